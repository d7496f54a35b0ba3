import logging
from typing import List, Optional

from fastapi import Depends, FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# --- Imports ---
from src.config import get_settings
from src.core.entities.market import MarketSnapshot
from src.core.entities.prediction import (
    FeePrediction,
    MarketDataResponse,
    PredictFeeRequest,
    PredictFeeResponse,
    PredictionRequest,
    SnapshotRequest,
    TokenQuote,
)
from src.core.entities.token import TokenInfo
from src.core.errors import (
    EmptySnapshot,
    FeeEngineError,
    InvalidAmount,
    UnknownNetwork,
    UnknownToken,
    UpstreamUnavailable,
)
from src.core.interfaces.snapshot_source import SnapshotSource
from src.core.registry import get_token_info, list_tokens
from src.core.services import FeeService
from src.infrastructure.gateways.synthetic_market import SyntheticMarketGateway

settings = get_settings()

# Setup Logging
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger("SwapFee")

app = FastAPI(
    title="SwapFee API",
    version="1.0.0",
    description="Dynamic swap fee prediction from market snapshots",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_methods=["*"],
    allow_headers=["*"],
)

ERROR_STATUS = {
    UnknownToken: 400,
    UnknownNetwork: 400,
    InvalidAmount: 400,
    EmptySnapshot: 422,
    UpstreamUnavailable: 503,
}


@app.exception_handler(FeeEngineError)
async def fee_engine_error_handler(request: Request, exc: FeeEngineError):
    status_code = ERROR_STATUS.get(type(exc), 500)
    logger.warning(f"{request.method} {request.url.path} -> {status_code} {exc.kind}: {exc}")
    return JSONResponse(status_code=status_code, content={"error": exc.kind, "detail": str(exc)})


# --- Dependency Injection ---

def get_snapshot_source() -> SnapshotSource:
    return SyntheticMarketGateway()


def get_fee_service(source: SnapshotSource = Depends(get_snapshot_source)) -> FeeService:
    return FeeService(source)


def _network(network: Optional[str]) -> str:
    return network or settings.default_network


# --- Endpoints ---

@app.get("/health")
async def health():
    return {"status": "healthy", "mode": "Synthetic market data", "network": settings.default_network}


@app.get("/v1/tokens", response_model=List[TokenInfo])
async def get_tokens(network: Optional[str] = Query(None, description="'mainnet' or 'testnet'")):
    return list_tokens(_network(network))


@app.get("/v1/tokens/{symbol}", response_model=TokenInfo)
async def get_token(symbol: str, network: Optional[str] = Query(None)):
    return get_token_info(symbol, _network(network))


@app.get("/v1/market-data", response_model=MarketDataResponse)
async def get_market_data(
    fromToken: str = Query(..., description="Base token symbol"),
    toToken: str = Query(..., description="Quote token symbol"),
    network: Optional[str] = Query(None),
    service: FeeService = Depends(get_fee_service),
):
    return await service.get_market_data(fromToken, toToken, _network(network))


@app.get("/v1/quote", response_model=TokenQuote)
async def get_quote(
    fromToken: str = Query(...),
    toToken: str = Query(...),
    network: Optional[str] = Query(None),
    service: FeeService = Depends(get_fee_service),
):
    return await service.get_quote(fromToken, toToken, _network(network))


@app.post("/v1/snapshot", response_model=MarketSnapshot)
async def get_snapshot(body: SnapshotRequest, service: FeeService = Depends(get_fee_service)):
    return await service.get_snapshot(body.base, body.quote, _network(body.network))


@app.post("/v1/predict", response_model=FeePrediction)
async def predict(body: PredictionRequest, service: FeeService = Depends(get_fee_service)):
    """
    Scores a snapshot the caller already holds.
    """
    return service.predict_from_snapshot(body.snapshot, body.amount)


@app.post("/v1/predict-fee", response_model=PredictFeeResponse)
async def predict_fee(body: PredictFeeRequest, service: FeeService = Depends(get_fee_service)):
    """
    Fetches a fresh snapshot for the pair and scores it for the given amount.
    """
    return await service.predict_fee(body.fromToken, body.toToken, body.amount, _network(body.network))

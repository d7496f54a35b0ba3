import logging
from decimal import Decimal
from typing import Union

from src.core.entities.market import MarketSnapshot
from src.core.entities.prediction import (
    FeePrediction,
    MarketDataResponse,
    PredictFeeResponse,
    TokenQuote,
)
from src.core.entities.token import TradingPair
from src.core.errors import FeeEngineError
from src.core.interfaces.snapshot_source import SnapshotSource
from src.core.registry import get_network, get_token_info
from src.core.use_cases.fee_predictor import FeePredictor, parse_amount

logger = logging.getLogger(__name__)


class FeeService:
    """
    Wires a SnapshotSource to the FeePredictor.
    Holds no per-request state; one instance can serve concurrent requests.
    """

    def __init__(self, source: SnapshotSource):
        self.source = source

    async def get_snapshot(self, base: str, quote: str, network: str) -> MarketSnapshot:
        pair = TradingPair(base=base, quote=quote)
        get_network(network)
        try:
            return await self.source.get_snapshot(pair, network)
        except FeeEngineError as e:
            logger.warning(f"Snapshot for {pair} on {network} failed: {e.kind}: {e}")
            raise

    async def get_market_data(self, base: str, quote: str, network: str) -> MarketDataResponse:
        logger.info(f"Market data requested for {base}/{quote} on {network}")
        token_data = get_token_info(base, network)
        snapshot = await self.get_snapshot(base, quote, network)
        return MarketDataResponse(tokenData=token_data, marketData=snapshot)

    async def get_quote(self, base: str, quote: str, network: str) -> TokenQuote:
        get_network(network)
        return await self.source.get_quote(TradingPair(base=base, quote=quote), network)

    def predict_from_snapshot(
        self, snapshot: MarketSnapshot, amount: Union[str, int, Decimal]
    ) -> FeePrediction:
        try:
            return FeePredictor.predict(snapshot, amount)
        except FeeEngineError as e:
            logger.warning(f"Prediction failed: {e.kind}: {e}")
            raise

    async def predict_fee(
        self, base: str, quote: str, amount: Union[str, int, Decimal], network: str
    ) -> PredictFeeResponse:
        logger.info(f"Fee prediction requested for {amount} {base}/{quote} on {network}")
        # Reject a bad amount before touching the market source
        try:
            parse_amount(amount)
        except FeeEngineError as e:
            logger.warning(f"Prediction failed: {e.kind}: {e}")
            raise

        snapshot = await self.get_snapshot(base, quote, network)
        prediction = self.predict_from_snapshot(snapshot, amount)
        return PredictFeeResponse(prediction=prediction, marketData=snapshot)

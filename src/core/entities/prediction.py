"""
Fee prediction entities and the request/response shapes built around them.
"""
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from src.core.entities.market import DecimalStr, MarketSnapshot
from src.core.entities.token import TokenInfo


class FeePrediction(BaseModel):
    """
    Output of FeePredictor.predict.
    suggestedFee is a percentage with 3 decimals, riskScore has 2 decimals,
    confidence keeps full precision within [0, 100].
    """
    model_config = ConfigDict(frozen=True)

    predictedPrice: DecimalStr
    confidence: DecimalStr = Field(ge=0, le=100)
    suggestedFee: DecimalStr
    riskScore: DecimalStr = Field(ge=0)


class TokenQuote(BaseModel):
    model_config = ConfigDict(frozen=True)

    fromToken: str
    toToken: str
    price: DecimalStr
    liquidity: DecimalStr
    volume24h: DecimalStr


# --- Transport shapes ---

class SnapshotRequest(BaseModel):
    base: str
    quote: str
    network: Optional[str] = None


class PredictionRequest(BaseModel):
    snapshot: MarketSnapshot
    # Left loose so parse_amount reports every bad amount as InvalidAmount
    amount: Union[str, int, float]


class PredictFeeRequest(BaseModel):
    fromToken: str
    toToken: str
    amount: Union[str, int, float]
    network: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "fromToken": "ETH",
                "toToken": "USDC",
                "amount": "250",
                "network": "testnet",
            }
        }
    )


class MarketDataResponse(BaseModel):
    tokenData: TokenInfo
    marketData: MarketSnapshot


class PredictFeeResponse(BaseModel):
    prediction: FeePrediction
    marketData: MarketSnapshot

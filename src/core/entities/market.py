"""
Market snapshot entities.

All prices and amounts are Decimals. They serialise to JSON as strings so the
values survive a process boundary without float rounding.
"""
from decimal import Decimal
from typing import Annotated, Tuple

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _reject_float(value):
    # bool is an int subclass but never a valid amount
    if isinstance(value, (float, bool)):
        raise ValueError("decimal fields must be sent as strings or integers, not floats")
    return value


DecimalStr = Annotated[Decimal, BeforeValidator(_reject_float)]

# Upper bounds keep every scoring step inside the default 28-digit decimal context
MAX_QUANTITY = Decimal("1e18")
MAX_VOLATILITY = Decimal("1000000")


class PricePoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    timestamp: int
    price: DecimalStr


class DepthLevel(BaseModel):
    model_config = ConfigDict(frozen=True)

    price: DecimalStr
    amount: DecimalStr = Field(ge=0, le=MAX_QUANTITY)


class MarketDepth(BaseModel):
    model_config = ConfigDict(frozen=True)

    bids: Tuple[DepthLevel, ...] = ()
    asks: Tuple[DepthLevel, ...] = ()


class TradePrint(BaseModel):
    model_config = ConfigDict(frozen=True)

    price: DecimalStr
    amount: DecimalStr
    timestamp: int


class MarketSnapshot(BaseModel):
    """
    Point-in-time view of a trading pair.
    priceHistory is oldest first, lastTrades is most recent first.
    """
    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "priceHistory": [
                    {"timestamp": 1705000000000, "price": "1500"},
                    {"timestamp": 1705003600000, "price": "1480"},
                ],
                "marketDepth": {
                    "bids": [{"price": "1490", "amount": "10"}],
                    "asks": [{"price": "1510", "amount": "15"}],
                },
                "volatility24h": "2.5",
                "lastTrades": [{"price": "1500", "amount": "1.5", "timestamp": 1705007140000}],
            }
        },
    )

    priceHistory: Tuple[PricePoint, ...] = Field(min_length=1)
    marketDepth: MarketDepth
    volatility24h: DecimalStr = Field(ge=0, le=MAX_VOLATILITY)
    # Not length-checked here: FeePredictor reports a missing trade as EmptySnapshot
    lastTrades: Tuple[TradePrint, ...]

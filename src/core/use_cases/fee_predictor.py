from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

from src.core.entities.market import MAX_QUANTITY, MarketSnapshot
from src.core.entities.prediction import FeePrediction
from src.core.errors import EmptySnapshot, InvalidAmount

BASE_FEE = Decimal("0.3")
FEE_STEP = Decimal("0.1")
HIGH_VOLATILITY = Decimal("5")
LARGE_TRADE = Decimal("10000")
SMALL_TRADE = Decimal("100")
DEPTH_MULTIPLIER = Decimal("10")
VOLATILITY_WEIGHT = Decimal("10")

ONE = Decimal("1")
HUNDRED = Decimal("100")
FEE_PRECISION = Decimal("0.001")
RISK_PRECISION = Decimal("0.01")
MIN_AMOUNT = Decimal("1e-18")


def parse_amount(amount: Union[str, int, Decimal]) -> Decimal:
    """
    Converts a trade amount to a finite, positive Decimal.
    Floats are refused so no binary rounding sneaks into the fee.
    """
    if isinstance(amount, (bool, float)) or not isinstance(amount, (str, int, Decimal)):
        raise InvalidAmount(f"Amount must be a decimal string, got {type(amount).__name__}")

    try:
        value = Decimal(amount.strip() if isinstance(amount, str) else amount)
    except InvalidOperation:
        raise InvalidAmount(f"Amount '{amount}' is not numeric") from None

    if not value.is_finite():
        raise InvalidAmount(f"Amount '{amount}' is not finite")
    if value <= 0:
        raise InvalidAmount(f"Amount must be positive, got {amount}")
    if value < MIN_AMOUNT or value > MAX_QUANTITY:
        raise InvalidAmount(f"Amount {amount} is outside the supported range [{MIN_AMOUNT}, {MAX_QUANTITY}]")
    return value


class FeePredictor:
    @staticmethod
    def predict(snapshot: MarketSnapshot, amount: Union[str, int, Decimal]) -> FeePrediction:
        trade_amount = parse_amount(amount)

        if not snapshot.lastTrades:
            raise EmptySnapshot("Snapshot has no recent trades to price against")

        volatility = snapshot.volatility24h

        base_fee = BASE_FEE
        if volatility > HIGH_VOLATILITY:
            base_fee += FEE_STEP

        # Exclusive size adjustments. No floor or ceiling on base_fee.
        if trade_amount > LARGE_TRADE:
            base_fee -= FEE_STEP
        elif trade_amount < SMALL_TRADE:
            base_fee += FEE_STEP

        total_bids = sum((bid.amount for bid in snapshot.marketDepth.bids), Decimal(0))
        total_asks = sum((ask.amount for ask in snapshot.marketDepth.asks), Decimal(0))

        confidence = min((total_bids + total_asks) / (trade_amount * DEPTH_MULTIPLIER), ONE) * HUNDRED

        risk_score = (volatility * VOLATILITY_WEIGHT + (HUNDRED - confidence)) / 2

        return FeePrediction(
            predictedPrice=snapshot.lastTrades[0].price,
            confidence=confidence,
            suggestedFee=base_fee.quantize(FEE_PRECISION, rounding=ROUND_HALF_UP),
            riskScore=risk_score.quantize(RISK_PRECISION, rounding=ROUND_HALF_UP),
        )

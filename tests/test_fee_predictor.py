"""
Tests for the fixed fee scoring policy.
"""
from decimal import Decimal

import pytest
from pydantic import ValidationError

from src.core.errors import EmptySnapshot, InvalidAmount
from src.core.use_cases.fee_predictor import FeePredictor, parse_amount
from tests.sample_data import make_snapshot


def test_calm_market_with_no_depth():
    """Mid-size trade, low volatility, empty book: no fee adjustments."""
    snapshot = make_snapshot(volatility="2.5")
    prediction = FeePredictor.predict(snapshot, "500")

    assert prediction.suggestedFee == Decimal("0.3")
    assert prediction.confidence == Decimal("0")
    assert prediction.riskScore == Decimal("62.5")
    assert prediction.predictedPrice == Decimal("1500")


def test_volatile_market_small_trade():
    snapshot = make_snapshot(volatility="6.0", bids=["10", "20"], asks=["40"])
    prediction = FeePredictor.predict(snapshot, "50")

    assert prediction.suggestedFee == Decimal("0.5")
    assert prediction.confidence == Decimal("14")
    assert prediction.riskScore == Decimal("73")


def test_large_trade_discount():
    snapshot = make_snapshot(volatility="1.0", bids=["1000"], asks=["600", "400"])
    prediction = FeePredictor.predict(snapshot, "20000")

    assert prediction.suggestedFee == Decimal("0.2")
    assert prediction.confidence == Decimal("1")
    assert prediction.riskScore == Decimal("54.5")


def test_volatility_and_large_trade_cancel_out():
    snapshot = make_snapshot(volatility="8", bids=["500000"])
    prediction = FeePredictor.predict(snapshot, "10001")

    assert prediction.suggestedFee == Decimal("0.3")
    assert prediction.confidence == Decimal("100")


@pytest.mark.parametrize("volatility,amount,expected_fee", [
    ("5", "500", "0.300"),       # threshold is strictly greater than 5
    ("5.01", "500", "0.400"),
    ("2", "100", "0.300"),       # 100 is not a small trade
    ("2", "99.99", "0.400"),
    ("2", "10000", "0.300"),     # 10000 is not a large trade
    ("2", "10000.01", "0.200"),
])
def test_fee_thresholds(volatility, amount, expected_fee):
    prediction = FeePredictor.predict(make_snapshot(volatility=volatility), amount)
    assert str(prediction.suggestedFee) == expected_fee


def test_confidence_clamped_to_hundred():
    snapshot = make_snapshot(bids=["1000000"], asks=["1000000"])
    prediction = FeePredictor.predict(snapshot, "1")

    assert prediction.confidence == Decimal("100")
    assert Decimal("0") <= prediction.confidence <= Decimal("100")


def test_rounding_precision():
    # 1 / 3000 leaves a repeating confidence before rounding
    snapshot = make_snapshot(volatility="3.333", bids=["1"])
    prediction = FeePredictor.predict(snapshot, "300")

    assert prediction.suggestedFee.as_tuple().exponent == -3
    assert prediction.riskScore.as_tuple().exponent == -2
    assert str(prediction.suggestedFee) == "0.300"
    # (33.33 + 100 - 0.0333...) / 2
    assert str(prediction.riskScore) == "66.65"


def test_prediction_is_deterministic():
    snapshot = make_snapshot(volatility="4.2", bids=["12.5"], asks=["7.25"])
    first = FeePredictor.predict(snapshot, "250")
    second = FeePredictor.predict(snapshot, "250")

    assert first == second
    assert first.model_dump_json() == second.model_dump_json()


def test_predicted_price_passes_through_latest_trade():
    snapshot = make_snapshot(last_price="1234.5678")
    assert FeePredictor.predict(snapshot, "10").predictedPrice == Decimal("1234.5678")


def test_zero_amount_rejected():
    with pytest.raises(InvalidAmount):
        FeePredictor.predict(make_snapshot(), "0")


@pytest.mark.parametrize("amount", ["-5", "abc", "", "NaN", "Infinity", 1.5, True, None])
def test_invalid_amounts_rejected(amount):
    with pytest.raises(InvalidAmount):
        FeePredictor.predict(make_snapshot(), amount)


def test_empty_last_trades_rejected():
    snapshot = make_snapshot(with_trades=False)
    with pytest.raises(EmptySnapshot):
        FeePredictor.predict(snapshot, "100")


def test_parse_amount_accepts_decimal_forms():
    assert parse_amount("  42.50 ") == Decimal("42.50")
    assert parse_amount(7) == Decimal("7")
    assert parse_amount(Decimal("0.001")) == Decimal("0.001")


@pytest.mark.parametrize("amount", ["9e999999", "1e-999999999", "1e19", "1e-19"])
def test_out_of_range_amounts_rejected(amount):
    snapshot = make_snapshot(bids=["10"])
    with pytest.raises(InvalidAmount):
        FeePredictor.predict(snapshot, amount)


def test_amount_range_edges_accepted():
    snapshot = make_snapshot(bids=["1000000000000000000"], asks=["1000000000000000000"])

    assert FeePredictor.predict(snapshot, "1e-18").confidence == Decimal("100")
    assert FeePredictor.predict(snapshot, "1e18").suggestedFee == Decimal("0.2")


def test_extreme_volatility_rejected_by_snapshot():
    with pytest.raises(ValidationError):
        make_snapshot(volatility="1e30", bids=["10"])


def test_highest_volatility_still_scores():
    prediction = FeePredictor.predict(make_snapshot(volatility="1000000"), "500")
    # (10000000 + 100) / 2
    assert str(prediction.riskScore) == "5000050.00"

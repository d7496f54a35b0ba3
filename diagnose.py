
import sys
import asyncio

try:
    from src.core.entities.token import TradingPair
    from src.core.use_cases.fee_predictor import FeePredictor
    from src.infrastructure.gateways.synthetic_market import SyntheticMarketGateway
    from src.api.main import app
    print("✅ All imports successful.")
except Exception as e:
    print(f"❌ Import failed: {e}")
    sys.exit(1)

# End-to-end check: synthetic snapshot -> prediction
def test_predict():
    try:
        gateway = SyntheticMarketGateway()
        snapshot = asyncio.run(gateway.get_snapshot(TradingPair(base="ETH", quote="USDC"), "testnet"))
        prediction = FeePredictor.predict(snapshot, "500")

        if str(prediction.suggestedFee) == "0.300" and str(prediction.riskScore) == "61.80":
            print(f"✅ Prediction pipeline passed: {prediction.model_dump_json()}")
        else:
            print(f"❌ Unexpected prediction: {prediction.model_dump_json()}")
    except Exception as e:
        print(f"❌ Prediction raised exception: {e}")

if __name__ == "__main__":
    test_predict()

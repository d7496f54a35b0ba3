"""
Typed failures raised by the fee engine.

Every error carries a stable ``kind`` so the transport layer can map it to a
user-visible message without inspecting the text.
"""


class FeeEngineError(Exception):
    kind = "fee_engine_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UnknownToken(FeeEngineError):
    kind = "unknown_token"

    def __init__(self, symbol: str, network: str):
        super().__init__(f"Token '{symbol}' is not registered on {network}")
        self.symbol = symbol
        self.network = network


class UnknownNetwork(FeeEngineError):
    kind = "unknown_network"

    def __init__(self, network: str):
        super().__init__(f"Unsupported network '{network}'")
        self.network = network


class UpstreamUnavailable(FeeEngineError):
    kind = "upstream_unavailable"


class InvalidAmount(FeeEngineError):
    kind = "invalid_amount"


class EmptySnapshot(FeeEngineError):
    kind = "empty_snapshot"

from typing import Literal

from pydantic import BaseModel, ConfigDict

Network = Literal["mainnet", "testnet"]


class TradingPair(BaseModel):
    """Ordered (base, quote) pair of registry symbols."""
    model_config = ConfigDict(frozen=True)

    base: str
    quote: str

    def __str__(self) -> str:
        return f"{self.base}/{self.quote}"


class NetworkConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: Network
    rpcUrl: str
    chainId: int


class TokenInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    symbol: str
    name: str
    decimals: int
    address: str
    network: Network
    chainId: int

from abc import ABC, abstractmethod

from src.core.entities.market import MarketSnapshot
from src.core.entities.prediction import TokenQuote
from src.core.entities.token import TradingPair


class SnapshotSource(ABC):
    @abstractmethod
    async def get_snapshot(self, pair: TradingPair, network: str) -> MarketSnapshot:
        """
        Returns a snapshot with non-empty priceHistory and lastTrades.
        Raises UnknownToken if either symbol is not registered on the network,
        UpstreamUnavailable if a live source cannot be reached.
        """
        pass

    @abstractmethod
    async def get_quote(self, pair: TradingPair, network: str) -> TokenQuote:
        pass

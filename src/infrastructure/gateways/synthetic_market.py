import logging
import time
from decimal import Decimal
from typing import Callable, Optional

from src.core.entities.market import (
    DepthLevel,
    MarketDepth,
    MarketSnapshot,
    PricePoint,
    TradePrint,
)
from src.core.entities.prediction import TokenQuote
from src.core.entities.token import TradingPair
from src.core.interfaces.snapshot_source import SnapshotSource
from src.core.registry import resolve_address

logger = logging.getLogger(__name__)

HOUR_MS = 3_600_000
MINUTE_MS = 60_000


def _now_ms() -> int:
    return int(time.time() * 1000)


class SyntheticMarketGateway(SnapshotSource):
    """
    Deterministic stand-in for a real market data feed.
    Output depends only on the pair, the network and the clock, so a fixed
    clock yields identical snapshots.
    """

    def __init__(self, clock: Optional[Callable[[], int]] = None):
        """
        :param clock: Returns the current time in epoch milliseconds.
        """
        self.clock = clock or _now_ms

    def _validate_pair(self, pair: TradingPair, network: str) -> None:
        # Both symbols resolve before anything is built
        resolve_address(pair.base, network)
        resolve_address(pair.quote, network)

    async def get_snapshot(self, pair: TradingPair, network: str) -> MarketSnapshot:
        self._validate_pair(pair, network)
        now = self.clock()

        snapshot = MarketSnapshot(
            priceHistory=(
                PricePoint(timestamp=now - 3 * HOUR_MS, price=Decimal("1500")),
                PricePoint(timestamp=now - 2 * HOUR_MS, price=Decimal("1480")),
                PricePoint(timestamp=now - HOUR_MS, price=Decimal("1450")),
            ),
            marketDepth=MarketDepth(
                bids=(
                    DepthLevel(price=Decimal("1490"), amount=Decimal("10")),
                    DepthLevel(price=Decimal("1485"), amount=Decimal("20")),
                ),
                asks=(
                    DepthLevel(price=Decimal("1510"), amount=Decimal("15")),
                    DepthLevel(price=Decimal("1515"), amount=Decimal("25")),
                ),
            ),
            volatility24h=Decimal("2.5"),
            lastTrades=(
                TradePrint(price=Decimal("1500"), amount=Decimal("1.5"), timestamp=now - MINUTE_MS),
                TradePrint(price=Decimal("1498"), amount=Decimal("0.5"), timestamp=now - 2 * MINUTE_MS),
            ),
        )
        logger.debug(f"Synthetic snapshot built for {pair} on {network}")
        return snapshot

    async def get_quote(self, pair: TradingPair, network: str) -> TokenQuote:
        self._validate_pair(pair, network)
        return TokenQuote(
            fromToken=pair.base,
            toToken=pair.quote,
            price=Decimal("1500"),
            liquidity=Decimal("1000000"),
            volume24h=Decimal("500000"),
        )

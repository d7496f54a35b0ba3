"""Runtime settings for the SwapFee API, read once from the environment."""
import logging
import os
from functools import lru_cache
from typing import Tuple

from pydantic import BaseModel, ConfigDict

from src.core.registry import get_network


def _get_csv(value: str, default: Tuple[str, ...]) -> Tuple[str, ...]:
    if not value:
        return default
    return tuple(item.strip() for item in value.split(",") if item.strip())


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    default_network: str = "testnet"
    log_level: str = "INFO"
    cors_origins: Tuple[str, ...] = ("*",)


def load_settings() -> Settings:
    network = os.getenv("FEE_ENGINE_NETWORK", "testnet").strip()
    # Fail fast on a typo rather than on the first request
    get_network(network)

    log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    # getLevelName maps known names to their numeric level
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"Unsupported LOG_LEVEL '{log_level}'")

    return Settings(
        default_network=network,
        log_level=log_level,
        cors_origins=_get_csv(os.getenv("CORS_ORIGINS", ""), ("*",)),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()

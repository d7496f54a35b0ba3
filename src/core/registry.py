"""
Token Registry

Per-network symbol -> address configuration for the supported Optimism
networks. Built once at import time and exposed read-only.
"""
from types import MappingProxyType
from typing import List, Mapping

from src.core.entities.token import NetworkConfig, TokenInfo
from src.core.errors import UnknownNetwork, UnknownToken

NETWORKS: Mapping[str, NetworkConfig] = MappingProxyType({
    "mainnet": NetworkConfig(name="mainnet", rpcUrl="https://mainnet.optimism.io", chainId=10),
    "testnet": NetworkConfig(name="testnet", rpcUrl="https://goerli.optimism.io", chainId=420),
})

TOKEN_ADDRESSES: Mapping[str, Mapping[str, str]] = MappingProxyType({
    "mainnet": MappingProxyType({
        "ETH": "0x0000000000000000000000000000000000000000",
        "USDC": "0x7F5c764cBc14f9669B88837ca1490cCa17c31607",
        "DAI": "0xDA10009cBd5D07dd0CeCc66161FC93D7c9000da1",
        "EURC": "0x4c5D5234f232BD2D76311e307852Bd9C29701C9F",
        "xDAI": "0x4c5D5234f232BD2D76311e307852Bd9C29701C9F",
    }),
    "testnet": MappingProxyType({
        "ETH": "0x0000000000000000000000000000000000000000",
        "USDC": "0x7E07E15D2a87A24492740D16f5bdF58c16db0c4E",
        "DAI": "0x7E07E15D2a87A24492740D16f5bdF58c16db0c4E",
        "EURC": "0x7E07E15D2a87A24492740D16f5bdF58c16db0c4E",
        "xDAI": "0x7E07E15D2a87A24492740D16f5bdF58c16db0c4E",
    }),
})

# (name, decimals) per symbol; identical on both networks
TOKEN_METADATA: Mapping[str, tuple] = MappingProxyType({
    "ETH": ("Ethereum", 18),
    "USDC": ("USD Coin", 6),
    "DAI": ("Dai Stablecoin", 18),
    "EURC": ("Euro Coin", 6),
    "xDAI": ("xDAI", 18),
})


def get_network(network: str) -> NetworkConfig:
    try:
        return NETWORKS[network]
    except KeyError:
        raise UnknownNetwork(network) from None


def resolve_address(symbol: str, network: str) -> str:
    """Symbol lookup is case-sensitive ('xDAI' is not 'XDAI')."""
    get_network(network)
    try:
        return TOKEN_ADDRESSES[network][symbol]
    except KeyError:
        raise UnknownToken(symbol, network) from None


def get_token_info(symbol: str, network: str) -> TokenInfo:
    address = resolve_address(symbol, network)
    name, decimals = TOKEN_METADATA[symbol]
    return TokenInfo(
        symbol=symbol,
        name=name,
        decimals=decimals,
        address=address,
        network=network,
        chainId=NETWORKS[network].chainId,
    )


def list_tokens(network: str) -> List[TokenInfo]:
    get_network(network)
    return [get_token_info(symbol, network) for symbol in TOKEN_ADDRESSES[network]]

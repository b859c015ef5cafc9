from collections import defaultdict
from collections.abc import Mapping
from types import MappingProxyType

from eth_typing import ChecksumAddress

from chaintokens.chains import ChainId
from chaintokens.config import settings
from chaintokens.currency import Token
from chaintokens.exceptions import SharedRegistryAddress
from chaintokens.logging import logger

# Canonical wrapped native token, keyed by chain ID
WRAPPED_NATIVE_TOKENS: Mapping[ChainId, Token] = MappingProxyType(
    {
        ChainId.BSC_TESTNET: Token(
            ChainId.BSC_TESTNET,
            "0x69c5207A60C8e34311E44A2E10afa0CB4dbFC8df",
            18,
            "WtBNB",
            "Wrapped tBNB",
            "https://www.binance.org",
        ),
        ChainId.BITGERT_MAINNET: Token(
            ChainId.BITGERT_MAINNET,
            "0xD75411C6A3fEf2278E51EEaa73cdE8352c59eFEd",
            18,
            "WBRISE",
            "Wrapped Brise",
            "https://bitgert.com",
        ),
        ChainId.BSC_MAINNET: Token(
            ChainId.BSC_MAINNET,
            "0x2F856544d28c793F4461CE639709AA8C01D12745",
            18,
            "WBNB",
            "Wrapped BNB",
            "https://www.binance.org",
        ),
        ChainId.GATECHAIN_MAINNET: Token(
            ChainId.GATECHAIN_MAINNET,
            "0x5CaD84E500d73A9bcCdeB21eDD9720FFb7531c56",
            18,
            "WGATE",
            "Wrapped Gatecoin",
            "https://www.gatechain.io",
        ),
        ChainId.OMAX_MAINNET: Token(
            ChainId.OMAX_MAINNET,
            "0x2e19F01B81628CCd8cFce9F7d9F2fACC77343b7c",
            18,
            "WOMAX",
            "Wrapped OMAX",
            "https://www.omaxcoin.com",
        ),
        ChainId.WANCHAIN_MAINNET: Token(
            ChainId.WANCHAIN_MAINNET,
            "0x2e19F01B81628CCd8cFce9F7d9F2fACC77343b7c",
            18,
            "WWAN",
            "Wrapped WAN",
            "https://www.wanchain.org",
        ),
        ChainId.OKX_MAINNET: Token(
            ChainId.OKX_MAINNET,
            "0xf886ABaCe837E5EC0CF7037B4d2198F7a1bf35B5",
            18,
            "WOKX",
            "Wrapped OKX",
            "https://www.okx.com",
        ),
        ChainId.ETH_MAINNET: Token(
            ChainId.ETH_MAINNET,
            "0xfbAE861cbDFBB11AC0bC64c27AE7fEd3f99B8737",
            18,
            "WETH",
            "Wrapped Ether",
            "https://ethereum.org",
        ),
        ChainId.MATIC_MAINNET: Token(
            ChainId.MATIC_MAINNET,
            "0x15EDEa3D3b4C59E8d76B8BF9374ed4f60F58e3b7",
            18,
            "WMATIC",
            "Wrapped Matic",
            "https://polygon.technology",
        ),
        ChainId.TELOS_MAINNET: Token(
            ChainId.TELOS_MAINNET,
            "0x61F2ddAa57B328feE381D13D2E0E91C604a43fF7",
            18,
            "WTLOS",
            "Wrapped Telos",
            "https://telos.net",
        ),
        ChainId.ASTAR_MAINNET: Token(
            ChainId.ASTAR_MAINNET,
            "0xfbAE861cbDFBB11AC0bC64c27AE7fEd3f99B8737",
            18,
            "WASTR",
            "Wrapped Astar",
            "https://astar.network",
        ),
    }
)


def get_wrapped_native_token(chain_id: int) -> Token | None:
    """
    Return the wrapped native token for the chain, or None if the chain has no registered entry.
    """

    return WRAPPED_NATIVE_TOKENS.get(chain_id)  # type: ignore[call-overload]


def find_shared_addresses(
    tokens: Mapping[ChainId, Token],
) -> dict[ChecksumAddress, tuple[ChainId, ...]]:
    """
    Find contract addresses that appear under more than one chain ID.
    """

    chains_by_address: defaultdict[ChecksumAddress, list[ChainId]] = defaultdict(list)
    for chain_id, token in tokens.items():
        chains_by_address[token.address].append(chain_id)

    return {
        address: tuple(chain_ids)
        for address, chain_ids in chains_by_address.items()
        if len(chain_ids) > 1
    }


def check_unique_addresses(tokens: Mapping[ChainId, Token], *, allow_shared: bool) -> None:
    """
    Check that each registry entry uses a distinct contract address. Shared addresses are logged,
    and raise `SharedRegistryAddress` unless `allow_shared` is set.
    """

    shared = find_shared_addresses(tokens)
    if not shared:
        return

    for address, chain_ids in shared.items():
        logger.warning(
            f"Wrapped token address {address} is registered for multiple chains: "
            f"{', '.join(chain_id.name for chain_id in chain_ids)}"
        )

    if not allow_shared:
        raise SharedRegistryAddress(shared)


check_unique_addresses(
    WRAPPED_NATIVE_TOKENS,
    allow_shared=settings.registry.allow_shared_addresses,
)

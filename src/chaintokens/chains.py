import enum

from chaintokens.exceptions import UnknownChain


class ChainId(enum.IntEnum):
    """
    EIP-155 chain IDs for the networks with a registered wrapped native token.
    """

    ETH_MAINNET = 1
    TELOS_MAINNET = 40
    BSC_MAINNET = 56
    OKX_MAINNET = 66
    GATECHAIN_MAINNET = 86
    BSC_TESTNET = 97
    MATIC_MAINNET = 137
    OMAX_MAINNET = 311
    ASTAR_MAINNET = 592
    WANCHAIN_MAINNET = 888
    BITGERT_MAINNET = 32520


def get_chain_id(value: int | str) -> ChainId:
    """
    Resolve an integer chain ID, a decimal string, or a member name to a `ChainId`.

    Names are matched case-insensitively, and the "_MAINNET" suffix may be omitted, e.g. "eth",
    "ETH_MAINNET" and "1" all resolve to `ChainId.ETH_MAINNET`.
    """

    match value:
        case bool():
            raise UnknownChain(value)
        case int():
            try:
                return ChainId(value)
            except ValueError:
                raise UnknownChain(value) from None
        case str() if value.strip().isdecimal():
            try:
                return ChainId(int(value.strip()))
            except ValueError:
                raise UnknownChain(value) from None
        case str():
            name = value.strip().upper().replace("-", "_")
            for candidate in (name, f"{name}_MAINNET"):
                if candidate in ChainId.__members__:
                    return ChainId[candidate]
            raise UnknownChain(value)
        case _:
            raise UnknownChain(value)

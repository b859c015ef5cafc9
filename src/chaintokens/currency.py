import dataclasses
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from eth_typing import ChecksumAddress

from chaintokens.address import validate_and_parse_address
from chaintokens.chains import ChainId
from chaintokens.exceptions import ChainMismatch, IdenticalAddress


class Currency:
    """
    Base for any fungible unit of value on a chain. A currency is either a `Token` with a contract
    address, or the chain's `NativeCurrency`.
    """

    __slots__ = ()

    chain_id: int
    decimals: int
    symbol: str | None
    name: str | None

    @property
    def is_native(self) -> bool:
        return isinstance(self, NativeCurrency)

    @property
    def is_token(self) -> bool:
        return isinstance(self, Token)


@dataclasses.dataclass(slots=True, frozen=True, eq=False)
class NativeCurrency(Currency):
    """
    The native coin of a chain, e.g. Ether on Ethereum mainnet. One instance exists per chain, so
    equality is identity.
    """

    chain_id: int
    decimals: int
    symbol: str | None = None
    name: str | None = None

    def __str__(self) -> str:
        return self.symbol or self.__class__.__name__


@dataclasses.dataclass(slots=True, frozen=True, eq=False)
class Token(Currency):
    """
    An ERC-20 token, uniquely identified by its chain ID and contract address. The remaining
    attributes are metadata and do not participate in equality or hashing.
    """

    chain_id: int
    address: ChecksumAddress
    decimals: int
    symbol: str | None = None
    name: str | None = None
    project_link: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "address", validate_and_parse_address(self.address))

    def equals(self, other: "Token") -> bool:
        """
        Return True if both tokens have the same chain ID and address.
        """

        if self is other:
            return True
        match other:
            case Token():
                return self.chain_id == other.chain_id and self.address == other.address
            case _:
                return False

    def sorts_before(self, other: "Token") -> bool:
        """
        Return True if this token's address sorts before the other token's address, compared
        case-insensitively.

        Raises `ChainMismatch` if the tokens are on different chains, and `IdenticalAddress` if
        both tokens have the same address.
        """

        if self.chain_id != other.chain_id:
            raise ChainMismatch(chain_id=self.chain_id, other_chain_id=other.chain_id)
        if self.address == other.address:
            raise IdenticalAddress(address=self.address)
        return self.address.lower() < other.address.lower()

    def __eq__(self, other: object) -> bool:
        match other:
            case Token():
                return self.equals(other)
            case _:
                return NotImplemented

    def __lt__(self, other: Any) -> bool:
        match other:
            case Token():
                return self.sorts_before(other)
            case _:
                return NotImplemented

    def __hash__(self) -> int:
        return hash((self.chain_id, self.address))

    def __str__(self) -> str:
        return self.symbol or self.address


def currency_equals(currency_a: Currency, currency_b: Currency) -> bool:
    """
    Compare two currencies. Tokens are compared by chain ID and address, native currencies by
    identity, and a token never equals a native currency.
    """

    match currency_a, currency_b:
        case Token(), Token():
            return currency_a.equals(currency_b)
        case (Token(), _) | (_, Token()):
            return False
        case _:
            return currency_a is currency_b


NATIVE_CURRENCIES: Mapping[ChainId, NativeCurrency] = MappingProxyType(
    {
        ChainId.BSC_TESTNET: NativeCurrency(ChainId.BSC_TESTNET, 18, "tBNB", "Test BNB"),
        ChainId.BITGERT_MAINNET: NativeCurrency(ChainId.BITGERT_MAINNET, 18, "BRISE", "Brise"),
        ChainId.BSC_MAINNET: NativeCurrency(ChainId.BSC_MAINNET, 18, "BNB", "BNB"),
        ChainId.GATECHAIN_MAINNET: NativeCurrency(ChainId.GATECHAIN_MAINNET, 18, "GT", "GateToken"),
        ChainId.OMAX_MAINNET: NativeCurrency(ChainId.OMAX_MAINNET, 18, "OMAX", "OMAX"),
        ChainId.WANCHAIN_MAINNET: NativeCurrency(ChainId.WANCHAIN_MAINNET, 18, "WAN", "Wancoin"),
        ChainId.OKX_MAINNET: NativeCurrency(ChainId.OKX_MAINNET, 18, "OKT", "OKT"),
        ChainId.ETH_MAINNET: NativeCurrency(ChainId.ETH_MAINNET, 18, "ETH", "Ether"),
        ChainId.MATIC_MAINNET: NativeCurrency(ChainId.MATIC_MAINNET, 18, "MATIC", "Matic"),
        ChainId.TELOS_MAINNET: NativeCurrency(ChainId.TELOS_MAINNET, 18, "TLOS", "Telos"),
        ChainId.ASTAR_MAINNET: NativeCurrency(ChainId.ASTAR_MAINNET, 18, "ASTR", "Astar"),
    }
)


def get_native_currency(chain_id: int) -> NativeCurrency | None:
    return NATIVE_CURRENCIES.get(chain_id)  # type: ignore[call-overload]

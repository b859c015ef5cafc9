from .cache import get_checksum_address
from .config import settings
from .logging import logger
from .version import __version__

# isort: split

from .address import validate_and_parse_address
from .chains import ChainId, get_chain_id
from .currency import (
    NATIVE_CURRENCIES,
    Currency,
    NativeCurrency,
    Token,
    currency_equals,
    get_native_currency,
)
from .registry import WRAPPED_NATIVE_TOKENS, get_wrapped_native_token

__all__ = (
    "NATIVE_CURRENCIES",
    "WRAPPED_NATIVE_TOKENS",
    "ChainId",
    "Currency",
    "NativeCurrency",
    "Token",
    "__version__",
    "currency_equals",
    "exceptions",
    "get_chain_id",
    "get_checksum_address",
    "get_native_currency",
    "get_wrapped_native_token",
    "logger",
    "registry",
    "settings",
    "validate_and_parse_address",
)

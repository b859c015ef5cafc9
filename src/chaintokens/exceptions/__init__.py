from chaintokens.exceptions.base import (
    ChainTokensError,
    ChainTokensValueError,
    InvalidAddress,
    UnknownChain,
)
from chaintokens.exceptions.registry import RegistryError, SharedRegistryAddress
from chaintokens.exceptions.token import ChainMismatch, IdenticalAddress, TokenError

from . import registry, token

__all__ = (
    "ChainMismatch",
    "ChainTokensError",
    "ChainTokensValueError",
    "IdenticalAddress",
    "InvalidAddress",
    "RegistryError",
    "SharedRegistryAddress",
    "TokenError",
    "UnknownChain",
    "registry",
    "token",
)

from typing import Any

from chaintokens.exceptions.base import ChainTokensError

"""
Exceptions defined here are raised by misuse of the comparison methods on `Token`.
"""


class TokenError(ChainTokensError):
    """
    Exception raised inside token helpers.
    """


class ChainMismatch(TokenError):
    """
    Raised when two tokens on different chains are ordered against each other.
    """

    def __init__(self, chain_id: int, other_chain_id: int) -> None:
        self.chain_id = chain_id
        self.other_chain_id = other_chain_id
        super().__init__(
            message=f"Tokens are on different chains ({int(chain_id)} != {int(other_chain_id)})"
        )

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.chain_id, self.other_chain_id)


class IdenticalAddress(TokenError):
    """
    Raised when a token is ordered against another token with the same address.
    """

    def __init__(self, address: str) -> None:
        self.address = address
        super().__init__(message=f"Tokens have the same address {address}")

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.address,)

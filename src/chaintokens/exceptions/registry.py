from collections.abc import Mapping
from typing import Any

from chaintokens.exceptions.base import ChainTokensError

"""
Exceptions defined here are raised by classes and functions in the `registry` module.
"""


class RegistryError(ChainTokensError):
    """
    Exception raised inside registries.
    """


class SharedRegistryAddress(RegistryError):
    """
    Raised by a strict registry check when one contract address is registered for more than one
    chain.
    """

    def __init__(self, shared: Mapping[str, tuple[int, ...]]) -> None:
        self.shared = dict(shared)
        details = "; ".join(
            f"{address} on chains {', '.join(str(int(chain_id)) for chain_id in chain_ids)}"
            for address, chain_ids in self.shared.items()
        )
        super().__init__(message=f"Registry addresses are shared between chains: {details}")

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.shared,)

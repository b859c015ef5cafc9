from .wrapped import (
    WRAPPED_NATIVE_TOKENS,
    check_unique_addresses,
    find_shared_addresses,
    get_wrapped_native_token,
)

__all__ = (
    "WRAPPED_NATIVE_TOKENS",
    "check_unique_addresses",
    "find_shared_addresses",
    "get_wrapped_native_token",
)

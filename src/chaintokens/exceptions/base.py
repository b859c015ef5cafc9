from typing import Any


class ChainTokensError(Exception):
    """
    Parent class for every exception raised by this package.

    Catch specific subclasses first, then `ChainTokensError` for anything else raised here, and
    leave general exceptions from dependencies or built-ins to a final handler:

    ```
    try:
        token.sorts_before(other)
    except ChainMismatch:
        ...
    except ChainTokensError:
        ...
    ```

    The formatted message, if one was given, is available as `.message`.
    """

    message: str | None = None

    def __init__(self, message: str | None = None) -> None:
        if message:
            self.message = message
            super().__init__(message)


class ChainTokensValueError(ChainTokensError): ...


class InvalidAddress(ChainTokensValueError):
    """
    Raised when a string cannot be parsed as an EVM address, either because it is malformed or
    because a mixed-case address fails the EIP-55 checksum.
    """

    def __init__(self, address: Any) -> None:
        self.address = address
        super().__init__(message=f"Invalid address: {address!r}")

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.address,)


class UnknownChain(ChainTokensValueError):
    """
    Raised when a value does not identify a supported chain.
    """

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(message=f"Unknown chain: {value!r}")

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.value,)

from typing import Any

from eth_typing import ChecksumAddress
from eth_utils.address import is_hex_address

from chaintokens.cache import get_checksum_address
from chaintokens.exceptions import InvalidAddress


def validate_and_parse_address(address: Any) -> ChecksumAddress:
    """
    Validate an address string and return its EIP-55 checksummed form.

    All-lowercase and all-uppercase hex bodies are accepted as-is. A mixed-case body is treated as
    a checksummed address and must match its checksum. The "0x" prefix is optional.
    """

    if not isinstance(address, str):
        raise InvalidAddress(address)

    body = address[2:] if address[:2] in ("0x", "0X") else address
    if not is_hex_address(f"0x{body}"):
        raise InvalidAddress(address)

    checksummed = get_checksum_address(f"0x{body.lower()}")

    # Mixed case is a checksum claim, which must match exactly
    if body not in (body.lower(), body.upper()) and checksummed[2:] != body:
        raise InvalidAddress(address)

    return checksummed

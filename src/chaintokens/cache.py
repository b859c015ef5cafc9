import functools

from cchecksum import to_checksum_address
from eth_typing import ChecksumAddress, HexStr


@functools.lru_cache(maxsize=1024)
def get_checksum_address(address: HexStr | str) -> ChecksumAddress:
    """
    Return the EIP-55 checksummed form of a 0x-prefixed hex address. Results are memoized.
    """

    return to_checksum_address(address)

from chaintokens.cache import get_checksum_address

from .conftest import WETH_ADDRESS


def test_checksum_address_is_memoized():
    get_checksum_address.cache_clear()
    get_checksum_address(WETH_ADDRESS.lower())
    get_checksum_address(WETH_ADDRESS.lower())
    cache_info = get_checksum_address.cache_info()
    assert cache_info.hits == 1
    assert cache_info.misses == 1


def test_checksum_address_from_lowercase():
    assert get_checksum_address(WETH_ADDRESS.lower()) == WETH_ADDRESS

import dataclasses

import pytest

from chaintokens.chains import ChainId
from chaintokens.currency import (
    NATIVE_CURRENCIES,
    NativeCurrency,
    Token,
    currency_equals,
    get_native_currency,
)

from .conftest import WBTC_ADDRESS, WETH_ADDRESS

ETHER = NATIVE_CURRENCIES[ChainId.ETH_MAINNET]
BNB = NATIVE_CURRENCIES[ChainId.BSC_MAINNET]


def test_native_currency_singletons():
    assert get_native_currency(ChainId.ETH_MAINNET) is ETHER
    assert get_native_currency(1) is ETHER
    assert get_native_currency(12345) is None
    assert set(NATIVE_CURRENCIES) == set(ChainId)
    for chain_id, native in NATIVE_CURRENCIES.items():
        assert native.chain_id == chain_id
        assert native.decimals == 18


def test_native_currency_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        ETHER.symbol = "WETH"  # type: ignore[misc]


def test_native_currency_uses_identity_equality():
    lookalike = NativeCurrency(ChainId.ETH_MAINNET, 18, "ETH", "Ether")
    assert ETHER == ETHER  # noqa: PLR0124
    assert ETHER != lookalike
    assert not currency_equals(ETHER, lookalike)


def test_native_variant_tags():
    assert ETHER.is_native
    assert not ETHER.is_token
    assert str(ETHER) == "ETH"


def test_currency_equals_tokens():
    weth = Token(ChainId.ETH_MAINNET, WETH_ADDRESS, 18, "WETH")
    assert currency_equals(weth, weth)
    assert currency_equals(weth, Token(ChainId.ETH_MAINNET, WETH_ADDRESS.lower(), 18))
    assert not currency_equals(weth, Token(ChainId.ETH_MAINNET, WBTC_ADDRESS, 8))
    assert not currency_equals(weth, Token(ChainId.BSC_MAINNET, WETH_ADDRESS, 18))


def test_currency_equals_native():
    assert currency_equals(ETHER, ETHER)
    assert not currency_equals(ETHER, BNB)


def test_currency_equals_mixed():
    weth = Token(ChainId.ETH_MAINNET, WETH_ADDRESS, 18, "WETH")
    assert not currency_equals(weth, ETHER)
    assert not currency_equals(ETHER, weth)

import pytest

from chaintokens.chains import ChainId, get_chain_id
from chaintokens.exceptions import UnknownChain


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (1, ChainId.ETH_MAINNET),
        (56, ChainId.BSC_MAINNET),
        (ChainId.ASTAR_MAINNET, ChainId.ASTAR_MAINNET),
        ("1", ChainId.ETH_MAINNET),
        (" 97 ", ChainId.BSC_TESTNET),
        ("eth", ChainId.ETH_MAINNET),
        ("ETH_MAINNET", ChainId.ETH_MAINNET),
        ("bsc", ChainId.BSC_MAINNET),
        ("bsc_testnet", ChainId.BSC_TESTNET),
        ("bsc-testnet", ChainId.BSC_TESTNET),
        ("Matic", ChainId.MATIC_MAINNET),
    ],
)
def test_get_chain_id(value, expected: ChainId):
    assert get_chain_id(value) is expected


@pytest.mark.parametrize("value", [0, 12345, "12345", "²", "solana", "", True, 1.0, None])
def test_unknown_chain(value):
    with pytest.raises(UnknownChain) as exc_info:
        get_chain_id(value)
    assert exc_info.value.value == value


def test_chain_ids_are_ints():
    assert ChainId.ETH_MAINNET == 1
    assert ChainId.BITGERT_MAINNET == 32520

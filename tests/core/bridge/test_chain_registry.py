import pytest

from bridge_pinger.core.bridge.chain_registry import ChainRegistry, chain_registry
from bridge_pinger.core.bridge.errors import InvalidRequestError, UnsupportedChainError, UnsupportedTokenError


class TestChainLookups:
    def test_resolve_chain_id(self):
        assert chain_registry.resolve_chain_id("ethereum") == 1
        assert chain_registry.resolve_chain_id("Arbitrum") == 42161
        assert chain_registry.resolve_chain_id(" base ") == 8453

    def test_unknown_chain_fails(self):
        with pytest.raises(UnsupportedChainError) as exc_info:
            chain_registry.resolve_chain_id("solana")
        assert isinstance(exc_info.value, InvalidRequestError)
        assert "solana" in exc_info.value.message

    def test_chain_name_for_id(self):
        assert chain_registry.chain_name_for_id(137) == "polygon"
        assert chain_registry.chain_name_for_id(999999) == "unknown"

    def test_lifi_chain_alias(self):
        assert chain_registry.provider_chain_alias("polygon", "lifi") == "POL"
        assert chain_registry.provider_chain_alias("optimism") == "OPT"

    def test_unmapped_alias_passes_through_uppercased(self):
        assert chain_registry.provider_chain_alias("zksync", "lifi") == "ZKSYNC"


class TestTokenLookups:
    def test_resolve_token_address(self):
        assert chain_registry.resolve_token_address("USDC", "base") == "0x833589fCD6eDb6E08f4c7C32D4f71b54bdA02913"
        assert chain_registry.resolve_token_address("weth", "optimism") == "0x4200000000000000000000000000000000000006"

    def test_eth_on_polygon_is_wrapped(self):
        assert chain_registry.resolve_token_address("ETH", "polygon") == "0x7ceB23fD6bC0adD59E62ac25578270cFf1b9f619"

    def test_unknown_token_fails(self):
        with pytest.raises(UnsupportedTokenError):
            chain_registry.resolve_token_address("DAI", "ethereum")

    def test_known_token_on_unknown_chain_fails(self):
        with pytest.raises(UnsupportedTokenError) as exc_info:
            chain_registry.resolve_token_address("USDC", "fantom")
        assert exc_info.value.chain == "fantom"

    def test_token_decimals(self):
        assert chain_registry.token_decimals("USDC") == 6
        assert chain_registry.token_decimals("usdt") == 6
        assert chain_registry.token_decimals("ETH") == 18

    def test_unknown_token_decimals_default_to_18(self):
        assert chain_registry.token_decimals("SHIB") == 18

    def test_supported_sets(self):
        assert chain_registry.is_supported_token("usdc")
        assert not chain_registry.is_supported_token("DAI")
        assert chain_registry.is_supported_chain("BASE")
        assert not chain_registry.is_supported_chain("avalanche")
        assert chain_registry.supported_chains == ["ethereum", "polygon", "arbitrum", "optimism", "base"]


def test_custom_tables_are_injectable():
    registry = ChainRegistry(
        chain_ids={"devnet": 31337},
        token_addresses={"TST": {"devnet": "0xTest"}},
        token_decimals={"TST": 8},
    )

    assert registry.resolve_chain_id("devnet") == 31337
    assert registry.chain_name_for_id(31337) == "devnet"
    assert registry.resolve_token_address("TST", "devnet") == "0xTest"
    assert registry.token_decimals("TST") == 8

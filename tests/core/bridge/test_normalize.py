import math

import pytest

from bridge_pinger.core.bridge.models import Confidence
from bridge_pinger.core.bridge.normalize import (
    bridge_confidence,
    bridge_url,
    build_requirements,
    build_route,
    eta_from_seconds,
    format_bridge_name,
    from_base_units,
    round_half_up,
    to_base_units,
)


class TestBridgeMetadata:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("across", "Across Protocol"),
            ("Across Protocol", "Across Protocol"),
            ("stargate", "Stargate"),
            ("Polygon Bridge", "Polygon Bridge"),
            ("somethingNew", "somethingNew"),
        ],
    )
    def test_format_bridge_name(self, raw, expected):
        assert format_bridge_name(raw) == expected

    def test_bridge_url_known_and_unknown(self):
        assert bridge_url("hop") == "https://hop.exchange"
        assert bridge_url("mystery") == "https://unknown-bridge.com"

    def test_confidence_lookup(self):
        assert bridge_confidence("across") is Confidence.HIGH
        assert bridge_confidence("multichain") is Confidence.LOW
        assert bridge_confidence("hyphen") is Confidence.MEDIUM
        assert bridge_confidence("mystery") is Confidence.MEDIUM


class TestRequirements:
    def test_gas_and_receive_lines(self):
        assert build_requirements("hop", "USDC", "polygon", "arbitrum") == [
            "MATIC for gas on Polygon",
            "Will receive USDC on Arbitrum",
        ]

    def test_stargate_note(self):
        reqs = build_requirements("stargate", "USDT", "ethereum", "base")
        assert reqs == [
            "ETH for gas on Ethereum",
            "Will receive USDT on Base",
            "STG tokens recommended for lower fees",
        ]


class TestUnits:
    def test_to_base_units(self):
        assert to_base_units(100, 6) == 100_000_000
        assert to_base_units(0.1, 18) == 10**17
        assert to_base_units(1.2345678, 6) == 1_234_567

    def test_from_base_units(self):
        assert from_base_units("99500000", 6) == 99.5
        assert from_base_units(10**18, 18) == 1.0
        assert from_base_units(None, 6) == 0.0

    @pytest.mark.parametrize("raw", ["abc", "NaN", "Infinity"])
    def test_from_base_units_rejects_garbage(self, raw):
        with pytest.raises(ValueError):
            from_base_units(raw, 6)

    def test_round_half_up(self):
        assert round_half_up(0.125, 2) == 0.13
        assert round_half_up(2.675, 2) == 2.68
        assert round_half_up(1.23456789, 6) == 1.234568

    def test_eta_rounds_up_to_minutes(self):
        assert eta_from_seconds(61, 15) == 2
        assert eta_from_seconds(120, 15) == 2
        assert eta_from_seconds(None, 15) == 15
        assert eta_from_seconds(0, 10) == 10

    @pytest.mark.parametrize("seconds", [float("inf"), float("nan"), -60])
    def test_eta_rejects_unusable_durations(self, seconds):
        with pytest.raises(ValueError):
            eta_from_seconds(seconds, 10)


class TestBuildRoute:
    def _build(self, **overrides):
        kwargs = dict(
            raw_bridge_name="across",
            token="USDC",
            amount=100.0,
            from_chain="arbitrum",
            to_chain="base",
            fee_amount=0.5,
            gas_usd=1.234,
            output_amount=99.5,
            eta_minutes=3,
            bridge_contract="0xabc",
        )
        kwargs.update(overrides)
        return build_route(**kwargs)

    def test_derivations(self):
        route = self._build()

        assert route.bridge_name == "Across Protocol"
        assert route.bridge_url == "https://across.to"
        assert route.fee_usd == 0.5
        assert route.fee_percentage == 0.5
        assert route.gas_estimate_usd == 1.23
        assert route.total_cost_usd == 1.73
        assert route.output_amount == 99.5
        assert route.eta_minutes == 3
        assert route.confidence is Confidence.HIGH
        assert route.bridge_contract == "0xabc"
        assert route.requirements == ("ETH for gas on Arbitrum", "Will receive USDC on Base")

    def test_missing_contract_uses_sentinel(self):
        assert self._build(bridge_contract=None).bridge_contract == "N/A"

    def test_negative_fee_is_kept(self):
        route = self._build(fee_amount=-0.25, output_amount=100.25, gas_usd=0.0)
        assert route.fee_usd == -0.25
        assert route.fee_percentage == -0.25
        assert route.total_cost_usd == -0.25

    def test_zero_amount_has_zero_fee_percentage(self):
        assert self._build(amount=0.0).fee_percentage == 0.0

    @pytest.mark.parametrize(
        "overrides",
        [
            {"gas_usd": math.nan},
            {"gas_usd": -1.0},
            {"output_amount": math.inf},
            {"fee_amount": math.nan},
            {"eta_minutes": -1},
        ],
    )
    def test_rejects_invalid_numbers(self, overrides):
        with pytest.raises(ValueError):
            self._build(**overrides)

    def test_to_dict_puts_rank_first_when_set(self):
        from dataclasses import replace

        route = self._build()
        assert "rank" not in route.to_dict()

        ranked = replace(route, rank=1).to_dict()
        assert list(ranked)[0] == "rank"
        assert ranked["confidence"] == "HIGH"
        assert ranked["requirements"] == ["ETH for gas on Arbitrum", "Will receive USDC on Base"]

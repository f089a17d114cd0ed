"""Shared helpers that turn provider quotes into canonical ``Route`` objects."""

from __future__ import annotations

import math
import re
from decimal import ROUND_DOWN, ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, List, Optional

from .constants import BRIDGE_METADATA, GAS_TOKENS, UNKNOWN_BRIDGE_URL, UNKNOWN_CONTRACT
from .models import Confidence, Route


def _metadata_key(bridge_name: str) -> str:
    return re.sub(r"\s+", "-", (bridge_name or "").strip().lower())


def format_bridge_name(bridge_name: str) -> str:
    metadata = BRIDGE_METADATA.get(_metadata_key(bridge_name))
    return metadata["name"] if metadata else bridge_name


def bridge_url(bridge_name: str) -> str:
    metadata = BRIDGE_METADATA.get(_metadata_key(bridge_name))
    return metadata["url"] if metadata else UNKNOWN_BRIDGE_URL


def bridge_confidence(bridge_name: str) -> Confidence:
    metadata = BRIDGE_METADATA.get(_metadata_key(bridge_name))
    return Confidence(metadata["confidence"]) if metadata else Confidence.MEDIUM


def build_requirements(bridge_name: str, token: str, from_chain: str, to_chain: str) -> List[str]:
    requirements: List[str] = []

    gas_token = GAS_TOKENS.get(from_chain)
    if gas_token:
        requirements.append(f"{gas_token} for gas on {from_chain.capitalize()}")

    requirements.append(f"Will receive {token} on {to_chain.capitalize()}")

    if "stargate" in (bridge_name or "").lower():
        requirements.append("STG tokens recommended for lower fees")

    return requirements


def round_half_up(value: float, places: int) -> float:
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def to_base_units(amount: float, decimals: int) -> int:
    """Human amount -> smallest token unit, truncated toward zero."""
    scaled = Decimal(str(amount)) * (Decimal(10) ** decimals)
    return int(scaled.to_integral_value(rounding=ROUND_DOWN))


def from_base_units(raw: Any, decimals: int) -> float:
    """Smallest token unit (int or numeric string) -> human amount."""
    if raw is None or raw == "":
        return 0.0
    try:
        value = Decimal(str(raw))
    except InvalidOperation as exc:
        raise ValueError(f"Invalid token amount: {raw!r}") from exc
    if not value.is_finite():
        raise ValueError(f"Invalid token amount: {raw!r}")
    return float(value / (Decimal(10) ** decimals))


def eta_from_seconds(seconds: Optional[float], default_minutes: int) -> int:
    if not seconds:
        return default_minutes
    if not math.isfinite(seconds) or seconds < 0:
        raise ValueError(f"Invalid duration in seconds: {seconds!r}")
    return int(math.ceil(seconds / 60))



def _require_finite(name: str, value: float, *, allow_negative: bool = False) -> None:
    if not math.isfinite(value):
        raise ValueError(f"{name} is not finite: {value!r}")
    if not allow_negative and value < 0:
        raise ValueError(f"{name} is negative: {value!r}")


def build_route(
    *,
    raw_bridge_name: str,
    token: str,
    amount: float,
    from_chain: str,
    to_chain: str,
    fee_amount: float,
    gas_usd: float,
    output_amount: float,
    eta_minutes: int,
    bridge_contract: Optional[str],
) -> Route:
    """Apply the canonical derivations and rounding to one quote.

    Raises ValueError when a numeric field is not finite, or when gas,
    output or ETA is negative. The fee may be negative when a provider
    quotes more out than in.
    """
    _require_finite("fee", fee_amount, allow_negative=True)
    _require_finite("gas", gas_usd)
    _require_finite("output", output_amount)
    _require_finite("eta", eta_minutes)

    fee_percentage = (fee_amount / amount) * 100 if amount > 0 else 0.0

    return Route(
        bridge_name=format_bridge_name(raw_bridge_name),
        bridge_url=bridge_url(raw_bridge_name),
        eta_minutes=int(eta_minutes),
        fee_usd=round_half_up(fee_amount, 4),
        fee_percentage=round_half_up(fee_percentage, 2),
        gas_estimate_usd=round_half_up(gas_usd, 2),
        total_cost_usd=round_half_up(fee_amount + gas_usd, 2),
        output_amount=round_half_up(output_amount, 6),
        requirements=tuple(build_requirements(raw_bridge_name, token, from_chain, to_chain)),
        confidence=bridge_confidence(raw_bridge_name),
        bridge_contract=bridge_contract or UNKNOWN_CONTRACT,
    )

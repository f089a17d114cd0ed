"""Inbound request validation for route lookups."""

from __future__ import annotations

import math
from typing import Any, Mapping

from .constants import DEFAULT_MIN_AMOUNT, MAX_AMOUNT, MIN_AMOUNTS, SUPPORTED_CHAINS, SUPPORTED_TOKENS
from .errors import InvalidRequestError
from .models import BridgeRequest


def _parse_amount(raw: Any) -> float:
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        raise InvalidRequestError("Amount is required")
    if isinstance(raw, bool):
        raise InvalidRequestError("Amount must be a valid number")
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise InvalidRequestError("Amount must be a valid number") from None
    if not math.isfinite(value):
        raise InvalidRequestError("Amount must be a valid number")
    return value


def _format_amount(value: float) -> str:
    return f"{value:g}"


def validate_bridge_request(body: Mapping[str, Any]) -> BridgeRequest:
    """Normalize and validate a raw request body.

    Tokens are uppercased and chains lowercased before checking support.
    Raises InvalidRequestError with a client-facing message.
    """
    token = body.get("token")
    from_chain = body.get("from_chain")
    to_chain = body.get("to_chain")

    if not token:
        raise InvalidRequestError("Token is required")
    normalized_token = str(token).strip().upper()
    if normalized_token not in SUPPORTED_TOKENS:
        raise InvalidRequestError(
            f"Token {token} not supported. Supported tokens: {', '.join(SUPPORTED_TOKENS)}"
        )

    if not from_chain:
        raise InvalidRequestError("from_chain is required")
    if not to_chain:
        raise InvalidRequestError("to_chain is required")

    normalized_from = str(from_chain).strip().lower()
    normalized_to = str(to_chain).strip().lower()

    for original, normalized in ((from_chain, normalized_from), (to_chain, normalized_to)):
        if normalized not in SUPPORTED_CHAINS:
            raise InvalidRequestError(
                f"Chain {original} not supported. Supported chains: {', '.join(SUPPORTED_CHAINS)}"
            )

    if normalized_from == normalized_to:
        raise InvalidRequestError("Source and destination chains cannot be the same")

    amount = _parse_amount(body.get("amount"))
    if amount <= 0:
        raise InvalidRequestError("Amount must be a positive number")

    min_amount = MIN_AMOUNTS.get(normalized_token, DEFAULT_MIN_AMOUNT)
    if amount < min_amount:
        raise InvalidRequestError(f"Minimum bridge amount is {_format_amount(min_amount)} {normalized_token}")

    if amount > MAX_AMOUNT:
        raise InvalidRequestError("Maximum bridge amount is 1,000,000 tokens")

    return BridgeRequest(
        token=normalized_token,
        amount=amount,
        from_chain=normalized_from,
        to_chain=normalized_to,
    )

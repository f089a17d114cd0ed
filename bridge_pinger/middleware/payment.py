"""
x402 payment-header gate.

Checks that a payment token, amount and currency are present and
acceptable. Signatures and on-chain settlement are not verified.
"""

import math
from typing import Any, Dict, Optional

import structlog
from fastapi import HTTPException, Request, status

from ..config import settings

logger = structlog.stdlib.get_logger("payment")


class PaymentRequired(HTTPException):
    """Rejected or missing payment headers."""

    def __init__(self, message: str):
        super().__init__(
            status_code=status.HTTP_402_PAYMENT_REQUIRED,
            detail={
                "error": "Payment Required",
                "message": message,
                "payment_details": payment_details(),
            },
        )
        self.message = message


def payment_details() -> Dict[str, Any]:
    return {
        "amount": settings.payment_amount,
        "currency": settings.payment_currency,
        "protocol": "x402",
    }


def check_payment_headers(
    token: Optional[str],
    amount: Optional[str],
    currency: Optional[str],
) -> None:
    """Raise PaymentRequired unless the headers describe an acceptable payment."""
    if not token:
        raise PaymentRequired("X402 payment token required")

    try:
        paid = float(amount) if amount else None
    except ValueError:
        paid = None
    if paid is None or not math.isfinite(paid) or paid < settings.payment_amount:
        raise PaymentRequired(f"Minimum payment is {settings.payment_amount} {settings.payment_currency}")

    if not currency or currency.upper() != settings.payment_currency.upper():
        raise PaymentRequired(f"Payment must be in {settings.payment_currency}")


async def require_payment(request: Request) -> None:
    """FastAPI dependency guarding paid endpoints."""
    if not settings.payment_required:
        return

    headers = request.headers
    check_payment_headers(
        headers.get("x-payment-token"),
        headers.get("x-payment-amount"),
        headers.get("x-payment-currency"),
    )
    logger.info(
        "payment_verified",
        amount=headers.get("x-payment-amount"),
        currency=headers.get("x-payment-currency"),
    )

from .logging_middleware import RequestLoggingMiddleware
from .payment import PaymentRequired, check_payment_headers, require_payment

__all__ = [
    "RequestLoggingMiddleware",
    "PaymentRequired",
    "check_payment_headers",
    "require_payment",
]

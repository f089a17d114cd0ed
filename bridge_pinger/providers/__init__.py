from .base import ProviderResult, QuoteProvider
from .lifi import LifiProvider
from .socket_tech import SocketProvider

__all__ = [
    "ProviderResult",
    "QuoteProvider",
    "LifiProvider",
    "SocketProvider",
]

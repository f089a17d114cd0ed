"""Route aggregation components."""

from typing import TYPE_CHECKING

from .errors import BridgeError, InvalidRequestError, NoRoutesError, UpstreamError
from .models import BridgeRequest, Confidence, OptimizedRoutes, Recommendation, Route

if TYPE_CHECKING:  # pragma: no cover
    from .aggregator import RouteAggregator
    from .service import BridgeRouteService

__all__ = [
    "BridgeError",
    "BridgeRequest",
    "BridgeRouteService",
    "Confidence",
    "InvalidRequestError",
    "NoRoutesError",
    "OptimizedRoutes",
    "Recommendation",
    "Route",
    "RouteAggregator",
    "UpstreamError",
]


def __getattr__(name: str):  # pragma: no cover - simple thunk
    # Deferred so providers can import core.bridge without a cycle
    if name == "BridgeRouteService":
        from .service import BridgeRouteService as _BridgeRouteService

        return _BridgeRouteService
    if name == "RouteAggregator":
        from .aggregator import RouteAggregator as _RouteAggregator

        return _RouteAggregator
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

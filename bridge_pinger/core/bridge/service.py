"""BridgeRouteService runs the cached aggregate -> optimize pipeline for one request."""

from __future__ import annotations

import asyncio
import logging
import time
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from ...cache import RouteCache, RouteCacheKey, route_cache_key
from .aggregator import RouteAggregator
from .errors import NoRoutesError
from .models import BridgeRequest, OptimizedRoutes
from .optimizer import build_warnings, optimize_routes


def build_summary(optimized: OptimizedRoutes) -> Dict[str, Any]:
    cheapest = optimized.routes[0]
    fastest_eta = min(route.eta_minutes for route in optimized.routes)
    return {
        "total_routes_found": len(optimized.routes),
        "cheapest_bridge": cheapest.bridge_name,
        "best_fee": f"${cheapest.total_cost_usd}",
        "fastest_eta": f"{fastest_eta} minutes",
    }


class BridgeRouteService:
    """Serves route recommendations, memoized per (token, amount, from, to).

    Identical requests that arrive while one is already querying the
    providers wait on that in-flight lookup instead of starting another.
    """

    def __init__(
        self,
        *,
        aggregator: Optional[RouteAggregator] = None,
        cache: Optional[RouteCache] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.aggregator = aggregator or RouteAggregator()
        self.cache = cache or RouteCache()
        self._logger = logger or logging.getLogger(__name__)
        self._inflight: Dict[RouteCacheKey, asyncio.Future] = {}

    async def get_routes(self, request: BridgeRequest) -> Dict[str, Any]:
        start = time.perf_counter()
        key = route_cache_key(request.token, request.amount, request.from_chain, request.to_chain)

        cached = await self.cache.get(key)
        if cached is not None:
            return self._finalize(cached, start, cached=True)

        task = self._inflight.get(key)
        if task is None:
            task = asyncio.ensure_future(self._lookup(request, key))
            self._inflight[key] = task
            task.add_done_callback(lambda done, k=key: self._release(k, done))

        payload = await asyncio.shield(task)
        return self._finalize(payload, start, cached=False)

    def _release(self, key: RouteCacheKey, task: asyncio.Future) -> None:
        if self._inflight.get(key) is task:
            del self._inflight[key]

    @staticmethod
    def _finalize(payload: Dict[str, Any], start: float, *, cached: bool) -> Dict[str, Any]:
        return {
            **payload,
            "cached": cached,
            "response_time_ms": int((time.perf_counter() - start) * 1000),
        }

    async def _lookup(self, request: BridgeRequest, key: RouteCacheKey) -> Dict[str, Any]:
        routes = await self.aggregator.aggregate(
            request.token, request.amount, request.from_chain, request.to_chain
        )
        if not routes:
            raise NoRoutesError("No bridge routes found for this transfer")

        optimized = optimize_routes(routes, request.token, request.amount)
        payload: Dict[str, Any] = {
            "token": request.token,
            "amount": request.amount,
            "from_chain": request.from_chain,
            "to_chain": request.to_chain,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "routes": [route.to_dict() for route in optimized.routes],
            "recommended_route": optimized.recommendation.to_dict() if optimized.recommendation else None,
            "summary": build_summary(optimized),
            "warnings": build_warnings(request.token, request.amount),
        }

        try:
            await self.cache.set(key, payload)
        except Exception:  # noqa: BLE001 - a failed store only means no caching
            self._logger.warning("Failed to cache routes for %s", key, exc_info=True)

        return payload

    def cache_stats(self) -> Dict[str, int]:
        return self.cache.stats()


_route_service: Optional[BridgeRouteService] = None


def get_route_service() -> BridgeRouteService:
    """Get the process-wide route service (and with it, the shared cache)."""
    global _route_service
    if _route_service is None:
        _route_service = BridgeRouteService()
    return _route_service

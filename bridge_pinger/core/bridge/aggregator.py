"""Fan out to every quote provider and merge the results."""

from __future__ import annotations

import asyncio
import logging
from typing import Dict, List, Optional, Sequence

from ...providers.base import ProviderResult, QuoteProvider
from ...providers.lifi import LifiProvider
from ...providers.socket_tech import SocketProvider
from .models import Route


def dedupe_routes(routes: Sequence[Route]) -> List[Route]:
    """Keep one route per bridge name: the cheaper one, first seen on a tie."""
    by_name: Dict[str, Route] = {}
    for route in routes:
        existing = by_name.get(route.bridge_name)
        if existing is None or route.total_cost_usd < existing.total_cost_usd:
            by_name[route.bridge_name] = route
    return list(by_name.values())


class RouteAggregator:
    """Runs providers concurrently and returns routes unique by bridge name.

    A provider that fails contributes nothing; the others still count.
    Concatenation follows provider order (Socket, then LI.FI by default).
    """

    def __init__(
        self,
        providers: Optional[Sequence[QuoteProvider]] = None,
        *,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.providers: List[QuoteProvider] = list(providers) if providers is not None else [
            SocketProvider(),
            LifiProvider(),
        ]
        self._logger = logger or logging.getLogger(__name__)

    async def aggregate(self, token: str, amount: float, from_chain: str, to_chain: str) -> List[Route]:
        self._logger.info("Aggregating routes for %s %s from %s to %s", amount, token, from_chain, to_chain)

        results = await asyncio.gather(
            *(provider.fetch_result(token, amount, from_chain, to_chain) for provider in self.providers),
            return_exceptions=True,
        )

        all_routes: List[Route] = []
        for provider, result in zip(self.providers, results):
            if isinstance(result, BaseException):
                if not isinstance(result, Exception):
                    raise result
                self._logger.warning("Provider %s raised: %s", provider.name, result)
                continue
            if not isinstance(result, ProviderResult):
                self._logger.warning("Provider %s returned an unexpected result", provider.name)
                continue
            if result.error is not None:
                self._logger.info("No routes from %s: %s", provider.name, result.error)
                continue
            if result.routes:
                all_routes.extend(result.routes)
                self._logger.info("Added %d routes from %s", len(result.routes), provider.name)
            else:
                self._logger.info("No routes from %s", provider.name)

        unique = dedupe_routes(all_routes)
        self._logger.info("Total unique routes aggregated: %d", len(unique))
        return unique

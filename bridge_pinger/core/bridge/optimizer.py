"""Ranking, recommendation and advisory warnings for aggregated routes."""

from __future__ import annotations

from dataclasses import replace
from typing import List, Sequence

from .models import OptimizedRoutes, Recommendation, Route

REASON_LOWEST_COST = "lowest total cost"
REASON_BALANCED = "best balance of speed and cost"
REASON_SMALL_TRANSFER = "fastest option for small transfer"

MAX_COST_PREMIUM = 0.20  # fastest may cost up to 20% more than cheapest
SPEEDUP_FACTOR = 2  # ...if it is at least twice as fast
SMALL_TRANSFER_AMOUNT = 10
LARGE_TRANSFER_AMOUNT = 50_000

BASE_WARNINGS = (
    "Always verify bridge contracts before approving tokens",
    "Bridge times are estimates and may vary with network congestion",
)


def _within_cost_premium(fastest: Route, cheapest: Route) -> bool:
    if cheapest.total_cost_usd == 0:
        # Relative premium is undefined; only an equally priced route qualifies
        return fastest.total_cost_usd == cheapest.total_cost_usd
    premium = (fastest.total_cost_usd - cheapest.total_cost_usd) / cheapest.total_cost_usd
    return premium < MAX_COST_PREMIUM


def optimize_routes(routes: Sequence[Route], token: str, amount: float) -> OptimizedRoutes:
    """Sort routes by total cost, assign ranks, and pick a recommendation.

    The recommendation starts as the cheapest route. The fastest route
    replaces it when it costs less than 20% more and takes under half the
    time. For transfers under 10 tokens the fastest route always wins if
    it is a different bridge; that check runs last.
    """
    if not routes:
        return OptimizedRoutes(routes=[], recommendation=None)

    ordered = sorted(routes, key=lambda r: r.total_cost_usd)
    cheapest = ordered[0]
    # min() keeps the first of equal ETAs, in the order routes arrived
    fastest = min(routes, key=lambda r: r.eta_minutes)

    recommended, reason = cheapest, REASON_LOWEST_COST

    if (
        fastest is not cheapest
        and _within_cost_premium(fastest, cheapest)
        and fastest.eta_minutes < cheapest.eta_minutes / SPEEDUP_FACTOR
    ):
        recommended, reason = fastest, REASON_BALANCED

    if amount < SMALL_TRANSFER_AMOUNT and fastest.bridge_name != cheapest.bridge_name:
        recommended, reason = fastest, REASON_SMALL_TRANSFER

    ranked = [replace(route, rank=index) for index, route in enumerate(ordered, start=1)]
    return OptimizedRoutes(
        routes=ranked,
        recommendation=Recommendation(bridge_name=recommended.bridge_name, reason=reason),
    )


def build_warnings(token: str, amount: float) -> List[str]:
    warnings = list(BASE_WARNINGS)
    if amount < SMALL_TRANSFER_AMOUNT:
        warnings.append("For small amounts, bridge fees may be a significant percentage of your transfer")
    if amount > LARGE_TRANSFER_AMOUNT:
        warnings.append("For large amounts, consider splitting into multiple transfers or verify bridge liquidity")
    return warnings

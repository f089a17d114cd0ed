import httpx
import pytest
from unittest.mock import AsyncMock, MagicMock

from bridge_pinger.core.bridge.aggregator import RouteAggregator, dedupe_routes
from bridge_pinger.core.bridge.errors import UpstreamError
from bridge_pinger.core.bridge.models import Route
from bridge_pinger.providers.base import ProviderResult
from bridge_pinger.providers.lifi import LifiProvider


def make_route(name: str, cost: float, eta: int = 10) -> Route:
    return Route(
        bridge_name=name,
        bridge_url="https://unknown-bridge.com",
        eta_minutes=eta,
        fee_usd=cost,
        fee_percentage=0.0,
        gas_estimate_usd=0.0,
        total_cost_usd=cost,
        output_amount=100.0 - cost,
    )


def mock_provider(name: str, routes=None, *, error=None, side_effect=None):
    provider = MagicMock()
    provider.name = name
    if side_effect is not None:
        provider.fetch_result = AsyncMock(side_effect=side_effect)
    else:
        provider.fetch_result = AsyncMock(
            return_value=ProviderResult(provider=name, routes=list(routes or []), error=error)
        )
    return provider


class TestDedupe:
    def test_keeps_cheaper_duplicate(self):
        routes = [make_route("Stargate", 3.0), make_route("Hop Protocol", 2.0), make_route("Stargate", 1.5)]

        unique = dedupe_routes(routes)

        assert len(unique) == 2
        by_name = {r.bridge_name: r for r in unique}
        assert by_name["Stargate"].total_cost_usd == 1.5

    def test_first_seen_wins_on_tie(self):
        first = make_route("Stargate", 2.0, eta=5)
        second = make_route("Stargate", 2.0, eta=50)

        assert dedupe_routes([first, second]) == [first]

    def test_empty(self):
        assert dedupe_routes([]) == []


class TestAggregate:
    @pytest.mark.asyncio
    async def test_merges_all_providers(self):
        socket = mock_provider("Socket", [make_route("Stargate", 2.0), make_route("Hop Protocol", 1.0)])
        lifi = mock_provider("LI.FI", [make_route("Across Protocol", 0.5)])
        aggregator = RouteAggregator([socket, lifi])

        routes = await aggregator.aggregate("USDC", 100.0, "arbitrum", "base")

        assert [r.bridge_name for r in routes] == ["Stargate", "Hop Protocol", "Across Protocol"]
        socket.fetch_result.assert_awaited_once_with("USDC", 100.0, "arbitrum", "base")
        lifi.fetch_result.assert_awaited_once_with("USDC", 100.0, "arbitrum", "base")

    @pytest.mark.asyncio
    async def test_cross_provider_duplicate_keeps_cheaper(self):
        socket = mock_provider("Socket", [make_route("Stargate", 2.0)])
        lifi = mock_provider("LI.FI", [make_route("Stargate", 1.2)])

        routes = await RouteAggregator([socket, lifi]).aggregate("USDC", 100.0, "arbitrum", "base")

        assert len(routes) == 1
        assert routes[0].total_cost_usd == 1.2

    @pytest.mark.asyncio
    async def test_lifi_raising_keeps_socket_routes(self):
        socket = mock_provider("Socket", [make_route("Stargate", 2.0)])
        lifi = mock_provider("LI.FI", side_effect=RuntimeError("boom"))

        routes = await RouteAggregator([socket, lifi]).aggregate("USDC", 100.0, "arbitrum", "base")

        assert [r.bridge_name for r in routes] == ["Stargate"]

    @pytest.mark.asyncio
    async def test_socket_error_keeps_lifi_routes(self):
        socket = mock_provider("Socket", error=UpstreamError("Socket", "HTTP error", status_code=503))
        lifi = mock_provider("LI.FI", [make_route("Across Protocol", 0.5)])

        routes = await RouteAggregator([socket, lifi]).aggregate("USDC", 100.0, "arbitrum", "base")

        assert [r.bridge_name for r in routes] == ["Across Protocol"]

    @pytest.mark.asyncio
    async def test_all_providers_empty(self):
        aggregator = RouteAggregator([mock_provider("Socket"), mock_provider("LI.FI")])

        assert await aggregator.aggregate("USDC", 100.0, "arbitrum", "base") == []

    @pytest.mark.asyncio
    async def test_real_provider_outage_is_isolated(self):
        def unreachable(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        lifi = LifiProvider(base_url="https://li.test/v1", transport=httpx.MockTransport(unreachable))
        socket = mock_provider("Socket", [make_route("Hop Protocol", 1.0)])

        routes = await RouteAggregator([socket, lifi]).aggregate("USDC", 100.0, "arbitrum", "base")

        assert [r.bridge_name for r in routes] == ["Hop Protocol"]

    def test_default_provider_order(self):
        aggregator = RouteAggregator()
        assert [p.name for p in aggregator.providers] == ["Socket", "LI.FI"]

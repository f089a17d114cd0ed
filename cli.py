#!/usr/bin/env python3
"""Simple CLI for querying bridge routes locally"""

import argparse
import asyncio
import json
import sys
from typing import Any, Dict

from bridge_pinger.config import settings
from bridge_pinger.core.bridge.errors import InvalidRequestError, NoRoutesError
from bridge_pinger.core.bridge.service import BridgeRouteService
from bridge_pinger.core.bridge.validation import validate_bridge_request
from bridge_pinger.logging_config import setup_logging


def print_routes(payload: Dict[str, Any]) -> None:
    """Pretty print a route recommendation payload"""
    print(f"\n🌉 {payload['amount']:g} {payload['token']}: {payload['from_chain']} → {payload['to_chain']}")
    print("=" * 72)
    print(f"{'#':>2}  {'Bridge':<20} {'ETA':>8} {'Fee':>10} {'Gas':>9} {'Total':>9} {'Receive':>12}")
    print("-" * 72)

    for route in payload["routes"]:
        print(
            f"{route['rank']:>2}. {route['bridge_name']:<20} "
            f"{route['eta_minutes']:>5} min "
            f"${route['fee_usd']:>9.4f} "
            f"${route['gas_estimate_usd']:>8.2f} "
            f"${route['total_cost_usd']:>8.2f} "
            f"{route['output_amount']:>12.6f}"
        )

    recommended = payload.get("recommended_route")
    if recommended:
        print(f"\n✅ Recommended: {recommended['bridge_name']} ({recommended['reason']})")

    if payload.get("warnings"):
        print("\nWarnings:")
        for warning in payload["warnings"]:
            print(f"  ⚠️  {warning}")

    print(f"\n⏱  {payload['response_time_ms']} ms")


async def cli_routes(token: str, amount: str, from_chain: str, to_chain: str, as_json: bool = False) -> int:
    """CLI command to fetch and rank bridge routes"""
    try:
        request = validate_bridge_request(
            {"token": token, "amount": amount, "from_chain": from_chain, "to_chain": to_chain}
        )
    except InvalidRequestError as exc:
        print(f"❌ {exc.message}")
        return 2

    service = BridgeRouteService()
    try:
        payload = await service.get_routes(request)
    except NoRoutesError as exc:
        print(f"❌ {exc.message}")
        return 1

    if as_json:
        print(json.dumps(payload, indent=2))
    else:
        print_routes(payload)
    return 0


def cli_serve(host: str, port: int) -> None:
    import uvicorn

    uvicorn.run("bridge_pinger.main:app", host=host, port=port, log_level=settings.log_level.lower())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Bridge Route Pinger CLI")
    subparsers = parser.add_subparsers(dest="command")

    routes_parser = subparsers.add_parser("routes", help="Fetch ranked bridge routes")
    routes_parser.add_argument("token", help="Token symbol (USDC, USDT, ETH, WETH)")
    routes_parser.add_argument("amount", help="Amount to bridge")
    routes_parser.add_argument("from_chain", help="Source chain")
    routes_parser.add_argument("to_chain", help="Destination chain")
    routes_parser.add_argument("--json", action="store_true", help="Print the raw response payload")

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default=settings.host, help=f"Bind host (default: {settings.host})")
    serve_parser.add_argument("--port", type=int, default=settings.port, help=f"Bind port (default: {settings.port})")

    return parser


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return 0

    if args.command == "serve":
        cli_serve(args.host, args.port)
        return 0

    setup_logging("WARNING")
    return asyncio.run(cli_routes(args.token, args.amount, args.from_chain, args.to_chain, args.json))


if __name__ == "__main__":
    sys.exit(main())

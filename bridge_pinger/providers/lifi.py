"""Async client for LI.FI's quote API, normalized into ``Route`` objects."""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Union

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..config import settings
from ..core.bridge.chain_registry import ChainRegistry
from ..core.bridge.models import Route
from ..core.bridge.normalize import build_route, eta_from_seconds, from_base_units, to_base_units
from .base import QuoteProvider

logger = logging.getLogger(__name__)

LIFI_DEFAULT_ETA_MINUTES = 15

RawAmount = Union[int, float, str]


class _LifiModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class LifiGasCost(_LifiModel):
    amount_usd: Optional[float] = Field(default=None, alias="amountUSD")


class LifiEstimate(_LifiModel):
    to_amount: Optional[RawAmount] = Field(default=None, alias="toAmount")
    gas_costs: List[LifiGasCost] = Field(default_factory=list, alias="gasCosts")
    execution_duration: Optional[float] = Field(default=None, alias="executionDuration")


class LifiToolDetails(_LifiModel):
    name: Optional[str] = None


class LifiTransactionRequest(_LifiModel):
    to: Optional[str] = None


class LifiQuote(_LifiModel):
    """The subset of a ``GET /quote`` response the normalizer reads."""

    estimate: Optional[LifiEstimate] = None
    tool: Optional[str] = None
    tool_details: Optional[LifiToolDetails] = Field(default=None, alias="toolDetails")
    transaction_request: Optional[LifiTransactionRequest] = Field(default=None, alias="transactionRequest")

    @property
    def bridge_name(self) -> str:
        if self.tool_details and self.tool_details.name:
            return self.tool_details.name
        return self.tool or "Unknown"


class LifiProvider(QuoteProvider):
    """Thin wrapper around https://li.quest/v1; one quote per request."""

    name = "LI.FI"

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        timeout_s: Optional[float] = None,
        registry: Optional[ChainRegistry] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        super().__init__(
            base_url=base_url or settings.lifi_base_url,
            timeout_s=timeout_s,
            registry=registry,
            transport=transport,
        )

    def build_params(self, token: str, amount: float, from_chain: str, to_chain: str) -> dict:
        decimals = self.registry.token_decimals(token)
        return {
            "fromChain": self.registry.provider_chain_alias(from_chain, "lifi"),
            "toChain": self.registry.provider_chain_alias(to_chain, "lifi"),
            "fromToken": self.registry.resolve_token_address(token, from_chain),
            "toToken": self.registry.resolve_token_address(token, to_chain),
            "fromAmount": str(to_base_units(amount, decimals)),
            "fromAddress": settings.quote_user_address,
            "slippage": settings.lifi_slippage,
        }

    async def _fetch(self, token: str, amount: float, from_chain: str, to_chain: str) -> List[Route]:
        params = self.build_params(token, amount, from_chain, to_chain)
        logger.debug("Fetching LI.FI routes with params: %s", params)
        data = await self._get_json("/quote", params)
        return self.parse_quote(data, token, amount, from_chain, to_chain)

    def parse_quote(self, data: Any, token: str, amount: float, from_chain: str, to_chain: str) -> List[Route]:
        if not isinstance(data, dict) or not data.get("estimate"):
            logger.info("No routes found in LI.FI response")
            return []

        try:
            quote = LifiQuote.model_validate(data)
            estimate = quote.estimate
            decimals = self.registry.token_decimals(token)
            output_amount = from_base_units(estimate.to_amount, decimals)
            gas_usd = sum(cost.amount_usd or 0.0 for cost in estimate.gas_costs)
            route = build_route(
                raw_bridge_name=quote.bridge_name,
                token=token,
                amount=amount,
                from_chain=from_chain,
                to_chain=to_chain,
                fee_amount=amount - output_amount,
                gas_usd=gas_usd,
                output_amount=output_amount,
                eta_minutes=eta_from_seconds(estimate.execution_duration, LIFI_DEFAULT_ETA_MINUTES),
                bridge_contract=quote.transaction_request.to if quote.transaction_request else None,
            )
        except (ValidationError, ValueError) as exc:
            logger.warning("Skipping unusable LI.FI quote: %s", exc)
            return []

        logger.info("Found 1 route from LI.FI: %s", route.bridge_name)
        return [route]

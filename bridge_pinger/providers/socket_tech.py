"""Async client for the Socket (Bungee) v2 quote API, normalized into ``Route`` objects."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Union

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..config import settings
from ..core.bridge.chain_registry import ChainRegistry
from ..core.bridge.models import Route
from ..core.bridge.normalize import build_route, eta_from_seconds, from_base_units, to_base_units
from .base import QuoteProvider

logger = logging.getLogger(__name__)

SOCKET_DEFAULT_ETA_MINUTES = 10

RawAmount = Union[int, float, str]


class _SocketModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class SocketIntegratorFee(_SocketModel):
    amount: Optional[RawAmount] = None


class SocketApprovalData(_SocketModel):
    allowance_target: Optional[str] = Field(default=None, alias="allowanceTarget")


class SocketUserTx(_SocketModel):
    to: Optional[str] = None


class SocketRoute(_SocketModel):
    """One candidate route from ``result.routes``."""

    used_bridge_names: List[str] = Field(default_factory=list, alias="usedBridgeNames")
    integrator_fee: Optional[SocketIntegratorFee] = Field(default=None, alias="integratorFee")
    total_gas_fees_in_usd: Optional[float] = Field(default=None, alias="totalGasFeesInUsd")
    to_amount: Optional[RawAmount] = Field(default=None, alias="toAmount")
    service_time: Optional[float] = Field(default=None, alias="serviceTime")
    approval_data: Optional[SocketApprovalData] = Field(default=None, alias="approvalData")
    user_txs: List[SocketUserTx] = Field(default_factory=list, alias="userTxs")

    @property
    def bridge_name(self) -> str:
        return self.used_bridge_names[0] if self.used_bridge_names else "Unknown"

    @property
    def contract(self) -> Optional[str]:
        if self.approval_data and self.approval_data.allowance_target:
            return self.approval_data.allowance_target
        if self.user_txs and self.user_txs[0].to:
            return self.user_txs[0].to
        return None


class SocketQuoteResult(_SocketModel):
    # Routes stay raw so one malformed entry does not sink the rest
    routes: List[Any] = Field(default_factory=list)


class SocketQuoteResponse(_SocketModel):
    result: Optional[SocketQuoteResult] = None


class SocketProvider(QuoteProvider):
    """Thin wrapper around https://api.socket.tech/v2; may return several routes."""

    name = "Socket"

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout_s: Optional[float] = None,
        registry: Optional[ChainRegistry] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        super().__init__(
            base_url=base_url or settings.socket_base_url,
            timeout_s=timeout_s,
            registry=registry,
            transport=transport,
        )
        self.api_key = api_key or settings.socket_api_key

    def _headers(self) -> Dict[str, str]:
        headers = super()._headers()
        if self.api_key:
            headers["API-KEY"] = self.api_key
        return headers

    def build_params(self, token: str, amount: float, from_chain: str, to_chain: str) -> dict:
        decimals = self.registry.token_decimals(token)
        return {
            "fromChainId": self.registry.resolve_chain_id(from_chain),
            "toChainId": self.registry.resolve_chain_id(to_chain),
            "fromTokenAddress": self.registry.resolve_token_address(token, from_chain),
            "toTokenAddress": self.registry.resolve_token_address(token, to_chain),
            "fromAmount": str(to_base_units(amount, decimals)),
            "userAddress": settings.quote_user_address,
            "singleTxOnly": "true",
            "sort": "output",
            "defaultSwapSlippage": settings.socket_swap_slippage,
        }

    async def _fetch(self, token: str, amount: float, from_chain: str, to_chain: str) -> List[Route]:
        params = self.build_params(token, amount, from_chain, to_chain)
        logger.debug("Fetching Socket routes with params: %s", params)
        data = await self._get_json("/quote", params)
        return self.parse_quote(data, token, amount, from_chain, to_chain)

    def parse_quote(self, data: Any, token: str, amount: float, from_chain: str, to_chain: str) -> List[Route]:
        try:
            response = SocketQuoteResponse.model_validate(data)
        except ValidationError as exc:
            logger.warning("Unusable Socket response: %s", exc)
            return []

        raw_routes = response.result.routes if response.result else []
        if not raw_routes:
            logger.info("No routes found in Socket response")
            return []

        logger.info("Found %d routes from Socket", len(raw_routes))
        decimals = self.registry.token_decimals(token)

        routes: List[Route] = []
        for index, raw in enumerate(raw_routes):
            try:
                quote = SocketRoute.model_validate(raw)
                fee_raw = quote.integrator_fee.amount if quote.integrator_fee else None
                output_amount = from_base_units(quote.to_amount, decimals)
                routes.append(
                    build_route(
                        raw_bridge_name=quote.bridge_name,
                        token=token,
                        amount=amount,
                        from_chain=from_chain,
                        to_chain=to_chain,
                        fee_amount=from_base_units(fee_raw, decimals) if fee_raw else 0.0,
                        gas_usd=quote.total_gas_fees_in_usd or 0.0,
                        output_amount=output_amount,
                        eta_minutes=eta_from_seconds(quote.service_time, SOCKET_DEFAULT_ETA_MINUTES),
                        bridge_contract=quote.contract,
                    )
                )
            except (ValidationError, ValueError) as exc:
                logger.warning("Skipping Socket route #%d: %s", index, exc)

        return routes

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import httpx

from ..config import settings
from ..core.bridge.chain_registry import ChainRegistry, chain_registry
from ..core.bridge.errors import InvalidRequestError, UpstreamError
from ..core.bridge.models import Route

logger = logging.getLogger(__name__)


@dataclass
class ProviderResult:
    """Outcome of one provider call: routes on success, the error otherwise."""

    provider: str
    routes: List[Route] = field(default_factory=list)
    error: Optional[UpstreamError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class QuoteProvider(ABC):
    """Base class for bridge quote providers.

    Subclasses implement ``_fetch``; callers use ``fetch_quotes`` or
    ``fetch_result``, which never raise.
    """

    name: str
    timeout_s: float = 8.0

    def __init__(
        self,
        *,
        base_url: str,
        timeout_s: Optional[float] = None,
        registry: Optional[ChainRegistry] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout_s = timeout_s or settings.provider_timeout_seconds or self.timeout_s
        self.registry = registry or chain_registry
        self._transport = transport

    def _headers(self) -> Dict[str, str]:
        return {"Accept": "application/json"}

    async def _get_json(self, path: str, params: Dict[str, Any]) -> Any:
        cleaned_params = {k: v for k, v in params.items() if v is not None}
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout_s,
                transport=self._transport,
            ) as client:
                resp = await client.get(path, params=cleaned_params, headers=self._headers())
                resp.raise_for_status()
                return resp.json()
        except httpx.HTTPStatusError as exc:
            body = exc.response.text[:500]
            raise UpstreamError(self.name, f"HTTP error: {body}", status_code=exc.response.status_code) from exc
        except httpx.TimeoutException as exc:
            raise UpstreamError(self.name, f"Timed out after {self.timeout_s}s") from exc
        except httpx.RequestError as exc:
            raise UpstreamError(self.name, f"Request failed: {exc}") from exc
        except ValueError as exc:
            raise UpstreamError(self.name, f"Unparseable response: {exc}") from exc

    @abstractmethod
    async def _fetch(self, token: str, amount: float, from_chain: str, to_chain: str) -> List[Route]:
        """Call the upstream API and normalize its quotes; may raise UpstreamError."""

    async def fetch_result(self, token: str, amount: float, from_chain: str, to_chain: str) -> ProviderResult:
        try:
            routes = await self._fetch(token, amount, from_chain, to_chain)
        except UpstreamError as exc:
            logger.warning("%s API error: %s", self.name, exc)
            return ProviderResult(provider=self.name, error=exc)
        except InvalidRequestError as exc:
            logger.warning("%s cannot quote this pair: %s", self.name, exc.message)
            return ProviderResult(provider=self.name, error=UpstreamError(self.name, exc.message))
        except Exception as exc:  # noqa: BLE001 - one provider must not break aggregation
            logger.exception("%s adapter failed unexpectedly", self.name)
            return ProviderResult(provider=self.name, error=UpstreamError(self.name, str(exc)))
        return ProviderResult(provider=self.name, routes=routes)

    async def fetch_quotes(self, token: str, amount: float, from_chain: str, to_chain: str) -> List[Route]:
        result = await self.fetch_result(token, amount, from_chain, to_chain)
        return result.routes

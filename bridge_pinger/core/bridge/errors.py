"""
Error taxonomy for the route pipeline.

Invalid requests and empty aggregations surface to the client with their
own codes. Upstream failures never leave the provider adapters.
"""

from typing import Optional


class BridgeError(Exception):
    """Base class for route pipeline errors."""

    code = "BRIDGE_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidRequestError(BridgeError):
    """Bad, missing or unsupported request parameter."""

    code = "INVALID_REQUEST"


class UnsupportedChainError(InvalidRequestError):
    def __init__(self, chain: str):
        super().__init__(f"Chain {chain} not supported")
        self.chain = chain


class UnsupportedTokenError(InvalidRequestError):
    def __init__(self, token: str, chain: Optional[str] = None):
        where = f" on {chain}" if chain else ""
        super().__init__(f"Token {token} not supported{where}")
        self.token = token
        self.chain = chain


class UpstreamError(BridgeError):
    """A quote provider failed: network, timeout, non-2xx or unusable payload."""

    code = "UPSTREAM_ERROR"

    def __init__(self, provider: str, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.provider = provider
        self.status_code = status_code

    def __str__(self) -> str:
        status = f" (HTTP {self.status_code})" if self.status_code is not None else ""
        return f"{self.provider}: {self.message}{status}"


class NoRoutesError(BridgeError):
    """Every provider came back empty."""

    code = "NO_ROUTES"

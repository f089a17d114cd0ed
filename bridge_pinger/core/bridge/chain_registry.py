"""Chain and token lookups shared by the quote providers."""

from __future__ import annotations

from typing import Dict, List, Optional

from .constants import (
    CHAIN_IDS,
    DEFAULT_TOKEN_DECIMALS,
    LIFI_CHAIN_CODES,
    SUPPORTED_CHAINS,
    SUPPORTED_TOKENS,
    TOKEN_ADDRESSES,
    TOKEN_DECIMALS,
)
from .errors import UnsupportedChainError, UnsupportedTokenError


class ChainRegistry:
    """Pure lookup over static chain and token tables.

    Usage:
        registry = ChainRegistry()
        registry.resolve_chain_id("arbitrum")              # 42161
        registry.resolve_token_address("USDC", "base")     # 0x8335...
        registry.provider_chain_alias("polygon", "lifi")   # "POL"
    """

    def __init__(
        self,
        *,
        chain_ids: Optional[Dict[str, int]] = None,
        token_addresses: Optional[Dict[str, Dict[str, str]]] = None,
        token_decimals: Optional[Dict[str, int]] = None,
        provider_aliases: Optional[Dict[str, Dict[str, str]]] = None,
    ) -> None:
        self._chain_ids = chain_ids if chain_ids is not None else CHAIN_IDS
        self._token_addresses = token_addresses if token_addresses is not None else TOKEN_ADDRESSES
        self._token_decimals = token_decimals if token_decimals is not None else TOKEN_DECIMALS
        self._provider_aliases = provider_aliases if provider_aliases is not None else {"lifi": LIFI_CHAIN_CODES}
        self._id_to_name = {chain_id: name for name, chain_id in self._chain_ids.items()}

    @staticmethod
    def _normalize_chain(name: str) -> str:
        return (name or "").strip().lower()

    @staticmethod
    def _normalize_token(token: str) -> str:
        return (token or "").strip().upper()

    # ─────────────────────────────────────────────────────────────────────────
    # Public lookup methods
    # ─────────────────────────────────────────────────────────────────────────

    def resolve_chain_id(self, name: str) -> int:
        chain_id = self._chain_ids.get(self._normalize_chain(name))
        if chain_id is None:
            raise UnsupportedChainError(name)
        return chain_id

    def chain_name_for_id(self, chain_id: int) -> str:
        return self._id_to_name.get(chain_id, "unknown")

    def resolve_token_address(self, token: str, chain: str) -> str:
        by_chain = self._token_addresses.get(self._normalize_token(token))
        if by_chain is None:
            raise UnsupportedTokenError(token)
        address = by_chain.get(self._normalize_chain(chain))
        if address is None:
            raise UnsupportedTokenError(token, chain)
        return address

    def token_decimals(self, token: str) -> int:
        # Unknown tokens fall back to 18 decimals rather than failing
        return self._token_decimals.get(self._normalize_token(token), DEFAULT_TOKEN_DECIMALS)

    def provider_chain_alias(self, name: str, provider: str = "lifi") -> str:
        """Provider-specific chain code; unmapped chains pass through uppercased."""
        aliases = self._provider_aliases.get(provider, {})
        return aliases.get(self._normalize_chain(name), (name or "").upper())

    def is_supported_chain(self, name: str) -> bool:
        return self._normalize_chain(name) in SUPPORTED_CHAINS

    def is_supported_token(self, token: str) -> bool:
        return self._normalize_token(token) in SUPPORTED_TOKENS

    @property
    def supported_chains(self) -> List[str]:
        return list(SUPPORTED_CHAINS)

    @property
    def supported_tokens(self) -> List[str]:
        return list(SUPPORTED_TOKENS)


chain_registry = ChainRegistry()


__all__ = ["ChainRegistry", "chain_registry"]

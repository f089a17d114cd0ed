"""Typed models used by the route pipeline."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class Confidence(str, Enum):
    """Static reputation tier of a bridge."""

    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


@dataclass(frozen=True)
class Route:
    """One provider's normalized quote for moving a token between chains."""

    bridge_name: str
    bridge_url: str
    eta_minutes: int
    fee_usd: float
    fee_percentage: float
    gas_estimate_usd: float
    total_cost_usd: float
    output_amount: float
    requirements: Tuple[str, ...] = ()
    confidence: Confidence = Confidence.MEDIUM
    bridge_contract: str = "N/A"
    rank: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["requirements"] = list(self.requirements)
        data["confidence"] = self.confidence.value
        if self.rank is None:
            data.pop("rank")
        else:
            data = {"rank": data.pop("rank"), **data}
        return data


@dataclass(frozen=True)
class Recommendation:
    bridge_name: str
    reason: str

    def to_dict(self) -> Dict[str, str]:
        return {"bridge_name": self.bridge_name, "reason": self.reason}


@dataclass
class OptimizedRoutes:
    """Ranked routes plus the recommended pick (None when nothing was ranked)."""

    routes: List[Route] = field(default_factory=list)
    recommendation: Optional[Recommendation] = None


@dataclass(frozen=True)
class BridgeRequest:
    """A validated, normalized route request."""

    token: str
    amount: float
    from_chain: str
    to_chain: str

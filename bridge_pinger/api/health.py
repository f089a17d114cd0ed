from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Depends

from ..core.bridge.service import BridgeRouteService, get_route_service

router = APIRouter()


@router.get("/health")
async def health_check(service: BridgeRouteService = Depends(get_route_service)) -> Dict[str, Any]:
    """Liveness plus route cache occupancy"""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "cache": service.cache_stats(),
    }

from typing import Any, Dict, Optional, Union

import structlog
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, StrictFloat, StrictInt, StrictStr

from ..core.bridge.constants import SUPPORTED_CHAINS, SUPPORTED_TOKENS
from ..core.bridge.errors import InvalidRequestError, NoRoutesError
from ..core.bridge.service import BridgeRouteService, get_route_service
from ..core.bridge.validation import validate_bridge_request
from ..middleware.payment import require_payment

logger = structlog.stdlib.get_logger("routes")

router = APIRouter(prefix="/api/v1/bridge")


class BridgeRoutesRequest(BaseModel):
    token: Optional[str] = Field(default=None, description="Token to bridge (USDC, USDT, ETH, WETH)")
    amount: Optional[Union[StrictStr, StrictInt, StrictFloat]] = Field(default=None, description="Amount to bridge, e.g. '100'")
    from_chain: Optional[str] = Field(default=None, description="Source chain")
    to_chain: Optional[str] = Field(default=None, description="Destination chain")


def error_response(status_code: int, error: str, message: str, **extra: Any) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": error, "message": message, **extra})


@router.post("/routes", dependencies=[Depends(require_payment)])
async def post_bridge_routes(
    req: BridgeRoutesRequest,
    service: BridgeRouteService = Depends(get_route_service),
) -> Dict[str, Any]:
    try:
        request = validate_bridge_request(req.model_dump())
    except InvalidRequestError as e:
        return error_response(400, e.code, e.message)

    try:
        return await service.get_routes(request)
    except NoRoutesError as e:
        return error_response(
            404,
            e.code,
            e.message,
            suggestion="Try a different token, amount, or chain pair",
            supported_tokens=SUPPORTED_TOKENS,
            supported_chains=SUPPORTED_CHAINS,
        )
    except Exception as e:
        logger.exception("bridge_routes_failed", token=request.token, amount=request.amount)
        return error_response(
            500,
            "INTERNAL_ERROR",
            f"Failed to fetch bridge routes: {e}",
            suggestion="Please try again in a few moments",
        )

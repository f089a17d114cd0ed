from typing import Any, Dict

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api import health, routes
from .config import settings
from .core.bridge.constants import SUPPORTED_CHAINS, SUPPORTED_TOKENS
from .logging_config import setup_logging
from .middleware.logging_middleware import RequestLoggingMiddleware
from .middleware.payment import PaymentRequired

setup_logging()

# Create FastAPI app
app = FastAPI(
    title="Bridge Route Pinger",
    description=settings.service_description,
    version=settings.service_version,
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router, tags=["Health"])
app.include_router(routes.router, tags=["Bridge"])


@app.exception_handler(PaymentRequired)
async def payment_required_handler(request: Request, exc: PaymentRequired) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.detail)


@app.exception_handler(RequestValidationError)
async def invalid_body_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request body") if errors else "Invalid request body"
    return JSONResponse(status_code=400, content={"error": "INVALID_REQUEST", "message": message})


def _pricing() -> Dict[str, Any]:
    return {
        "amount": settings.payment_amount,
        "currency": settings.payment_currency,
        "network": settings.payment_network,
        "protocol": "x402",
    }


@app.get("/")
async def root():
    """Root endpoint with service metadata"""
    return {
        "name": settings.service_name,
        "version": settings.service_version,
        "description": settings.service_description,
        "endpoints": {
            "routes": "POST /api/v1/bridge/routes",
            "health": "GET /health",
            "manifest": "GET /.well-known/agent.json",
            "docs": "/docs",
        },
        "supported_tokens": SUPPORTED_TOKENS,
        "supported_chains": SUPPORTED_CHAINS,
        "pricing": _pricing(),
    }


@app.get("/.well-known/agent.json")
async def agent_manifest():
    """Agent manifest describing the paid entrypoint"""
    return {
        "name": settings.service_name,
        "version": settings.service_version,
        "description": settings.service_description,
        "entrypoints": [
            {
                "key": "get_bridge_routes",
                "description": "Get optimal bridge routes with fees and time estimates for cross-chain token transfers",
                "method": "POST",
                "path": "/api/v1/bridge/routes",
                "input": {
                    "type": "object",
                    "required": ["token", "amount", "from_chain", "to_chain"],
                    "properties": {
                        "token": {"type": "string", "enum": SUPPORTED_TOKENS},
                        "amount": {"type": "string", "description": "Amount to bridge (e.g., '100')"},
                        "from_chain": {"type": "string", "enum": SUPPORTED_CHAINS},
                        "to_chain": {"type": "string", "enum": SUPPORTED_CHAINS},
                    },
                },
            }
        ],
        "payments": {
            **_pricing(),
            "payTo": settings.pay_to_wallet,
            "facilitatorUrl": settings.facilitator_url,
        },
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "bridge_pinger.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,
        log_level=settings.log_level.lower()
    )

"""
Safe Walk Routing API - FastAPI Main Application
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routes.routing import router as routing_router
from api.schemas.routing import ErrorResponse
from api.services.routing_service import API_VERSION, routing_service

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log whether Google Maps access is configured at startup."""
    health = routing_service.get_health_status()
    if health.api_key_configured:
        logger.info("Safe Walk Routing API started with Google Maps access")
    else:
        logger.warning("Safe Walk Routing API started without GOOGLE_MAPS_API_KEY: "
                       "/compare is unavailable and /evaluate returns neutral scores")
    yield
    logger.info("Safe Walk Routing API stopped")


app = FastAPI(
    title="Safe Walk Routing API",
    description="Label alternative walking routes as Safest, Shortest and Neutral "
                "from the police stations, hospitals, stores and buildings along them.",
    version=API_VERSION,
    lifespan=lifespan,
    responses={422: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


def error_response(status_code: int, error: str, message: str, details=None) -> JSONResponse:
    body = ErrorResponse(error=error, message=message, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump())


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Validation error for {request.url.path}: {exc}")
    # ctx may hold the raised ValueError, which is not JSON serializable
    details = [
        {key: value for key, value in error.items() if key != "ctx"}
        for error in exc.errors()
    ]
    return error_response(422, "validation_error", "Request validation failed", details)


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unexpected error for {request.url.path}: {exc}")
    return error_response(500, "internal_server_error", "An unexpected error occurred")


app.include_router(routing_router)


@app.get("/", tags=["general"])
async def root():
    return {
        "api": "Safe Walk Routing API",
        "version": API_VERSION,
        "documentation": "/docs",
        "health_check": "/api/routing/health"
    }


@app.get("/health", tags=["general"])
async def api_health():
    """Liveness of the API plus the routing service status."""
    return {
        "api_status": "healthy",
        "service_status": routing_service.get_health_status().status,
        "timestamp": datetime.now(timezone.utc).isoformat()
    }

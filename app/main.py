# app/main.py

import logging

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from app.api.middleware import AuditTriggerMiddleware, CorrelationIdMiddleware
from app.api.routers import health, partition_keys
from app.config.logging import configure_logging
from app.config.settings import get_settings
from app.domain.exceptions import DomainError, SerializationError

logger = logging.getLogger(__name__)

settings = get_settings()
configure_logging(settings.log_level)

app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    debug=settings.debug,
)

# Middleware order: last added runs first (outermost). Request flow: CorrelationId -> AuditTrigger.
app.add_middleware(AuditTriggerMiddleware)
app.add_middleware(CorrelationIdMiddleware)


@app.exception_handler(SerializationError)
async def serialization_error_handler(request, exc: SerializationError):
    return JSONResponse(status_code=422, content={"detail": exc.message})


@app.exception_handler(DomainError)
async def domain_error_handler(request, exc: DomainError):
    return JSONResponse(status_code=400, content={"detail": exc.message})


@app.exception_handler(Exception)
async def unexpected_error_handler(request, exc: Exception):
    logger.exception("unhandled_error")
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"},
    )


# Routers: /health, /partition-keys
app.include_router(health.router)
app.include_router(partition_keys.router, prefix="/partition-keys")

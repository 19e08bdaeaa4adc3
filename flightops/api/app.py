"""FastAPI application factory."""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, Request

# Load .env file from project root (must be before other imports)
load_dotenv()
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402
from fastapi.responses import JSONResponse  # noqa: E402
from pydantic import ValidationError as PydanticValidationError  # noqa: E402

from flightops.api.routes import (  # noqa: E402
    admin,
    company,
    crew,
    documents,
    fleet,
    maintenance,
    messaging,
    quotes,
    trips,
)
from flightops.persistence.errors import (  # noqa: E402
    ConfigurationError,
    DocumentExistsError,
    DocumentNotFoundError,
    StoreError,
)
from flightops.services.errors import (  # noqa: E402
    OperationNotAllowedError,
    ProviderError,
    ValidationError,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize Firebase Admin on startup."""
    # Uses ADC on Cloud Run
    try:
        import firebase_admin
        firebase_admin.initialize_app()
        logger.info("Firebase Admin SDK initialized")
    except ValueError:
        # Already initialized
        logger.info("Firebase Admin SDK already initialized")
    except Exception as exc:
        logger.warning("Firebase Admin SDK init failed: %s", exc)
    yield


app = FastAPI(
    title="FlightOps API",
    description="Charter flight operations back office",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=os.environ.get("CORS_ORIGINS", "http://localhost:3000").split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(fleet.router, prefix="/api")
app.include_router(maintenance.router, prefix="/api")
app.include_router(documents.router, prefix="/api")
app.include_router(crew.router, prefix="/api")
app.include_router(company.router, prefix="/api")
app.include_router(quotes.router, prefix="/api")
app.include_router(trips.router, prefix="/api")
app.include_router(messaging.router, prefix="/api")
app.include_router(admin.router, prefix="/api")


# ------------------------------------------------------------------
# Error mapping
# ------------------------------------------------------------------


def _error(status_code: int, exc: Exception, **extra) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": str(exc), **extra})


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return _error(422, exc, issues=exc.issues)


@app.exception_handler(PydanticValidationError)
async def pydantic_error_handler(request: Request, exc: PydanticValidationError):
    converted = ValidationError.from_pydantic(exc)
    return _error(422, converted, issues=converted.issues)


@app.exception_handler(DocumentNotFoundError)
async def not_found_handler(request: Request, exc: DocumentNotFoundError):
    return _error(404, exc)


@app.exception_handler(DocumentExistsError)
@app.exception_handler(OperationNotAllowedError)
async def conflict_handler(request: Request, exc: Exception):
    return _error(409, exc)


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError):
    logger.error("Configuration error on %s: %s", request.url.path, exc)
    return _error(503, exc)


@app.exception_handler(StoreError)
@app.exception_handler(ProviderError)
async def upstream_error_handler(request: Request, exc: Exception):
    logger.error("Upstream failure on %s: %s", request.url.path, exc)
    return _error(502, exc)


@app.get("/api/health")
async def health():
    return {"status": "ok"}

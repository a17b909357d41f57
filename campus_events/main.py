import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from starlette.middleware.sessions import SessionMiddleware

from campus_events.api.endpoints.auth import router as auth_router
from campus_events.api.endpoints.catalog import router as catalog_router
from campus_events.api.endpoints.events import router as events_router
from campus_events.api.endpoints.registrations import router as registrations_router
from campus_events.api.endpoints.reviews import router as reviews_router
from campus_events.constants.constants import ErrorCode
from campus_events.core.config import settings
from campus_events.core.errors import CampusEventsError, field_errors
from campus_events.core.rate_limit import limiter
from campus_events.core.seed import seed_sample_data
from campus_events.core.storage import MemStorage

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Async context manager for app lifespan events"""
    logger.info("🚀 Starting Campus Events application...")

    storage: MemStorage = app.state.storage
    if settings.SEED_ON_STARTUP and storage.is_empty():
        logger.info("🌱 Seeding sample data...")
        seed_sample_data(
            storage,
            coordinator_email=settings.SEED_COORDINATOR_EMAIL,
            coordinator_password=settings.SEED_COORDINATOR_PASSWORD,
        )

    logger.info(f"🏁 Startup complete (strict references: {storage.strict_references})")
    try:
        yield
    finally:
        logger.info("👋 Application shutdown complete")


async def domain_exception_handler(request: Request, exc: CampusEventsError):
    logger.info(f"{request.method} {request.url.path} failed with {exc}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Validation Error: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content={
            "message": "Invalid request data",
            "code": ErrorCode.VALIDATION_FAILED.value,
            "errors": field_errors(exc.errors()),
        },
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


def create_app(storage: Optional[MemStorage] = None) -> FastAPI:
    """Build the API around ``storage``, or a fresh store configured from settings."""
    app = FastAPI(
        title="Campus Events API",
        description="Browse campus events, register for tickets and leave reviews",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.state.storage = storage if storage is not None else MemStorage(
        strict_references=settings.STRICT_REFERENCES
    )
    app.state.limiter = limiter

    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_exception_handler(CampusEventsError, domain_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.SESSION_SECRET_KEY,
        max_age=settings.SESSION_MAX_AGE,
        same_site="none" if settings.IS_PRODUCTION else "lax",
        https_only=settings.IS_PRODUCTION,
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        response = await call_next(request)
        logger.info(f"{request.method} {request.url.path} -> {response.status_code}")
        return response

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/", tags=["Health Check"])
    async def health_check(request: Request):
        store: MemStorage = request.app.state.storage
        return {
            "status": "healthy",
            "service": "Campus Events API",
            "events": len(store.get_events()),
            "strict_references": store.strict_references,
        }

    app.include_router(auth_router, prefix="/api", tags=["Authentication"])
    app.include_router(events_router, prefix="/api", tags=["Events"])
    app.include_router(registrations_router, prefix="/api", tags=["Registrations"])
    app.include_router(reviews_router, prefix="/api", tags=["Reviews"])
    app.include_router(catalog_router, prefix="/api", tags=["Catalog"])

    logger.info(f"✅ Loaded {len(app.routes)} routes")
    return app


app = create_app()

"""FastAPI application entrypoint. No business logic; only wiring and middleware."""

from dotenv import load_dotenv

load_dotenv()

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import Limiter
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from app.api.v1 import health
from app.api.v1 import router as v1_router
from app.core.config import settings
from app.core.error_handlers import register_exception_handlers
from app.schemas.base import ApiResponse, envelope

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Refuse to start without both token signing secrets."""
    missing = settings.missing_secrets()
    if missing:
        raise RuntimeError(f"Missing required configuration: {', '.join(missing)}")
    logger.info("Starting Backlinkse API (%s)", settings.APP_ENV)
    yield


limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[settings.rate_limit],
    enabled=settings.RATE_LIMIT_ENABLED,
)

app = FastAPI(
    title="Backlinkse API",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)
app.state.limiter = limiter

register_exception_handlers(app)

app.add_middleware(SlowAPIMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.APP_ENV == "dev" else settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(v1_router, prefix=settings.API_V1_PREFIX)
app.include_router(health.router, prefix="/health", tags=["health"])


@app.get("/", response_model=ApiResponse, response_model_exclude_unset=True)
def root() -> ApiResponse:
    """Root route; minimal payload for discovery."""
    return envelope("Welcome to the Backlinkse API", version=app.version, docs="/docs")

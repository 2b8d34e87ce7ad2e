from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from core.db import build_repository
from core.environment import get_vehicles_file
from core.logging import setup_logging
from core.prometheus_metrics import prometheus_collector
from exceptions import register_exception_handlers
from middleware.rate_limit import limiter, custom_rate_limit_exceeded
from routers import health, metrics, vehicles

setup_logging()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Loader errors other than a missing file abort startup
    repository = build_repository(get_vehicles_file())
    app.state.vehicle_repository = repository
    prometheus_collector.update_catalog_size(len(repository))
    logger.info(f"Vehicle catalog ready with {len(repository)} vehicles (last id {repository.last_id})")

    try:
        yield
    finally:
        app.state.vehicle_repository = None


app = FastAPI(title="Vehicle Catalog API", lifespan=lifespan)

# Register exception handlers
register_exception_handlers(app)

# Rate limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, custom_rate_limit_exceeded)
app.add_middleware(SlowAPIMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],   # Allows POST, GET, PUT, DELETE, OPTIONS
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(metrics.router)
app.include_router(vehicles.router)


if __name__ == "__main__":
    import uvicorn
    from core.environment import get_host, get_port

    uvicorn.run(app, host=get_host(), port=get_port(), log_config=None)

from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from fastapi import Request
from fastapi.responses import JSONResponse
from prometheus_client import Counter

from core.environment import get_rate_limit_default, is_rate_limit_enabled
from core.prometheus_metrics import REGISTRY

limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[get_rate_limit_default()],
    enabled=is_rate_limit_enabled(),
)

# Metric for monitoring
rate_limit_exceeded_counter = Counter(
    'vehicle_rate_limit_exceeded_total',
    'Total rate limit violations',
    ['endpoint'],
    registry=REGISTRY
)

def custom_rate_limit_exceeded(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    rate_limit_exceeded_counter.labels(endpoint=request.url.path).inc()

    return JSONResponse(
        status_code=429,
        content={
            "error": "Rate limit exceeded. Please try again later.",
            "limit": str(exc.detail),
        },
    )

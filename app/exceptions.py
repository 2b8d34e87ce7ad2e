import logging

from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from services.exceptions import (
    InvalidVehicleError,
    VehiclesNotFoundError,
    VehicleNotFoundError,
    VehicleIdAlreadyExistsError,
)

logger = logging.getLogger(__name__)


class ValidationError(HTTPException):
    def __init__(self, message: str, field: str = None):
        detail = {"error": "validation_error", "message": message}
        if field:
            detail["field"] = field
        super().__init__(status_code=400, detail=detail)


async def validation_exception_handler(request, exc):
    return JSONResponse(
        status_code=400,
        content={
            "error": "Validation Error",
            "message": exc.detail.get("message", "Validation error"),
            "field": exc.detail.get("field"),
        },
    )


async def invalid_vehicle_exception_handler(request: Request, exc: InvalidVehicleError):
    return await validation_exception_handler(request, ValidationError(str(exc), exc.field))


async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies and unparsable path/query parameters are reported as 400."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    loc = first.get("loc") or ()
    field = loc[-1] if len(loc) > 1 and isinstance(loc[-1], str) else None

    if first.get("type") == "missing" and loc and loc[0] == "body" and field:
        message = f"missing required field: {field}"
    elif loc and loc[0] in ("path", "query"):
        message = f"invalid {field}"
    else:
        message = "invalid request body"

    return await validation_exception_handler(request, ValidationError(message, field))


async def not_found_exception_handler(request: Request, exc: Exception):
    return JSONResponse(status_code=404, content={"error": "Not Found", "message": str(exc)})


async def conflict_exception_handler(request: Request, exc: VehicleIdAlreadyExistsError):
    return JSONResponse(status_code=409, content={"error": "Conflict", "message": str(exc)})


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=500,
        content={"error": "Internal Server Error", "message": "an unexpected error occurred"},
    )


def register_exception_handlers(app):
    app.add_exception_handler(ValidationError, validation_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(InvalidVehicleError, invalid_vehicle_exception_handler)
    app.add_exception_handler(VehiclesNotFoundError, not_found_exception_handler)
    app.add_exception_handler(VehicleNotFoundError, not_found_exception_handler)
    app.add_exception_handler(VehicleIdAlreadyExistsError, conflict_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from roombooking.clock import utc_now
from roombooking.errors import BookingError, ErrorKind, RequestInvalid

logger = logging.getLogger(__name__)

HTTP_STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
}


def error_body(exc: BookingError) -> dict:
    http_status = HTTP_STATUS_BY_KIND[exc.kind]
    body = {
        "error": exc.code,
        "message": exc.message,
        "status": http_status,
        "timestamp": utc_now().isoformat(),
    }
    if exc.details:
        body["details"] = exc.details
    return body


async def booking_error_handler(request: Request, exc: BookingError) -> JSONResponse:
    body = error_body(exc)
    logger.warning(f"{request.method} {request.url.path} rejected: {exc.code} ({exc.message})")
    return JSONResponse(status_code=body["status"], content=body)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # field path -> message, e.g. {"body.start_time": "Field required"}
    fields = {
        ".".join(str(part) for part in error["loc"]): error["msg"]
        for error in exc.errors()
    }
    return await booking_error_handler(request, RequestInvalid("Request validation failed", fields))


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BookingError, booking_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

import logging

from fastapi import Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.schemas.responses import ErrorResponse

from .custom import AgodaDataMissingError, AgodaError, InvalidSearchParameterError

logger = logging.getLogger(__name__)

FETCH_FAILED = "Failed to fetch hotel data"
FETCH_FAILED_SUGGESTION = (
    "Try again in a few minutes or check if the search parameters are valid"
)
DATA_MISSING_HINT = "This might be due to rate limiting or changed API structure"
METHOD_NOT_ALLOWED = "Method not allowed"


def _error(
    status_code: int, body: ErrorResponse, headers: dict[str, str] | None = None
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
        headers=headers,
    )


async def invalid_search_parameter_handler(
    _request: Request, exc: InvalidSearchParameterError
) -> JSONResponse:
    logger.info("Rejected search: %s", exc.message)
    return _error(400, ErrorResponse(error=exc.message))


async def agoda_error_handler(_request: Request, exc: AgodaError) -> JSONResponse:
    logger.error("Agoda error: %s (status=%s)", exc.message, exc.status_code)
    return _error(
        500,
        ErrorResponse(
            error=FETCH_FAILED,
            message=exc.message,
            suggestion=FETCH_FAILED_SUGGESTION,
        ),
    )


async def agoda_data_missing_handler(
    _request: Request, exc: AgodaDataMissingError
) -> JSONResponse:
    logger.warning("Agoda returned no properties list")
    return _error(500, ErrorResponse(error=exc.message, message=DATA_MISSING_HINT))


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> Response:
    if exc.status_code == 405:
        logger.info("Rejected %s %s", request.method, request.url.path)
        return _error(405, ErrorResponse(error=METHOD_NOT_ALLOWED), headers=exc.headers)
    return await http_exception_handler(request, exc)


async def unexpected_error_handler(_request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unexpected error while searching hotels")
    return _error(
        500,
        ErrorResponse(
            error=FETCH_FAILED,
            message=str(exc),
            suggestion=FETCH_FAILED_SUGGESTION,
        ),
    )

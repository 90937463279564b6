"""
FastAPI exception handlers.

Errors are returned in the same envelope shape as analysis failures
({"success": false, "error": ...}) so clients handle one format.
"""

import structlog
from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from mediscan.models.output_models import ResultEnvelope

logger = structlog.get_logger(__name__)


def _envelope_content(error: str) -> dict:
    return ResultEnvelope.failure(error).model_dump(by_alias=True, exclude_none=True)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Handle undecodable request bodies (malformed JSON, non-object body).

    Maps to 400 Bad Request.
    """
    logger.warning("Invalid request body", errors=jsonable_encoder(exc.errors()))

    content = _envelope_content("Invalid request body")
    content["details"] = jsonable_encoder(exc.errors())
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=content)


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle unexpected errors.

    Maps to 500 Internal Server Error.
    """
    logger.exception("Unexpected error", error_type=type(exc).__name__)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_envelope_content("Internal server error"),
    )


# Exception handler mapping for FastAPI app.add_exception_handler()
EXCEPTION_HANDLERS = {
    RequestValidationError: request_validation_error_handler,
    Exception: generic_error_handler,
}

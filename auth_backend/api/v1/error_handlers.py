# Standard library imports
import logging

# External package imports
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

# Local application imports
from .auth_controller import envelope

logger = logging.getLogger(__name__)


INVALID_BODY_MESSAGE = "Invalid request body"


async def request_validation_exception_handler(
    request: Request, exception: RequestValidationError
) -> JSONResponse:
    """
    Report malformed bodies (bad JSON, non-string fields) as 400 in the
    standard envelope instead of FastAPI's default 422
    """
    locations = [error.get("loc") for error in exception.errors()]
    logger.info(f"Rejected malformed body on {request.url.path}: {locations}")
    return envelope(status.HTTP_400_BAD_REQUEST, INVALID_BODY_MESSAGE)

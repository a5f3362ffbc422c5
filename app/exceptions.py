from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.logger import get_logger

logger = get_logger(__name__)


class ValidationError(Exception):
    """The request is missing something the service needs; no fetch is made."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class FetchFailed(Exception):
    """Fetching, parsing or serializing the target page failed."""

    def __init__(self, message: str, url: str = ""):
        super().__init__(message)
        self.message = message
        self.url = url


def validation_error_response(exc: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": exc.message})


def fetch_failed_response(exc: FetchFailed) -> JSONResponse:
    logger.error(f"Error fetching URL {exc.url}: {exc.message}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": f"Failed to fetch content: {exc.message}"},
    )


def add_exception_handlers(app):
    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        return validation_error_response(exc)

    @app.exception_handler(FetchFailed)
    async def fetch_failed_handler(request: Request, exc: FetchFailed):
        return fetch_failed_response(exc)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # A url that is present but not a string can't be fetched; anything else
        # wrong with the body means no usable url was sent.
        for error in exc.errors():
            loc = tuple(error.get("loc", ()))
            if loc[:2] == ("body", "url"):
                return fetch_failed_response(FetchFailed(error.get("msg", "Invalid URL"), url=repr(error.get("input"))))
        return validation_error_response(ValidationError("URL is required"))

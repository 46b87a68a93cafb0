"""Problem Details error responses for the API."""

from typing import Callable, Optional

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from ..domain.exceptions import DuplicationException, NotFoundException
from ..utils.logging_config import get_logger, log_exception

logger = get_logger("api")

DEFAULT_TITLES = {
    400: "Bad Request",
    404: "Not Found",
    405: "Method Not Allowed",
    409: "Conflict",
    422: "Unprocessable Entity",
    500: "Internal Server Error",
    503: "Service Unavailable",
}


def create_problem_response(
    status_code: int,
    title: str,
    detail: Optional[str] = None,
    instance: Optional[str] = None,
    **extra_fields,
) -> JSONResponse:
    """Create a JSON response in RFC 9457 Problem Details format."""
    problem = {
        "type": f"https://httpstatuses.com/{status_code}",
        "title": title,
        "status": status_code,
    }

    if detail:
        problem["detail"] = detail
    if instance:
        problem["instance"] = instance

    problem.update(extra_fields)

    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(problem),
        media_type="application/problem+json",
    )


class ProblemDetailsMiddleware(BaseHTTPMiddleware):
    """Turns exceptions no handler dealt with into a 500 Problem Details response."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            log_exception("api", exc, {"method": request.method, "url": str(request.url)})
            return create_problem_response(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                title=DEFAULT_TITLES[500],
                detail="An unexpected error occurred",
                instance=str(request.url),
            )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return create_problem_response(
        status_code=exc.status_code,
        title=DEFAULT_TITLES.get(exc.status_code, "Error"),
        detail=exc.detail,
        instance=str(request.url),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return create_problem_response(
        status_code=422,
        title="Validation Error",
        detail="Request validation failed",
        instance=str(request.url),
        errors=exc.errors(),
    )


async def not_found_exception_handler(
    request: Request, exc: NotFoundException
) -> JSONResponse:
    logger.info(f"{request.method} {request.url.path}: {exc}")
    return create_problem_response(
        status_code=status.HTTP_404_NOT_FOUND,
        title=DEFAULT_TITLES[404],
        detail=str(exc),
        instance=str(request.url),
    )


async def duplication_exception_handler(
    request: Request, exc: DuplicationException
) -> JSONResponse:
    logger.info(f"{request.method} {request.url.path}: {exc}")
    return create_problem_response(
        status_code=status.HTTP_409_CONFLICT,
        title=DEFAULT_TITLES[409],
        detail=str(exc),
        instance=str(request.url),
        field=exc.field,
    )


def register_problem_handlers(app: FastAPI) -> None:
    """Install the Problem Details exception handlers on an application."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(NotFoundException, not_found_exception_handler)
    app.add_exception_handler(DuplicationException, duplication_exception_handler)

"""
Uniform ``{error, message}`` JSON error bodies.

Route code and dependencies raise ``HTTPException`` as usual (routing 404/405s
come through the same handler); these handlers only reshape the response.
Anything else that escapes a handler becomes a generic 500 so no internal
detail reaches the caller.

The ``Exception`` handler runs inside Starlette's ``ServerErrorMiddleware``,
which re-raises after sending the 500; the server logs that traceback. Our
own log line carries only the path and the exception class.
"""

from __future__ import annotations

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from swa_api.schemas.identity import ErrorOut

logger = logging.getLogger(__name__)

INTERNAL_ERROR = ErrorOut(error="Internal server error", message="Application Crash")


def _error_name(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    body = ErrorOut(error=_error_name(exc.status_code), message=str(exc.detail))
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error path=%s method=%s error=%s",
        request.url.path,
        request.method,
        type(exc).__name__,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=INTERNAL_ERROR.model_dump(),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

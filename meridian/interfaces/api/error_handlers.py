"""
FastAPI exception handlers.

Maps decode failures onto client errors so a malformed request is reported
as HTTP 400, never as a server error. Anything else becomes a sanitized 500.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from meridian.helpers.exceptions import PayloadDecodeError
from meridian.helpers.logging_helper import sanitize_exception_message

logger = logging.getLogger(__name__)

INVALID_PAYLOAD_MESSAGE = "invalid payload"


async def payload_decode_error_handler(request: Request, exc: PayloadDecodeError) -> JSONResponse:
    logger.info(f"[API] {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=400,
        content={"error": INVALID_PAYLOAD_MESSAGE, "details": exc.errors},
    )


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = [
        {"loc": list(e.get("loc", ())), "msg": e.get("msg", ""), "type": e.get("type", "")} for e in exc.errors()
    ]
    logger.info(f"[API] {request.method} {request.url.path}: {len(details)} validation error(s)")
    return JSONResponse(
        status_code=400,
        content={"error": INVALID_PAYLOAD_MESSAGE, "details": details},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    message = sanitize_exception_message(exc, "Internal server error")
    return JSONResponse(status_code=500, content={"error": message})


def register_exception_handlers(app: FastAPI) -> None:
    """Install the API error mapping on a FastAPI app."""
    app.add_exception_handler(PayloadDecodeError, payload_decode_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

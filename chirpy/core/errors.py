from __future__ import annotations

from typing import Any

from fastapi import FastAPI
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from chirpy.core.logging import log

class ChirpyError(Exception):
    status_code = 500
    message = "internal error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.message
        super().__init__(self.message)

class ChirpTooLong(ChirpyError):
    status_code = 400
    message = "Chirp is too long"

class Forbidden(ChirpyError):
    status_code = 403
    message = "Forbidden"

class NotFound(ChirpyError):
    status_code = 404
    message = "not found"

class MalformedRequest(ChirpyError):
    # Client-side parse failures keep the historical 500 status.
    status_code = 500
    message = "couldn't unmarshal parameters"

class StorageFailure(ChirpyError):
    status_code = 500
    message = "storage error"

class SerializationFailure(ChirpyError):
    status_code = 500
    message = "couldn't encode response"


def respond_with_json(status_code: int, payload: Any) -> Response:
    # JSONResponse renders the body on construction; nothing is sent if that fails.
    try:
        return JSONResponse(
            content=jsonable_encoder(payload),
            status_code=status_code,
            headers={"Access-Control-Allow-Origin": "*"},
        )
    except (TypeError, ValueError) as exc:
        raise SerializationFailure(f"couldn't encode response: {exc}") from exc

def respond_with_error(status_code: int, message: str) -> Response:
    return respond_with_json(status_code, {"error": message})


async def chirpy_error_handler(request: Request, exc: ChirpyError):
    if isinstance(exc, (StorageFailure, SerializationFailure)):
        log.error("request_failed", path=request.url.path, error=exc.message)
    return respond_with_error(exc.status_code, exc.message)

async def validation_error_handler(request: Request, exc: RequestValidationError):
    in_path = any(err.get("loc") and err["loc"][0] == "path" for err in exc.errors())
    err = MalformedRequest("invalid uuid") if in_path else MalformedRequest()
    return respond_with_error(err.status_code, err.message)

async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return respond_with_error(exc.status_code, str(exc.detail))

async def unexpected_error_handler(request: Request, exc: Exception):
    log.exception("unhandled_error", path=request.url.path)
    return respond_with_error(500, "internal error")

def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ChirpyError, chirpy_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)

from __future__ import annotations

import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from chirpy.core.counter import VisitCounter
from chirpy.core.logging import log

class VisitCounterMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp, counter: VisitCounter, prefix: str = "/app") -> None:
        super().__init__(app)
        self.counter = counter
        self.prefix = prefix.rstrip("/")

    async def dispatch(self, request: Request, call_next):
        path = request.url.path
        # Counted before dispatch, so misses on the file server count too. The
        # bare prefix only redirects to "prefix/" and is not a visit.
        if path.startswith(self.prefix + "/"):
            self.counter.increment()
        return await call_next(request)

class RequestLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response: Response = await call_next(request)
        ms = (time.perf_counter() - start) * 1000.0
        log.info("http_request", method=request.method, path=request.url.path, status=response.status_code, duration_ms=round(ms, 3))
        response.headers["Server-Timing"] = f"app;dur={ms:.2f}"
        return response

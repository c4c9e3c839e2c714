"""Access logging middleware.

One line per request on the ``demo_api.access`` logger, written after the
response is produced so the status and duration are known.
"""

import logging
import time

from demo_api.errors import HTTPError
from demo_api.http.request import Request
from demo_api.http.response import Response
from demo_api.middleware.protocol import Next

logger = logging.getLogger("demo_api.access")


class AccessLogMiddleware:
    """Log ``METHOD /path STATUS duration`` for every request.

    HTTP errors raised further down the chain are logged with their status,
    anything else as 500. Both are re-raised untouched for the error
    pipeline to render.
    """

    __slots__ = ("_logger",)

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._logger = log or logger

    async def __call__(self, request: Request, next: Next) -> Response:
        start = time.perf_counter()
        try:
            response = await next(request)
        except HTTPError as exc:
            self._log(request, exc.status, start)
            raise
        except Exception:
            self._log(request, 500, start)
            raise
        self._log(request, response.status, start)
        return response

    def _log(self, request: Request, status: int, start: float) -> None:
        elapsed_ms = (time.perf_counter() - start) * 1000
        client = f"{request.client[0]}:{request.client[1]}" if request.client else "-"
        self._logger.info(
            "%s %s %s %d %.1fms", client, request.method, request.url, status, elapsed_ms
        )

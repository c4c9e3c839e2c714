"""demo-api exception hierarchy.

Shared across Router, App, handler pipeline, and middleware so every
module raises and catches the same types.
"""

from dataclasses import dataclass


class DemoAPIError(Exception):
    """Base for all demo-api errors."""


class ConfigurationError(DemoAPIError):
    """Raised when app or route configuration is invalid.

    Surfaces at startup: bad env values, malformed route patterns.
    """


@dataclass(frozen=True, slots=True)
class HTTPError(DemoAPIError):
    """An error that maps directly to an HTTP status code.

    Raised by the router, request parsing, or handlers. The request
    pipeline catches these and dispatches to the matching
    ``@app.error()`` handler.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class BadRequest(HTTPError):  # noqa: N818
    """400: the request could not be interpreted."""

    def __init__(self, detail: str = "Bad Request") -> None:
        super().__init__(status=400, detail=detail)


class NotFound(HTTPError):  # noqa: N818
    """404: no route matched the request path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


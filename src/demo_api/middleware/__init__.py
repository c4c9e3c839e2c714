"""Middleware protocol and built-in middleware."""

from demo_api.middleware.access_log import AccessLogMiddleware
from demo_api.middleware.protocol import Middleware, Next

__all__ = ["AccessLogMiddleware", "Middleware", "Next"]

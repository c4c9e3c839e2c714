"""HTTP primitives: immutable Request, Headers, QueryParams and Response."""

from demo_api.http.headers import Headers
from demo_api.http.query import QueryParams
from demo_api.http.request import Request
from demo_api.http.response import Response

__all__ = ["Headers", "QueryParams", "Request", "Response"]

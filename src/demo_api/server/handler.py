"""ASGI handler: translates ASGI scope/messages to demo_api types.

The only component that touches raw ASGI directly. Converts the scope to
a typed Request, dispatches through middleware and routing, and sends the
Response back through ASGI ``send()``.
"""

import inspect
from collections.abc import Callable
from typing import Any

from demo_api._internal.asgi import Receive, Scope, Send
from demo_api._internal.invoke import invoke
from demo_api.errors import BadRequest, HTTPError
from demo_api.http.request import Request
from demo_api.http.response import Response
from demo_api.middleware.protocol import Next
from demo_api.routing.params import compile_converter, converter_for
from demo_api.routing.route import RouteMatch
from demo_api.routing.router import Router
from demo_api.server.errors import handle_http_error, handle_internal_error
from demo_api.server.negotiation import negotiate
from demo_api.server.sender import send_response

# Annotations a path parameter may be converted to
_PARAM_TYPES: dict[Any, str] = {int: "an integer", float: "a number", str: "a string"}


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    router: Router,
    middleware: tuple[Callable[..., Any], ...],
    error_handlers: dict[int | type, Callable[..., Any]],
    debug: bool,
    max_content_length: int = 0,
) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope, receive, max_body=max_content_length)

    async def dispatch(req: Request) -> Response:
        match = router.match(req.method, req.path)
        return await _invoke_handler(match, req)

    handler: Next = dispatch
    for mw in reversed(middleware):
        async def make_next(req: Request, _mw: Any = mw, _next: Next = handler) -> Response:
            return await _mw(req, _next)

        handler = make_next

    try:
        response = await handler(request)
    except HTTPError as exc:
        response = await handle_http_error(exc, request, error_handlers, debug)
    except Exception as exc:
        response = await handle_internal_error(exc, request, error_handlers, debug)

    await send_response(response, send, head=request.method == "HEAD")


async def _invoke_handler(match: RouteMatch, request: Request) -> Response:
    """Call the matched route handler, converting path params and the return value."""
    handler = match.route.handler
    request = request.with_path_params(match.path_params)
    kwargs = build_handler_kwargs(handler, request, match.path_params)
    result = await invoke(handler, **kwargs)
    return negotiate(result)


def build_handler_kwargs(
    handler: Callable[..., Any],
    request: Request,
    path_params: dict[str, str],
) -> dict[str, Any]:
    """Inspect the handler signature and build kwargs from request + path params.

    Resolution order:
    1. ``request`` parameter (by name or ``Request`` annotation)
    2. Path parameters (by name, converted to the annotated type)

    A path parameter that fails conversion raises ``BadRequest``.
    """
    sig = inspect.signature(handler, eval_str=True)
    kwargs: dict[str, Any] = {}

    for name, param in sig.parameters.items():
        if name == "request" or param.annotation is Request:
            kwargs[name] = request
        elif name in path_params:
            kwargs[name] = _convert_path_param(name, path_params[name], param.annotation)

    return kwargs


def _convert_path_param(name: str, value: str, annotation: Any) -> Any:
    if annotation is inspect.Parameter.empty or annotation is str:
        return value
    type_name = getattr(annotation, "__name__", str(annotation))
    expected = _PARAM_TYPES.get(annotation, f"a valid {type_name}")
    msg = f"Path parameter {name!r} must be {expected}, got {value!r}"

    # Builtin numeric types only take the converter's plain-digit form
    converter = converter_for(annotation)
    if converter is not None and not compile_converter(converter).fullmatch(value):
        raise BadRequest(msg)
    try:
        return annotation(value)
    except (ValueError, TypeError) as exc:
        raise BadRequest(msg) from exc

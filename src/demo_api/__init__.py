"""demo-api: a small JSON API on a compact ASGI toolkit.

Four endpoints: a health probe, a fixed user listing, user creation with
field validation, and an integer sum driven by path parameters.

Basic usage::

    from demo_api import AppConfig, create_app

    app = create_app(AppConfig(port=3000))
    app.run()
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "AppConfig",
    "BadRequest",
    "ConfigurationError",
    "DemoAPIError",
    "HTTPError",
    "NotFound",
    "Request",
    "Response",
    "create_app",
]


def __getattr__(name: str) -> object:
    """Lazy imports for the public API.

    Keeps ``import demo_api`` fast while providing a flat top-level API.
    """
    if name == "App":
        from demo_api.app import App

        return App

    if name == "AppConfig":
        from demo_api.config import AppConfig

        return AppConfig

    if name == "Request":
        from demo_api.http.request import Request

        return Request

    if name == "Response":
        from demo_api.http.response import Response

        return Response

    if name == "create_app":
        from demo_api.service.api import create_app

        return create_app

    if name in (
        "BadRequest",
        "ConfigurationError",
        "DemoAPIError",
        "HTTPError",
        "NotFound",
    ):
        import demo_api.errors as errors_module

        return getattr(errors_module, name)

    msg = f"module 'demo_api' has no attribute {name!r}"
    raise AttributeError(msg)

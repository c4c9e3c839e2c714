"""Route handlers for the demo API and the ``create_app`` factory.

Every handler is pure apart from reading the injected clock: the user
listing is constant data and a created user is echoed, never stored.
"""

import logging

from demo_api.app import App
from demo_api.clock import Clock, SystemClock
from demo_api.config import AppConfig
from demo_api.errors import BadRequest, HTTPError
from demo_api.http.request import Request
from demo_api.http.response import Response
from demo_api.middleware.access_log import AccessLogMiddleware
from demo_api.service.models import CREATED_USER_ID, FIXED_USERS, HealthStatus, SumResult, User
from demo_api.validation import required, validate

logger = logging.getLogger("demo_api.service")

USER_REQUIRED_MESSAGE = "Name and email required"


def create_app(config: AppConfig | None = None, *, clock: Clock | None = None) -> App:
    """Build the demo API application.

    Args:
        config: Server configuration. Defaults to ``AppConfig.from_env()``.
        clock: Time source for ``timestamp``/``createdAt``. Defaults to
            the system clock.
    """
    app = App(config or AppConfig.from_env())
    clock = clock or SystemClock()

    if app.config.access_log:
        app.add_middleware(AccessLogMiddleware())

    @app.get("/health", name="health")
    def health():
        return HealthStatus(timestamp=clock.now()).to_dict()

    @app.get("/api/users", name="list_users")
    def list_users():
        return [user.to_dict() for user in FIXED_USERS]

    @app.post("/api/users", name="create_user")
    async def create_user(request: Request):
        body = await request.json()
        result = validate(body, {"name": [required], "email": [required]})
        if not result:
            logger.debug("Rejected user creation: %s", ", ".join(sorted(result.errors)))
            return {"error": USER_REQUIRED_MESSAGE}, 400

        user = User(
            id=CREATED_USER_ID,
            name=result.data["name"],
            email=result.data["email"],
            created_at=clock.now(),
        )
        return user.to_dict(), 201

    @app.get("/api/sum/{a}/{b}", name="sum")
    def add(a: int, b: int):
        try:
            # int-to-str conversion is capped (sys.get_int_max_str_digits)
            return Response.from_json(SumResult(a=a, b=b).to_dict())
        except ValueError as exc:
            raise BadRequest("Sum is too large to encode") from exc

    _register_error_handlers(app)
    return app


def _register_error_handlers(app: App) -> None:
    """Render every error as ``{"error": ...}`` JSON."""

    def json_error(request: Request, exc: Exception) -> Response:
        if isinstance(exc, HTTPError):
            return Response.from_json({"error": exc.detail or str(exc.status)}, status=exc.status)
        return Response.from_json({"error": "Internal Server Error"}, status=500)

    for status in (400, 404, 413, 500):
        app.error(status)(json_error)

"""End-to-end tests for the demo API endpoints."""

from datetime import UTC, datetime

import pytest

from demo_api.app import App
from demo_api.clock import SystemClock
from demo_api.config import AppConfig
from demo_api.service import create_app
from demo_api.testing import TestClient


class TestHealth:
    """GET /health"""

    async def test_healthy(self, demo_app: App) -> None:
        async with TestClient(demo_app) as client:
            response = await client.get("/health")
            assert response.status == 200
            assert response.content_type.startswith("application/json")
            assert response.json == {"status": "healthy", "timestamp": "2024-06-01T09:30:15.250Z"}

    async def test_timestamp_fresh_per_request(self, demo_app: App, clock) -> None:
        async with TestClient(demo_app) as client:
            first = (await client.get("/health")).json["timestamp"]
            clock.advance(seconds=2)
            second = (await client.get("/health")).json["timestamp"]
        assert first == "2024-06-01T09:30:15.250Z"
        assert second == "2024-06-01T09:30:17.250Z"


class TestListUsers:
    """GET /api/users"""

    async def test_two_fixed_users(self, demo_app: App) -> None:
        async with TestClient(demo_app) as client:
            response = await client.get("/api/users")
            assert response.status == 200
            assert response.json == [
                {"id": 1, "name": "John", "email": "john@example.com"},
                {"id": 2, "name": "Jane", "email": "jane@example.com"},
            ]

    async def test_creation_does_not_change_listing(self, demo_app: App) -> None:
        async with TestClient(demo_app) as client:
            await client.post("/api/users", json={"name": "Bob", "email": "bob@example.com"})
            response = await client.get("/api/users")
            assert [u["id"] for u in response.json] == [1, 2]


class TestCreateUser:
    """POST /api/users"""

    async def test_created(self, demo_app: App) -> None:
        async with TestClient(demo_app) as client:
            response = await client.post(
                "/api/users", json={"name": "Bob", "email": "bob@example.com"}
            )
            assert response.status == 201
            assert response.json == {
                "id": 3,
                "name": "Bob",
                "email": "bob@example.com",
                "createdAt": "2024-06-01T09:30:15.250Z",
            }

    async def test_always_id_three(self, demo_app: App) -> None:
        async with TestClient(demo_app) as client:
            for name in ("Ann", "Ben"):
                response = await client.post(
                    "/api/users", json={"name": name, "email": f"{name}@example.com"}
                )
                assert response.json["id"] == 3
                assert response.json["name"] == name

    async def test_created_at_not_before_request(self) -> None:
        app = create_app(AppConfig(access_log=False), clock=SystemClock())
        issued = datetime.now(UTC).replace(microsecond=0)
        async with TestClient(app) as client:
            response = await client.post("/api/users", json={"name": "Bob", "email": "b@x.io"})
        created = datetime.strptime(response.json["createdAt"], "%Y-%m-%dT%H:%M:%S.%fZ")
        assert created.replace(tzinfo=UTC) >= issued

    @pytest.mark.parametrize(
        "body",
        [
            {"name": "Invalid"},
            {"email": "x@example.com"},
            {},
            {"name": "", "email": "x@example.com"},
            {"name": "Bob", "email": ""},
            {"name": None, "email": "x@example.com"},
            {"name": "Bob", "email": None},
        ],
    )
    async def test_missing_fields_rejected(self, demo_app: App, body: dict) -> None:
        async with TestClient(demo_app) as client:
            response = await client.post("/api/users", json=body)
            assert response.status == 400
            assert response.json == {"error": "Name and email required"}

    async def test_no_body_rejected(self, demo_app: App) -> None:
        async with TestClient(demo_app) as client:
            response = await client.post("/api/users")
            assert response.status == 400
            assert response.json["error"] == "Name and email required"

    async def test_array_body_rejected(self, demo_app: App) -> None:
        async with TestClient(demo_app) as client:
            response = await client.post("/api/users", json=["Bob", "bob@example.com"])
            assert response.status == 400

    async def test_malformed_json(self, demo_app: App) -> None:
        async with TestClient(demo_app) as client:
            response = await client.post(
                "/api/users",
                body=b'{"name": "Bob",',
                headers={"Content-Type": "application/json"},
            )
            assert response.status == 400
            assert response.content_type.startswith("application/json")
            assert response.json["error"] == "Malformed JSON body"

    async def test_oversized_body(self, clock) -> None:
        app = create_app(AppConfig(max_content_length=16), clock=clock)
        async with TestClient(app) as client:
            response = await client.post(
                "/api/users", json={"name": "B" * 50, "email": "bob@example.com"}
            )
            assert response.status == 413
            assert "error" in response.json


class TestSum:
    """GET /api/sum/{a}/{b}"""

    async def test_sum(self, demo_app: App) -> None:
        async with TestClient(demo_app) as client:
            response = await client.get("/api/sum/5/3")
            assert response.status == 200
            assert response.json == {"a": 5, "b": 3, "sum": 8}

    @pytest.mark.parametrize(
        ("a", "b"), [(0, 0), (-4, 10), (123456789012345678901234567890, 1)]
    )
    async def test_signed_and_large(self, demo_app: App, a: int, b: int) -> None:
        async with TestClient(demo_app) as client:
            response = await client.get(f"/api/sum/{a}/{b}")
            assert response.json == {"a": a, "b": b, "sum": a + b}

    @pytest.mark.parametrize(
        "path",
        [
            "/api/sum/abc/3",
            "/api/sum/5/x",
            "/api/sum/1.5/2",
            "/api/sum/1_000/2",
            "/api/sum/+5/2",
            "/api/sum/ 5/2",
        ],
    )
    async def test_non_integer_is_400(self, demo_app: App, path: str) -> None:
        async with TestClient(demo_app) as client:
            response = await client.get(path)
            assert response.status == 400
            assert "must be an integer" in response.json["error"]

    async def test_sum_too_large_to_encode(self, demo_app: App) -> None:
        operand = "9" * 4300
        async with TestClient(demo_app) as client:
            response = await client.get(f"/api/sum/{operand}/{operand}")
            assert response.status == 400
            assert response.content_type.startswith("application/json")
            assert "too large" in response.json["error"]

    async def test_missing_operand_is_404(self, demo_app: App) -> None:
        async with TestClient(demo_app) as client:
            assert (await client.get("/api/sum/5")).status == 404


class TestFallbacks:
    async def test_unknown_path_404_json(self, demo_app: App) -> None:
        async with TestClient(demo_app) as client:
            response = await client.get("/api/unknown")
            assert response.status == 404
            assert response.content_type.startswith("application/json")
            assert response.json["error"]

    async def test_unserved_method_is_404(self, demo_app: App) -> None:
        async with TestClient(demo_app) as client:
            response = await client.delete("/api/users")
            assert response.status == 404
            assert response.content_type.startswith("application/json")
            assert response.header("allow") is None
            assert "error" in response.json

    async def test_post_to_get_only_route_is_404(self, demo_app: App) -> None:
        async with TestClient(demo_app) as client:
            assert (await client.post("/health", json={})).status == 404

    async def test_route_table(self, demo_app: App) -> None:
        assert [(sorted(r.methods), r.path) for r in demo_app.routes] == [
            (["GET"], "/health"),
            (["GET"], "/api/users"),
            (["POST"], "/api/users"),
            (["GET"], "/api/sum/{a}/{b}"),
        ]


class TestFactory:
    def test_reads_env_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "5050")
        assert create_app().config.port == 5050

    def test_apps_are_independent(self, clock) -> None:
        first = create_app(AppConfig(), clock=clock)
        second = create_app(AppConfig(port=4000), clock=clock)
        assert first is not second
        assert first.config.port == 3000
        assert second.config.port == 4000

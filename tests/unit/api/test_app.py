"""Unit tests for the HTTP API."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from nexus import __version__
from nexus.api.app import create_app
from nexus.api.dependencies import reset_dependencies, set_runtime
from nexus.audit import InMemoryAuditSink
from nexus.bootstrap import Runtime, build_runtime
from nexus.config.settings import Settings


@pytest.fixture
def sink() -> InMemoryAuditSink:
    return InMemoryAuditSink()


@pytest.fixture
async def runtime(content, sink) -> Runtime:
    """Fresh runtime installed as the API dependency."""
    await reset_dependencies()
    runtime = build_runtime(
        Settings(environment="test"),
        content=content,
        audit_sink=sink,
    )
    set_runtime(runtime)
    return runtime


@pytest.fixture
def client(runtime: Runtime) -> Iterator[TestClient]:
    """Test client with lifespan events."""
    with TestClient(create_app()) as client:
        yield client


class TestWebhook:
    """Tests for POST /webhook/{platform}."""

    def test_cold_start(self, client: TestClient) -> None:
        response = client.post(
            "/webhook/facebook",
            json={"sender": {"id": "123"}, "message": {"text": "hello"}},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["recipient"] == {"id": "123"}
        assert body["messaging_type"] == "RESPONSE"
        assert float(response.headers["X-Processing-Time-Ms"]) >= 0
        assert response.headers["X-Request-ID"]

    def test_unsupported_platform(self, client: TestClient) -> None:
        response = client.post("/webhook/unknown", json={"user_id": "1"})

        assert response.status_code == 400
        assert response.json() == {"error": "Unsupported platform: unknown"}

    def test_invalid_json(self, client: TestClient) -> None:
        response = client.post(
            "/webhook/facebook",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Request body must be valid JSON"}

    def test_payload_without_user(self, client: TestClient) -> None:
        response = client.post("/webhook/zalo", json={"message": {"text": "hi"}})
        assert response.status_code == 400

    def test_conversation_over_http(self, client: TestClient, runtime: Runtime) -> None:
        def send(text: str) -> dict:
            return client.post(
                "/webhook/zalo",
                json={"fromuid": "77", "message": {"text": text}},
            ).json()

        send("hi")
        listed = send("investment")
        buttons = listed["message"]["attachment"]["payload"]["buttons"]
        assert [b["payload"] for b in buttons][0] == "become-shareholder"

    def test_request_id_echoed(self, client: TestClient) -> None:
        response = client.post(
            "/webhook/facebook",
            json={"sender": {"id": "1"}, "message": {"text": "hi"}},
            headers={"X-Request-ID": "abc-123"},
        )
        assert response.headers["X-Request-ID"] == "abc-123"

    def test_interactions_audited(self, runtime: Runtime, sink: InMemoryAuditSink) -> None:
        with TestClient(create_app()) as client:
            client.post(
                "/webhook/facebook",
                json={"sender": {"id": "9"}, "message": {"text": "hi"}},
            )
            client.post("/webhook/unknown", json={})

        # Shutdown flushes pending audit writes
        assert sorted((r.platform, r.success) for r in sink.records) == [
            ("facebook", True),
            ("unknown", False),
        ]


class TestHealth:
    def test_operational_metadata(self, client: TestClient) -> None:
        client.post("/webhook/facebook", json={"sender": {"id": "1"}, "message": {"text": "hi"}})

        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "operational"
        assert data["version"] == __version__
        assert data["environment"] == "test"
        assert data["uptime_seconds"] >= 0
        assert data["active_sessions"] == 1
        assert data["context_entries"] == 1
        assert "facebook" in data["platforms"]


class TestMetrics:
    def test_prometheus_exposition(self, client: TestClient) -> None:
        client.post("/webhook/facebook", json={"sender": {"id": "1"}, "message": {"text": "hi"}})

        response = client.get("/metrics")

        assert response.status_code == 200
        assert "nexus_turn_count_total" in response.text
        assert "text/plain" in response.headers["content-type"]


class TestLifespan:
    def test_sweeper_runs_during_lifespan(self, runtime: Runtime) -> None:
        with TestClient(create_app()):
            assert runtime.sweeper.running
        assert not runtime.sweeper.running

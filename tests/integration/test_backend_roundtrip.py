"""End-to-end tests against an in-process fake EventSphere backend.

The FastAPI app below serves the backend's routes; requests reach it through
httpx.ASGITransport, so the full stack (transport, retrying client, services,
fallback orchestrator) runs without a network.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import httpx
import pytest
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from eventsphere.config.settings import ClientConfig
from eventsphere.offline.dataset import StaticEventSource
from eventsphere.services.api import EventSphereApi, create_api

BASE_URL = "http://testserver/api"


# ---------------------------------------------------------------------------
# Fake backend
# ---------------------------------------------------------------------------


def _create_backend(events: list[dict], calls: list[str]) -> FastAPI:
    app = FastAPI()
    bookings: list[dict] = []

    @app.get("/api/health")
    async def health() -> dict:
        calls.append("health")
        return {"status": "healthy", "timestamp": "2025-03-01T10:00:00Z"}

    @app.get("/api/GetEvents")
    async def get_events(
        category: str | None = None, search: str | None = None, city: str | None = None
    ) -> dict:
        calls.append("GetEvents")
        result = events
        if category:
            result = [e for e in result if e["category"] == category]
        if search:
            needle = search.lower()
            result = [
                e
                for e in result
                if needle in e["title"].lower()
                or needle in e["description"].lower()
                or needle in e["venue"]["city"].lower()
            ]
        if city:
            result = [e for e in result if e["venue"]["city"].lower() == city.lower()]
        return {"events": result, "count": len(result)}

    @app.get("/api/GetEventById")
    async def get_event_by_id(id: str) -> JSONResponse:
        calls.append("GetEventById")
        for event in events:
            if event["id"] == id:
                return JSONResponse({"event": event})
        return JSONResponse({"error": "Event not found"}, status_code=404)

    @app.post("/api/CreateBooking")
    async def create_booking(request: Request) -> JSONResponse:
        calls.append("CreateBooking")
        body = await request.json()
        booking = {"id": f"bk-{len(bookings) + 1}", **body, "status": "confirmed"}
        bookings.append(booking)
        return JSONResponse(
            {"success": True, "booking": booking, "message": "Booking confirmed"},
            status_code=201,
        )

    @app.get("/api/GetUserBookings")
    async def get_user_bookings(userId: str) -> dict:
        calls.append("GetUserBookings")
        mine = [b for b in bookings if b["userId"] == userId]
        return {
            "bookings": mine,
            "upcomingBookings": mine,
            "pastBookings": [],
            "totalBookings": len(mine),
        }

    return app


def _create_failing_backend(calls: list[str]) -> FastAPI:
    app = FastAPI()

    @app.get("/api/{path:path}")
    async def always_fails(path: str) -> JSONResponse:
        calls.append(path)
        return JSONResponse({"error": "boom"}, status_code=500)

    return app


@pytest.fixture
def backend_calls() -> list[str]:
    return []


@pytest.fixture
def server_events(event_factory) -> list[dict]:
    return [
        event_factory("srv-1", "Rooftop Jazz", "Mumbai", "Music", "Jazz above the city."),
        event_factory("srv-2", "Cloud Day", "Pune", "Technology", "Serverless talks."),
    ]


@pytest.fixture
def remote_config() -> ClientConfig:
    return ClientConfig(base_url=BASE_URL, retry_attempts=3, retry_delay_ms=1000)


@pytest.fixture
def api(
    server_events: list[dict],
    backend_calls: list[str],
    remote_config: ClientConfig,
    event_source: StaticEventSource,
) -> EventSphereApi:
    app = _create_backend(server_events, backend_calls)
    return create_api(
        config=remote_config,
        event_source=event_source,
        http_transport=httpx.ASGITransport(app=app),
    )


# ---------------------------------------------------------------------------
# Healthy backend
# ---------------------------------------------------------------------------


class TestHealthyBackend:
    @pytest.mark.asyncio
    async def test_health(self, api: EventSphereApi) -> None:
        response = await api.check_api_health()

        assert response.success is True
        assert response.data["status"] == "healthy"

    @pytest.mark.asyncio
    async def test_events_come_from_server(self, api: EventSphereApi) -> None:
        response = await api.get_events()

        assert response.data["count"] == 2
        assert [e["id"] for e in response.data["events"]] == ["srv-1", "srv-2"]
        assert api.get_online_status() is True

    @pytest.mark.asyncio
    async def test_filters_reach_server(self, api: EventSphereApi) -> None:
        by_city = await api.get_events_by_city("pune")
        by_search = await api.search_events("jazz")
        by_category = await api.get_events_by_category("Technology")

        assert [e["id"] for e in by_city.data["events"]] == ["srv-2"]
        assert [e["id"] for e in by_search.data["events"]] == ["srv-1"]
        assert [e["id"] for e in by_category.data["events"]] == ["srv-2"]

    @pytest.mark.asyncio
    async def test_event_by_id(self, api: EventSphereApi) -> None:
        response = await api.get_event_by_id("srv-1")

        assert response.data["event"]["title"] == "Rooftop Jazz"

    @pytest.mark.asyncio
    async def test_booking_round_trip(self, api: EventSphereApi) -> None:
        created = await api.create_booking(
            {
                "userId": "user-1",
                "eventId": "srv-1",
                "quantity": 2,
                "userDetails": {"name": "Asha", "email": "asha@example.com", "phone": "9999999999"},
            }
        )
        bookings = await api.get_user_bookings("user-1")

        assert created.success is True
        assert created.data["booking"]["eventId"] == "srv-1"
        assert created.data["booking"]["quantity"] == 2
        assert bookings.data["totalBookings"] == 1
        assert bookings.data["bookings"][0]["id"] == "bk-1"


# ---------------------------------------------------------------------------
# Degraded backend
# ---------------------------------------------------------------------------


class TestDegradedBackend:
    @pytest.mark.asyncio
    async def test_unknown_event_falls_back_to_offline_lookup(
        self, api: EventSphereApi
    ) -> None:
        """A 404 is a failure like any other, so the offline dataset answers."""
        with patch("asyncio.sleep", new_callable=AsyncMock):
            response = await api.get_event_by_id("evt-1")

        assert response.success is True
        assert response.data["event"]["title"] == "Jazz Night"
        assert api.get_online_status() is False

    @pytest.mark.asyncio
    async def test_server_errors_exhaust_retries_then_serve_offline(
        self,
        backend_calls: list[str],
        remote_config: ClientConfig,
        event_source: StaticEventSource,
    ) -> None:
        api = create_api(
            config=remote_config,
            event_source=event_source,
            http_transport=httpx.ASGITransport(app=_create_failing_backend(backend_calls)),
        )

        with patch("asyncio.sleep", new_callable=AsyncMock) as mock_sleep:
            first = await api.search_events("jazz")
            second = await api.get_events()

        assert backend_calls == ["GetEvents"] * 3
        assert mock_sleep.await_count == 2
        assert [e["id"] for e in first.data["events"]] == ["evt-1"]
        assert second.data["count"] == 3
        assert api.get_online_status() is False

    @pytest.mark.asyncio
    async def test_booking_failure_is_reported_not_simulated(
        self,
        backend_calls: list[str],
        remote_config: ClientConfig,
        event_source: StaticEventSource,
    ) -> None:
        app = FastAPI()

        @app.post("/api/CreateBooking")
        async def create_booking() -> JSONResponse:
            backend_calls.append("CreateBooking")
            return JSONResponse({"error": "Event is sold out"}, status_code=409)

        api = create_api(
            config=remote_config.model_copy(update={"retry_attempts": 1}),
            event_source=event_source,
            http_transport=httpx.ASGITransport(app=app),
        )

        response = await api.create_booking(
            {
                "userId": "user-1",
                "eventId": "evt-1",
                "quantity": 1,
                "userDetails": {"name": "Asha", "email": "asha@example.com", "phone": "1"},
            }
        )

        assert response.success is False
        assert response.error.startswith("HTTP 409")
        assert "sold out" in response.error
        assert backend_calls == ["CreateBooking"]
        assert api.get_online_status() is True

    @pytest.mark.asyncio
    async def test_retarget_to_local_backend_fails_fast(
        self,
        backend_calls: list[str],
        event_source: StaticEventSource,
    ) -> None:
        config = ClientConfig(base_url=BASE_URL, fallback_enabled=True, retry_attempts=3)
        api = create_api(
            config=config,
            event_source=event_source,
            http_transport=httpx.ASGITransport(app=_create_failing_backend(backend_calls)),
        )

        api.update_base_url("http://localhost:7071/api")
        with patch("asyncio.sleep", new_callable=AsyncMock) as mock_sleep:
            response = await api.get_events_by_city("Pune")

        assert backend_calls == ["GetEvents"]
        mock_sleep.assert_not_awaited()
        assert [e["id"] for e in response.data["events"]] == ["evt-1"]

"""Shared test fixtures for difr_leaderboard tests."""

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from difr_leaderboard.services.audits import AuditRecord, ProviderMetric
from difr_leaderboard.services.config import DashboardSettings

BASE_URL = "https://audits.example.org/inference-provider-leaderboard"
BASE_PATH = "/inference-provider-leaderboard"

Route = tuple[int, Any]


def _make_record(
    model: str, timestamp: str, scores: dict[str, float | None]
) -> AuditRecord:
    """Build an AuditRecord with only exact_match_rate populated."""
    return AuditRecord(
        model=model,
        timestamp=timestamp,
        providers={
            endpoint: ProviderMetric(exact_match_rate=rate)
            for endpoint, rate in scores.items()
        },
    )


def _data_path(filename: str) -> str:
    return f"{BASE_PATH}/data/{filename}"


def _to_response(route: Route) -> httpx.Response:
    status, body = route
    if isinstance(body, str):
        return httpx.Response(status, text=body)
    return httpx.Response(status, content=json.dumps(body).encode())


@pytest.fixture
def settings() -> DashboardSettings:
    """Settings pointing at the mocked audit host."""
    return DashboardSettings(base_url=BASE_URL, timeout=5.0, max_connections=4)


@pytest.fixture
def requested_paths() -> list[str]:
    """URL paths requested through the mock transport, in request order."""
    return []


@pytest.fixture
def audit_transport(
    requested_paths: list[str],
) -> Callable[[dict[str, Route]], httpx.MockTransport]:
    """Factory for a MockTransport serving ``{path: (status, body)}`` routes.

    String bodies are sent verbatim, anything else is JSON encoded.
    Unknown paths return 404.
    """

    def factory(routes: dict[str, Route]) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            requested_paths.append(request.url.path)
            return _to_response(routes.get(request.url.path, (404, {"error": "not found"})))

        return httpx.MockTransport(handler)

    return factory


@pytest.fixture
def make_record() -> Callable[..., AuditRecord]:
    """Factory building an AuditRecord with only exact_match_rate populated."""
    return _make_record


@pytest.fixture
def data_path() -> Callable[[str], str]:
    """URL path of a file under the mocked host's data directory."""
    return _data_path

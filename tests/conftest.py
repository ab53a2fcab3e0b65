"""
Shared fixtures: a quiet structlog setup, a sample validator address and a
routed httpx.MockTransport that stands in for the dashboard API.
"""

import logging
from typing import Any, Callable, Dict, List, Union

import httpx
import pytest
import structlog

from packages.config.env import Cfg

ADDRESS = "0x" + "ab" * 20
OTHER = "0x" + "cd" * 20
BASE_URL = "https://dash.test/api"
ENV_KEYS = (
    "DASHTEC_BASE_URL", "DASHTEC_BYPASS_TOKEN", "VALIDATOR_ADDRESS", "HTTP_TIMEOUT",
    "TOKEN_UNIT", "EPOCH_SPAN", "ENDPOINTS_FILE", "LOG_LEVEL",
)

Route = Union[httpx.Response, Callable[[httpx.Request], httpx.Response]]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for k in ENV_KEYS:
        monkeypatch.delenv(k, raising=False)


@pytest.fixture(autouse=True)
def quiet_logging():
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.CRITICAL))
    yield
    structlog.reset_defaults()


@pytest.fixture
def cfg() -> Cfg:
    return Cfg(base_url=BASE_URL, bypass_token="tok123", timeout=5.0)


class Router:
    """Maps request paths (below /api) to canned responses and records every request."""

    def __init__(self, routes: Dict[str, Route]):
        self.routes = routes
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path[len("/api"):]
        route = self.routes.get(path)
        if route is None:
            return httpx.Response(404, json={"error": "not found"})
        if callable(route):
            return route(request)
        return route

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    def paths(self) -> List[str]:
        return [r.url.path[len("/api"):] for r in self.requests]


@pytest.fixture
def make_router() -> Callable[[Dict[str, Any]], Router]:
    return Router

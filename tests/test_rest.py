"""Tests for the dashtec HTTP client."""

import asyncio

import httpx
import pytest

from conftest import ADDRESS, Router
from packages.config.env import Cfg
from packages.dashtec_adapter.rest import DashtecClient, build_headers
from packages.dashtec_adapter.types import SectionStatus
from packages.leaderboard.models import EpochWindow


def _fetch(cfg: Cfg, router: Router, kind: str, **kw):
    async def go():
        async with DashtecClient(cfg, transport=router.transport) as client:
            return await client.fetch(kind, **kw)

    return asyncio.run(go())


class TestHeaders:
    def test_bypass_cookie(self, cfg: Cfg) -> None:
        headers = build_headers(cfg)
        assert headers["Cookie"] == "cf_clearance=tok123"
        assert headers["Accept"] == "application/json"
        assert "Mozilla" in headers["User-Agent"]

    def test_no_cookie_without_token(self) -> None:
        assert "Cookie" not in build_headers(Cfg())


class TestFetch:
    def test_ok_payload_and_request_shape(self, cfg: Cfg, make_router) -> None:
        router = make_router({f"/validators/{ADDRESS}": httpx.Response(200, json={"status": "active"})})
        res = _fetch(cfg, router, "validator", address=ADDRESS)

        assert res.status is SectionStatus.OK
        assert res.ok
        assert res.status_code == 200
        assert res.payload == {"status": "active"}
        req = router.requests[0]
        assert req.url.host == "dash.test"
        assert req.headers["cookie"] == "cf_clearance=tok123"
        assert req.headers["referer"] == cfg.referer

    def test_window_becomes_query_params(self, cfg: Cfg, make_router) -> None:
        router = make_router({"/dashboard/top-validators": httpx.Response(200, json=[])})
        _fetch(cfg, router, "leaderboard", window=EpochWindow(start=400, end=500))

        params = router.requests[0].url.params
        assert params["startEpoch"] == "400"
        assert params["endEpoch"] == "500"

    def test_forbidden_is_access_denied(self, cfg: Cfg, make_router) -> None:
        router = make_router({"/stats/general": httpx.Response(403, text="Just a moment...")})
        res = _fetch(cfg, router, "network_summary")
        assert res.status is SectionStatus.ACCESS_DENIED
        assert res.status_code == 403
        assert res.payload is None

    def test_challenge_header_is_access_denied(self, cfg: Cfg, make_router) -> None:
        router = make_router(
            {"/stats/general": httpx.Response(503, headers={"cf-mitigated": "challenge"}, text="<html>")}
        )
        assert _fetch(cfg, router, "network_summary").status is SectionStatus.ACCESS_DENIED

    @pytest.mark.parametrize("code", [404, 500, 502])
    def test_other_errors_are_unavailable(self, cfg: Cfg, make_router, code: int) -> None:
        router = make_router({"/stats/general": httpx.Response(code)})
        res = _fetch(cfg, router, "network_summary")
        assert res.status is SectionStatus.UNAVAILABLE
        assert res.error == f"HTTP {code}"

    def test_invalid_json_is_malformed(self, cfg: Cfg, make_router) -> None:
        router = make_router({"/stats/general": httpx.Response(200, text="<html>oops</html>")})
        assert _fetch(cfg, router, "network_summary").status is SectionStatus.MALFORMED

    @pytest.mark.parametrize("exc", [httpx.ConnectError, httpx.ReadTimeout])
    def test_transport_errors_are_unavailable(self, cfg: Cfg, make_router, exc) -> None:
        def boom(request: httpx.Request) -> httpx.Response:
            raise exc("boom", request=request)

        router = make_router({"/stats/general": boom})
        res = _fetch(cfg, router, "network_summary")
        assert res.status is SectionStatus.UNAVAILABLE
        assert res.status_code is None
        assert res.error == "boom"

    def test_unknown_kind(self, cfg: Cfg) -> None:
        client = DashtecClient(cfg, transport=httpx.MockTransport(lambda r: httpx.Response(200)))
        with pytest.raises(ValueError, match="Unknown endpoint kind"):
            client.path_for("rewards")
        asyncio.run(client.close())

    def test_custom_endpoint_table(self, cfg: Cfg, make_router) -> None:
        router = make_router({"/v2/summary": httpx.Response(200, json={"latestEpoch": 1})})

        async def go():
            async with DashtecClient(cfg, {"network_summary": "/v2/summary"}, transport=router.transport) as c:
                return await c.fetch("network_summary")

        assert asyncio.run(go()).payload == {"latestEpoch": 1}

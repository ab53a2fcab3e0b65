from typing import Any, Optional, Dict
import httpx
import structlog
from packages.config.constants import BYPASS_COOKIE, DEFAULT_ENDPOINTS
from packages.config.env import Cfg
from packages.leaderboard.models import EpochWindow
from .types import Fetched, SectionStatus

log = structlog.get_logger()

ACCESS_DENIED_CODES = (403,)

def build_headers(cfg: Cfg) -> Dict[str, str]:
    headers = {
        "User-Agent": cfg.user_agent,
        "Referer": cfg.referer,
        "Accept": "application/json",
    }
    if cfg.bypass_token:
        headers["Cookie"] = f"{BYPASS_COOKIE}={cfg.bypass_token}"
    return headers

def _is_challenge(r: httpx.Response) -> bool:
    return r.status_code in ACCESS_DENIED_CODES or r.headers.get("cf-mitigated", "").lower() == "challenge"

class DashtecClient:
    """Thin async client for the dashboard API. One GET per endpoint kind, no retries."""

    def __init__(self, cfg: Cfg, endpoints: Optional[Dict[str, str]] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.cfg = cfg
        self.endpoints = dict(endpoints or DEFAULT_ENDPOINTS)
        self._http = httpx.AsyncClient(
            base_url=cfg.base_url.rstrip("/"),
            headers=build_headers(cfg),
            timeout=cfg.timeout,
            follow_redirects=True,
            transport=transport,
        )

    async def __aenter__(self) -> "DashtecClient":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.close()

    async def close(self) -> None:
        await self._http.aclose()

    def path_for(self, kind: str, address: Optional[str] = None) -> str:
        try:
            tmpl = self.endpoints[kind]
        except KeyError:
            raise ValueError(f"Unknown endpoint kind: {kind}") from None
        return tmpl.format(address=address or "")

    async def fetch(self, kind: str, address: Optional[str] = None,
                    window: Optional[EpochWindow] = None) -> Fetched:
        path = self.path_for(kind, address)
        params: Dict[str, Any] = window.as_params() if window is not None else {}
        try:
            r = await self._http.get(path, params=params)
        except httpx.HTTPError as e:
            log.warning("Request failed", kind=kind, path=path, err=str(e) or type(e).__name__)
            return Fetched(kind=kind, status=SectionStatus.UNAVAILABLE, error=str(e) or type(e).__name__)

        if _is_challenge(r):
            log.warning("Access denied by CDN challenge", kind=kind, status_code=r.status_code)
            return Fetched(kind=kind, status=SectionStatus.ACCESS_DENIED, status_code=r.status_code,
                           error=f"HTTP {r.status_code}: access denied")
        if not r.is_success:
            log.warning("Unexpected status", kind=kind, status_code=r.status_code)
            return Fetched(kind=kind, status=SectionStatus.UNAVAILABLE, status_code=r.status_code,
                           error=f"HTTP {r.status_code}")
        try:
            payload = r.json()
        except ValueError as e:
            log.warning("Response is not JSON", kind=kind, status_code=r.status_code)
            return Fetched(kind=kind, status=SectionStatus.MALFORMED, status_code=r.status_code,
                           error=f"invalid JSON: {e}")
        log.info("Fetched section", kind=kind, status_code=r.status_code)
        return Fetched(kind=kind, status=SectionStatus.OK, status_code=r.status_code, payload=payload)

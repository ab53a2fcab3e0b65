import asyncio
from typing import Any, Callable, Optional, List
import structlog
from pydantic import BaseModel, ConfigDict
from packages.config.constants import DEFAULT_UNIT
from packages.dashtec_adapter.rest import DashtecClient
from packages.dashtec_adapter.types import Fetched, SectionStatus
from packages.leaderboard.models import EpochWindow
from packages.leaderboard.ranker import find_validator_row
from packages.normalizer.address import validate_address
from packages.normalizer.errors import MalformedResponse
from packages.normalizer.models import SlashingEvent
from packages.normalizer.normalize import (
    normalize_accusations, normalize_leaderboard, normalize_network_summary,
    normalize_slashing_history, normalize_validator,
)

log = structlog.get_logger()


class Section(BaseModel):
    """One report section: its fetch outcome and, when OK, the normalised data."""
    model_config = ConfigDict(frozen=True)

    status: SectionStatus
    data: Any = None
    error: Optional[str] = None
    # what the endpoint itself reported when the data came from another source
    source_status: Optional[SectionStatus] = None

    @property
    def ok(self) -> bool:
        return self.status is SectionStatus.OK


class SlashingHistory(BaseModel):
    model_config = ConfigDict(frozen=True)

    total: int = 0
    events: List[SlashingEvent] = []


class ValidatorReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    address: str
    window: Optional[EpochWindow] = None
    network: Section
    validator: Section
    slashing: Section
    accusations: Section
    rank: Section

    @property
    def access_denied(self) -> bool:
        return any(SectionStatus.ACCESS_DENIED in (s.status, s.source_status) for s in
                   (self.network, self.validator, self.slashing, self.accusations, self.rank))


def to_section(fetched: Fetched, normalize: Callable[[Any], Any]) -> Section:
    """Normalise a fetched payload; transport and shape failures stay in the section."""
    if not fetched.ok:
        return Section(status=fetched.status, error=fetched.error)
    try:
        data = normalize(fetched.payload)
    except MalformedResponse as e:
        log.warning("Malformed response", kind=fetched.kind, err=str(e))
        return Section(status=SectionStatus.MALFORMED, error=str(e))
    return Section(status=SectionStatus.OK, data=data)


async def build_report(client: DashtecClient, address: str, span: int = 100,
                       unit: str = DEFAULT_UNIT) -> ValidatorReport:
    """Fetch every section for one validator.

    The summary goes first because the leaderboard window hangs off its current
    epoch; the remaining requests run concurrently. A failed section never stops
    the others.
    """
    address = validate_address(address)

    summary_f = await client.fetch("network_summary")
    network = to_section(summary_f, normalize_network_summary)
    current = network.data.current_epoch if network.ok else None
    window = EpochWindow.trailing(current, span) if current is not None else None
    log.info("Resolved epoch window", current_epoch=current, window=window.model_dump() if window else None)

    validator_f, slashing_f, accusations_f, board_f = await asyncio.gather(
        client.fetch("validator", address),
        client.fetch("slashing", address),
        client.fetch("accusations", address),
        client.fetch("leaderboard", window=window),
    )

    rank = to_section(board_f, lambda raw: normalize_leaderboard(raw, address))

    # The leaderboard row carries the rewards, attestation totals and committee
    # participation; it fills whatever the detail payload leaves unresolved.
    row = None
    if board_f.ok:
        try:
            row = find_validator_row(board_f.payload, address)
        except MalformedResponse:
            row = None
    validator = to_section(validator_f, lambda raw: normalize_validator(raw, address, unit, fallback=row))
    if not validator.ok and row is not None:
        log.info("Using leaderboard row for validator stats", address=address,
                 detail_status=validator.status.value)
        validator = Section(status=SectionStatus.OK, data=normalize_validator(row, address, unit),
                            error=validator.error, source_status=validator.status)

    def _slashing(raw: Any) -> SlashingHistory:
        total, events = normalize_slashing_history(raw, address, unit)
        return SlashingHistory(total=total, events=events)

    report = ValidatorReport(
        address=address,
        window=window,
        network=network,
        validator=validator,
        slashing=to_section(slashing_f, _slashing),
        accusations=to_section(accusations_f, lambda raw: normalize_accusations(raw, address)),
        rank=rank,
    )
    log.info("Report built", address=address,
             statuses={k: getattr(report, k).status.value
                       for k in ("network", "validator", "slashing", "accusations", "rank")})
    return report


"""Tests for packages.report.render."""

import json

from conftest import ADDRESS
from packages.dashtec_adapter.types import SectionStatus
from packages.leaderboard.models import EpochWindow
from packages.normalizer.models import AccusationEvent, Amount, NetworkSummary, SlashingEvent, ValidatorRecord
from packages.report.pipeline import Section, SlashingHistory, ValidatorReport
from packages.report.render import BYPASS_HINT, RED, render_json, render_report

OK = SectionStatus.OK


def _report(**overrides) -> ValidatorReport:
    fields = dict(
        address=ADDRESS,
        window=EpochWindow(start=400, end=500),
        network=Section(status=OK, data=NetworkSummary(current_epoch=500, active_validators=9, total_validators=10)),
        validator=Section(
            status=OK,
            data=ValidatorRecord(
                address=ADDRESS,
                status="active",
                balance=Amount(raw="2", display="2 STK"),
                attestations_succeeded=7,
                attestations_missed=3,
                success_rate="70.0%",
                found=True,
            ),
        ),
        slashing=Section(status=OK, data=SlashingHistory()),
        accusations=Section(status=OK, data=[]),
        rank=Section(status=OK, data=3),
    )
    fields.update(overrides)
    return ValidatorReport(**fields)


class TestRenderReport:
    def test_happy_path(self) -> None:
        text = render_report(_report(), color=False)
        assert ADDRESS in text
        assert "Active Validators: 9 / 10" in text
        assert "Current Epoch: 500" in text
        assert "Attestation Success Rate: 70.0%" in text
        assert "Balance: 2 STK" in text
        assert "Leaderboard Rank: 3" in text
        assert "No slashing history" in text
        assert "No accusations" in text
        assert BYPASS_HINT not in text
        assert "\033[" not in text

    def test_color_codes(self) -> None:
        assert RED in render_report(_report(), color=True)

    def test_access_denied_network(self) -> None:
        report = _report(network=Section(status=SectionStatus.ACCESS_DENIED, error="HTTP 403"), window=None)
        text = render_report(report, color=False)
        assert "Network: access denied" in text
        assert "Active Validators: unknown / unknown" in text
        assert "Current Epoch: unknown" in text
        assert "Status: active" in text
        assert BYPASS_HINT in text

    def test_hint_kept_when_forbidden_detail_was_filled_from_leaderboard(self) -> None:
        base = _report()
        validator = base.validator.model_copy(update={"source_status": SectionStatus.ACCESS_DENIED})
        text = render_report(_report(validator=validator), color=False)
        assert "Status: active" in text
        assert BYPASS_HINT in text

    def test_unavailable_and_malformed_sections(self) -> None:
        report = _report(
            validator=Section(status=SectionStatus.UNAVAILABLE, error="HTTP 500"),
            slashing=Section(status=SectionStatus.MALFORMED, error="bad"),
            rank=Section(status=SectionStatus.UNAVAILABLE),
        )
        text = render_report(report, color=False)
        assert "Validator stats: unavailable" in text
        assert "unreadable response" in text
        assert "Leaderboard Rank: unavailable" in text

    def test_not_found_validator(self) -> None:
        report = _report(validator=Section(status=OK, data=ValidatorRecord(address=ADDRESS)))
        text = render_report(report, color=False)
        assert "No data returned for this validator." in text
        assert "Attestation Success Rate: unknown" in text

    def test_events_listed(self) -> None:
        report = _report(
            slashing=Section(status=OK, data=SlashingHistory(total=3, events=[SlashingEvent(epoch=12, reason="double vote")])),
            accusations=Section(status=OK, data=[AccusationEvent(epoch=4, type="inactivity", accuser="0xdead")]),
            rank=Section(status=OK, data="not ranked"),
        )
        text = render_report(report, color=False)
        assert "1 slashing event(s) detected (3 in response)" in text
        assert "Epoch: 12, Slot: unknown, Reason: double vote, Amount: unknown" in text
        assert "Epoch: 4, Type: inactivity, Accuser: 0xdead" in text
        assert "Leaderboard Rank: not ranked" in text


def test_render_json() -> None:
    data = json.loads(render_json(_report()))
    assert data["address"] == ADDRESS
    assert data["network"]["status"] == "ok"
    assert data["network"]["data"]["current_epoch"] == 500
    assert data["validator"]["data"]["success_rate"] == "70.0%"
    assert data["rank"]["data"] == 3
    assert data["window"] == {"start": 400, "end": 500}

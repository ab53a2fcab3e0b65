from typing import Any, List, Optional
from packages.dashtec_adapter.types import SectionStatus
from packages.normalizer.fields import UNKNOWN
from .pipeline import Section, ValidatorReport

RED = "\033[0;31m"
GREEN = "\033[0;32m"
YELLOW = "\033[1;33m"
CYAN = "\033[0;36m"
NC = "\033[0m"

RULE = "═" * 50

BYPASS_HINT = ("The dashboard answered with a CDN challenge. Open it in a browser, copy the "
               "cf_clearance cookie and rerun with --bypass-token <value> (add --save-token to keep it).")


class Painter:
    def __init__(self, color: bool = True):
        self.color = color

    def __call__(self, code: str, text: Any) -> str:
        return f"{code}{text}{NC}" if self.color else str(text)


def _v(value: Optional[Any]) -> str:
    return UNKNOWN if value is None else str(value)


def _unavailable(section: Section) -> str:
    if section.status is SectionStatus.ACCESS_DENIED:
        return "access denied"
    if section.status is SectionStatus.MALFORMED:
        return "unreadable response"
    return "unavailable"


def render_report(report: ValidatorReport, color: bool = True) -> str:
    p = Painter(color)
    out: List[str] = []

    net = report.network.data if report.network.ok else None
    out.append(p(CYAN, RULE))
    out.append(f" Validator Address: {p(YELLOW, report.address)}")
    if net is None:
        out.append(f" Network: {p(RED, _unavailable(report.network))}")
    out.append(f" Active Validators: {p(GREEN, _v(net and net.active_validators))} / "
               f"{_v(net and net.total_validators)}")
    out.append(f" Current Epoch: {p(YELLOW, _v(net and net.current_epoch))}"
               f"   Finalized: {_v(net and net.finalized_epoch)}")
    if report.window is not None:
        out.append(f" Epoch Window: {report.window.start}-{report.window.end}")
    out.append(p(CYAN, RULE))

    if report.validator.ok:
        v = report.validator.data
        if not v.found:
            out.append(p(YELLOW, " No data returned for this validator."))
        out.append(f" Status: {p(YELLOW, v.status)}")
        out.append(f" Balance: {p(GREEN, v.balance.display)}")
        out.append(f" Effective Balance: {p(GREEN, v.effective_balance.display)}")
        out.append(f" Total Rewards: {p(GREEN, v.total_rewards.display)}")
        out.append(f" Attestations: {p(GREEN, v.attestations_succeeded)} succeeded / "
                   f"{p(RED, v.attestations_missed)} missed"
                   + (f" ({v.total_attestations} total)" if v.total_attestations is not None else ""))
        out.append(f" Attestation Success Rate: {p(YELLOW, v.success_rate)}")
        out.append(f" Committee Participation: {p(YELLOW, v.committee_participation)}")
        out.append(f" Blocks: {v.blocks_proposed} proposed / {v.blocks_mined} mined / "
                   f"{p(RED, v.blocks_missed)} missed")
    else:
        out.append(f" Validator stats: {p(RED, _unavailable(report.validator))}")

    rank = report.rank.data if report.rank.ok else None
    out.append(f" Leaderboard Rank: {p(YELLOW, _v(rank) if report.rank.ok else _unavailable(report.rank))}")

    out.append("")
    out.append(p(CYAN, " Slashing history"))
    if not report.slashing.ok:
        out.append(f"  {p(RED, _unavailable(report.slashing))}")
    elif not report.slashing.data.events:
        out.append(f"  No slashing history {p(GREEN, '✅')}")
    else:
        hist = report.slashing.data
        out.append(p(RED, f"  {len(hist.events)} slashing event(s) detected ({hist.total} in response):"))
        for e in hist.events:
            out.append(f"  - Epoch: {_v(e.epoch)}, Slot: {_v(e.slot)}, Reason: {e.reason}, Amount: {e.amount.display}")

    out.append("")
    out.append(p(CYAN, " Accusations"))
    if not report.accusations.ok:
        out.append(f"  {p(RED, _unavailable(report.accusations))}")
    elif not report.accusations.data:
        out.append(f"  No accusations {p(GREEN, '✅')}")
    else:
        out.append(p(RED, f"  {len(report.accusations.data)} accusation(s) detected:"))
        for a in report.accusations.data:
            out.append(f"  - Epoch: {_v(a.epoch)}, Type: {a.type}, Accuser: {a.accuser}")

    if report.access_denied:
        out.append("")
        out.append(p(YELLOW, f" {BYPASS_HINT}"))

    out.append(p(CYAN, RULE))
    return "\n".join(out)


def render_json(report: ValidatorReport) -> str:
    return report.model_dump_json(indent=2)

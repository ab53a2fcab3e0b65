"""Turn raw dashboard payloads into typed records.

Every operation tolerates missing or differently named fields: unresolved
strings become "unknown", counters become 0 and optional numbers None. Only a
top-level document that is neither an object nor an array raises
MalformedResponse, so callers can tell "no data" from "garbage".
"""
from typing import Any, Optional, List, Tuple
from packages.config.constants import DEFAULT_UNIT
from packages.leaderboard.ranker import Rank, rank_of
from . import keys
from .address import same_address
from .fields import (
    UNKNOWN, Layers, as_text, ensure_document, extract_list, resolve, resolve_counter,
    resolve_int, resolve_str,
)
from .metrics import convert_balance, explicit_rate, success_rate
from .models import (
    AccusationEvent, Amount, NetworkSummary, SlashingEvent, ValidatorRecord,
)

# every field read by normalize_validator; used to decide whether anything was found
_VALIDATOR_FIELDS = (
    keys.ADDRESS, keys.STATUS, keys.BALANCE, keys.EFFECTIVE_BALANCE,
    keys.ATTESTATIONS_SUCCEEDED, keys.ATTESTATIONS_MISSED, keys.BLOCKS_PROPOSED,
    keys.BLOCKS_MINED, keys.BLOCKS_MISSED, keys.SUCCESS_RATE, keys.TOTAL_REWARDS,
    keys.TOTAL_ATTESTATIONS, keys.COMMITTEE_PARTICIPATION,
)


def _amount(doc: Any, candidates, unit: str) -> Amount:
    val = resolve(doc, candidates)
    text = None if isinstance(val, bool) else as_text(val)
    if not text:
        return Amount()
    return Amount(raw=text, display=convert_balance(val, unit))


def _unwrap_validator(doc: Any) -> Any:
    if isinstance(doc, dict):
        for k in keys.VALIDATOR_WRAPPERS:
            inner = doc.get(k)
            if isinstance(inner, dict):
                return inner
    if isinstance(doc, list):
        # a one-row list is how some revisions answer a single lookup
        rows = [r for r in doc if isinstance(r, dict)]
        return rows[0] if rows else {}
    return doc


def normalize_network_summary(raw: Any) -> NetworkSummary:
    doc = ensure_document(raw)
    return NetworkSummary(
        current_epoch=resolve_int(doc, keys.CURRENT_EPOCH),
        active_validators=resolve_int(doc, keys.ACTIVE_VALIDATORS),
        total_validators=resolve_int(doc, keys.TOTAL_VALIDATORS),
        finalized_epoch=resolve_int(doc, keys.FINALIZED_EPOCH),
    )


def normalize_validator(raw: Any, address: Optional[str] = None, unit: str = DEFAULT_UNIT,
                        fallback: Optional[dict] = None) -> ValidatorRecord:
    """Validator record from a detail payload.

    fallback (the validator's leaderboard row) fills fields the detail payload
    leaves unresolved; detail values always win.
    """
    doc = _unwrap_validator(ensure_document(raw))
    if fallback:
        doc = Layers((doc, fallback))
    succeeded = resolve_counter(doc, keys.ATTESTATIONS_SUCCEEDED)
    missed = resolve_counter(doc, keys.ATTESTATIONS_MISSED)
    rate = explicit_rate(resolve(doc, keys.SUCCESS_RATE)) or success_rate(succeeded, missed)
    addr = resolve_str(doc, keys.ADDRESS)
    if addr == UNKNOWN and address:
        addr = address
    return ValidatorRecord(
        address=addr.lower() if addr != UNKNOWN else addr,
        status=resolve_str(doc, keys.STATUS),
        balance=_amount(doc, keys.BALANCE, unit),
        effective_balance=_amount(doc, keys.EFFECTIVE_BALANCE, unit),
        attestations_succeeded=succeeded,
        attestations_missed=missed,
        blocks_proposed=resolve_counter(doc, keys.BLOCKS_PROPOSED),
        blocks_mined=resolve_counter(doc, keys.BLOCKS_MINED),
        blocks_missed=resolve_counter(doc, keys.BLOCKS_MISSED),
        success_rate=rate,
        total_rewards=_amount(doc, keys.TOTAL_REWARDS, unit),
        total_attestations=resolve_int(doc, keys.TOTAL_ATTESTATIONS),
        committee_participation=explicit_rate(resolve(doc, keys.COMMITTEE_PARTICIPATION)) or UNKNOWN,
        found=any(resolve(doc, c) is not None for c in _VALIDATOR_FIELDS),
    )


def _event_address(row: dict) -> Optional[str]:
    val = resolve(row, keys.EVENT_ADDRESS)
    return str(val).lower() if isinstance(val, str) and val.strip() else None


def normalize_slashing_history(raw: Any, address: str, unit: str = DEFAULT_UNIT) -> Tuple[int, List[SlashingEvent]]:
    """(total events in the payload, events that concern address).

    Rows without any address field are counted as matching because the
    slashing endpoint is already scoped to one validator.
    """
    rows = extract_list(raw) or []
    matching: List[SlashingEvent] = []
    for row in rows:
        subject = _event_address(row)
        if subject is not None and not same_address(subject, address):
            continue
        matching.append(SlashingEvent(
            epoch=resolve_int(row, keys.EVENT_EPOCH),
            slot=resolve_int(row, keys.EVENT_SLOT),
            block=resolve_int(row, keys.EVENT_BLOCK),
            address=subject,
            reason=resolve_str(row, keys.SLASH_REASON),
            amount=_amount(row, keys.SLASH_AMOUNT, unit),
        ))
    return len(rows), matching


def normalize_accusations(raw: Any, address: Optional[str] = None) -> List[AccusationEvent]:
    rows = extract_list(raw) or []
    out: List[AccusationEvent] = []
    for row in rows:
        subject = _event_address(row)
        if address and subject is not None and not same_address(subject, address):
            continue
        out.append(AccusationEvent(
            epoch=resolve_int(row, keys.EVENT_EPOCH),
            type=resolve_str(row, keys.ACCUSATION_TYPE),
            accuser=resolve_str(row, keys.ACCUSER),
            address=subject,
        ))
    return out


def normalize_leaderboard(raw: Any, address: str) -> Rank:
    """1-based rank, "not ranked", or "unknown" when no list could be read."""
    return rank_of(raw, address)

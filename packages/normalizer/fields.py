from typing import Any, Optional, Iterable, List, Dict
from .errors import MalformedResponse

UNKNOWN = "unknown"

# keys under which list endpoints wrap their array, in lookup order
LIST_KEYS = ("data", "events", "slashings", "accusations", "validators")

_MISSING = object()

def _lookup(doc: Any, key: str) -> Any:
    cur = doc
    for part in key.split("."):
        if not isinstance(cur, dict) or part not in cur:
            return _MISSING
        cur = cur[part]
    return cur

class Layers(tuple):
    """Documents consulted in order, field by field; earlier ones win."""

def resolve(doc: Any, keys: Iterable[str]) -> Any:
    """Return the value of the first candidate key that is present and non-null.

    Keys are tried in the given order; dotted keys walk nested objects
    (``validators.active``). For Layers each document is searched with the full
    key list before the next one. Returns None when no candidate resolves.
    """
    if isinstance(doc, Layers):
        for layer in doc:
            val = resolve(layer, keys)
            if val is not None:
                return val
        return None
    for key in keys:
        val = _lookup(doc, key)
        if val is not _MISSING and val is not None:
            return val
    return None

def _maybe_int(value: Any) -> Optional[int]:
    if value in (None, "") or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return None

def as_text(value: Any) -> Optional[str]:
    """str() of a scalar; None for containers and ints too long to print."""
    if value is None or isinstance(value, (dict, list)):
        return None
    try:
        return str(value).strip()
    except ValueError:
        return None

def resolve_str(doc: Any, keys: Iterable[str]) -> str:
    return as_text(resolve(doc, keys)) or UNKNOWN

def resolve_int(doc: Any, keys: Iterable[str]) -> Optional[int]:
    """Optional non-negative integer; None stands for unknown."""
    val = _maybe_int(resolve(doc, keys))
    if val is None or val < 0:
        return None
    return val

def resolve_counter(doc: Any, keys: Iterable[str]) -> int:
    # counters feed rate arithmetic, so absent means zero
    return resolve_int(doc, keys) or 0

def ensure_document(raw: Any) -> Any:
    if not isinstance(raw, (dict, list)):
        raise MalformedResponse(f"expected a JSON object or array, got {type(raw).__name__}")
    return raw

def extract_list(raw: Any) -> Optional[List[Dict[str, Any]]]:
    """Pull the record list out of a bare array or a wrapping object.

    Raises MalformedResponse for a document that is neither. Returns None when
    an object holds no list under any of LIST_KEYS. Non-object items are dropped.
    """
    ensure_document(raw)
    rows = raw
    if isinstance(raw, dict):
        rows = None
        for k in LIST_KEYS:
            if isinstance(raw.get(k), list):
                rows = raw[k]
                break
        if rows is None:
            return None
    return [r for r in rows if isinstance(r, dict)]

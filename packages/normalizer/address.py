import re
from typing import Any
from .errors import InvalidAddress

_ADDRESS_RE = re.compile(r"^0x[0-9a-f]{40}$")

def validate_address(value: str) -> str:
    """Return the canonical lowercase form or raise InvalidAddress."""
    if not isinstance(value, str) or len(value) != 42 or not _ADDRESS_RE.match(value.lower()):
        raise InvalidAddress(
            f"invalid validator address {value!r}: expected 0x followed by 40 hex characters"
        )
    return value.lower()

def is_valid_address(value: Any) -> bool:
    try:
        validate_address(value)
    except InvalidAddress:
        return False
    return True

def same_address(a: Any, b: Any) -> bool:
    if not isinstance(a, str) or not isinstance(b, str):
        return False
    return a.strip().lower() == b.strip().lower()

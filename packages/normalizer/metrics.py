from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Any, Optional
from .fields import UNKNOWN, as_text

SUBUNIT_DECIMALS = 18
SUBUNIT_MIN_DIGITS = 16   # integer strings longer than 15 digits are subunits
DISPLAY_DECIMALS = 6
RATE_PLACES = Decimal("0.1")

def format_rate(value: Any) -> str:
    """Render a percentage with one decimal, half-up. Non-finite -> unknown."""
    try:
        d = Decimal(str(value))
        if not d.is_finite():
            return UNKNOWN
        # quantize raises when the value has more digits than the context allows
        return f"{d.quantize(RATE_PLACES, rounding=ROUND_HALF_UP)}%"
    except (InvalidOperation, ValueError):
        return UNKNOWN

def success_rate(succeeded: int, missed: int) -> str:
    total = succeeded + missed
    if total <= 0:
        return UNKNOWN
    return format_rate(Decimal(succeeded) * 100 / Decimal(total))

def explicit_rate(value: Any) -> Optional[str]:
    """Normalise a rate the API already computed; None if unusable."""
    if value is None or isinstance(value, (bool, dict, list)):
        return None
    if isinstance(value, (int, float)):
        rate = format_rate(value)
        return None if rate == UNKNOWN else rate
    s = as_text(value) or ""
    number = s[:-1].strip() if s.endswith("%") else s
    try:
        if not number or not Decimal(number).is_finite():
            return None
    except (InvalidOperation, ValueError):
        return None
    return number + "%"

def convert_balance(value: Any, unit: str) -> str:
    """Best-effort balance rendering.

    The API never states its decimals. A plain integer longer than 15 digits is
    assumed to be in 18-decimal subunits and is scaled to 6 places; anything else
    is passed through as given. The unit label is appended in both cases.
    """
    if isinstance(value, bool):
        return UNKNOWN
    s = as_text(value)
    if not s:
        return UNKNOWN
    if s.isdigit() and s.isascii() and len(s) >= SUBUNIT_MIN_DIGITS:
        # integer arithmetic keeps long values exact; past the interpreter's
        # int conversion limit the value is shown as given
        try:
            subunits = int(s)
        except ValueError:
            return f"{s} {unit}"
        micro, rem = divmod(subunits, 10 ** (SUBUNIT_DECIMALS - DISPLAY_DECIMALS))
        if rem * 2 >= 10 ** (SUBUNIT_DECIMALS - DISPLAY_DECIMALS):
            micro += 1
        whole, frac = divmod(micro, 10 ** DISPLAY_DECIMALS)
        s = f"{whole}.{frac:0{DISPLAY_DECIMALS}d}"
    return f"{s} {unit}"

# utils/validators.py

import math


class ValidationError(ValueError):
    """Client-side validation failure; the message is shown to the user as-is."""
    pass


def non_empty(text: str) -> bool:
    """
    True if `text` is not None/empty after stripping whitespace.
    """
    return bool(text and str(text).strip())


# ---- Numeric parsing ----

def try_parse_float(x):
    """
    Best-effort parse to float. NaN and infinities are rejected.

    Returns:
        (ok: bool, value: float|None)
    """
    if x is None or (isinstance(x, str) and not x.strip()):
        return False, None
    try:
        val = float(x)
    except (TypeError, ValueError):
        return False, None
    if not math.isfinite(val):
        return False, None
    return True, val


def float_or_zero(x) -> float:
    """Parse to float, treating blanks and junk as 0 (for running totals)."""
    ok, val = try_parse_float(x)
    return val if ok else 0.0  # type: ignore[return-value]


def try_parse_int(x):
    """(ok, int|None); accepts '3' and '3.0' but not '3.5'."""
    ok, val = try_parse_float(x)
    if not ok or val is None or not float(val).is_integer():
        return False, None
    return True, int(val)

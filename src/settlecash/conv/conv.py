from __future__ import annotations

import logging
import re
from decimal import Decimal, InvalidOperation

NUM_CLEAN_RE = re.compile(r"[,\s]")  # remove thousands separators, spaces
LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")


logger = logging.getLogger(__name__)


def to_dec_strict(s: str | float | int | Decimal | None) -> Decimal:
    """Convert trade numeric inputs to Decimal.

    Raises ValueError on invalid/missing data. Floats go through ``str`` so
    ``1.2`` becomes ``Decimal("1.2")`` rather than its binary expansion.
    """
    if s is None:
        raise ValueError("Value is None")
    if isinstance(s, bool):
        raise ValueError(f"Value is a boolean: {s!r}")
    if isinstance(s, Decimal):
        value = s
    elif isinstance(s, (int, float)):
        value = Decimal(str(s))
    else:
        s_stripped = s.strip()
        if not s_stripped:
            raise ValueError("Value is empty string")

        try:
            s_clean = NUM_CLEAN_RE.sub("", s_stripped)
            value = Decimal(s_clean)
        except InvalidOperation as e:
            raise ValueError(f"Invalid decimal format: {s!r}") from e

    if not value.is_finite():
        raise ValueError(f"Value is not a finite number: {s!r}")
    return value


def to_int_lenient(s: str) -> int:
    """Parse the leading integer of a token, C ``atoi`` style.

    Leading whitespace and a sign are accepted, anything after the digits is
    ignored, and a token without leading digits yields 0 instead of failing.
    """
    m = LEADING_INT_RE.match(s)
    if m is None:
        logger.debug("No leading integer in %r; using 0", s)
        return 0
    return int(m.group(1))

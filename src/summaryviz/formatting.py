"""Number and date formatting shared by templates and charts.

Every number shown in a report goes through :func:`format_number`, which
keeps a fixed number of *significant* digits for values below one instead of
a fixed number of decimal places::

    format_number(1.51631235, 3)        -> "1.516"
    format_number(0.151631235, 3)       -> "0.152"
    format_number(0.00000151631235, 3)  -> "0.00000152"

Zero, ``None`` and NaN are passed through untouched rather than formatted;
callers that render them get the raw value back.
"""

from __future__ import annotations

import math
from datetime import datetime
from decimal import ROUND_HALF_UP, Context, Decimal, localcontext
from typing import Any

# Enough digits to hold any finite double scaled to an integer.
_DECIMAL_CONTEXT = Context(prec=800)


def is_blank(n: Any) -> bool:
    """Return True for the values that skip formatting: 0, None and NaN."""
    if n is None:
        return True
    if isinstance(n, float) and math.isnan(n):
        return True
    return n == 0


def round_adaptive(n: Any, precision: int = 0) -> Any:
    """Round a number to a given precision, adapting to numbers < 1.

    Args:
        n: The number to round
        precision: Digits after the decimal point, or after the first
                   significant digit when ``abs(n) < 0.1``

    Returns:
        The rounded value as a float, or ``n`` itself when it is blank

    Raises:
        ValueError: If n is infinite
    """
    if is_blank(n):
        return n
    if math.isinf(n):
        raise ValueError(f"Cannot round a non-finite number: {n}")

    precision = precision or 0
    negative = n < 0
    magnitude = Decimal(abs(n))

    # Smallest i >= 0 such that magnitude * 10**i >= 0.1
    shift = max(0, -magnitude.adjusted() - 1)
    exponent = shift + precision

    with localcontext(_DECIMAL_CONTEXT):
        rounded = (
            magnitude.scaleb(exponent)
            .quantize(Decimal(1), rounding=ROUND_HALF_UP)
            .scaleb(-exponent)
        )

    result = float(rounded)
    return -result if negative else result


def _group_digits(value: float) -> str:
    if value == int(value):
        return f"{int(value):,}"
    # repr() gives the shortest round-tripping digits; Decimal avoids "e-06"
    return f"{Decimal(repr(value)):,f}"


def format_number(n: Any, precision: int = 0) -> Any:
    """Format a number for display with thousands separators and adaptive rounding.

    Blank values (see :func:`is_blank`) are returned unchanged.
    """
    if is_blank(n):
        return n
    return _group_digits(round_adaptive(n, precision))


def percent_change(a: Any, b: Any) -> str:
    """Percentage change from ``a`` to ``b``.

    Equal operands give ``"0%"``. A blank operand on either side gives
    ``"n/a"`` instead of a division by zero.
    """
    if a == b:
        return "0%"
    if is_blank(a) or is_blank(b):
        return "n/a"
    return f"{format_number(((b - a) / a) * 100)}%"


def plural(n: Any, singular: str, plural_form: str, precision: int = 0) -> str:
    """Format ``n`` followed by the singular or plural suffix."""
    suffix = singular if n == 1 else plural_form
    return f"{format_number(n, precision)}{suffix}"


def format_datetime(ts: float) -> str:
    """Render a Unix timestamp (seconds) in local time, naming the timezone.

    Raises:
        ValueError: If the timestamp is outside the platform's supported range
    """
    try:
        moment = datetime.fromtimestamp(ts).astimezone()
    except (OverflowError, OSError) as e:
        raise ValueError(f"Timestamp out of range: {ts}") from e
    return f"{moment.strftime('%Y-%m-%d %H:%M:%S')} ({moment.tzname()})"

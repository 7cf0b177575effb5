"""Display rounding and currency formatting.

Rounding here is display-only; projection figures keep full float precision.
Ties round away from zero on the exact binary value of the float, so
54.125 (exactly representable) becomes 54.13 while 1.005 (stored just
below the tie) becomes 1.00.
"""

import math
from decimal import Decimal, ROUND_HALF_UP, localcontext


def _quantize(value: float, digits: int) -> Decimal:
    """Round to `digits` decimals with enough precision for any finite float."""
    exact = Decimal(value)
    with localcontext() as ctx:
        # quantize raises InvalidOperation if the result needs more than prec digits
        ctx.prec = max(28, exact.adjusted() + digits + 2)
        ctx.rounding = ROUND_HALF_UP
        return exact.quantize(Decimal(1).scaleb(-digits))


def to_fixed(value: float, digits: int = 2) -> str:
    """Format a number with a fixed count of decimals.

    Args:
        value: Number to format
        digits: Decimal places to keep

    Returns:
        String such as "54.50" or "-0.13". Non-finite values come back as
        "Infinity", "-Infinity" or "NaN".
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return str(_quantize(value, digits))


def round_display(value: float, digits: int = 2) -> float:
    """Round a number for display, returned as a float."""
    return float(to_fixed(value, digits))


def format_currency(value: float) -> str:
    """Format a dollar amount with no cents.

    Examples:
        1234.5 -> "$1,235"
        -1234.4 -> "-$1,234"
    """
    sign = "-" if value < 0 else ""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return f"{sign}$∞"
    whole = _quantize(value, 0)
    return f"{sign}${abs(int(whole)):,}"


def format_rate(value: float) -> str:
    """Format an hourly rate as dollars and cents ("$54.50")."""
    if value < 0:
        return f"-${to_fixed(-value, 2)}"
    return f"${to_fixed(value, 2)}"

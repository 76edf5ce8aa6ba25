"""
Money Formatting

Turns floating point amounts into the strings printed on an invoice:
comma thousands separators, a period decimal point and exactly two
decimals ("1,234.50"). The currency code is prefixed by the caller.

DESIGN DECISION: Rounding is ROUND_HALF_UP (half away from zero) applied
to the shortest decimal representation of the float. 999.995 therefore
renders as "1,000.00" even though its binary value sits just below the
half-way point.

CRITICAL: If the formatted text does not have the expected shape we
raise FormattingInvariantError. It is an AssertionError on purpose and
must never be caught and replaced by a default value.
"""

import re
from decimal import ROUND_HALF_UP, Context, Decimal, InvalidOperation

from billconf.logs import get_logger


# Built once per process.
MONEY_PATTERN = re.compile(r"-?[0-9,]+\.[0-9]{2}")
CENTS = Decimal("0.01")
# Wide enough to quantize the largest finite float to cents.
CENTS_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)


class FormattingInvariantError(AssertionError):
    """A monetary value could not be rendered in the expected shape."""
    
    def __init__(self, value, formatted: str):
        self.value = value
        self.formatted = formatted
        super().__init__(
            f"Formatted amount {formatted!r} for {value!r} has no two-decimal part"
        )


def _round_cents(value: float) -> Decimal:
    quantized = Decimal(str(value)).quantize(CENTS, context=CENTS_CONTEXT)
    if quantized.is_zero():
        # Avoid "-0.00" for tiny negatives.
        return quantized.copy_abs()
    return quantized


def nice_float_str(value: float) -> str:
    """
    Format a float as a grouped, two-decimal monetary string.
    
    Examples:
        0.0      -> "0.00"
        1234.5   -> "1,234.50"
        -42.1    -> "-42.10"
    
    Raises:
        FormattingInvariantError: the value has no finite two-decimal form
            (NaN, infinity).
    """
    try:
        formatted = format(_round_cents(value), ",.2f")
    except InvalidOperation:
        formatted = str(value)
    
    match = MONEY_PATTERN.search(formatted)
    if match is None:
        get_logger(__name__).critical(
            "money_format_invariant_violated",
            value=repr(value),
            formatted=formatted,
        )
        raise FormattingInvariantError(value, formatted)
    
    return match.group(0)


def format_quantity(value: float) -> str:
    """Quantity with exactly two decimals and no grouping, e.g. "3.00"."""
    return f"{value:.2f}"


def format_money(currency: str, value: float) -> str:
    """Amount prefixed by its currency code, e.g. "USD 1,234.50"."""
    return f"{currency} {nice_float_str(value)}"

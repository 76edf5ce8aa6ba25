"""Money and quantity formatting package."""

from billconf.formatting.money import (
    FormattingInvariantError,
    format_money,
    format_quantity,
    nice_float_str,
)

__all__ = [
    "FormattingInvariantError",
    "format_money",
    "format_quantity",
    "nice_float_str",
]

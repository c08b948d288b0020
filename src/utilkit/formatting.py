"""Number formatting with digit grouping and fixed decimals.
"""

__docformat__ = 'google'

__all__ = [
    'format_number'
]

import math
from decimal import Decimal, ROUND_HALF_UP, localcontext
from numbers import Real
from typing import Optional
import pandas as pd
from utilkit.config import default_number_format
from utilkit.entities import NumberFormat
from utilkit.patterns import digit_group_pattern

def _is_count(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)

def _to_float(number) -> Optional[float]:
    """Read input as a float, or None if it is missing or not numeric."""
    if number is None or isinstance(number, bool):
        return None
    if not isinstance(number, str) and pd.api.types.is_scalar(number) and pd.isna(number):
        return None
    try:
        value = float(number)
    except (TypeError, ValueError):
        return None
    if math.isnan(value):
        return None
    return value

def _to_fixed(value: float, decimals: int) -> str:
    """Fixed-point text of the exact binary value, rounded half away from zero."""
    exact = Decimal(value)
    with localcontext() as ctx:
        # float max has 309 integer digits
        ctx.prec = 400 + decimals
        fixed = exact.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)
    return f'{fixed:f}'

def format_number(
        number,
        decimals = 0,
        empty_value: Optional[str] = '',
        prefix: Optional[str] = '',
        *,
        number_format: Optional[NumberFormat] = None
        ) -> str:
    """
    Format a number with grouped thousands and a fixed number of decimals.

    Positional calls may skip `decimals`: when the second argument is not a
    number it is read as `empty_value`, the third as `prefix`, and `decimals`
    is 0.

        - `format_number(n)`
        - `format_number(n, empty_value)`
        - `format_number(n, empty_value, prefix)`
        - `format_number(n, decimals)`
        - `format_number(n, decimals, empty_value)`
        - `format_number(n, decimals, empty_value, prefix)`

    Args:
        number: Number or numeric string to format
        decimals: Number of decimal places
        empty_value: Returned (after the prefix) for missing or non-numeric input
        prefix: Prepended to every result
        number_format: Separators to use instead of the packaged defaults

    Returns:
        Formatted string

    Example:
        >>> format_number(1234.5, 2)
        '1,234.50'
        >>> format_number(None, 'N/A')
        'N/A'
        >>> format_number(float('nan'), 2, 'N/A', '$')
        '$N/A'
        >>> format_number(1234567, prefix='$')
        '$1,234,567'
    """
    if not _is_count(decimals):
        decimals, empty_value, prefix = 0, decimals, empty_value or prefix
    decimals = int(decimals)
    if decimals < 0:
        raise ValueError(f'decimals must not be negative, got {decimals}')
    prefix = prefix or ''
    empty_value = empty_value or ''
    number_format = number_format or default_number_format()

    value = _to_float(number)
    if value is None:
        return prefix + empty_value
    if math.isinf(value):
        return prefix + ('-Infinity' if value < 0 else 'Infinity')
    if value == 0:
        # negative zero formats without a sign
        value = 0.0

    integer, _, fraction = _to_fixed(value, decimals).partition('.')
    pattern = digit_group_pattern(number_format.group_size)
    integer = pattern.sub(lambda m: m.group(1) + number_format.group_separator, integer)

    result = prefix + integer
    if fraction:
        result += number_format.decimal_point + fraction
    return result

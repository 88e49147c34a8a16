"""
Percent Formatter - число → "3.10%"

Два знака после запятой, без разделителей тысяч, знак сохраняется.
Значение НЕ умножается на 100: 3.1 → "3.10%".

Правило округления: half away from zero по точному двоичному значению float.
- 0.125 (точная середина) → "0.13%", -0.125 → "-0.13%"
- -1.005 (хранится как -1.00499999...) → "-1.00%"
"""

from typing import Final

from src.core.math.numerical_safeguards import (
    format_fixed,
    is_valid_float,
    render_non_finite,
)

PERCENT_DECIMAL_PLACES: Final[int] = 2
PERCENT_SUFFIX: Final[str] = "%"


def format_percent(value: float) -> str:
    """
    Форматирование процента.

    Args:
        value: Значение в процентах (3.1 означает 3.1%)

    Returns:
        Строка вида "3.10%"; NaN/Inf → "NaN%", "Infinity%", "-Infinity%"
    """
    if not is_valid_float(value):
        return f"{render_non_finite(value)}{PERCENT_SUFFIX}"

    return f"{format_fixed(value, PERCENT_DECIMAL_PLACES)}{PERCENT_SUFFIX}"

"""
Currency Formatter - числовая сумма → строка для отображения

Два режима:
- compact (по умолчанию): суффиксы K/M, один знак после запятой, без "$"
- full: "$" + разделители тысяч + один знак после запятой

Знак всегда выносится отдельно: "-" + форматирование abs(amount).
Пороги K/M сравниваются с НЕокруглённой величиной, поэтому 999.95 → "1000.0",
а 999999.95 → "1000.0K".

Форматирование однонаправленное: parse_amount не понимает "$", запятые
и результат K/M-сжатия.
"""

from typing import Final

from src.core.math.numerical_safeguards import (
    format_fixed,
    is_valid_float,
    render_non_finite,
)

# =============================================================================
# ПАРАМЕТРЫ ФОРМАТИРОВАНИЯ
# =============================================================================

CURRENCY_SYMBOL: Final[str] = "$"

# Один знак после запятой в обоих режимах
CURRENCY_DECIMAL_PLACES: Final[int] = 1

# Пороги compact-режима (сравнение по abs(amount))
COMPACT_MILLION_THRESHOLD: Final[float] = 1_000_000.0
COMPACT_THOUSAND_THRESHOLD: Final[float] = 1_000.0

COMPACT_MILLION_SUFFIX: Final[str] = "M"
COMPACT_THOUSAND_SUFFIX: Final[str] = "K"


# =============================================================================
# FORMATTER
# =============================================================================


def _format_compact(magnitude: float) -> str:
    if magnitude >= COMPACT_MILLION_THRESHOLD:
        scaled = format_fixed(magnitude / COMPACT_MILLION_THRESHOLD, CURRENCY_DECIMAL_PLACES)
        return f"{scaled}{COMPACT_MILLION_SUFFIX}"
    elif magnitude >= COMPACT_THOUSAND_THRESHOLD:
        scaled = format_fixed(magnitude / COMPACT_THOUSAND_THRESHOLD, CURRENCY_DECIMAL_PLACES)
        return f"{scaled}{COMPACT_THOUSAND_SUFFIX}"
    else:
        return format_fixed(magnitude, CURRENCY_DECIMAL_PLACES)


def format_currency(amount: float, full_numbers: bool = False) -> str:
    """
    Форматирование денежной суммы.

    Args:
        amount: Сумма (может быть отрицательной, дробной, нулевой)
        full_numbers: True → "$1,234.5"; False → compact "1.2K"

    Returns:
        Строка для отображения. NaN/Inf рендерятся как "NaN",
        "Infinity", "-Infinity" в обоих режимах (без "$" и суффикса).

    Examples:
        >>> format_currency(-1234567.89, full_numbers=True)
        '-$1,234,567.9'
        >>> format_currency(1500)
        '1.5K'
        >>> format_currency(2_500_000)
        '2.5M'
        >>> format_currency(42)
        '42.0'
    """
    if not is_valid_float(amount):
        return render_non_finite(amount)

    sign = "-" if amount < 0 else ""
    magnitude = abs(amount)

    if full_numbers:
        grouped = format_fixed(magnitude, CURRENCY_DECIMAL_PLACES, grouping=True)
        return f"{sign}{CURRENCY_SYMBOL}{grouped}"

    return f"{sign}{_format_compact(magnitude)}"

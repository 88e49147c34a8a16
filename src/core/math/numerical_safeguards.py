"""
Numerical Safeguards - Fixed-Point Rendering Primitives

Модуль обеспечивает детерминированное преобразование float → текст
для всех форматтеров кодека:
- Проверка на NaN/Inf перед форматированием
- Округление до фиксированного числа знаков (half away from zero)
- Единая текстовая форма для NaN/Inf

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Округление применяется к ТОЧНОМУ двоичному значению float
   (1.005 хранится как 1.00499999999999989... → "1.00")
2. Точная середина округляется от нуля (0.125 → "0.13", -0.125 → "-0.13")
3. NaN/Inf никогда не проходят через Decimal-квантование
4. Все операции детерминированы и воспроизводимы
"""

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Final

# =============================================================================
# ТЕКСТОВЫЕ ФОРМЫ NaN/Inf
# =============================================================================

NAN_TEXT: Final[str] = "NaN"
INFINITY_TEXT: Final[str] = "Infinity"


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def render_non_finite(value: float) -> str:
    """
    Текстовая форма для NaN/Inf.

    Args:
        value: NaN, +Inf или -Inf

    Returns:
        "NaN", "Infinity" или "-Infinity"

    Raises:
        ValueError: Если value конечное

    Examples:
        >>> render_non_finite(float('nan'))
        'NaN'
        >>> render_non_finite(float('-inf'))
        '-Infinity'
    """
    if math.isnan(value):
        return NAN_TEXT
    if math.isinf(value):
        return f"-{INFINITY_TEXT}" if value < 0 else INFINITY_TEXT
    raise ValueError(f"value must be NaN or Inf, got {value}")


# =============================================================================
# ОКРУГЛЕНИЕ С ФИКСИРОВАННОЙ ТОЧКОЙ
# =============================================================================


def round_half_away_from_zero(value: float, places: int) -> Decimal:
    """
    Округление float до places знаков после запятой.

    Decimal(value) берёт точное двоичное значение float, поэтому
    "видимые" середины вроде 1.005 округляются вниз, а точные
    (0.125, 2.5) - от нуля.

    Args:
        value: Конечное значение
        places: Количество знаков после запятой (>= 0)

    Returns:
        Decimal с ровно places знаками

    Raises:
        ValueError: Если value NaN/Inf или places < 0

    Examples:
        >>> round_half_away_from_zero(0.125, 2)
        Decimal('0.13')
        >>> round_half_away_from_zero(-0.125, 2)
        Decimal('-0.13')
        >>> round_half_away_from_zero(1.005, 2)
        Decimal('1.00')
    """
    if not is_valid_float(value):
        raise ValueError(f"value must be a valid float (not NaN/Inf), got {value}")

    if places < 0:
        raise ValueError(f"places must be non-negative, got {places}")

    quantum = Decimal(1).scaleb(-places)
    # ROUND_HALF_UP в decimal = округление середины от нуля
    return Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)


def format_fixed(value: float, places: int, grouping: bool = False) -> str:
    """
    Рендеринг float с фиксированным числом знаков.

    Args:
        value: Конечное значение
        places: Количество знаков после запятой
        grouping: Разделять тысячи запятыми

    Returns:
        Строка вида "1234.5" или "1,234.5"

    Examples:
        >>> format_fixed(3.1, 2)
        '3.10'
        >>> format_fixed(1234567.89, 1, grouping=True)
        '1,234,567.9'
    """
    if value == 0:
        # -0.0 рендерится без знака
        value = 0.0

    rounded = round_half_away_from_zero(value, places)
    format_spec = f",.{places}f" if grouping else f".{places}f"
    return format(rounded, format_spec)

"""
Duration Parser - "<years>y<months>m" → общее число месяцев

Политика ошибок: EXPLICIT FAILURE (в отличие от parse_amount).
Закрытая таксономия причин (DurationErrorKind):
- INVALID_YEAR_FORMAT: перед "y" нет целого числа
- INVALID_MONTH_FORMAT: перед "m" нет целого числа
- NON_POSITIVE_DURATION: years * 12 + months <= 0

Две формы API:
- try_parse_duration → DurationParseResult (tagged result, без исключений)
- parse_duration → int или DurationParseError (подкласс по каждой причине)

Алгоритм:
1. lower + strip
2. Первый "y": текст до него → годы; остаток после "y" сканируется дальше.
   Нет "y" → годы = 0, сканируется вся строка.
3. Первый "m" в остатке: текст до него → месяцы. Нет "m" → месяцы = 0.
4. total = years * 12 + months; total <= 0 → ошибка.

Целое читается как в начале строки: пробелы, знак, цифры; хвост игнорируется
("1.5y" → 1 год, "1y 6m" → 18).

Examples:
    "1y6m" → 18, "2y" → 24, "18m" → 18
    "0y0m" → NON_POSITIVE_DURATION, "xy" → INVALID_YEAR_FORMAT
    "" → NON_POSITIVE_DURATION
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Final, Optional

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

MONTHS_PER_YEAR: Final[int] = 12

YEAR_MARKER: Final[str] = "y"
MONTH_MARKER: Final[str] = "m"

_LEADING_INT_RE: Final[re.Pattern[str]] = re.compile(r"\s*([+-]?[0-9]+)")


# =============================================================================
# ERROR TAXONOMY
# =============================================================================


class DurationErrorKind(str, Enum):
    """Причина отказа разбора длительности."""

    INVALID_YEAR_FORMAT = "INVALID_YEAR_FORMAT"
    INVALID_MONTH_FORMAT = "INVALID_MONTH_FORMAT"
    NON_POSITIVE_DURATION = "NON_POSITIVE_DURATION"


_ERROR_MESSAGES: Final[dict[DurationErrorKind, str]] = {
    DurationErrorKind.INVALID_YEAR_FORMAT: "Invalid year format",
    DurationErrorKind.INVALID_MONTH_FORMAT: "Invalid month format",
    DurationErrorKind.NON_POSITIVE_DURATION: "Duration must be greater than 0",
}


@dataclass(frozen=True)
class DurationParseResult:
    """
    Результат разбора длительности.

    Ровно одно из полей заполнено:
    - months: общее число месяцев (> 0) при успехе
    - error: причина отказа
    """

    months: Optional[int] = None
    error: Optional[DurationErrorKind] = None

    def __post_init__(self) -> None:
        if (self.months is None) == (self.error is None):
            raise ValueError("exactly one of months/error must be set")

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> Optional[str]:
        """Текст ошибки для отображения пользователю (None при успехе)."""
        if self.error is None:
            return None
        return _ERROR_MESSAGES[self.error]


class DurationParseError(ValueError):
    """
    Ошибка разбора длительности.

    Атрибут kind позволяет ветвиться по причине без сравнения строк.
    """

    kind: DurationErrorKind

    def __init__(self, kind: DurationErrorKind, text: str):
        super().__init__(_ERROR_MESSAGES[kind])
        self.kind = kind
        self.text = text


class InvalidYearFormatError(DurationParseError):
    def __init__(self, text: str):
        super().__init__(DurationErrorKind.INVALID_YEAR_FORMAT, text)


class InvalidMonthFormatError(DurationParseError):
    def __init__(self, text: str):
        super().__init__(DurationErrorKind.INVALID_MONTH_FORMAT, text)


class NonPositiveDurationError(DurationParseError):
    def __init__(self, text: str):
        super().__init__(DurationErrorKind.NON_POSITIVE_DURATION, text)


_ERROR_TYPES: Final[dict[DurationErrorKind, type[DurationParseError]]] = {
    DurationErrorKind.INVALID_YEAR_FORMAT: InvalidYearFormatError,
    DurationErrorKind.INVALID_MONTH_FORMAT: InvalidMonthFormatError,
    DurationErrorKind.NON_POSITIVE_DURATION: NonPositiveDurationError,
}


# =============================================================================
# PARSER
# =============================================================================


def _parse_leading_int(text: str) -> Optional[int]:
    match = _LEADING_INT_RE.match(text)
    if match is None:
        return None
    return int(match.group(1))


def try_parse_duration(text: str) -> DurationParseResult:
    """
    Разбор длительности без исключений.

    Args:
        text: Текст вида "1y6m", "2y", "18m"

    Returns:
        DurationParseResult с months или error

    Examples:
        >>> try_parse_duration("1y6m").months
        18
        >>> try_parse_duration("xy").error
        <DurationErrorKind.INVALID_YEAR_FORMAT: 'INVALID_YEAR_FORMAT'>
    """
    remaining = text.lower().strip()
    years = 0
    months = 0

    y_index = remaining.find(YEAR_MARKER)
    if y_index != -1:
        parsed_years = _parse_leading_int(remaining[:y_index])
        if parsed_years is None:
            return _rejected(DurationErrorKind.INVALID_YEAR_FORMAT, text)
        years = parsed_years
        remaining = remaining[y_index + 1 :]

    m_index = remaining.find(MONTH_MARKER)
    if m_index != -1:
        parsed_months = _parse_leading_int(remaining[:m_index])
        if parsed_months is None:
            return _rejected(DurationErrorKind.INVALID_MONTH_FORMAT, text)
        months = parsed_months

    total_months = years * MONTHS_PER_YEAR + months
    if total_months <= 0:
        return _rejected(DurationErrorKind.NON_POSITIVE_DURATION, text)

    return DurationParseResult(months=total_months)


def _rejected(kind: DurationErrorKind, text: str) -> DurationParseResult:
    logger.debug("Duration %r rejected: %s", text, kind.value)
    return DurationParseResult(error=kind)


def parse_duration(text: str) -> int:
    """
    Разбор длительности в общее число месяцев.

    Args:
        text: Текст вида "1y6m", "2y", "18m"

    Returns:
        Общее число месяцев (> 0)

    Raises:
        InvalidYearFormatError: перед "y" нет целого числа
        InvalidMonthFormatError: перед "m" нет целого числа
        NonPositiveDurationError: итог <= 0

    Examples:
        >>> parse_duration("1y6m")
        18
        >>> parse_duration("0y0m")  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        NonPositiveDurationError: Duration must be greater than 0
    """
    result = try_parse_duration(text)
    if result.error is not None:
        raise _ERROR_TYPES[result.error](text)
    return result.months

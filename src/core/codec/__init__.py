"""
Value Text Codec для калькулятора rent-vs-buy

Преобразование между текстом, введённым пользователем, и числами:
- format_currency / format_percent: число → строка (тотальные функции)
- parse_amount / parse_appreciation_rates: текст → число (0 при ошибке)
- parse_duration / try_parse_duration: "1y6m" → месяцы (явная ошибка)
"""

# Currency Formatter
from src.core.codec.currency import (
    COMPACT_MILLION_THRESHOLD,
    COMPACT_THOUSAND_THRESHOLD,
    CURRENCY_SYMBOL,
    format_currency,
)

# Amount Parser & Rate List Parser
from src.core.codec.amount import (
    BILLION_MULTIPLIER,
    MILLION_MULTIPLIER,
    THOUSAND_MULTIPLIER,
    parse_amount,
    parse_appreciation_rates,
)

# Duration Parser
from src.core.codec.duration import (
    MONTHS_PER_YEAR,
    DurationErrorKind,
    DurationParseError,
    DurationParseResult,
    InvalidMonthFormatError,
    InvalidYearFormatError,
    NonPositiveDurationError,
    parse_duration,
    try_parse_duration,
)

# Percent Formatter
from src.core.codec.percent import format_percent

__all__ = [
    # Currency Formatter
    "COMPACT_MILLION_THRESHOLD",
    "COMPACT_THOUSAND_THRESHOLD",
    "CURRENCY_SYMBOL",
    "format_currency",
    # Amount Parser - Constants
    "BILLION_MULTIPLIER",
    "MILLION_MULTIPLIER",
    "THOUSAND_MULTIPLIER",
    # Amount Parser - Functions
    "parse_amount",
    "parse_appreciation_rates",
    # Duration Parser - Constants
    "MONTHS_PER_YEAR",
    # Duration Parser - Types
    "DurationErrorKind",
    "DurationParseResult",
    # Duration Parser - Exceptions
    "DurationParseError",
    "InvalidMonthFormatError",
    "InvalidYearFormatError",
    "NonPositiveDurationError",
    # Duration Parser - Functions
    "parse_duration",
    "try_parse_duration",
    # Percent Formatter
    "format_percent",
]

"""
Amount Parser & Rate List Parser - текст → число

Политика ошибок: SILENT DEGRADATION.
Любой нераспознанный текст превращается в 0.0, исключения наружу не выходят.
Это осознанно отличается от parse_duration (см. duration.py), которая
сигнализирует об ошибке.

Нотация:
- "1.5k" → 1500, "2M" → 2_000_000, "3b" → 3_000_000_000
- "50%" → 50 (знак процента отбрасывается, НЕ делится на 100)
- "" / "   " / "abc" → 0
- "$1,200" → 0 ("$" и разделители тысяч не поддерживаются)

Суффикс - ровно один последний символ, проверка строго по порядку k → m → b.
Числовая часть читается как самый длинный десятичный литерал в начале строки,
хвост после литерала игнорируется: "1bk" → "1b" × 1000 → 1000.
"""

import logging
import re
from typing import Final

logger = logging.getLogger(__name__)

# =============================================================================
# SUFFIX MULTIPLIERS
# =============================================================================

THOUSAND_MULTIPLIER: Final[float] = 1_000.0
MILLION_MULTIPLIER: Final[float] = 1_000_000.0
BILLION_MULTIPLIER: Final[float] = 1_000_000_000.0

PERCENT_SIGN: Final[str] = "%"
RATE_SEPARATOR: Final[str] = ","

# Десятичный литерал в начале строки: знак, цифры, дробь, экспонента.
# Слова nan/inf и разделители "_" сюда не попадают.
_LEADING_DECIMAL_RE: Final[re.Pattern[str]] = re.compile(
    r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:e[+-]?[0-9]+)?"
)


# =============================================================================
# HELPERS
# =============================================================================


def _split_suffix(text: str) -> tuple[str, float]:
    # Явная упорядоченная проверка: только последний символ, только один
    if text.endswith("k"):
        return text[:-1], THOUSAND_MULTIPLIER
    elif text.endswith("m"):
        return text[:-1], MILLION_MULTIPLIER
    elif text.endswith("b"):
        return text[:-1], BILLION_MULTIPLIER
    return text, 1.0


def _parse_leading_float(text: str) -> float | None:
    """
    Чтение десятичного литерала в начале строки.

    Args:
        text: Текст (ведущие/хвостовые пробелы допускаются)

    Returns:
        Значение литерала или None если литерала нет

    Examples:
        >>> _parse_leading_float(" 12.5 ")
        12.5
        >>> _parse_leading_float("1b")
        1.0
        >>> _parse_leading_float("$1,200") is None
        True
    """
    match = _LEADING_DECIMAL_RE.match(text.strip())
    if match is None:
        return None
    return float(match.group(0))


# =============================================================================
# PARSERS
# =============================================================================


def parse_amount(text: str) -> float:
    """
    Разбор суммы, введённой пользователем.

    Args:
        text: Текст вида "1.5k", "2M", "50%", "1200"

    Returns:
        Число × множитель суффикса; 0.0 для пустого или нераспознанного ввода.
        Никогда не бросает исключений.

    Examples:
        >>> parse_amount("1.5k")
        1500.0
        >>> parse_amount("10%")
        10.0
        >>> parse_amount("abc")
        0.0
    """
    normalized = text.lower().strip()

    if normalized == "":
        return 0.0

    if normalized.endswith(PERCENT_SIGN):
        normalized = normalized[: -len(PERCENT_SIGN)].strip()

    number_text, multiplier = _split_suffix(normalized)

    value = _parse_leading_float(number_text)
    if value is None:
        logger.debug("Amount text %r is not a number, using 0", text)
        return 0.0

    return value * multiplier


def parse_appreciation_rates(text: str) -> list[float]:
    """
    Разбор списка ставок через запятую.

    Каждый элемент проходит через parse_amount, поэтому функция
    никогда не бросает исключений. Порядок сохраняется, дубликаты
    и нули не удаляются.

    Args:
        text: Текст вида "3,5k,-2"

    Returns:
        Список ставок; [0.0] для пустого ввода

    Examples:
        >>> parse_appreciation_rates("3,5k,-2")
        [3.0, 5000.0, -2.0]
        >>> parse_appreciation_rates("")
        [0.0]
    """
    normalized = text.strip()
    if normalized == "":
        return [0.0]

    rates = [parse_amount(part) for part in normalized.split(RATE_SEPARATOR)]

    if not rates:
        return [0.0]

    return rates

"""
Тесты для Rate List Parser

Проверяемые инварианты:
1. Пустой ввод → [0]
2. Каждый элемент разбирается через parse_amount (никогда не бросает)
3. Порядок сохраняется, дубликаты и нули не удаляются
"""

from src.core.codec import parse_appreciation_rates


class TestParseAppreciationRates:
    """Тесты parse_appreciation_rates."""

    def test_empty(self) -> None:
        assert parse_appreciation_rates("") == [0.0]

    def test_whitespace_only(self) -> None:
        assert parse_appreciation_rates("   ") == [0.0]

    def test_single_value(self) -> None:
        assert parse_appreciation_rates("3.5") == [3.5]

    def test_mixed_notation(self) -> None:
        assert parse_appreciation_rates("3,5k,-2") == [3.0, 5000.0, -2.0]

    def test_parts_trimmed_by_amount_parser(self) -> None:
        assert parse_appreciation_rates(" 3 , 4 ,5% ") == [3.0, 4.0, 5.0]

    def test_order_preserved(self) -> None:
        assert parse_appreciation_rates("5,4,3,2,1") == [5.0, 4.0, 3.0, 2.0, 1.0]

    def test_duplicates_and_zeros_preserved(self) -> None:
        assert parse_appreciation_rates("1,1,0,1") == [1.0, 1.0, 0.0, 1.0]

    def test_invalid_parts_become_zero(self) -> None:
        assert parse_appreciation_rates("a,2") == [0.0, 2.0]
        assert parse_appreciation_rates("3,,4") == [3.0, 0.0, 4.0]

    def test_bare_separator(self) -> None:
        """"," → две пустые части → [0, 0]."""
        assert parse_appreciation_rates(",") == [0.0, 0.0]

    def test_percent_not_scaled(self) -> None:
        assert parse_appreciation_rates("3%,4%") == [3.0, 4.0]

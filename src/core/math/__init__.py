"""
Core math modules

Численные примитивы для детерминированного форматирования.
"""

from src.core.math.numerical_safeguards import (
    INFINITY_TEXT,
    NAN_TEXT,
    format_fixed,
    is_valid_float,
    render_non_finite,
    round_half_away_from_zero,
)

__all__ = [
    # Constants
    "INFINITY_TEXT",
    "NAN_TEXT",
    # NaN/Inf
    "is_valid_float",
    "render_non_finite",
    # Rounding
    "format_fixed",
    "round_half_away_from_zero",
]

"""Money formatting for reports and plot axes."""

from __future__ import annotations

import math


def format_with_thousands_separator(num: float) -> str:
    """Format ``num`` as reais with comma thousands separators and two decimals.

    The integer part is truncated and the fraction rounded on its own, so a
    fraction that rounds up to one is shown as ``.00``.
    """
    sign = "-" if num < 0.0 else ""
    if not math.isfinite(num):
        return f"{sign}R$ {'inf' if math.isinf(num) else 'NaN'}"

    magnitude = abs(num)
    integer_part = math.trunc(magnitude)
    fraction = magnitude - integer_part
    decimals = f"{fraction:.2f}"[1:]
    return f"{sign}R$ {integer_part:,}{decimals}"


def format_axis_tick(value: float, position: object = None) -> str:
    """Tick label formatter usable with a plotting library's function formatter."""
    return format_with_thousands_separator(value)
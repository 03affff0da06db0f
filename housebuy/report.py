"""Key figures and plots of a simulation result."""

from __future__ import annotations

import enum

from matplotlib.ticker import FuncFormatter

from .calculation import SimulationOutput
from .formatting import format_axis_tick, format_with_thousands_separator
from .model import Simulation

_MISSING = "NaN"


class PlotSelection(enum.Enum):
    """Which series to plot."""

    MONEY_IN_ACCOUNT = "money"
    PAYMENTS = "payments"

    @classmethod
    def default(cls) -> "PlotSelection":
        return cls.MONEY_IN_ACCOUNT


def _money_at(series: list[float], index: int) -> str:
    try:
        return format_with_thousands_separator(series[index])
    except IndexError:
        return _MISSING


def kpi_rows(output: SimulationOutput, simulation: Simulation) -> list[tuple[str, str]]:
    """Label and value pairs summarising a simulation."""
    payments = output.monthly_payments
    first = payments[0] if payments else 0.0
    last = payments[-1] if payments else 0.0
    return [
        ("Dinheiro Inicial:", _money_at(output.time_series, 0)),
        ("Parcelas Mensais", f"Primeira: {format_with_thousands_separator(first)}"),
        ("", f"Última: {format_with_thousands_separator(last)}"),
        ("Parcels terminam em:", f"{output.ends_after} meses"),
        ("Dinheiro depois de 1 ano:", _money_at(output.time_series, 12 - 1)),
        ("Dinheiro depois de 5 anos:", _money_at(output.time_series, 5 * 12 - 1)),
        (
            f"Dinheiro no fim da sim ({simulation.months_to_forecast} meses)",
            _money_at(output.time_series, -1),
        ),
    ]


def render_kpis(output: SimulationOutput, simulation: Simulation) -> str:
    """The key figures as an aligned two-column text table."""
    rows = kpi_rows(output, simulation)
    width = max(len(label) for label, _ in rows)
    return "\n".join(f"{label:<{width}}  {value}".rstrip() for label, value in rows)


def plot_output(output: SimulationOutput, selection: PlotSelection, ax):
    """Draw the selected series on a matplotlib ``ax`` and return the line."""
    if selection is PlotSelection.MONEY_IN_ACCOUNT:
        values, label, style = output.time_series, "Dinheiro na Conta", {"color": "darkgreen"}
    elif selection is PlotSelection.PAYMENTS:
        values, label, style = output.monthly_payments, "Pagamentos", {}
    else:
        raise ValueError(f"unknown plot selection: {selection!r}")

    (line,) = ax.plot(range(len(values)), values, label=label, **style)
    ax.yaxis.set_major_formatter(FuncFormatter(format_axis_tick))
    ax.legend()
    return line
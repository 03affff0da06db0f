import pytest
from matplotlib.colors import to_hex
from matplotlib.figure import Figure

from housebuy.calculation import SimulationOutput
from housebuy.formatting import format_with_thousands_separator
from housebuy.model import Simulation
from housebuy.report import PlotSelection, kpi_rows, plot_output, render_kpis


def _output(months=72):
    series = [1000.0 * i for i in range(months + 1)]
    return SimulationOutput(
        time_series=series, monthly_payments=[500.0, 400.0, 300.0], ends_after=3
    )


def test_kpi_rows_values():
    output = _output()
    rows = dict(kpi_rows(output, Simulation(months_to_forecast=72)))
    assert rows["Dinheiro Inicial:"] == format_with_thousands_separator(output.time_series[0])
    assert rows["Parcelas Mensais"] == "Primeira: " + format_with_thousands_separator(500.0)
    assert rows[""] == "Última: " + format_with_thousands_separator(300.0)
    assert rows["Parcels terminam em:"] == "3 meses"
    assert rows["Dinheiro depois de 1 ano:"] == format_with_thousands_separator(
        output.time_series[11]
    )
    assert rows["Dinheiro depois de 5 anos:"] == format_with_thousands_separator(
        output.time_series[59]
    )
    assert rows["Dinheiro no fim da sim (72 meses)"] == format_with_thousands_separator(
        output.time_series[-1]
    )


def test_kpi_rows_missing_values():
    output = SimulationOutput(time_series=[5.0] * 6, monthly_payments=[], ends_after=0)
    rows = dict(kpi_rows(output, Simulation(months_to_forecast=5)))
    assert rows["Dinheiro depois de 1 ano:"] == "NaN"
    assert rows["Dinheiro depois de 5 anos:"] == "NaN"
    assert rows["Parcelas Mensais"] == "Primeira: " + format_with_thousands_separator(0.0)
    assert rows[""] == "Última: " + format_with_thousands_separator(0.0)


def test_render_kpis_contains_every_row():
    output = _output()
    sim = Simulation(months_to_forecast=72)
    text = render_kpis(output, sim)
    lines = text.splitlines()
    rows = kpi_rows(output, sim)
    assert len(lines) == len(rows)
    for line, (label, value) in zip(lines, rows):
        assert line.startswith(label)
        assert line.endswith(value)


def test_plot_money_in_account():
    output = _output(24)
    ax = Figure().add_subplot()
    line = plot_output(output, PlotSelection.MONEY_IN_ACCOUNT, ax)
    assert list(line.get_ydata()) == output.time_series
    assert line.get_label() == "Dinheiro na Conta"
    assert to_hex(line.get_color()) == "#006400"


def test_plot_payments():
    output = _output(24)
    ax = Figure().add_subplot()
    line = plot_output(output, PlotSelection.PAYMENTS, ax)
    assert list(line.get_ydata()) == output.monthly_payments
    assert list(line.get_xdata()) == [0, 1, 2]
    assert line.get_label() == "Pagamentos"


def test_plot_axis_uses_money_format():
    ax = Figure().add_subplot()
    plot_output(_output(), PlotSelection.MONEY_IN_ACCOUNT, ax)
    formatter = ax.yaxis.get_major_formatter()
    assert formatter(1234.5, 0) == format_with_thousands_separator(1234.5)


def test_plot_unknown_selection():
    with pytest.raises(ValueError):
        plot_output(_output(), "money", Figure().add_subplot())


def test_plot_selection_default():
    assert PlotSelection.default() is PlotSelection.MONEY_IN_ACCOUNT
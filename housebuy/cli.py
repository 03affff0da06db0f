"""Command line front end for the house buying simulation."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable

from .calculation import AmortizationStrategy
from .model import Buyer, House, Simulation
from .report import PlotSelection, plot_output, render_kpis
from .scenario import run_scenario


def _bounded(kind: Callable[[str], float], low: float, high: float):
    def parse(text: str):
        try:
            value = kind(text)
        except ValueError:
            raise argparse.ArgumentTypeError(f"invalid number: {text!r}") from None
        if not low <= value <= high:
            raise argparse.ArgumentTypeError(f"{value} is outside {low}..{high}")
        return value

    return parse


def build_parser() -> argparse.ArgumentParser:
    """Argument parser with the simulation parameters and their limits."""
    buyer, house, sim = Buyer(), House(), Simulation()
    parser = argparse.ArgumentParser(
        prog="housebuy", description="Simulate money on account after buying a house."
    )

    group = parser.add_argument_group("buyer")
    group.add_argument("--starting-money", type=_bounded(float, 0.0, 2_000_000.0),
                       default=buyer.starting_money)
    group.add_argument("--liquid-salary", type=_bounded(float, 0.0, 100_000.0),
                       default=buyer.liquid_salary)
    group.add_argument("--fixed-monthly-expenses", type=_bounded(float, 0.0, 100_000.0),
                       default=buyer.fixed_monthly_expenses)
    group.add_argument("--yearly-bonus", type=_bounded(float, 0.0, 2_000_000.0),
                       default=buyer.yearly_bonus)
    group.add_argument("--investment-monthly-interest", type=_bounded(float, 0.0, 1.0),
                       default=buyer.investment_monthly_interest)

    group = parser.add_argument_group("financing")
    group.add_argument("--house-price", type=_bounded(float, 0.0, 2_000_000.0),
                       default=house.house_price)
    group.add_argument("--down-payment", type=_bounded(float, 0.0, 2_000_000.0),
                       default=house.down_payment)
    group.add_argument("--months-to-pay", type=_bounded(int, 1, 360),
                       default=house.months_to_pay)
    group.add_argument("--yearly-extra-amortization", type=_bounded(float, 0.0, 2_000_000.0),
                       default=house.yearly_extra_amortization,
                       help="only used with the SAC strategy")
    group.add_argument("--house-monthly-interest", type=_bounded(float, 0.0, 1.0),
                       default=house.house_monthly_interest)

    group = parser.add_argument_group("simulation")
    group.add_argument("--months-to-forecast", type=_bounded(int, 1, 720),
                       default=sim.months_to_forecast)
    group.add_argument("--inflation", type=_bounded(float, 0.0, 1.0), default=sim.inflation)
    group.add_argument("--strategy", choices=[s.value for s in AmortizationStrategy],
                       default=AmortizationStrategy.default().value)
    group.add_argument("--plot", choices=[p.value for p in PlotSelection],
                       default=PlotSelection.default().value)
    group.add_argument("--plot-file", default=None,
                       help="write the selected plot to this image file")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run a simulation, print its key figures and optionally save a plot."""
    args = build_parser().parse_args(argv)

    buyer = Buyer(
        starting_money=args.starting_money,
        liquid_salary=args.liquid_salary,
        fixed_monthly_expenses=args.fixed_monthly_expenses,
        investment_monthly_interest=args.investment_monthly_interest,
        yearly_bonus=args.yearly_bonus,
    )
    house = House(
        house_price=args.house_price,
        down_payment=args.down_payment,
        house_monthly_interest=args.house_monthly_interest,
        months_to_pay=args.months_to_pay,
        yearly_extra_amortization=args.yearly_extra_amortization,
    )
    simulation = Simulation(months_to_forecast=args.months_to_forecast, inflation=args.inflation)

    output = run_scenario(buyer, house, simulation, AmortizationStrategy(args.strategy))
    print(render_kpis(output, simulation))

    if args.plot_file:
        from matplotlib.figure import Figure

        figure = Figure(figsize=(10.24, 7.68))
        plot_output(output, PlotSelection(args.plot), figure.add_subplot())
        figure.savefig(args.plot_file)

    return 0


if __name__ == "__main__":
    sys.exit(main())
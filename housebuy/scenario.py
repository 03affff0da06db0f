"""Running a simulation from buyer, house and simulation parameters."""

from __future__ import annotations

from .calculation import (
    AmortizationStrategy,
    SimulationOutput,
    simulate_price,
    simulate_sac,
)
from .model import Buyer, House, Simulation


def run_scenario(
    buyer: Buyer,
    house: House,
    simulation: Simulation,
    strategy: AmortizationStrategy = AmortizationStrategy.SAC,
) -> SimulationOutput:
    """Simulate the buyer's account under the chosen amortization strategy."""
    if strategy is AmortizationStrategy.PRICE:
        return simulate_price(
            simulation.months_to_forecast,
            buyer.starting_money,
            house.down_payment,
            house.house_price,
            house.house_monthly_interest,
            house.months_to_pay,
            buyer.liquid_salary,
            buyer.fixed_monthly_expenses,
            buyer.investment_monthly_interest,
            buyer.yearly_bonus,
            simulation.inflation,
        )
    if strategy is AmortizationStrategy.SAC:
        return simulate_sac(
            simulation.months_to_forecast,
            buyer.starting_money,
            house.down_payment,
            house.house_price,
            house.house_monthly_interest,
            house.months_to_pay,
            buyer.liquid_salary,
            buyer.fixed_monthly_expenses,
            buyer.investment_monthly_interest,
            buyer.yearly_bonus,
            house.yearly_extra_amortization,
            simulation.inflation,
        )
    raise ValueError(f"unknown amortization strategy: {strategy!r}")
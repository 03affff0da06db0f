"""Parameters describing the buyer, the house loan and the simulation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Buyer:
    """The buyer's finances."""

    starting_money: float = 600_000.0
    liquid_salary: float = 20_000.0
    fixed_monthly_expenses: float = 7_000.0
    investment_monthly_interest: float = 0.01
    yearly_bonus: float = 0.0


@dataclass
class House:
    """The house and its financing terms."""

    house_price: float = 600_000.0
    down_payment: float = 150_000.0
    house_monthly_interest: float = 0.01
    months_to_pay: int = 120
    yearly_extra_amortization: float = 0.0


@dataclass
class Simulation:
    """How far and under which inflation to simulate."""

    months_to_forecast: int = 120
    inflation: float = 0.004
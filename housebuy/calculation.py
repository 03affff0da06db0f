"""Mortgage amortization and account balance simulations."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

ERR = 0.001
MAX_ITERS = 10_000
UPPER_BOUND = 5_000_000.0


class AmortizationStrategy(enum.Enum):
    """How a loan is paid back."""

    SAC = "sac"
    PRICE = "price"

    @classmethod
    def default(cls) -> "AmortizationStrategy":
        return cls.SAC


@dataclass
class SimulationOutput:
    """Result of a simulation run."""

    time_series: list[float] = field(default_factory=list)
    monthly_payments: list[float] = field(default_factory=list)
    ends_after: int = 0


def simulate_price(
    months_to_forecast: int,
    starting_money: float,
    down_payment: float,
    house_price: float,
    house_monthly_interest: float,
    n_months_to_pay: int,
    liquid_salary: float,
    fixed_monthly_expenses: float,
    investment_monthly_interest: float,
    yearly_bonus: float,
    inflation: float,
) -> SimulationOutput:
    """Monthly money on account after buying a house paid with fixed instalments."""
    money_left = starting_money - down_payment
    time_series = [money_left]

    monthly_payment = monthly_payment_price_table(
        house_price - down_payment, house_monthly_interest, n_months_to_pay
    )

    for month in range(months_to_forecast):
        is_end_of_year = month % 12 == 0 and month > 0

        # Subtractions come first to underestimate returns.
        if month < n_months_to_pay:
            money_left -= monthly_payment

        money_left -= fixed_monthly_expenses * (1.0 + inflation) ** month
        money_left *= 1.0 + investment_monthly_interest
        money_left += liquid_salary

        if is_end_of_year:
            money_left += yearly_bonus

        time_series.append(money_left)

    return SimulationOutput(
        time_series=time_series,
        monthly_payments=[monthly_payment] * max(n_months_to_pay, 0),
        ends_after=n_months_to_pay,
    )


def simulate_sac(
    months_to_forecast: int,
    starting_money: float,
    down_payment: float,
    house_price: float,
    house_monthly_interest: float,
    n_months_to_pay: int,
    liquid_salary: float,
    fixed_monthly_expenses: float,
    investment_monthly_interest: float,
    yearly_bonus: float,
    yearly_extra_amortization: float,
    inflation: float,
) -> SimulationOutput:
    """Monthly money on account after buying a house paid with constant amortization."""
    if n_months_to_pay < 1:
        raise ValueError("n_months_to_pay must be at least 1")

    money_left = starting_money - down_payment
    value_left = house_price - down_payment
    time_series = [money_left]

    monthly_amortization = value_left / n_months_to_pay
    monthly_payments: list[float] = []

    ends_after = n_months_to_pay if value_left > 0.0 else 0

    for month in range(max(months_to_forecast, n_months_to_pay)):
        is_end_of_year = (month + 1) % 12 == 0

        # Subtractions come first to underestimate returns.
        if value_left > 0.0:
            if month < n_months_to_pay:
                payment = value_left * house_monthly_interest + monthly_amortization
                money_left -= payment
                monthly_payments.append(payment)
                value_left -= monthly_amortization

            if is_end_of_year:
                if yearly_extra_amortization >= value_left:
                    money_left -= value_left
                    value_left = 0.0
                else:
                    money_left -= yearly_extra_amortization
                    value_left -= yearly_extra_amortization

            if value_left <= 0.0:
                ends_after = month + 1

        money_left -= fixed_monthly_expenses * (1.0 + inflation) ** month
        money_left *= 1.0 + investment_monthly_interest
        money_left += liquid_salary

        if is_end_of_year:
            money_left += yearly_bonus

        if month <= months_to_forecast:
            time_series.append(money_left)

    return SimulationOutput(
        time_series=time_series,
        monthly_payments=monthly_payments,
        ends_after=ends_after,
    )


def monthly_payment_price_table(
    value: float,
    monthly_interest: float,
    n_months: int,
    err: float = ERR,
    max_iters: int = MAX_ITERS,
    upper_bound: float = UPPER_BOUND,
) -> float:
    """Fixed monthly payment that pays off ``value`` in ``n_months`` (French system).

    Found by bisection between zero and ``upper_bound``.
    """
    low, high = 0.0, upper_bound
    guess = (low + high) / 2.0

    for _ in range(max_iters):
        current_error = remaining_balance(guess, value, monthly_interest, n_months)
        if abs(current_error) < err:
            return guess
        if current_error > 0.0:
            low = guess
        else:
            high = guess
        guess = (low + high) / 2.0

    return guess


def sac_table_payments(value: float, monthly_interest: float, n_months: int) -> list[float]:
    """Decreasing monthly payments under constant amortization (SAC)."""
    if n_months <= 0:
        return []
    amortization = value / n_months
    payments = []
    value_left = value
    for _ in range(n_months):
        payments.append(value_left * monthly_interest + amortization)
        value_left -= amortization
    return payments


def remaining_balance(
    monthly_payment: float, total: float, monthly_interest: float, n_months: int
) -> float:
    """Amount still owed after ``n_months`` of paying ``monthly_payment``.

    Interest is only charged while the balance is positive.
    """
    left = total
    for _ in range(n_months):
        if left > 0.0:
            left *= 1.0 + monthly_interest
        left -= monthly_payment
    return left
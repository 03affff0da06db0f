# housebuy

Simulate how much money stays in your account, month by month, after buying a
house on a loan. Two amortization schemes are supported:

- **SAC** (constant amortization): the same amount of principal is paid each
  month, so the installments shrink over time. An optional extra payment can be
  made toward the loan at the end of every year.
- **PRICE** (French system): every installment is the same size. It is found by
  bisection: the search looks for the payment that brings the balance to zero.

For every month, the simulation takes off the installment and your fixed
expenses, which grow with inflation. It then applies the investment return to
the remaining balance, adds your net salary, and adds a yearly bonus once a year.

## Installation

```
pip install .
```

## Command line

```
housebuy --help
```

`housebuy` runs one scenario and prints a short report of its key figures. The
report labels are in Portuguese. It shows:

- the money left after the down payment
- the first and last installments
- the month in which the installments end
- the balance after one year, after five years and at the end of the simulation

Values that the simulation did not reach are shown as `NaN`. Amounts are written
with thousands separators, for example `R$ 5,523.12`.

Options (defaults in brackets, allowed ranges after them):

- Buyer:
  - `--starting-money` [600000], 0–2,000,000
  - `--liquid-salary` [20000], 0–100,000
  - `--fixed-monthly-expenses` [7000], 0–100,000
  - `--yearly-bonus` [0], 0–2,000,000
  - `--investment-monthly-interest` [0.01], 0–1
- Financing:
  - `--house-price` [600000], 0–2,000,000
  - `--down-payment` [150000], 0–2,000,000
  - `--months-to-pay` [120], 1–360
  - `--yearly-extra-amortization` [0], 0–2,000,000. It is only used with SAC.
  - `--house-monthly-interest` [0.01], 0–1
- Simulation:
  - `--months-to-forecast` [120], 1–720
  - `--inflation` [0.004], 0–1
  - `--strategy` `sac` or `price` [sac]
  - `--plot` `money` or `payments` [money]
  - `--plot-file PATH` writes the plot that `--plot` selects to an image file
    using matplotlib.

A value outside its range is rejected with an error message.

Example:

```
housebuy --strategy price --months-to-pay 240 --plot payments --plot-file payments.png
```

## Library use

```python
from housebuy.model import Buyer, House, Simulation
from housebuy.calculation import AmortizationStrategy
from housebuy.scenario import run_scenario
from housebuy.report import render_kpis

buyer = Buyer()
house = House()
simulation = Simulation()

output = run_scenario(buyer, house, simulation, AmortizationStrategy.SAC)
print(render_kpis(output, simulation))
```

`Buyer`, `House` and `Simulation` are dataclasses with these defaults:

- Buyer: starting money 600,000, net salary 20,000, monthly expenses 7,000,
  investment return 1% per month, no yearly bonus.
- House: price 600,000, down payment 150,000, 1% interest per month, 120
  installments, no yearly extra amortization.
- Simulation: 120 months, 0.4% inflation per month.

The lower-level functions live in `housebuy.calculation`:

- `simulate_sac`: raises `ValueError` if the number of installments is below 1.
- `simulate_price`
- `monthly_payment_price_table`
- `sac_table_payments`
- `remaining_balance`

Each simulation function returns a `SimulationOutput` holding:

- `time_series`: the account balance, starting with the balance after the down payment
- `monthly_payments`: the installments
- `ends_after`: the month in which the installments end

`housebuy.report` offers the following:

- `kpi_rows`: the report as label and value pairs.
- `render_kpis`: the report as aligned text.
- `plot_output`: draws either series on a matplotlib axes. The series is chosen
  with `PlotSelection.MONEY_IN_ACCOUNT` or `PlotSelection.PAYMENTS`.

`housebuy.formatting.format_with_thousands_separator` formats a single amount.
`format_axis_tick` does the same for a matplotlib `FuncFormatter`.

## What it does not do

There is no interactive screen. You cannot adjust parameters with sliders and
watch the results change. Each run of `housebuy` computes one scenario from its
options. It prints the report and, if you ask for one, saves a plot image.

## Development

```
pip install -e ".[test]"
pytest
```
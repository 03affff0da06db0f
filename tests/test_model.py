import dataclasses

from housebuy.model import Buyer, House, Simulation


def test_buyer_defaults():
    buyer = Buyer()
    assert buyer.starting_money == 600_000.0
    assert buyer.liquid_salary == 20_000.0
    assert buyer.fixed_monthly_expenses == 7_000.0
    assert buyer.investment_monthly_interest == 0.01
    assert buyer.yearly_bonus == 0.0


def test_house_defaults():
    house = House()
    assert house.house_price == 600_000.0
    assert house.down_payment == 150_000.0
    assert house.house_monthly_interest == 0.01
    assert house.months_to_pay == 120
    assert house.yearly_extra_amortization == 0.0


def test_simulation_defaults():
    simulation = Simulation()
    assert simulation.months_to_forecast == 120
    assert simulation.inflation == 0.004


def test_instances_compare_by_value():
    assert Buyer() == Buyer()
    assert House(months_to_pay=60) != House()
    assert Simulation(inflation=0.0) == Simulation(inflation=0.0)


def test_replace_changes_only_given_field():
    house = House()
    cheaper = dataclasses.replace(house, house_price=300_000.0)
    assert cheaper.house_price == 300_000.0
    assert cheaper.down_payment == house.down_payment
    assert house.house_price == 600_000.0


def test_fields_are_mutable_per_instance():
    first = Buyer()
    second = Buyer()
    first.yearly_bonus = 5_000.0
    assert first.yearly_bonus == 5_000.0
    assert second.yearly_bonus == 0.0
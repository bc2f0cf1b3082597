"""Rent-vs-buy comparison - monthly net-worth projection of both paths"""

import math

from approu_calculators.domain.amortization import compute_monthly_payment, monthly_rate, remaining_balance
from approu_calculators.domain.exceptions import ValidationError
from approu_calculators.domain.models import BuyInputs, BuyingCostBreakdown, RentInputs, RentVsBuyProjection
from approu_calculators.utils.numbers import compound_growth, require_finite, require_non_negative


def _validate(buy: BuyInputs, rent: RentInputs, comparison_years: int, investment_return_percent: float) -> None:
    """
    Unlike the interactive calculators, a nonsensical projection is an error here.

    A zero mortgage rate is rejected too: the amortization engine prices it at a
    0 payment, which would leave the loan untouched for the whole horizon.
    """
    require_finite(
        home_price=buy.home_price,
        comparison_years=comparison_years,
        amortization_years=buy.amortization_years,
    )
    if buy.home_price <= 0:
        raise ValidationError(f"home_price must be positive, got {buy.home_price}")
    if comparison_years <= 0:
        raise ValidationError(f"comparison_years must be positive, got {comparison_years}")
    if buy.amortization_years <= 0:
        raise ValidationError(f"amortization_years must be positive, got {buy.amortization_years}")

    require_non_negative(
        down_payment=buy.down_payment,
        annual_rate_percent=buy.annual_rate_percent,
        annual_property_tax=buy.annual_property_tax,
        annual_home_insurance=buy.annual_home_insurance,
        annual_maintenance=buy.annual_maintenance,
        monthly_condo_fees=buy.monthly_condo_fees,
        home_appreciation_percent=buy.home_appreciation_percent,
        monthly_rent=rent.monthly_rent,
        annual_renters_insurance=rent.annual_renters_insurance,
        annual_rent_increase_percent=rent.annual_rent_increase_percent,
        investment_return_percent=investment_return_percent,
    )
    if buy.annual_rate_percent == 0:
        raise ValidationError("annual_rate_percent must be positive for a rent-vs-buy projection")
    if buy.down_payment > buy.home_price:
        raise ValidationError(
            f"down_payment ({buy.down_payment}) cannot exceed home_price ({buy.home_price})"
        )


def compare_rent_vs_buy(
    buy: BuyInputs,
    rent: RentInputs,
    comparison_years: int,
    investment_return_percent: float,
) -> RentVsBuyProjection:
    """
    Project net worth after ``comparison_years`` of buying vs renting.

    Buying: down payment plus a constant monthly carrying cost (mortgage, tax,
    insurance, maintenance, condo fees); equity is the appreciated home value
    less the mortgage still owed.

    Renting: rent (raised once a year) plus renters insurance; the down payment
    is invested instead, and when renting is cheaper than the carrying cost the
    monthly difference is invested as well. That difference is fixed from the
    initial rent and is not recomputed as rent escalates.

    Raises:
        ValidationError: non-positive price, horizon or amortization, negative
            amounts or rates, a down payment larger than the price, or growth
            rates that compound out of float range over the horizon
    """
    _validate(buy, rent, comparison_years, investment_return_percent)
    months = int(comparison_years * 12)

    # Buying
    principal = buy.home_price - buy.down_payment
    mortgage_payment = compute_monthly_payment(principal, buy.annual_rate_percent, buy.amortization_years)
    breakdown = BuyingCostBreakdown(
        mortgage=mortgage_payment,
        property_tax=buy.annual_property_tax / 12,
        insurance=buy.annual_home_insurance / 12,
        maintenance=buy.annual_maintenance / 12,
        condo_fees=buy.monthly_condo_fees,
    )
    monthly_cost_buying = breakdown.total
    total_paid_buying = buy.down_payment + monthly_cost_buying * months

    appreciation_rate = monthly_rate(buy.home_appreciation_percent)
    appreciation = compound_growth(appreciation_rate, months, "home_appreciation_percent")
    future_home_value = buy.home_price * appreciation
    remaining_mortgage = remaining_balance(principal, buy.annual_rate_percent, mortgage_payment, months)
    home_equity = future_home_value - remaining_mortgage

    # Renting
    renters_insurance = rent.annual_renters_insurance / 12
    rent_increase = rent.annual_rent_increase_percent / 100
    total_paid_renting = 0.0
    current_rent = rent.monthly_rent
    for month in range(months):
        total_paid_renting += current_rent + renters_insurance
        if month > 0 and month % 12 == 0:
            current_rent *= 1 + rent_increase

    return_rate = monthly_rate(investment_return_percent)
    investment_value = buy.down_payment * compound_growth(return_rate, months, "investment_return_percent")

    monthly_cost_renting = rent.monthly_rent + renters_insurance
    monthly_savings = monthly_cost_buying - monthly_cost_renting
    savings_invested = 0.0
    if monthly_savings > 0:
        for _ in range(months):
            savings_invested = (savings_invested + monthly_savings) * (1 + return_rate)

    total_investments = investment_value + savings_invested

    net_worth_buying = home_equity - total_paid_buying
    net_worth_renting = total_investments - total_paid_renting
    if not (math.isfinite(net_worth_buying) and math.isfinite(net_worth_renting)):
        raise ValidationError("Growth rates are too large to project over this horizon")

    return RentVsBuyProjection(
        comparison_years=comparison_years,
        months=months,
        monthly_cost_buying=monthly_cost_buying,
        monthly_cost_renting=monthly_cost_renting,
        total_paid_buying=total_paid_buying,
        future_home_value=future_home_value,
        remaining_mortgage_balance=remaining_mortgage,
        home_equity=home_equity,
        net_worth_buying=net_worth_buying,
        total_paid_renting=total_paid_renting,
        investment_value=investment_value,
        savings_invested=savings_invested,
        total_investments=total_investments,
        net_worth_renting=net_worth_renting,
        buying_is_better=net_worth_buying > net_worth_renting,
        difference_in_net_worth=abs(net_worth_buying - net_worth_renting),
        breakdown_buying=breakdown,
    )

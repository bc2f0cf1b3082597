"""Refinance savings - compare the current loan against a new rate"""

from approu_calculators.domain.amortization import compute_monthly_payment
from approu_calculators.domain.models import RefinanceAssessment
from approu_calculators.utils.numbers import floor_zero, require_finite, require_non_negative


def assess_refinance(
    current_balance: float,
    current_rate_percent: float,
    years_remaining: float,
    new_rate_percent: float,
    refinance_costs: float = 0.0,
) -> RefinanceAssessment:
    """
    Savings from refinancing the remaining balance over the same remaining term.

    Break-even is the number of months of payment savings needed to recover
    the refinancing costs (penalties, legal, appraisal); 0 when the new
    payment is not lower.

    Raises:
        ValidationError: non-finite input, negative balance or costs
    """
    require_non_negative(current_balance=current_balance, refinance_costs=refinance_costs)
    require_finite(
        current_rate_percent=current_rate_percent,
        years_remaining=years_remaining,
        new_rate_percent=new_rate_percent,
    )

    months_remaining = years_remaining * 12
    current_payment = compute_monthly_payment(current_balance, current_rate_percent, years_remaining)
    new_payment = compute_monthly_payment(current_balance, new_rate_percent, years_remaining)

    current_interest = floor_zero(current_payment * months_remaining - current_balance)
    new_interest = floor_zero(new_payment * months_remaining - current_balance)

    monthly_savings = current_payment - new_payment
    interest_savings = current_interest - new_interest
    net_savings = interest_savings - refinance_costs
    break_even_months = refinance_costs / monthly_savings if monthly_savings > 0 else 0.0

    return RefinanceAssessment(
        current_payment=current_payment,
        new_payment=new_payment,
        monthly_payment_savings=monthly_savings,
        total_interest_savings=interest_savings,
        refinance_costs=refinance_costs,
        net_savings=net_savings,
        break_even_months=break_even_months,
        break_even_years=break_even_months / 12,
        is_worth_it=net_savings > 0,
    )

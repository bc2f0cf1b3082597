"""Down payment rules and mortgage default insurance"""

from typing import List

from approu_calculators.domain.amortization import compute_monthly_payment
from approu_calculators.domain.exceptions import ValidationError
from approu_calculators.domain.models import DownPaymentAssessment, DownPaymentScenario
from approu_calculators.domain.rate_tables import CANADIAN_RULES, RateTables
from approu_calculators.utils.numbers import floor_zero, require_finite, require_non_negative

SCENARIO_PERCENTS = (
    (5.0, "Minimum (5%)"),
    (10.0, "10%"),
    (15.0, "15%"),
    (20.0, "20% (No insurance)"),
    (25.0, "25%"),
)


def _validate_price(home_price: float) -> None:
    require_finite(home_price=home_price)
    if home_price <= 0:
        raise ValidationError(f"home_price must be positive, got {home_price}")


def assess_down_payment(
    home_price: float,
    proposed_down_payment: float,
    tables: RateTables = CANADIAN_RULES,
) -> DownPaymentAssessment:
    """
    Check a down payment against the minimum rule and price its default insurance.

    Requirements:
    - Minimum down: 5% to $500k, 5% of $500k + 10% of the rest to $1M, 20% above $1M
    - Insurance required below 20% down, and only for homes under $1M
    - Premium is a tiered percent of the loan and is financed, not paid upfront

    A down payment below the lowest premium tier (under 5%) fails the minimum
    and carries a 0% premium rather than an extrapolated one; callers are
    expected to check ``meets_minimum`` first.

    Raises:
        ValidationError: non-positive price or negative down payment
    """
    _validate_price(home_price)
    require_non_negative(proposed_down_payment=proposed_down_payment)

    minimum = tables.minimum_down_payment(home_price)
    # Multiply first so round percentages stay exact (e.g. 10.0 rather than 10.000000000000002)
    percent = proposed_down_payment * 100 / home_price
    loan_principal = floor_zero(home_price - proposed_down_payment)

    requires_insurance = percent < tables.insurance_free_down_percent and tables.insurance_available(home_price)
    premium_rate = tables.premium_rate(percent) if requires_insurance else 0.0
    premium = loan_principal * premium_rate

    return DownPaymentAssessment(
        home_price=home_price,
        proposed_down_payment=proposed_down_payment,
        minimum_required_down_payment=minimum,
        meets_minimum=proposed_down_payment >= minimum,
        down_payment_percent=percent,
        requires_insurance=requires_insurance,
        insurance_premium_rate=premium_rate,
        loan_principal=loan_principal,
        insurance_premium_amount=premium,
        total_financed_amount=loan_principal + premium,
    )


def compare_down_payment_scenarios(
    home_price: float,
    annual_rate_percent: float,
    amortization_years: int = 25,
    tables: RateTables = CANADIAN_RULES,
) -> List[DownPaymentScenario]:
    """
    Financing cost at common down-payment levels (5/10/15/20/25%).

    Homes above the insured price cap only get the 20%+ scenarios, since
    anything lower is below their legal minimum.
    """
    _validate_price(home_price)

    scenarios = []
    for percent, label in SCENARIO_PERCENTS:
        if home_price > tables.insured_price_cap and percent < tables.insurance_free_down_percent:
            continue

        assessment = assess_down_payment(home_price, home_price * percent / 100, tables)
        scenarios.append(
            DownPaymentScenario(
                percent=percent,
                label=label,
                down_payment=assessment.proposed_down_payment,
                loan_amount=assessment.loan_principal,
                insurance_premium=assessment.insurance_premium_amount,
                total_mortgage=assessment.total_financed_amount,
                monthly_payment=compute_monthly_payment(
                    assessment.total_financed_amount, annual_rate_percent, amortization_years
                ),
            )
        )

    return scenarios

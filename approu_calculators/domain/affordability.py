"""Affordability calculation - maximum purchase price from income and debts"""

from approu_calculators.domain.amortization import monthly_rate
from approu_calculators.domain.models import AffordabilityAssessment
from approu_calculators.domain.rate_tables import CANADIAN_RULES, RateTables
from approu_calculators.utils.numbers import compound_growth, floor_zero, require_finite, require_non_negative


def principal_for_payment(monthly_payment: float, annual_rate_percent: float, amortization_years: float) -> float:
    """
    Inverse amortization: largest loan a monthly payment can retire.

        P = PMT · ((1+r)^n − 1) / (r · (1+r)^n)
    """
    r = monthly_rate(annual_rate_percent)
    n = amortization_years * 12
    if monthly_payment <= 0 or r <= 0 or n <= 0:
        return 0.0

    compound = compound_growth(r, n, "annual_rate_percent")
    return monthly_payment * (compound - 1) / (r * compound)


def assess_affordability(
    annual_income: float,
    monthly_debts: float,
    down_payment: float,
    annual_rate_percent: float,
    amortization_years: int,
    tables: RateTables = CANADIAN_RULES,
) -> AffordabilityAssessment:
    """
    Estimate the maximum home price under GDS/TDS debt-service ceilings.

    Flow:
    1. Housing payment capped at GDS (35%) of monthly income
    2. Housing + other debts capped at TDS (42%) of monthly income
    3. The lower cap wins, floored at 0
    4. Only 80% of it is treated as principal & interest (the rest is left for
       taxes, heat and condo fees)
    5. Invert the amortization formula for the loan, add the down payment

    Non-positive income, rate or amortization gives an all-zero assessment
    instead of raising, so a half-filled form never errors out.

    Raises:
        ValidationError: non-finite input, negative debts or down payment
    """
    require_finite(
        annual_income=annual_income,
        annual_rate_percent=annual_rate_percent,
        amortization_years=amortization_years,
    )
    require_non_negative(monthly_debts=monthly_debts, down_payment=down_payment)

    inputs = dict(
        annual_household_income=annual_income,
        monthly_debt_payments=monthly_debts,
        proposed_down_payment=down_payment,
        annual_rate_percent=annual_rate_percent,
        amortization_years=amortization_years,
    )
    if annual_income <= 0 or annual_rate_percent <= 0 or amortization_years <= 0:
        return AffordabilityAssessment(**inputs)

    monthly_income = annual_income / 12
    max_gds_payment = monthly_income * tables.gds_ratio
    max_tds_payment = monthly_income * tables.tds_ratio
    max_from_tds = max_tds_payment - monthly_debts
    max_allowed = floor_zero(min(max_gds_payment, max_from_tds))
    max_principal_interest = max_allowed * tables.principal_interest_share

    max_principal = principal_for_payment(max_principal_interest, annual_rate_percent, amortization_years)

    return AffordabilityAssessment(
        **inputs,
        monthly_income=monthly_income,
        max_gds_payment=max_gds_payment,
        max_tds_payment=max_tds_payment,
        max_mortgage_payment_from_tds=floor_zero(max_from_tds),
        max_allowed_payment=max_allowed,
        max_principal_interest=max_principal_interest,
        max_principal=max_principal,
        max_home_price=floor_zero(max_principal + down_payment),
    )

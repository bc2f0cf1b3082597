"""Amortization engine - periodic payments and outstanding balances"""

from typing import List

from approu_calculators.domain.exceptions import ValidationError
from approu_calculators.domain.models import LoanInputs, PaymentFrequency, PaymentSummary, YearlyAmortization
from approu_calculators.utils.numbers import compound_growth, floor_zero, require_finite


def monthly_rate(annual_rate_percent: float) -> float:
    """Nominal annual percent → monthly periodic rate"""
    return annual_rate_percent / 100 / 12


def _validate_loan(principal: float, annual_rate_percent: float, amortization_years: float) -> None:
    require_finite(
        principal=principal,
        annual_rate_percent=annual_rate_percent,
        amortization_years=amortization_years,
    )
    if principal < 0:
        raise ValidationError(f"principal cannot be negative, got {principal}")


def compute_monthly_payment(principal: float, annual_rate_percent: float, amortization_years: float) -> float:
    """
    Canonical monthly payment for a fully amortizing loan.

        M = P · r · (1+r)^n / ((1+r)^n − 1),  r = annual% / 100 / 12,  n = years × 12

    A zero (or negative) principal, rate or amortization yields 0, never NaN/Infinity.
    Zero rate is part of that rule: there is no simple-division fallback.

    Raises:
        ValidationError: non-finite input, negative principal, or a rate so large
            the payment overflows
    """
    _validate_loan(principal, annual_rate_percent, amortization_years)

    r = monthly_rate(annual_rate_percent)
    n = amortization_years * 12
    if r <= 0 or n <= 0 or principal <= 0:
        return 0.0

    compound = compound_growth(r, n, "annual_rate_percent")
    return principal * r * compound / (compound - 1)


def parse_frequency(frequency) -> PaymentFrequency:
    try:
        return PaymentFrequency(frequency)
    except ValueError:
        raise ValidationError(f"Unsupported payment frequency: {frequency!r}") from None


def convert_monthly_payment(monthly_payment: float, frequency: PaymentFrequency) -> float:
    """
    Re-express a monthly payment at another frequency.

    Standard frequencies spread the same annual total (M × 12) over their
    payments; accelerated ones take a fixed fraction of M, so a year of them
    pays more than twelve monthly payments.
    """
    if frequency == PaymentFrequency.MONTHLY:
        return monthly_payment
    if frequency == PaymentFrequency.WEEKLY:
        return monthly_payment * 12 / 52
    if frequency == PaymentFrequency.BIWEEKLY:
        return monthly_payment * 12 / 26
    if frequency == PaymentFrequency.BIMONTHLY:
        return monthly_payment * 2
    if frequency == PaymentFrequency.ACCELERATED_BIWEEKLY:
        return monthly_payment / 2
    if frequency == PaymentFrequency.ACCELERATED_WEEKLY:
        return monthly_payment / 4
    raise ValidationError(f"Unsupported payment frequency: {frequency!r}")


def compute_periodic_payment(
    principal: float,
    annual_rate_percent: float,
    amortization_years: float,
    frequency: PaymentFrequency = PaymentFrequency.MONTHLY,
) -> float:
    """Payment due each period at the given frequency"""
    monthly = compute_monthly_payment(principal, annual_rate_percent, amortization_years)
    return convert_monthly_payment(monthly, parse_frequency(frequency))


def remaining_balance(
    principal: float,
    annual_rate_percent: float,
    monthly_payment: float,
    periods_elapsed: int,
) -> float:
    """
    Outstanding balance after a number of monthly payments.

    Each period accrues interest on the balance, then the payment retires
    interest first and principal with the rest. The balance is floored at 0.
    """
    require_finite(
        principal=principal,
        annual_rate_percent=annual_rate_percent,
        monthly_payment=monthly_payment,
        periods_elapsed=periods_elapsed,
    )
    if principal < 0:
        raise ValidationError(f"principal cannot be negative, got {principal}")

    r = monthly_rate(annual_rate_percent)
    balance = principal
    for _ in range(max(int(periods_elapsed), 0)):
        if balance <= 0:
            break
        interest = balance * r
        balance -= monthly_payment - interest

    return floor_zero(balance)


def summarize_payment(loan: LoanInputs) -> PaymentSummary:
    """
    Payment at the loan's frequency with lifetime totals.

    Totals assume twelve monthly payments per year for the full amortization,
    whichever frequency is displayed.
    """
    monthly = compute_monthly_payment(loan.principal, loan.annual_rate_percent, loan.amortization_years)
    frequency = parse_frequency(loan.payment_frequency)
    total_paid = monthly * 12 * loan.amortization_years if monthly > 0 else 0.0

    return PaymentSummary(
        principal=loan.principal,
        monthly_payment=monthly,
        periodic_payment=convert_monthly_payment(monthly, frequency),
        payment_frequency=frequency,
        payments_per_year=frequency.payments_per_year,
        total_paid=total_paid,
        total_interest=floor_zero(total_paid - loan.principal),
    )


def amortization_schedule(
    principal: float,
    annual_rate_percent: float,
    amortization_years: int,
) -> List[YearlyAmortization]:
    """
    Month-by-month amortization aggregated by year.

    Returns an empty schedule when the loan has no payment (zero principal,
    rate or amortization).
    """
    payment = compute_monthly_payment(principal, annual_rate_percent, amortization_years)
    if payment <= 0:
        return []

    r = monthly_rate(annual_rate_percent)
    rows = []
    balance = principal
    interest_ytd = 0.0
    principal_ytd = 0.0

    for month in range(1, int(amortization_years) * 12 + 1):
        interest = balance * r
        principal_paid = min(payment - interest, balance)
        balance -= principal_paid
        interest_ytd += interest
        principal_ytd += principal_paid

        # Final payment can leave float dust behind
        if balance < 0.005:
            balance = 0.0

        if month % 12 == 0 or balance == 0:
            rows.append(
                YearlyAmortization(
                    year=(month - 1) // 12 + 1,
                    interest=interest_ytd,
                    principal=principal_ytd,
                    ending_balance=balance,
                )
            )
            interest_ytd = 0.0
            principal_ytd = 0.0

        if balance == 0:
            break

    return rows

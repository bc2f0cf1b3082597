"""Unit tests for the amortization engine"""

import math

import pytest
from approu_calculators.domain.amortization import (
    amortization_schedule,
    compute_monthly_payment,
    compute_periodic_payment,
    monthly_rate,
    remaining_balance,
    summarize_payment,
)
from approu_calculators.domain.exceptions import ValidationError
from approu_calculators.domain.models import LoanInputs, PaymentFrequency


def test_monthly_payment_known_value():
    """$100k at 6% over 30 years is the textbook $599.55"""
    assert compute_monthly_payment(100_000, 6, 30) == pytest.approx(599.55, abs=0.01)


def test_payment_strictly_increasing_in_rate():
    """Higher rate always costs more for the same loan"""
    payments = [compute_periodic_payment(400_000, rate / 2, 25) for rate in range(1, 21)]
    assert all(a < b for a, b in zip(payments, payments[1:]))


@pytest.mark.parametrize(
    "principal, rate, years",
    [
        (0, 5.5, 25),  # nothing financed
        (400_000, 0, 25),  # zero rate is the safe-zero case, not P / n
        (400_000, 5.5, 0),  # no amortization
        (400_000, -1, 25),
    ],
)
def test_degenerate_loans_pay_zero(principal, rate, years):
    """Zero-valued edge cases return 0 instead of NaN/Infinity or raising"""
    payment = compute_periodic_payment(principal, rate, years)
    assert payment == 0.0


@pytest.mark.parametrize("bad", [float("nan"), float("inf"), -float("inf")])
def test_non_finite_input_rejected(bad):
    with pytest.raises(ValidationError):
        compute_periodic_payment(bad, 5, 25)
    with pytest.raises(ValidationError):
        compute_periodic_payment(100_000, bad, 25)


def test_negative_principal_rejected():
    with pytest.raises(ValidationError):
        compute_periodic_payment(-1, 5, 25)


def test_frequency_conversion():
    """Standard frequencies keep the annual total; accelerated ones pay more"""
    monthly = compute_periodic_payment(400_000, 5.5, 25, PaymentFrequency.MONTHLY)
    weekly = compute_periodic_payment(400_000, 5.5, 25, PaymentFrequency.WEEKLY)
    biweekly = compute_periodic_payment(400_000, 5.5, 25, PaymentFrequency.BIWEEKLY)
    bimonthly = compute_periodic_payment(400_000, 5.5, 25, PaymentFrequency.BIMONTHLY)
    acc_weekly = compute_periodic_payment(400_000, 5.5, 25, PaymentFrequency.ACCELERATED_WEEKLY)
    acc_biweekly = compute_periodic_payment(400_000, 5.5, 25, PaymentFrequency.ACCELERATED_BIWEEKLY)

    assert biweekly * 26 == pytest.approx(monthly * 12)
    assert weekly * 52 == pytest.approx(monthly * 12)
    assert bimonthly == pytest.approx(monthly * 2)
    assert acc_biweekly == pytest.approx(monthly / 2)
    assert acc_weekly == pytest.approx(monthly / 4)

    assert acc_biweekly * 26 > monthly * 12
    assert acc_weekly * 52 > monthly * 12
    assert acc_biweekly > biweekly
    assert acc_weekly > weekly


def test_frequency_accepts_string_value():
    assert compute_periodic_payment(100_000, 6, 30, "acceleratedBiweekly") == pytest.approx(599.55 / 2, abs=0.01)


def test_unknown_frequency_rejected():
    with pytest.raises(ValidationError):
        compute_periodic_payment(100_000, 6, 30, "fortnightly")


def test_payments_per_year():
    assert PaymentFrequency.WEEKLY.payments_per_year == 52
    assert PaymentFrequency.ACCELERATED_BIWEEKLY.payments_per_year == 26
    assert PaymentFrequency.BIMONTHLY.payments_per_year == 6
    assert PaymentFrequency.ACCELERATED_WEEKLY.is_accelerated
    assert not PaymentFrequency.BIWEEKLY.is_accelerated


def test_remaining_balance_matches_closed_form():
    """Iterated interest-then-principal equals the closed-form balance"""
    principal, rate, months = 400_000, 5.0, 60
    payment = compute_monthly_payment(principal, rate, 25)
    r = monthly_rate(rate)
    growth = (1 + r) ** months
    expected = principal * growth - payment * (growth - 1) / r

    assert remaining_balance(principal, rate, payment, months) == pytest.approx(expected, rel=1e-9)


def test_remaining_balance_edges():
    payment = compute_monthly_payment(100_000, 6, 30)

    assert remaining_balance(100_000, 6, payment, 0) == 100_000
    assert remaining_balance(100_000, 6, payment, 360) == pytest.approx(0, abs=0.01)
    # Overpaying retires the loan and never goes negative
    assert remaining_balance(100_000, 6, 200_000, 5) == 0.0
    assert remaining_balance(100_000, 6, payment, 500) >= 0.0


def test_remaining_balance_rejects_negative_principal():
    with pytest.raises(ValidationError):
        remaining_balance(-5, 6, 100, 12)


def test_summarize_payment_totals():
    summary = summarize_payment(LoanInputs(100_000, 6, 30, PaymentFrequency.BIWEEKLY))

    assert summary.monthly_payment == pytest.approx(599.55, abs=0.01)
    assert summary.periodic_payment == pytest.approx(summary.monthly_payment * 12 / 26)
    assert summary.payments_per_year == 26
    assert summary.total_paid == pytest.approx(summary.monthly_payment * 360)
    assert summary.total_interest == pytest.approx(summary.total_paid - 100_000)


def test_summarize_zero_rate_loan():
    summary = summarize_payment(LoanInputs(100_000, 0, 30))
    assert summary.monthly_payment == 0.0
    assert summary.total_paid == 0.0
    assert summary.total_interest == 0.0


def test_amortization_schedule_by_year():
    schedule = amortization_schedule(100_000, 6, 30)

    assert len(schedule) == 30
    assert [row.year for row in schedule] == list(range(1, 31))
    assert schedule[-1].ending_balance == 0.0
    assert sum(row.principal for row in schedule) == pytest.approx(100_000, abs=0.01)
    # Early years are interest-heavy, late years principal-heavy
    assert schedule[0].interest > schedule[0].principal
    assert schedule[-1].principal > schedule[-1].interest
    assert all(a.ending_balance > b.ending_balance for a, b in zip(schedule, schedule[1:]))


def test_amortization_schedule_empty_without_payment():
    assert amortization_schedule(100_000, 0, 30) == []
    assert amortization_schedule(0, 5, 30) == []


def test_payment_is_idempotent():
    first = compute_periodic_payment(523_456.78, 4.79, 25, PaymentFrequency.ACCELERATED_WEEKLY)
    second = compute_periodic_payment(523_456.78, 4.79, 25, PaymentFrequency.ACCELERATED_WEEKLY)
    assert first == second
    assert math.isfinite(first)


def test_rate_too_large_to_compound_rejected():
    """A finite but absurd rate overflows (1+r)^n and is reported as invalid input"""
    with pytest.raises(ValidationError):
        compute_monthly_payment(100_000, 1e6, 30)
    with pytest.raises(ValidationError):
        compute_periodic_payment(100_000, 1e6, 30, PaymentFrequency.WEEKLY)

"""Unit tests for the affordability calculator"""

import pytest
from approu_calculators.domain.affordability import assess_affordability, principal_for_payment
from approu_calculators.domain.amortization import compute_monthly_payment
from approu_calculators.domain.exceptions import ValidationError
from approu_calculators.domain.rate_tables import RateTables


def test_gds_bound_case():
    """$120k income, small debts: the 35% GDS cap is the binding one"""
    result = assess_affordability(120_000, 500, 100_000, 5.0, 25)

    assert result.monthly_income == pytest.approx(10_000)
    assert result.max_gds_payment == pytest.approx(3_500)
    assert result.max_tds_payment == pytest.approx(4_200)
    assert result.max_mortgage_payment_from_tds == pytest.approx(3_700)
    assert result.max_allowed_payment == pytest.approx(3_500)
    assert result.max_principal_interest == pytest.approx(2_800)
    assert result.max_home_price == pytest.approx(result.max_principal + 100_000)


def test_tds_bound_case():
    """Heavy debts make the 42% TDS cap bind"""
    result = assess_affordability(120_000, 2_000, 50_000, 5.0, 25)

    assert result.max_allowed_payment == pytest.approx(2_200)
    assert result.max_principal_interest == pytest.approx(1_760)


def test_debts_exceeding_tds_floor_at_zero():
    result = assess_affordability(60_000, 5_000, 40_000, 5.0, 25)

    assert result.max_mortgage_payment_from_tds == 0
    assert result.max_allowed_payment == 0
    assert result.max_principal == 0
    assert result.max_home_price == 40_000


@pytest.mark.parametrize(
    "income, rate, years",
    [
        (0, 5.0, 25),
        (-50_000, 5.0, 25),
        (120_000, 0, 25),
        (120_000, 5.0, 0),
    ],
)
def test_incomplete_form_gives_all_zeros(income, rate, years):
    result = assess_affordability(income, 500, 100_000, rate, years)

    assert result.max_home_price == 0
    assert result.max_principal == 0
    assert result.max_allowed_payment == 0
    assert result.max_gds_payment == 0


def test_round_trip_payment_within_allowance():
    """The returned price, financed at the same terms, costs at most 80% of the allowance"""
    down = 80_000
    result = assess_affordability(150_000, 750, down, 4.79, 25)

    payment = compute_monthly_payment(result.max_home_price - down, 4.79, 25)
    assert payment == pytest.approx(result.max_allowed_payment * 0.8, rel=1e-9)
    assert payment <= result.max_allowed_payment * 0.8 + 1e-6


def test_principal_for_payment_inverts_amortization():
    principal = principal_for_payment(599.55, 6, 30)
    assert principal == pytest.approx(100_000, abs=1)
    assert principal_for_payment(0, 6, 30) == 0
    assert principal_for_payment(500, 0, 30) == 0


def test_configured_ratios():
    tables = RateTables(gds_ratio=0.39, tds_ratio=0.44)
    result = assess_affordability(120_000, 0, 0, 5.0, 25, tables)

    assert result.max_allowed_payment == pytest.approx(3_900)


def test_invalid_inputs_rejected():
    with pytest.raises(ValidationError):
        assess_affordability(120_000, -1, 0, 5.0, 25)
    with pytest.raises(ValidationError):
        assess_affordability(120_000, 0, -1, 5.0, 25)
    with pytest.raises(ValidationError):
        assess_affordability(float("nan"), 0, 0, 5.0, 25)


def test_affordability_is_idempotent():
    args = (98_765, 432.1, 55_555, 5.25, 30)
    assert assess_affordability(*args) == assess_affordability(*args)


def test_rate_too_large_to_compound_rejected():
    with pytest.raises(ValidationError):
        assess_affordability(120_000, 500, 100_000, 1e6, 30)

"""Unit tests for provincial land transfer tax"""

import pytest
from approu_calculators.domain.exceptions import ValidationError
from approu_calculators.domain.land_transfer import calculate_land_transfer_tax, marginal_tax
from approu_calculators.domain.models import Province
from approu_calculators.domain.rate_tables import ONTARIO_BRACKETS


@pytest.mark.parametrize(
    "province, price, expected",
    [
        ("ON", 500_000, 6_475),
        ("ON", 2_500_000, 48_975),
        ("BC", 500_000, 8_000),
        ("BC", 3_500_000, 93_000),
        ("QC", 300_000, 2_723),
        ("MB", 300_000, 6_000),
        ("NB", 300_000, 3_000),
        ("NS", 300_000, 4_750),
        ("AB", 750_000, 0),
        ("SK", 750_000, 0),
    ],
)
def test_provincial_tax(province, price, expected):
    result = calculate_land_transfer_tax(price, province)

    assert result.provincial_tax == pytest.approx(expected)
    assert result.municipal_tax == 0
    assert result.net_tax == pytest.approx(expected)


def test_toronto_doubles_ontario_tax():
    result = calculate_land_transfer_tax(500_000, Province.ONTARIO, toronto=True)

    assert result.municipal_tax == pytest.approx(6_475)
    assert result.total_tax == pytest.approx(12_950)


def test_toronto_flag_ignored_outside_ontario():
    result = calculate_land_transfer_tax(500_000, "BC", toronto=True)
    assert result.municipal_tax == 0


def test_ontario_first_time_buyer_rebate():
    result = calculate_land_transfer_tax(500_000, "ON", first_time_buyer=True)

    assert result.first_time_buyer_rebate == 4_000
    assert result.net_tax == pytest.approx(2_475)


def test_toronto_first_time_buyer_rebates_stack():
    result = calculate_land_transfer_tax(400_000, "ON", first_time_buyer=True, toronto=True)

    assert result.first_time_buyer_rebate == pytest.approx(8_475)
    assert result.net_tax == pytest.approx(475)


def test_british_columbia_rebate_phases_out():
    full = calculate_land_transfer_tax(800_000, "BC", first_time_buyer=True)
    partial = calculate_land_transfer_tax(847_500, "BC", first_time_buyer=True)
    none = calculate_land_transfer_tax(900_000, "BC", first_time_buyer=True)

    assert full.net_tax == pytest.approx(0)
    assert partial.first_time_buyer_rebate == pytest.approx(7_475)
    assert none.first_time_buyer_rebate == 0


def test_small_province_rebates():
    pei = calculate_land_transfer_tax(150_000, "PE", first_time_buyer=True)
    nova_scotia = calculate_land_transfer_tax(300_000, "NS", first_time_buyer=True)

    assert pei.net_tax == pytest.approx(0)
    assert nova_scotia.net_tax == pytest.approx(3_250)


@pytest.mark.parametrize("price, fee", [(400, 100), (3_000, 200), (10_500, 800)])
def test_newfoundland_registration_fee(price, fee):
    assert calculate_land_transfer_tax(price, "NL").provincial_tax == fee


def test_marginal_tax_is_monotonic():
    taxes = [marginal_tax(price, ONTARIO_BRACKETS) for price in range(0, 3_000_001, 50_000)]
    assert all(a <= b for a, b in zip(taxes, taxes[1:]))


def test_unknown_province_rejected():
    with pytest.raises(ValidationError):
        calculate_land_transfer_tax(500_000, "YT")


def test_negative_price_rejected():
    with pytest.raises(ValidationError):
        calculate_land_transfer_tax(-1, "ON")

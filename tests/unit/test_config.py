"""Unit tests for settings and the lending-rule tables they produce"""

from approu_calculators.config import Settings
from approu_calculators.domain.rate_tables import CANADIAN_RULES


def test_defaults_match_canadian_rules():
    assert Settings().rate_tables() == CANADIAN_RULES


def test_ratio_override_from_environment(monkeypatch):
    monkeypatch.setenv("GDS_RATIO", "0.39")
    monkeypatch.setenv("INSURED_PRICE_CAP", "1500000")

    tables = Settings().rate_tables()

    assert tables.gds_ratio == 0.39
    assert tables.insured_price_cap == 1_500_000
    assert tables.tds_ratio == CANADIAN_RULES.tds_ratio


def test_premium_tiers_sorted_highest_first(monkeypatch):
    monkeypatch.setenv("INSURANCE_PREMIUM_TIERS", "[[5, 0.04], [15, 0.028], [10, 0.031]]")

    tables = Settings().rate_tables()

    assert tables.insurance_premium_tiers == ((15.0, 0.028), (10.0, 0.031), (5.0, 0.04))
    assert tables.premium_rate(12) == 0.031

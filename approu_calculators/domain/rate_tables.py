"""Canadian mortgage-lending rule tables consumed by the calculators"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class RateTables:
    """
    Lending-rule constants. No logic beyond tier lookups.

    Defaults are the Canadian rules:
    - GDS ceiling 35%, TDS ceiling 42% of gross monthly income
    - Minimum down: 5% up to $500k, 10% on the portion to $1M, 20% above $1M
    - Mortgage default insurance only below 20% down and below the $1M price cap
    - Premium tiers keyed on down-payment percent: 15%+ → 2.8%, 10%+ → 3.1%, 5%+ → 4.0%
    """

    gds_ratio: float = 0.35
    tds_ratio: float = 0.42
    # Share of the allowed housing payment assumed to go to principal & interest;
    # the remainder covers taxes, heat and condo fees.
    principal_interest_share: float = 0.80

    insured_price_cap: float = 1_000_000
    min_down_first_tier_limit: float = 500_000
    min_down_first_tier_rate: float = 0.05
    min_down_second_tier_rate: float = 0.10
    min_down_over_cap_rate: float = 0.20

    insurance_free_down_percent: float = 20.0
    # (minimum down-payment percent, premium rate), highest threshold first
    insurance_premium_tiers: Tuple[Tuple[float, float], ...] = (
        (15.0, 0.028),
        (10.0, 0.031),
        (5.0, 0.040),
    )

    def minimum_down_payment(self, home_price: float) -> float:
        """Tiered minimum legal down payment for a purchase price"""
        if home_price <= self.min_down_first_tier_limit:
            minimum = home_price * self.min_down_first_tier_rate
        elif home_price <= self.insured_price_cap:
            minimum = (
                self.min_down_first_tier_limit * self.min_down_first_tier_rate
                + (home_price - self.min_down_first_tier_limit) * self.min_down_second_tier_rate
            )
        else:
            minimum = home_price * self.min_down_over_cap_rate
        return round(minimum, 2)

    def insurance_available(self, home_price: float) -> bool:
        return home_price < self.insured_price_cap

    def premium_rate(self, down_payment_percent: float) -> float:
        """
        Insurance premium rate for a down-payment percent.

        Returns 0.0 at or above the insurance-free threshold, and also below the
        lowest tier (a sub-minimum down payment has no defined premium).
        """
        if down_payment_percent >= self.insurance_free_down_percent:
            return 0.0
        for threshold, rate in self.insurance_premium_tiers:
            if down_payment_percent >= threshold:
                return rate
        return 0.0


CANADIAN_RULES = RateTables()


# Land transfer tax brackets: (upper bound of bracket or None for open-ended, marginal rate)
ONTARIO_BRACKETS = (
    (55_000, 0.005),
    (250_000, 0.01),
    (400_000, 0.015),
    (2_000_000, 0.02),
    (None, 0.025),
)

BRITISH_COLUMBIA_BRACKETS = (
    (200_000, 0.01),
    (2_000_000, 0.02),
    (3_000_000, 0.03),
    (None, 0.05),
)

QUEBEC_BRACKETS = (
    (59_200, 0.005),
    (296_200, 0.01),
    (None, 0.015),
)

NOVA_SCOTIA_BRACKETS = (
    (250_000, 0.015),
    (None, 0.02),
)

MANITOBA_BRACKETS = ((None, 0.02),)
NEW_BRUNSWICK_BRACKETS = ((None, 0.01),)
PRINCE_EDWARD_ISLAND_BRACKETS = ((None, 0.01),)

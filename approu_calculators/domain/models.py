"""Domain models - immutable dataclasses for calculator inputs and results"""

from dataclasses import dataclass
from enum import Enum


class PaymentFrequency(str, Enum):
    """How often mortgage payments are made"""

    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"
    BIMONTHLY = "bimonthly"
    ACCELERATED_WEEKLY = "acceleratedWeekly"
    ACCELERATED_BIWEEKLY = "acceleratedBiweekly"

    @property
    def payments_per_year(self) -> int:
        return _PAYMENTS_PER_YEAR[self]

    @property
    def is_accelerated(self) -> bool:
        return self in (PaymentFrequency.ACCELERATED_WEEKLY, PaymentFrequency.ACCELERATED_BIWEEKLY)


_PAYMENTS_PER_YEAR = {
    PaymentFrequency.WEEKLY: 52,
    PaymentFrequency.BIWEEKLY: 26,
    PaymentFrequency.MONTHLY: 12,
    PaymentFrequency.BIMONTHLY: 6,
    PaymentFrequency.ACCELERATED_WEEKLY: 52,
    PaymentFrequency.ACCELERATED_BIWEEKLY: 26,
}


class Province(str, Enum):
    """Canadian provinces with a land transfer tax rule"""

    ONTARIO = "ON"
    BRITISH_COLUMBIA = "BC"
    QUEBEC = "QC"
    ALBERTA = "AB"
    MANITOBA = "MB"
    SASKATCHEWAN = "SK"
    NOVA_SCOTIA = "NS"
    NEW_BRUNSWICK = "NB"
    PRINCE_EDWARD_ISLAND = "PE"
    NEWFOUNDLAND_AND_LABRADOR = "NL"


@dataclass(frozen=True)
class LoanInputs:
    """Amount financed and repayment terms"""

    principal: float
    annual_rate_percent: float
    amortization_years: int
    payment_frequency: PaymentFrequency = PaymentFrequency.MONTHLY


@dataclass(frozen=True)
class PaymentSummary:
    """Payment for a loan at the requested frequency plus lifetime totals"""

    principal: float
    monthly_payment: float
    periodic_payment: float
    payment_frequency: PaymentFrequency
    payments_per_year: int
    total_paid: float
    total_interest: float


@dataclass(frozen=True)
class YearlyAmortization:
    """One year of an amortization schedule"""

    year: int
    interest: float
    principal: float
    ending_balance: float


@dataclass(frozen=True)
class DownPaymentAssessment:
    """Down payment checked against the minimum rule, with default-insurance cost"""

    home_price: float
    proposed_down_payment: float
    minimum_required_down_payment: float
    meets_minimum: bool
    down_payment_percent: float
    requires_insurance: bool
    insurance_premium_rate: float
    loan_principal: float
    insurance_premium_amount: float
    total_financed_amount: float


@dataclass(frozen=True)
class DownPaymentScenario:
    """Cost of financing a home at one down-payment percent"""

    percent: float
    label: str
    down_payment: float
    loan_amount: float
    insurance_premium: float
    total_mortgage: float
    monthly_payment: float


@dataclass(frozen=True)
class AffordabilityAssessment:
    """Maximum purchase price supported by income under GDS/TDS ceilings"""

    annual_household_income: float
    monthly_debt_payments: float
    proposed_down_payment: float
    annual_rate_percent: float
    amortization_years: int
    monthly_income: float = 0.0
    max_gds_payment: float = 0.0
    max_tds_payment: float = 0.0
    max_mortgage_payment_from_tds: float = 0.0
    max_allowed_payment: float = 0.0
    max_principal_interest: float = 0.0
    max_principal: float = 0.0
    max_home_price: float = 0.0


@dataclass(frozen=True)
class BuyInputs:
    """Buy-side assumptions for a rent-vs-buy comparison"""

    home_price: float
    down_payment: float
    annual_rate_percent: float
    amortization_years: int = 25
    annual_property_tax: float = 0.0
    annual_home_insurance: float = 0.0
    annual_maintenance: float = 0.0
    monthly_condo_fees: float = 0.0
    home_appreciation_percent: float = 0.0


@dataclass(frozen=True)
class RentInputs:
    """Rent-side assumptions for a rent-vs-buy comparison"""

    monthly_rent: float
    annual_renters_insurance: float = 0.0
    annual_rent_increase_percent: float = 0.0


@dataclass(frozen=True)
class BuyingCostBreakdown:
    """Monthly carrying cost of owning, by component"""

    mortgage: float
    property_tax: float
    insurance: float
    maintenance: float
    condo_fees: float

    @property
    def total(self) -> float:
        return self.mortgage + self.property_tax + self.insurance + self.maintenance + self.condo_fees


@dataclass(frozen=True)
class RentVsBuyProjection:
    """Net worth after the comparison horizon under buying vs renting"""

    comparison_years: int
    months: int
    monthly_cost_buying: float
    monthly_cost_renting: float
    total_paid_buying: float
    future_home_value: float
    remaining_mortgage_balance: float
    home_equity: float
    net_worth_buying: float
    total_paid_renting: float
    investment_value: float
    savings_invested: float
    total_investments: float
    net_worth_renting: float
    buying_is_better: bool
    difference_in_net_worth: float
    breakdown_buying: BuyingCostBreakdown


@dataclass(frozen=True)
class RefinanceAssessment:
    """Savings from refinancing the remaining balance at a new rate"""

    current_payment: float
    new_payment: float
    monthly_payment_savings: float
    total_interest_savings: float
    refinance_costs: float
    net_savings: float
    break_even_months: float
    break_even_years: float
    is_worth_it: bool


@dataclass(frozen=True)
class LandTransferTax:
    """Land transfer tax owed on a purchase, net of first-time buyer rebates"""

    province: Province
    purchase_price: float
    provincial_tax: float
    municipal_tax: float
    total_tax: float
    first_time_buyer_rebate: float
    net_tax: float


"""Pydantic schemas for API request/response validation"""

import uuid
from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from approu_calculators.domain.models import PaymentFrequency, Province


class ResultModel(BaseModel):
    """Response built straight from a domain result dataclass"""

    model_config = ConfigDict(from_attributes=True)


# Payment


class PaymentRequest(BaseModel):
    """Request body for POST /v1/calculators/payment"""

    principal: float = Field(..., ge=0, description="Amount financed")
    annual_rate_percent: float = Field(..., ge=0, le=30, description="Nominal annual rate, e.g. 5.5")
    amortization_years: int = Field(25, ge=0, le=40)
    payment_frequency: PaymentFrequency = PaymentFrequency.MONTHLY
    include_schedule: bool = Field(False, description="Add the year-by-year amortization schedule")


class YearlyAmortizationSchema(ResultModel):
    year: int
    interest: float
    principal: float
    ending_balance: float


class PaymentResponse(ResultModel):
    """Response for POST /v1/calculators/payment"""

    principal: float
    monthly_payment: float
    periodic_payment: float
    payment_frequency: PaymentFrequency
    payments_per_year: int
    total_paid: float
    total_interest: float
    schedule: List[YearlyAmortizationSchema] = []


# Down payment


class DownPaymentRequest(BaseModel):
    """Request body for POST /v1/calculators/down-payment"""

    home_price: float = Field(..., gt=0)
    down_payment: float = Field(..., ge=0)
    annual_rate_percent: Optional[float] = Field(
        None, ge=0, le=30, description="When set, the response also compares 5-25% down scenarios"
    )
    amortization_years: int = Field(25, ge=1, le=40)


class DownPaymentScenarioSchema(ResultModel):
    percent: float
    label: str
    down_payment: float
    loan_amount: float
    insurance_premium: float
    total_mortgage: float
    monthly_payment: float


class DownPaymentResponse(ResultModel):
    """Response for POST /v1/calculators/down-payment"""

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
    scenarios: List[DownPaymentScenarioSchema] = []


# Affordability


class AffordabilityRequest(BaseModel):
    """Request body for POST /v1/calculators/affordability"""

    annual_income: float = Field(..., ge=0)
    monthly_debts: float = Field(0, ge=0)
    down_payment: float = Field(0, ge=0)
    annual_rate_percent: float = Field(..., ge=0, le=30)
    amortization_years: int = Field(25, ge=0, le=40)


class AffordabilityResponse(ResultModel):
    """Response for POST /v1/calculators/affordability"""

    annual_household_income: float
    monthly_debt_payments: float
    proposed_down_payment: float
    monthly_income: float
    max_gds_payment: float
    max_tds_payment: float
    max_mortgage_payment_from_tds: float
    max_allowed_payment: float
    max_principal_interest: float
    max_principal: float
    max_home_price: float


# Rent vs buy


class RentVsBuyRequest(BaseModel):
    """Request body for POST /v1/calculators/rent-vs-buy"""

    home_price: float = Field(..., gt=0)
    down_payment: float = Field(..., ge=0)
    annual_rate_percent: float = Field(..., gt=0, le=30)
    amortization_years: int = Field(25, gt=0, le=40)
    annual_property_tax: float = Field(0, ge=0)
    annual_home_insurance: float = Field(0, ge=0)
    annual_maintenance: float = Field(0, ge=0)
    monthly_condo_fees: float = Field(0, ge=0)
    home_appreciation_percent: float = Field(3, ge=0, le=30)
    monthly_rent: float = Field(..., ge=0)
    annual_renters_insurance: float = Field(0, ge=0)
    annual_rent_increase_percent: float = Field(3, ge=0, le=30)
    comparison_years: int = Field(5, gt=0, le=40, description="Projection horizon")
    investment_return_percent: float = Field(6, ge=0, le=30)


class BuyingCostBreakdownSchema(ResultModel):
    mortgage: float
    property_tax: float
    insurance: float
    maintenance: float
    condo_fees: float


class RentVsBuyResponse(ResultModel):
    """Response for POST /v1/calculators/rent-vs-buy"""

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
    breakdown_buying: BuyingCostBreakdownSchema


# Refinance


class RefinanceRequest(BaseModel):
    """Request body for POST /v1/calculators/refinance"""

    current_balance: float = Field(..., ge=0)
    current_rate_percent: float = Field(..., ge=0, le=30)
    years_remaining: float = Field(..., ge=0, le=40)
    new_rate_percent: float = Field(..., ge=0, le=30)
    refinance_costs: float = Field(0, ge=0, description="Penalties, legal fees and appraisal")


class RefinanceResponse(ResultModel):
    """Response for POST /v1/calculators/refinance"""

    current_payment: float
    new_payment: float
    monthly_payment_savings: float
    total_interest_savings: float
    refinance_costs: float
    net_savings: float
    break_even_months: float
    break_even_years: float
    is_worth_it: bool


# Land transfer tax


class LandTransferTaxRequest(BaseModel):
    """Request body for POST /v1/calculators/land-transfer-tax"""

    purchase_price: float = Field(..., ge=0)
    province: Province = Province.ONTARIO
    first_time_buyer: bool = False
    toronto: bool = Field(False, description="Property is in the City of Toronto (Ontario only)")


class LandTransferTaxResponse(ResultModel):
    """Response for POST /v1/calculators/land-transfer-tax"""

    province: Province
    purchase_price: float
    provincial_tax: float
    municipal_tax: float
    total_tax: float
    first_time_buyer_rebate: float
    net_tax: float


# Posted rates


class RateCreate(BaseModel):
    """Request body for POST /v1/rates"""

    lender_name: Optional[str] = None
    rate_type: str = Field(..., min_length=1, description="e.g. fixed, variable")
    term_months: int = Field(..., gt=0, le=120)
    rate: float = Field(..., ge=0, le=30)
    apr: float = Field(..., ge=0, le=30)
    effective_date: Optional[date] = None
    is_active: bool = True


class RateUpdate(BaseModel):
    """Request body for PUT /v1/rates/{rate_id}; only supplied fields change"""

    lender_name: Optional[str] = None
    rate_type: Optional[str] = Field(None, min_length=1)
    term_months: Optional[int] = Field(None, gt=0, le=120)
    rate: Optional[float] = Field(None, ge=0, le=30)
    apr: Optional[float] = Field(None, ge=0, le=30)
    effective_date: Optional[date] = None
    is_active: Optional[bool] = None

    @field_validator("rate_type", "term_months", "rate", "apr", "effective_date", "is_active")
    @classmethod
    def reject_null(cls, v):
        # Only lender_name may be cleared; the other columns are NOT NULL
        if v is None:
            raise ValueError("cannot be null")
        return v


class RateResponse(ResultModel):
    """Single posted rate"""

    id: uuid.UUID
    lender_name: Optional[str]
    rate_type: str
    term_months: int
    rate: float
    apr: float
    effective_date: date
    is_active: bool
    created_at: datetime
    updated_at: datetime


class RateListResponse(BaseModel):
    """Response for GET /v1/rates"""

    data: List[RateResponse]

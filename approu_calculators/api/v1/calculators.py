"""POST /v1/calculators/* - mortgage calculator endpoints"""

import logging
import time
from dataclasses import asdict
from typing import Any, Callable

from fastapi import APIRouter, Depends, HTTPException, Request

from approu_calculators.api.dependencies import get_rate_tables, get_request_id
from approu_calculators.api.v1.schemas import (
    AffordabilityRequest,
    AffordabilityResponse,
    DownPaymentRequest,
    DownPaymentResponse,
    LandTransferTaxRequest,
    LandTransferTaxResponse,
    PaymentRequest,
    PaymentResponse,
    RefinanceRequest,
    RefinanceResponse,
    RentVsBuyRequest,
    RentVsBuyResponse,
)
from approu_calculators.domain.affordability import assess_affordability
from approu_calculators.domain.amortization import amortization_schedule, summarize_payment
from approu_calculators.domain.down_payment import assess_down_payment, compare_down_payment_scenarios
from approu_calculators.domain.exceptions import ValidationError
from approu_calculators.domain.land_transfer import calculate_land_transfer_tax
from approu_calculators.domain.models import BuyInputs, LoanInputs, RentInputs
from approu_calculators.domain.rate_tables import RateTables
from approu_calculators.domain.refinance import assess_refinance
from approu_calculators.domain.rent_vs_buy import compare_rent_vs_buy
from approu_calculators.infrastructure.observability.logging import log_calculation
from approu_calculators.infrastructure.observability.metrics import (
    affordability_price_histogram,
    record_calculation,
)

router = APIRouter(prefix="/calculators")


def _calculate(calculator: str, request: Request, compute: Callable[[], Any]) -> Any:
    """
    Run one calculation with uniform metrics, logging and error mapping.

    ValidationError → 422 with the domain message; anything else → 500.
    """
    start_time = time.perf_counter()
    request_id = get_request_id(request)

    try:
        result = compute()
    except ValidationError as e:
        record_calculation(calculator, "invalid")
        logging.warning(f"Invalid {calculator} input: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        record_calculation(calculator, "error")
        logging.error(f"Unexpected {calculator} error: {e}", extra={"request_id": request_id}, exc_info=True)
        raise HTTPException(status_code=500, detail="Internal server error")

    record_calculation(calculator, "ok")
    log_calculation(request_id, calculator, "ok", (time.perf_counter() - start_time) * 1000)
    return result


@router.post("/payment", response_model=PaymentResponse)
def calculate_payment(body: PaymentRequest, request: Request):
    """Mortgage payment at the chosen frequency, optionally with the yearly schedule"""

    def compute() -> PaymentResponse:
        loan = LoanInputs(
            principal=body.principal,
            annual_rate_percent=body.annual_rate_percent,
            amortization_years=body.amortization_years,
            payment_frequency=body.payment_frequency,
        )
        summary = summarize_payment(loan)
        schedule = []
        if body.include_schedule:
            schedule = [
                asdict(row)
                for row in amortization_schedule(loan.principal, loan.annual_rate_percent, loan.amortization_years)
            ]
        return PaymentResponse(**asdict(summary), schedule=schedule)

    return _calculate("payment", request, compute)


@router.post("/down-payment", response_model=DownPaymentResponse)
def calculate_down_payment(
    body: DownPaymentRequest,
    request: Request,
    tables: RateTables = Depends(get_rate_tables),
):
    """
    Minimum down payment check and mortgage default insurance.

    Supplying a rate adds the 5/10/15/20/25% scenario comparison.
    """

    def compute() -> DownPaymentResponse:
        assessment = assess_down_payment(body.home_price, body.down_payment, tables)
        scenarios = []
        if body.annual_rate_percent is not None:
            scenarios = [
                asdict(s)
                for s in compare_down_payment_scenarios(
                    body.home_price, body.annual_rate_percent, body.amortization_years, tables
                )
            ]
        return DownPaymentResponse(**asdict(assessment), scenarios=scenarios)

    return _calculate("down_payment", request, compute)


@router.post("/affordability", response_model=AffordabilityResponse)
def calculate_affordability(
    body: AffordabilityRequest,
    request: Request,
    tables: RateTables = Depends(get_rate_tables),
):
    """Maximum home price under GDS/TDS ceilings"""

    def compute() -> AffordabilityResponse:
        assessment = assess_affordability(
            body.annual_income,
            body.monthly_debts,
            body.down_payment,
            body.annual_rate_percent,
            body.amortization_years,
            tables,
        )
        affordability_price_histogram.observe(assessment.max_home_price)
        return AffordabilityResponse.model_validate(assessment)

    return _calculate("affordability", request, compute)


@router.post("/rent-vs-buy", response_model=RentVsBuyResponse)
def calculate_rent_vs_buy(body: RentVsBuyRequest, request: Request):
    """Net worth after the horizon when buying vs renting and investing"""

    def compute() -> RentVsBuyResponse:
        buy = BuyInputs(
            home_price=body.home_price,
            down_payment=body.down_payment,
            annual_rate_percent=body.annual_rate_percent,
            amortization_years=body.amortization_years,
            annual_property_tax=body.annual_property_tax,
            annual_home_insurance=body.annual_home_insurance,
            annual_maintenance=body.annual_maintenance,
            monthly_condo_fees=body.monthly_condo_fees,
            home_appreciation_percent=body.home_appreciation_percent,
        )
        rent = RentInputs(
            monthly_rent=body.monthly_rent,
            annual_renters_insurance=body.annual_renters_insurance,
            annual_rent_increase_percent=body.annual_rent_increase_percent,
        )
        projection = compare_rent_vs_buy(buy, rent, body.comparison_years, body.investment_return_percent)
        return RentVsBuyResponse.model_validate(projection)

    return _calculate("rent_vs_buy", request, compute)


@router.post("/refinance", response_model=RefinanceResponse)
def calculate_refinance(body: RefinanceRequest, request: Request):
    """Payment and interest savings from refinancing, with break-even"""

    def compute() -> RefinanceResponse:
        assessment = assess_refinance(
            body.current_balance,
            body.current_rate_percent,
            body.years_remaining,
            body.new_rate_percent,
            body.refinance_costs,
        )
        return RefinanceResponse.model_validate(assessment)

    return _calculate("refinance", request, compute)


@router.post("/land-transfer-tax", response_model=LandTransferTaxResponse)
def calculate_land_transfer(body: LandTransferTaxRequest, request: Request):
    """Provincial (and Toronto municipal) land transfer tax net of rebates"""

    def compute() -> LandTransferTaxResponse:
        tax = calculate_land_transfer_tax(body.purchase_price, body.province, body.first_time_buyer, body.toronto)
        return LandTransferTaxResponse.model_validate(tax)

    return _calculate("land_transfer_tax", request, compute)

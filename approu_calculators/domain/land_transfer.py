"""Provincial land transfer tax with first-time buyer rebates"""

import math

from approu_calculators.domain.exceptions import ValidationError
from approu_calculators.domain.models import LandTransferTax, Province
from approu_calculators.domain.rate_tables import (
    BRITISH_COLUMBIA_BRACKETS,
    MANITOBA_BRACKETS,
    NEW_BRUNSWICK_BRACKETS,
    NOVA_SCOTIA_BRACKETS,
    ONTARIO_BRACKETS,
    PRINCE_EDWARD_ISLAND_BRACKETS,
    QUEBEC_BRACKETS,
)
from approu_calculators.utils.numbers import require_non_negative

BRACKETS_BY_PROVINCE = {
    Province.ONTARIO: ONTARIO_BRACKETS,
    Province.BRITISH_COLUMBIA: BRITISH_COLUMBIA_BRACKETS,
    Province.QUEBEC: QUEBEC_BRACKETS,
    Province.MANITOBA: MANITOBA_BRACKETS,
    Province.NOVA_SCOTIA: NOVA_SCOTIA_BRACKETS,
    Province.NEW_BRUNSWICK: NEW_BRUNSWICK_BRACKETS,
    Province.PRINCE_EDWARD_ISLAND: PRINCE_EDWARD_ISLAND_BRACKETS,
}

ONTARIO_FTB_PRICE_LIMIT = 500_000
ONTARIO_FTB_MAX_REBATE = 4_000
TORONTO_FTB_PRICE_LIMIT = 400_000
TORONTO_FTB_MAX_REBATE = 4_475
BC_FTB_FULL_EXEMPTION_LIMIT = 835_000
BC_FTB_PHASE_OUT_LIMIT = 860_000
NOVA_SCOTIA_FTB_PRICE_LIMIT = 500_000
NOVA_SCOTIA_FTB_MAX_REBATE = 1_500
PEI_FTB_PRICE_LIMIT = 200_000


def marginal_tax(price: float, brackets) -> float:
    """Apply each bracket's rate to the slice of the price that falls inside it"""
    tax = 0.0
    lower = 0.0
    for upper, rate in brackets:
        if upper is None or price <= upper:
            return tax + (price - lower) * rate
        tax += (upper - lower) * rate
        lower = upper
    return tax


def _newfoundland_registration_fee(price: float) -> float:
    if price <= 500:
        return 100.0
    if price <= 5_000:
        return 200.0
    return 200.0 + math.ceil((price - 5_000) / 1_000) * 100


def _first_time_buyer_rebate(province: Province, price: float, provincial: float, municipal: float) -> float:
    rebate = 0.0
    if province == Province.ONTARIO:
        if price <= ONTARIO_FTB_PRICE_LIMIT:
            rebate = min(provincial, ONTARIO_FTB_MAX_REBATE)
        if municipal and price <= TORONTO_FTB_PRICE_LIMIT:
            rebate += min(municipal, TORONTO_FTB_MAX_REBATE)
    elif province == Province.BRITISH_COLUMBIA:
        if price <= BC_FTB_FULL_EXEMPTION_LIMIT:
            rebate = provincial
        elif price <= BC_FTB_PHASE_OUT_LIMIT:
            phase_out = (price - BC_FTB_FULL_EXEMPTION_LIMIT) / (BC_FTB_PHASE_OUT_LIMIT - BC_FTB_FULL_EXEMPTION_LIMIT)
            rebate = provincial * (1 - phase_out)
    elif province == Province.NOVA_SCOTIA:
        if price <= NOVA_SCOTIA_FTB_PRICE_LIMIT:
            rebate = min(provincial, NOVA_SCOTIA_FTB_MAX_REBATE)
    elif province == Province.PRINCE_EDWARD_ISLAND:
        if price <= PEI_FTB_PRICE_LIMIT:
            rebate = provincial
    return rebate


def calculate_land_transfer_tax(
    purchase_price: float,
    province: Province | str,
    first_time_buyer: bool = False,
    toronto: bool = False,
) -> LandTransferTax:
    """
    Land transfer tax owed on closing.

    Toronto levies a municipal tax on top of Ontario's, with the same brackets;
    the flag is ignored outside Ontario. Alberta and Saskatchewan have no land
    transfer tax. Newfoundland and Labrador charges a deed registration fee.

    Raises:
        ValidationError: negative price or unknown province code
    """
    require_non_negative(purchase_price=purchase_price)
    try:
        province = Province(province)
    except ValueError:
        raise ValidationError(f"Unknown province code: {province!r}") from None

    if province == Province.NEWFOUNDLAND_AND_LABRADOR:
        provincial = _newfoundland_registration_fee(purchase_price)
    elif province in BRACKETS_BY_PROVINCE:
        provincial = marginal_tax(purchase_price, BRACKETS_BY_PROVINCE[province])
    else:
        provincial = 0.0

    municipal = 0.0
    if toronto and province == Province.ONTARIO:
        municipal = marginal_tax(purchase_price, ONTARIO_BRACKETS)

    rebate = 0.0
    if first_time_buyer:
        rebate = _first_time_buyer_rebate(province, purchase_price, provincial, municipal)

    total = provincial + municipal
    return LandTransferTax(
        province=province,
        purchase_price=purchase_price,
        provincial_tax=provincial,
        municipal_tax=municipal,
        total_tax=total,
        first_time_buyer_rebate=rebate,
        net_tax=total - rebate,
    )

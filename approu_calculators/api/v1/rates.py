"""/v1/rates - posted mortgage rate maintenance"""

import logging
import uuid
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from approu_calculators.api.dependencies import get_rate_repository, get_request_id
from approu_calculators.api.v1.schemas import RateCreate, RateListResponse, RateResponse, RateUpdate
from approu_calculators.domain.exceptions import RateNotFoundError
from approu_calculators.infrastructure.database.repositories import RateRepository
from approu_calculators.infrastructure.observability.metrics import rate_change_counter

router = APIRouter(prefix="/rates")


def _parse_rate_id(rate_id: str) -> uuid.UUID:
    try:
        return uuid.UUID(rate_id)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid rate ID format")


@router.get("", response_model=RateListResponse)
def list_rates(
    is_active: Optional[bool] = Query(None, description="Only active (true) or retired (false) rates"),
    rate_type: Optional[str] = Query(None, description="e.g. fixed, variable"),
    repo: RateRepository = Depends(get_rate_repository),
):
    """Posted rates, newest effective date first"""
    rates = repo.list_rates(is_active=is_active, rate_type=rate_type)
    return RateListResponse(data=[RateResponse.model_validate(r) for r in rates])


@router.post("", response_model=RateResponse, status_code=201)
def create_rate(
    body: RateCreate,
    request: Request,
    repo: RateRepository = Depends(get_rate_repository),
):
    """Publish a new rate"""
    db_rate = repo.create_rate(**body.model_dump(exclude_none=True))
    repo.db.commit()
    repo.db.refresh(db_rate)

    rate_change_counter.labels(action="created").inc()
    logging.info(
        "Rate created",
        extra={"request_id": get_request_id(request), "rate_id": str(db_rate.id), "rate_type": db_rate.rate_type},
    )
    return RateResponse.model_validate(db_rate)


@router.get("/{rate_id}", response_model=RateResponse)
def get_rate(rate_id: str, repo: RateRepository = Depends(get_rate_repository)):
    """Fetch one rate"""
    try:
        db_rate = repo.get_rate(_parse_rate_id(rate_id))
    except RateNotFoundError:
        raise HTTPException(status_code=404, detail="Rate not found")
    return RateResponse.model_validate(db_rate)


@router.put("/{rate_id}", response_model=RateResponse)
def update_rate(
    rate_id: str,
    body: RateUpdate,
    request: Request,
    repo: RateRepository = Depends(get_rate_repository),
):
    """Change the supplied fields of a rate"""
    rate_uuid = _parse_rate_id(rate_id)
    updates = body.model_dump(exclude_unset=True)

    try:
        db_rate = repo.update_rate(rate_uuid, updates)
    except RateNotFoundError:
        repo.db.rollback()
        raise HTTPException(status_code=404, detail="Rate not found")

    repo.db.commit()
    repo.db.refresh(db_rate)

    rate_change_counter.labels(action="updated").inc()
    logging.info(
        "Rate updated",
        extra={"request_id": get_request_id(request), "rate_id": rate_id, "fields": sorted(updates)},
    )
    return RateResponse.model_validate(db_rate)


@router.delete("/{rate_id}")
def delete_rate(
    rate_id: str,
    request: Request,
    repo: RateRepository = Depends(get_rate_repository),
):
    """Remove a rate"""
    rate_uuid = _parse_rate_id(rate_id)

    try:
        repo.delete_rate(rate_uuid)
    except RateNotFoundError:
        repo.db.rollback()
        raise HTTPException(status_code=404, detail="Rate not found")

    repo.db.commit()

    rate_change_counter.labels(action="deleted").inc()
    logging.info("Rate deleted", extra={"request_id": get_request_id(request), "rate_id": rate_id})
    return {"success": True}

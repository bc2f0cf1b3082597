"""Dependency injection for FastAPI endpoints"""

from functools import lru_cache

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from approu_calculators.config import settings
from approu_calculators.domain.rate_tables import RateTables
from approu_calculators.infrastructure.database.repositories import RateRepository
from approu_calculators.infrastructure.database.session import get_db


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


@lru_cache
def get_rate_tables() -> RateTables:
    """Lending-rule tables, built once from settings"""
    return settings.rate_tables()


def get_rate_repository(db: Session = Depends(get_db)) -> RateRepository:
    """Provide posted-rate repository bound to the request's session"""
    return RateRepository(db)

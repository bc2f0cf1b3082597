"""Data access layer for posted mortgage rates"""

import uuid
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from approu_calculators.domain.exceptions import RateNotFoundError
from approu_calculators.infrastructure.database.models import MortgageRate


class RateRepository:
    """Repository for posted mortgage rates"""

    def __init__(self, db: Session):
        self.db = db

    def create_rate(self, **fields: Any) -> MortgageRate:
        """Insert a rate and flush to assign its ID"""
        db_rate = MortgageRate(**fields)
        self.db.add(db_rate)
        self.db.flush()
        return db_rate

    def list_rates(
        self,
        is_active: Optional[bool] = None,
        rate_type: Optional[str] = None,
    ) -> List[MortgageRate]:
        """Rates newest effective date first, optionally filtered"""
        query = self.db.query(MortgageRate)
        if is_active is not None:
            query = query.filter(MortgageRate.is_active == is_active)
        if rate_type:
            query = query.filter(MortgageRate.rate_type == rate_type)
        return query.order_by(MortgageRate.effective_date.desc(), MortgageRate.created_at.desc()).all()

    def get_rate(self, rate_id: uuid.UUID) -> MortgageRate:
        """
        Raises:
            RateNotFoundError: no rate with this ID
        """
        db_rate = self.db.query(MortgageRate).filter(MortgageRate.id == rate_id).first()
        if db_rate is None:
            raise RateNotFoundError(f"Rate {rate_id} not found")
        return db_rate

    def update_rate(self, rate_id: uuid.UUID, updates: Dict[str, Any]) -> MortgageRate:
        """Apply a partial update"""
        db_rate = self.get_rate(rate_id)
        for field, value in updates.items():
            setattr(db_rate, field, value)
        self.db.flush()
        return db_rate

    def delete_rate(self, rate_id: uuid.UUID) -> None:
        db_rate = self.get_rate(rate_id)
        self.db.delete(db_rate)
        self.db.flush()

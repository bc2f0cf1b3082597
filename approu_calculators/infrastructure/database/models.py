"""SQLAlchemy ORM models for posted mortgage rates"""

import uuid
from datetime import date

from sqlalchemy import Column, Boolean, Date, DateTime, Float, Integer, Text, Uuid
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class MortgageRate(Base):
    """Posted rate for a lender product shown on the rates pages"""

    __tablename__ = "mortgage_rate"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    lender_name = Column(Text, nullable=True)
    rate_type = Column(Text, nullable=False, index=True)  # fixed | variable | ...
    term_months = Column(Integer, nullable=False)
    rate = Column(Float, nullable=False)
    apr = Column(Float, nullable=False)
    effective_date = Column(Date, nullable=False, default=date.today)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

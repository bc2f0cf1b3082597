"""Pytest fixtures for testing"""

import pytest
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from approu_calculators.api.main import create_app
from approu_calculators.domain.models import BuyInputs, RentInputs
from approu_calculators.infrastructure.database.models import Base
from approu_calculators.infrastructure.database.session import get_db


# Test database: one shared in-memory connection
TEST_DATABASE_URL = "sqlite://"
engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def toronto_condo() -> BuyInputs:
    """$500k purchase with 20% down at 5.5% over 25 years"""
    return BuyInputs(
        home_price=500_000,
        down_payment=100_000,
        annual_rate_percent=5.5,
        amortization_years=25,
        annual_property_tax=3_500,
        annual_home_insurance=1_200,
        annual_maintenance=2_000,
        monthly_condo_fees=0,
        home_appreciation_percent=3,
    )


@pytest.fixture
def typical_rental() -> RentInputs:
    return RentInputs(monthly_rent=2_200, annual_renters_insurance=300, annual_rent_increase_percent=3)

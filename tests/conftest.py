"""Pytest fixtures for testing"""

import pytest
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from nbfc_console.api.main import create_app
from nbfc_console.api.dependencies import get_disbursement_simulator
from nbfc_console.domain.disbursements import DisbursementSimulator
from nbfc_console.domain.models import BorrowerFinancials
from nbfc_console.domain.permissions import PermissionResolver
from nbfc_console.infrastructure.database.models import Base
from nbfc_console.infrastructure.database.seed import seed_sample_disbursements
from nbfc_console.infrastructure.database.session import get_db


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database seeded with the sample disbursements"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    seed_sample_disbursements(db)
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database and a bank rail that always succeeds"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_disbursement_simulator] = lambda: DisbursementSimulator(success_rate=1.0)
    return TestClient(app)


@pytest.fixture
def resolver() -> PermissionResolver:
    return PermissionResolver()


@pytest.fixture
def strong_borrower() -> BorrowerFinancials:
    """Tops every factor ladder: raw 900, capped at 850"""
    return BorrowerFinancials(
        monthly_income=60000,
        monthly_expenses=10000,
        existing_debt=1000,
        business_age_years=6,
        prior_credit_score=780,
    )

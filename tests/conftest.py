import os

# Must be set before any application module reads the settings
os.environ["ENV"] = "testing"
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
from decimal import Decimal
from httpx import ASGITransport, AsyncClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from typing import Generator

from main import app
from core.database import Base
from models.products import Product
from models.users import User
from utils.deps import get_db
from utils.hashing import get_password_hash

# SYNC SQLite for testing (matches sync service layer)
SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False}
)

TestingSessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)

TEST_PASSWORD = "TestPassword123!"


@pytest.fixture
def session() -> Generator[Session, None, None]:
    """
    Creates a fresh, empty database for each test.
    """
    Base.metadata.create_all(bind=engine)

    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()

    Base.metadata.drop_all(bind=engine)


@pytest.fixture
async def client(session: Session):
    """
    Async HTTP client bound to the app, with get_db pointed at the test session.
    """
    def override_get_db():
        try:
            yield session
        finally:
            pass  # Session cleanup handled by session fixture

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def user(session: Session) -> User:
    model = User(
        username="testuser",
        hashed_password=get_password_hash(TEST_PASSWORD)
    )
    session.add(model)
    session.commit()
    session.refresh(model)
    return model


@pytest.fixture
def products(session: Session) -> list[Product]:
    """Seeds a small catalog, ids 1 to 5 in insertion order."""
    models = [
        Product(name="Notebook", price=Decimal("4.50"), description="A5, dotted"),
        Product(name="Fountain pen", price=Decimal("24.00"), description="Medium nib"),
        Product(name="Ink bottle", price=Decimal("12.75")),
        Product(name="Pencil case", price=Decimal("7.20"), description="Canvas"),
        Product(name="Desk lamp", price=Decimal("9.99"), description="LED, warm white"),
    ]
    session.add_all(models)
    session.commit()
    for model in models:
        session.refresh(model)
    return models

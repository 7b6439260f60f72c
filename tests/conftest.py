"""Test fixtures for the brand matching engine and API."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool
import sys
from pathlib import Path
import os


def ensure_src_on_path() -> None:
    root = Path(__file__).resolve().parent.parent
    src_path = root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


ensure_src_on_path()

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("CELERY_BROKER_URL", "memory://")
os.environ.setdefault("CELERY_RESULT_BACKEND", "cache+memory://")

from api.routers import brands
from models import Base, get_db
from services.brand_matching import BrandRelation, MatchPolicy, Product


@pytest.fixture
def relations():
    return [
        BrandRelation("Heel", "Contour; Heel GmbH"),
        BrandRelation("Sunstar", "GUM; Sunstar GUM"),
        BrandRelation("La Roche-Posay", "La Roche Posay; LRP"),
        BrandRelation("Happy", "Happy Baby"),
        BrandRelation("RFF", ""),
        BrandRelation("Avène", "Pierre Fabre"),
        BrandRelation("Generic", "Other"),
    ]


@pytest.fixture
def policy():
    return MatchPolicy(
        ignored=frozenset({"other", "generic"}),
        first_word_only=frozenset({"gum", "rff", "happy", "heel", "contour"}),
        first_or_second_word=frozenset({"heel", "contour"}),
        case_sensitive={"happy": "HAPPY"},
    )


@pytest.fixture
def products():
    return [
        Product(title="Heel Contour Cream 50ml", source_id="1"),
        Product(title="Gum Paste Relief", source_id="2"),
        Product(title="Sensitive Gum Protection", source_id="3"),
        Product(title="Generic Vitamin C Tablets", source_id="4"),
    ]


@pytest.fixture(scope="function")
def db_engine():
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(db_engine):
    connection = db_engine.connect()
    transaction = connection.begin()
    session = Session(bind=connection)

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture(scope="function")
def test_app():
    @asynccontextmanager
    async def test_lifespan(app: FastAPI) -> AsyncGenerator:
        yield

    app = FastAPI(
        title="PharmaBrands Test",
        description="Assign canonical brands to pharmacy product titles",
        version="0.1.0",
        lifespan=test_lifespan,
    )

    app.include_router(brands.router, prefix="/api/v1/brands", tags=["brands"])

    @app.get("/health")
    async def health():
        return {"status": "healthy"}

    return app


@pytest.fixture(scope="function")
def client(db_session: Session, test_app: FastAPI):
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    test_app.dependency_overrides[get_db] = override_get_db
    with TestClient(test_app) as test_client:
        yield test_client
    test_app.dependency_overrides.clear()

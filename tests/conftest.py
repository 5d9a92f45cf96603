"""Pytest configuration and fixtures."""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key-that-is-long-enough-for-hs256")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

from collections.abc import Generator  # noqa: E402
from datetime import date  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from learntrack import models  # noqa: E402
from learntrack.database import Base, enable_sqlite_foreign_keys, get_db  # noqa: E402
from learntrack.infrastructure.identity.auth.token_service import (  # noqa: E402
    create_access_token,
)
from learntrack.main import app  # noqa: E402

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

# One shared connection so the app thread sees the tables the fixtures create
test_engine = create_engine(
    TEST_DATABASE_URL, connect_args={"check_same_thread": False}, poolclass=StaticPool
)
enable_sqlite_foreign_keys(test_engine)

TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client with database session."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


def create_test_user(
    db_session: Session, name: str = "Ana Silva", email: str = "ana@example.com"
) -> models.User:
    user = models.User(name=name, email=email, hashed_password="not-a-real-hash")
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


def create_test_category(
    db_session: Session, name: str = "Backend", color: str = "#3B82F6"
) -> models.Category:
    category = models.Category(name=name, color=color)
    db_session.add(category)
    db_session.commit()
    db_session.refresh(category)
    return category


def create_test_item(
    db_session: Session,
    user: models.User,
    category: models.Category,
    title: str = "Designing Data-Intensive Applications",
    status: str = "Backlog",
    due_date: date | None = None,
) -> models.LearningItem:
    item = models.LearningItem(
        user_id=user.id,
        category_id=category.id,
        title=title,
        description_md="",
        status=status,
        progress=0.0,
        due_date=due_date,
    )
    db_session.add(item)
    db_session.commit()
    db_session.refresh(item)
    return item


def create_test_module(
    db_session: Session,
    item: models.LearningItem,
    title: str = "Chapter 1",
    order: int = 0,
    status: str = "Pendente",
) -> models.Module:
    module = models.Module(learning_item_id=item.id, title=title, order=order, status=status)
    db_session.add(module)
    db_session.commit()
    db_session.refresh(module)
    return module


def create_test_dependency(
    db_session: Session, source: models.LearningItem, target: models.LearningItem
) -> models.Dependency:
    dependency = models.Dependency(source_item_id=source.id, target_item_id=target.id)
    db_session.add(dependency)
    db_session.commit()
    db_session.refresh(dependency)
    return dependency


def auth_headers_for(user: models.User) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(user.id)}"}


@pytest.fixture
def test_user(db_session: Session) -> models.User:
    return create_test_user(db_session)


@pytest.fixture
def other_user(db_session: Session) -> models.User:
    return create_test_user(db_session, name="Bruno Costa", email="bruno@example.com")


@pytest.fixture
def auth_headers(test_user: models.User) -> dict[str, str]:
    return auth_headers_for(test_user)


@pytest.fixture
def test_category(db_session: Session) -> models.Category:
    return create_test_category(db_session)


@pytest.fixture
def test_item(
    db_session: Session, test_user: models.User, test_category: models.Category
) -> models.LearningItem:
    return create_test_item(db_session, test_user, test_category)

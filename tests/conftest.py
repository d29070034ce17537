import os

# przed importem app.* - settings czytaja env przy imporcie
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ENVIRONMENT", "test")

from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import app.data.models  # noqa: F401
from app.data.database import Base
from app.data.models.book import BookModel
from app.domain.models import BookRecord


@pytest.fixture()
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(bind=engine, autoflush=False)()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def add_book(db_session):
    def _add(book_id, title="title", price="20.00", stock=3, genre=None):
        book = BookModel(
            id=book_id,
            title=title,
            genre=genre or ["fiction"],
            price=Decimal(price),
            stock=stock,
        )
        db_session.add(book)
        db_session.commit()
        return book

    return _add


@pytest.fixture()
def mock_redis():
    return MagicMock()


def book(book_id, price="20", stock=3, title="title"):
    return BookRecord(book_id=book_id, title=title, genre=["fiction"], price=Decimal(price), stock=stock)


@pytest.fixture()
def make_book():
    return book

# app/data/seed.py
from decimal import Decimal

from sqlalchemy.orm import Session

from app.data.database import SessionLocal
from app.data.models.book import BookModel
from app.utils.logging import get_logger

logger = get_logger(__name__)

BOOKS = [
    {"title": "The Pragmatic Programmer", "genre": ["programming"], "price": Decimal("39.99"), "stock": 12},
    {"title": "Dune", "genre": ["sci-fi", "classic"], "price": Decimal("18.50"), "stock": 30},
    {"title": "Solaris", "genre": ["sci-fi"], "price": Decimal("14.00"), "stock": 7},
    {"title": "Lalka", "genre": ["classic", "novel"], "price": Decimal("24.90"), "stock": 4},
    {"title": "Designing Data-Intensive Applications", "genre": ["programming"], "price": Decimal("45.00"), "stock": 0},
]


def seed(db: Session | None = None) -> int:
    """Wrzuca przykladowe ksiazki, tylko gdy katalog jest pusty. Zwraca ile dodano."""
    own_session = db is None
    db = db or SessionLocal()
    try:
        # not forcing: only seed if empty
        if db.query(BookModel).first():
            return 0
        db.add_all([BookModel(**data) for data in BOOKS])
        db.commit()
        logger.info(f"Seeded catalog with {len(BOOKS)} books")
        return len(BOOKS)
    finally:
        if own_session:
            db.close()


if __name__ == "__main__":
    seed()

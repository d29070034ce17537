# app/repos/book_repo.py
from typing import Iterable, List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.data.models.book import BookModel
from app.domain.exceptions import CatalogUnavailable
from app.domain.models import BookRecord
from app.utils.logging import get_logger

logger = get_logger(__name__)


def _to_record(book: BookModel) -> BookRecord:
    return BookRecord(
        book_id=book.id,
        title=book.title,
        genre=list(book.genre or []),
        price=book.price,
        stock=book.stock,
    )


class BookRepo:
    """Odczyt katalogu. Bledy bazy -> CatalogUnavailable, bez retry."""

    def __init__(self, db: Session):
        self.db = db

    def find_default_books(self, limit: int) -> List[BookRecord]:
        try:
            books = self.db.execute(
                select(BookModel).order_by(BookModel.created_at).limit(limit)
            ).scalars().all()
        except SQLAlchemyError as e:
            logger.error(f"Catalog query failed: {e}")
            raise CatalogUnavailable("Katalog niedostepny") from e
        return [_to_record(b) for b in books]

    def get_book(self, book_id: str) -> BookRecord | None:
        try:
            book = self.db.get(BookModel, book_id)
        except SQLAlchemyError as e:
            logger.error(f"Catalog lookup for {book_id} failed: {e}")
            raise CatalogUnavailable("Katalog niedostepny") from e
        return _to_record(book) if book else None

    def get_book_stock(self, book_id: str) -> int | None:
        book = self.get_book(book_id)
        if book is None:
            return None
        return book.stock

    def get_books_by_ids(self, ids: Iterable[str]) -> List[BookRecord]:
        ids = list(dict.fromkeys(ids))
        if not ids:
            return []

        try:
            books = self.db.execute(
                select(BookModel).where(BookModel.id.in_(ids))
            ).scalars().all()
        except SQLAlchemyError as e:
            logger.error(f"Catalog query for {len(ids)} books failed: {e}")
            raise CatalogUnavailable("Katalog niedostepny") from e
        return [_to_record(b) for b in books]

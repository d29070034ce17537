# app/services/book_service.py
from typing import Iterable, List

from app.domain.models import BookRecord
from app.repos.book_repo import BookRepo
from app.utils.settings import DEFAULT_BOOKS_LIMIT


class BookService:
    """
    Widok katalogu dla koszyka i zamowien.
    Tylko odczyt - stock nie jest tu zmniejszany.
    """

    def __init__(self, repo: BookRepo):
        self.repo = repo

    def get_default_books(self, limit: int = DEFAULT_BOOKS_LIMIT) -> List[BookRecord]:
        return self.repo.find_default_books(limit)

    def get_books_by_ids(self, ids: Iterable[str]) -> List[BookRecord]:
        ids = list(ids)
        if not ids:
            return []
        return self.repo.get_books_by_ids(ids)

    def get_book(self, book_id: str) -> BookRecord | None:
        return self.repo.get_book(book_id)

    def has_enough_stock(self, book_id: str, quantity: int) -> bool:
        stock = self.repo.get_book_stock(book_id)
        if stock is None:
            return False
        return stock >= quantity

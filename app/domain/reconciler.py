# app/domain/reconciler.py
"""
Uzgadnianie koszyka z redisa z aktualnym stanem katalogu.

Koszyk i katalog to dwa osobne store'y i moga sie rozjechac w kazdej chwili,
wiec przy kazdym odczycie koszyk jest filtrowany na swiezych danych:
- ksiazki ktorej nie ma w katalogu -> wypada (NOT_FOUND)
- ilosc wieksza niz stock -> wypada cala pozycja, bez przycinania ilosci
Wynik nie jest zapisywany z powrotem do redisa.
"""
from typing import Dict, Iterable, List, NamedTuple

from app.domain.models import (
    BookRecord,
    Cart,
    CartItem,
    CartItemDisplay,
    RemovalReason,
    RemovedItem,
)


class ReconcileResult(NamedTuple):
    items: List[CartItem]
    removed: List[RemovedItem]


def build_book_map(books: Iterable[BookRecord]) -> Dict[str, BookRecord]:
    return {book.book_id: book for book in books}


def reconcile_cart(cart: Cart, books_by_id: Dict[str, BookRecord]) -> ReconcileResult:
    items: List[CartItem] = []
    removed: List[RemovedItem] = []

    for item in cart.items:
        book = books_by_id.get(item.book_id)
        if book is None:
            removed.append(
                RemovedItem(book_id=item.book_id, quantity=item.quantity, reason=RemovalReason.NOT_FOUND)
            )
        elif item.quantity > book.stock:
            removed.append(
                RemovedItem(
                    book_id=item.book_id,
                    quantity=item.quantity,
                    reason=RemovalReason.INSUFFICIENT_STOCK,
                )
            )
        else:
            items.append(item)

    return ReconcileResult(items=items, removed=removed)


def build_display_rows(
    items: Iterable[CartItem], books_by_id: Dict[str, BookRecord]
) -> List[CartItemDisplay]:
    # zakladamy ze items przeszly reconcile_cart - kazda ma swoja ksiazke
    return [
        CartItemDisplay(
            book_id=item.book_id,
            title=books_by_id[item.book_id].title,
            price=books_by_id[item.book_id].price,
            quantity=item.quantity,
        )
        for item in items
    ]

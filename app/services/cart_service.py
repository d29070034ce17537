# app/services/cart_service.py
import uuid

from app.domain.models import (
    AddItemResult,
    Cart,
    CartItem,
    CartView,
    CheckoutSummary,
)
from app.domain.pricing import cart_summary, cart_view_meta, checkout_summary
from app.domain.reconciler import build_book_map, build_display_rows, reconcile_cart
from app.repos.cart_repo import CartRepo
from app.services.book_service import BookService
from app.utils.settings import SHIPPING_COST, SHIPPING_ON_EMPTY_CART
from app.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Use case'y koszyka:
    commands (add_item) zapisuja do redisa
    query (get_cart, get_checkout_summary) czytaja redis + katalog i uzgadniaja
    uzgodniony koszyk nie jest zapisywany z powrotem
    """

    def __init__(self, cart_repo: CartRepo, book_service: BookService):
        self.repo = cart_repo
        self.book_service = book_service

    #commands
    def add_item(self, book_id: str, quantity: int, cart_id: str | None) -> AddItemResult | None:
        """
        Tworzy nowy jednopozycyjny koszyk gdy jest stock i pod cart_id nic nie ma.
        Brak stocku i istniejacy koszyk daja to samo: None, nic nie jest zapisane.
        Wyscig dwoch requestow rozstrzyga create_cart (CartAlreadyExists).
        """
        if not self.book_service.has_enough_stock(book_id, quantity):
            logger.info(f"Not enough stock for book {book_id} (requested {quantity})")
            return None

        existing = self.repo.get_cart(cart_id)
        if existing is not None:
            logger.info(f"Cart {cart_id} already exists, nothing created")
            return None

        new_cart_id = str(uuid.uuid4())
        cart = self.repo.create_cart(new_cart_id, CartItem(book_id=book_id, quantity=quantity))

        return AddItemResult(cart_id=new_cart_id, cart=cart)

    #query - odczyt
    def get_cart(self, cart_id: str | None) -> CartView | None:
        cart = self.repo.get_cart(cart_id)
        if cart is None:
            return None

        books = build_book_map(self.book_service.get_books_by_ids(cart.book_ids()))
        result = reconcile_cart(cart, books)

        if result.removed:
            logger.info(
                f"Cart {cart_id}: {len(result.removed)} item(s) hidden after reconcile",
                removed=[r.book_id for r in result.removed],
            )

        return CartView(
            cart_id=cart_id,
            cart=Cart(items=result.items),
            items=build_display_rows(result.items, books),
            summary=cart_summary(result.items, books),
            meta=cart_view_meta(result.items, books, shipping_cost=SHIPPING_COST, removed=result.removed),
            removed=result.removed,
        )

    def get_checkout_summary(self, cart_id: str | None) -> CheckoutSummary | None:
        cart = self.repo.get_cart(cart_id)
        if cart is None:
            return None

        books = build_book_map(self.book_service.get_books_by_ids(cart.book_ids()))
        result = reconcile_cart(cart, books)

        return checkout_summary(
            result.items,
            books,
            shipping_cost=SHIPPING_COST,
            charge_empty=SHIPPING_ON_EMPTY_CART,
        )

    def get_cart_for_order(self, cart_id: str | None) -> Cart | None:
        # surowy koszyk, bez uzgadniania - tylko dla OrderService
        return self.repo.get_cart(cart_id)

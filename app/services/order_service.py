# app/services/order_service.py
from decimal import Decimal
from typing import Dict, List

from app.data.models.order import OrderItemModel, OrderModel
from app.domain.exceptions import OrderNotFound, PaymentSessionFailed
from app.domain.models import BookRecord, Cart, Order, OrderLineItem, OrderStatus
from app.domain.pricing import order_total
from app.domain.reconciler import build_book_map
from app.repos.order_repo import OrderRepo
from app.services.book_service import BookService
from app.services.cart_service import CartService
from app.services.notification_service import NotificationService
from app.services.payment_gateway import PaymentGateway
from app.utils.settings import PAYMENT_CURRENCY, SHIPPING_COST
from app.utils.logging import get_logger

logger = get_logger(__name__)

UNKNOWN_TITLE = "Unknown Title"


def build_order_items(cart: Cart | None, books_by_id: Dict[str, BookRecord]) -> List[OrderLineItem]:
    """
    Zamraza tytul i cene z katalogu.
    Inaczej niz w koszyku: ksiazka ktorej nie ma w katalogu NIE wypada,
    tylko dostaje "Unknown Title" i cene 0.
    """
    if cart is None:
        return []

    line_items = []
    for item in cart.items:
        book = books_by_id.get(item.book_id)
        line_items.append(
            OrderLineItem(
                book_id=book.book_id if book else None,
                title=book.title if book else UNKNOWN_TITLE,
                price=book.price if book else Decimal("0"),
                quantity=item.quantity,
            )
        )
    return line_items


def _to_order(model: OrderModel) -> Order:
    return Order(
        order_id=model.id,
        items=[OrderLineItem.model_validate(i) for i in model.items],
        total_price=model.total_price,
        shipping_address=model.shipping_address,
        status=OrderStatus(model.status),
        payment_session_id=model.payment_session_id,
        created_at=model.created_at,
    )


class OrderService:
    """
    Skladanie zamowienia z koszyka z redisa.
    Brak kompensacji: jak cos padnie po drodze, nic nie jest cofane.
    Stock nie jest zmniejszany, koszyk nie jest usuwany.
    """

    def __init__(
        self,
        cart_service: CartService,
        book_service: BookService,
        payment_gateway: PaymentGateway,
        order_repo: OrderRepo,
        notification_service: NotificationService | None = None,
    ):
        self.cart_service = cart_service
        self.book_service = book_service
        self.payment_gateway = payment_gateway
        self.repo = order_repo
        self.notification_service = notification_service

    def create_order(self, cart_id: str, shipping_address: str) -> Order:
        """
        Use Case: Tworzenie zamowienia z koszyka.

        1. Pobiera surowy koszyk (brak koszyka = puste zamowienie)
        2. Pobiera ksiazki z katalogu
        3. Buduje pozycje z zamrozona cena
        4. Liczy total + wysylka
        5. Otwiera sesje platnosci (brak sessionId = PaymentSessionFailed)
        6. Zapisuje zamowienie PENDING
        """
        cart = self.cart_service.get_cart_for_order(cart_id)
        if cart is None:
            logger.warning(f"Cart {cart_id} not found, placing order without items")

        book_ids = cart.book_ids() if cart is not None else []
        books = build_book_map(self.book_service.get_books_by_ids(book_ids))

        line_items = build_order_items(cart, books)
        total_price = order_total(line_items, SHIPPING_COST)

        session_id = self.payment_gateway.create_payment_session(total_price, PAYMENT_CURRENCY, cart_id)
        if not session_id:
            raise PaymentSessionFailed("Failed to create payment session")

        order = OrderModel(
            shipping_address=shipping_address,
            status=OrderStatus.PENDING.value,
            total_price=total_price,
            payment_session_id=session_id,
            items=[
                OrderItemModel(
                    book_id=li.book_id,
                    title=li.title,
                    price=li.price,
                    quantity=li.quantity,
                )
                for li in line_items
            ],
        )
        created = self.repo.create_order(order)

        logger.info(f"Order {created.id} created from cart {cart_id}", total_price=str(total_price))

        if self.notification_service is not None:
            try:
                self.notification_service.send_order_placed(created.id, total_price, session_id)
            except Exception as e:
                # zamowienie juz zapisane, brak brokera nie moze go wywrocic
                logger.warning(f"Failed to queue notification for order {created.id}: {e}")

        return _to_order(created)

    def get_order(self, order_id: int) -> Order:
        """
        Use Case: Pobranie zamowienia (Query).
        """
        order = self.repo.get_order(order_id)

        if not order:
            raise OrderNotFound(f"Zamowienie {order_id} nie istnieje")

        return _to_order(order)

# app/domain/pricing.py
from decimal import Decimal
from typing import Dict, Iterable, List

from app.domain.models import (
    BookRecord,
    CartItem,
    CartMeta,
    CartSummary,
    CheckoutSummary,
    OrderLineItem,
    RemovedItem,
)
from app.utils.settings import SHIPPING_COST


def cart_summary(items: Iterable[CartItem], books_by_id: Dict[str, BookRecord]) -> CartSummary:
    items = list(items)
    total_price = sum(
        (books_by_id[i.book_id].price * i.quantity for i in items if i.book_id in books_by_id),
        Decimal("0"),
    )
    total_items = sum(i.quantity for i in items)
    return CartSummary(total_items=total_items, total_price=total_price)


def checkout_summary(
    items: Iterable[CartItem],
    books_by_id: Dict[str, BookRecord],
    shipping_cost: Decimal = SHIPPING_COST,
    charge_empty: bool = True,
) -> CheckoutSummary:
    """
    Podsumowanie przed platnoscia: cart_summary + stala wysylka.
    Wysylka doliczana tez do pustego koszyka, chyba ze charge_empty=False.
    """
    summary = cart_summary(items, books_by_id)

    shipping = shipping_cost
    if not charge_empty and summary.total_items == 0:
        shipping = Decimal("0")

    return CheckoutSummary(
        total_items=summary.total_items,
        total_price=summary.total_price,
        shipping_cost=shipping,
        grand_total=summary.total_price + shipping,
    )


def order_total(line_items: List[OrderLineItem], shipping_cost: Decimal = SHIPPING_COST) -> Decimal:
    return sum((li.price * li.quantity for li in line_items), Decimal("0")) + shipping_cost


def cart_view_meta(
    items: Iterable[CartItem],
    books_by_id: Dict[str, BookRecord],
    shipping_cost: Decimal = SHIPPING_COST,
    removed: Iterable[RemovedItem] = (),
) -> CartMeta:
    """
    Meta dla widoku koszyka. Inaczej niz checkout_summary:
    wysylka doliczana tylko gdy total_price > 0.
    """
    summary = cart_summary(items, books_by_id)
    shipping = shipping_cost if summary.total_price > 0 else Decimal("0")

    return CartMeta(
        total_items=summary.total_items,
        total_price=summary.total_price,
        shipping_cost=shipping,
        grand_total=summary.total_price + shipping,
        messages=[f"Book {r.book_id} removed from cart: {r.reason.value}" for r in removed],
    )

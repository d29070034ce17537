from decimal import Decimal

import pytest

from app.domain.models import BookRecord, CartItem, OrderLineItem, RemovalReason, RemovedItem
from app.domain.pricing import cart_summary, cart_view_meta, checkout_summary, order_total
from app.domain.reconciler import build_book_map


@pytest.fixture()
def books():
    return build_book_map(
        [
            BookRecord(book_id="b1", title="One", price=Decimal("10"), stock=10),
            BookRecord(book_id="b2", title="Two", price=Decimal("15"), stock=5),
        ]
    )


def test_cart_summary_sums_quantity_and_price(books):
    items = [CartItem(book_id="b1", quantity=4), CartItem(book_id="b2", quantity=3)]
    summary = cart_summary(items, books)

    assert summary.total_items == 7
    assert summary.total_price == Decimal("85")


def test_checkout_summary_scenario(books):
    items = [CartItem(book_id="b1", quantity=4), CartItem(book_id="b2", quantity=3)]
    summary = checkout_summary(items, books)

    assert summary.total_items == 7
    assert summary.total_price == Decimal("85")
    assert summary.shipping_cost == Decimal("100")
    assert summary.grand_total == Decimal("185")


@pytest.mark.parametrize("quantity", [1, 2, 9])
def test_grand_total_is_price_plus_shipping(books, quantity):
    summary = checkout_summary([CartItem(book_id="b2", quantity=quantity)], books)

    assert summary.grand_total == summary.total_price + Decimal("100")


def test_shipping_charged_on_empty_checkout(books):
    summary = checkout_summary([], books)

    assert summary.total_items == 0
    assert summary.total_price == Decimal("0")
    assert summary.shipping_cost == Decimal("100")
    assert summary.grand_total == Decimal("100")


def test_empty_checkout_shipping_can_be_switched_off(books):
    summary = checkout_summary([], books, charge_empty=False)

    assert summary.shipping_cost == Decimal("0")
    assert summary.grand_total == Decimal("0")


def test_custom_shipping_cost(books):
    summary = checkout_summary([CartItem(book_id="b1", quantity=1)], books, shipping_cost=Decimal("7.5"))

    assert summary.grand_total == Decimal("17.5")


def test_prices_keep_cents(books):
    books["b3"] = BookRecord(book_id="b3", title="Three", price=Decimal("19.99"), stock=3)
    summary = cart_summary([CartItem(book_id="b3", quantity=3)], books)

    assert summary.total_price == Decimal("59.97")


def test_order_total_adds_shipping():
    lines = [
        OrderLineItem(book_id="b1", title="One", price=Decimal("10"), quantity=2),
        OrderLineItem(book_id=None, title="Unknown Title", price=Decimal("0"), quantity=5),
    ]
    assert order_total(lines, Decimal("100")) == Decimal("120")
    assert order_total([], Decimal("100")) == Decimal("100")


class TestCartViewMeta:
    def test_non_empty_cart_pays_shipping(self, books):
        meta = cart_view_meta([CartItem(book_id="b1", quantity=2)], books)

        assert meta.total_items == 2
        assert meta.total_price == Decimal("20")
        assert meta.shipping_cost == Decimal("100")
        assert meta.grand_total == Decimal("120")
        assert meta.messages == []

    def test_empty_cart_has_no_shipping(self, books):
        meta = cart_view_meta([], books)

        assert meta.shipping_cost == Decimal("0")
        assert meta.grand_total == Decimal("0")

    def test_differs_from_checkout_on_empty_cart(self, books):
        assert cart_view_meta([], books).grand_total == Decimal("0")
        assert checkout_summary([], books).grand_total == Decimal("100")

    def test_messages_list_removed_books(self, books):
        removed = [RemovedItem(book_id="gone", quantity=1, reason=RemovalReason.NOT_FOUND)]

        meta = cart_view_meta([], books, removed=removed)

        assert meta.messages == ["Book gone removed from cart: book not found"]

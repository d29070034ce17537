"""HTTP layer: routers over mocked services."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from app.api.dependencies import (
    get_book_service,
    get_cart_service,
    get_order_service,
    get_payment_gateway,
)
from app.domain.exceptions import (
    CartAlreadyExists,
    OrderNotFound,
    PaymentSessionFailed,
    StoreUnavailable,
)
from app.domain.models import (
    AddItemResult,
    Cart,
    CartItem,
    CartItemDisplay,
    CartMeta,
    CartSummary,
    CartView,
    CheckoutSummary,
    Order,
    OrderLineItem,
    OrderStatus,
)
from app.main import create_app


@pytest.fixture()
def cart_service():
    return MagicMock()


@pytest.fixture()
def order_service():
    return MagicMock()


@pytest.fixture()
def book_service():
    return MagicMock()


@pytest.fixture()
def payment_gateway():
    return MagicMock()


@pytest.fixture()
def client(cart_service, order_service, book_service, payment_gateway):
    app = create_app()
    app.dependency_overrides[get_cart_service] = lambda: cart_service
    app.dependency_overrides[get_order_service] = lambda: order_service
    app.dependency_overrides[get_book_service] = lambda: book_service
    app.dependency_overrides[get_payment_gateway] = lambda: payment_gateway
    return TestClient(app)


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_list_books(client, book_service, make_book):
    book_service.get_default_books.return_value = [make_book("b1", price="9.99")]

    response = client.get("/books/")

    assert response.status_code == 200
    assert response.json()[0]["book_id"] == "b1"


class TestCartRoutes:
    def test_add_item_created(self, client, cart_service):
        cart_service.add_item.return_value = AddItemResult(
            cart_id="abc", cart=Cart(items=[CartItem(book_id="b1", quantity=2)])
        )

        response = client.post("/carts/add", json={"book_id": "b1", "quantity": 2})

        assert response.status_code == 201
        assert response.json() == {"cart_id": "abc", "cart": {"items": [{"_id": "b1", "qty": 2}]}}
        cart_service.add_item.assert_called_once_with("b1", 2, None)

    def test_add_item_noop_is_conflict(self, client, cart_service):
        cart_service.add_item.return_value = None

        response = client.post("/carts/add", json={"book_id": "b1", "quantity": 2, "cart_id": "abc"})

        assert response.status_code == 409

    def test_add_item_race_is_conflict(self, client, cart_service):
        cart_service.add_item.side_effect = CartAlreadyExists("abc")

        assert client.post("/carts/add", json={"book_id": "b1", "quantity": 1}).status_code == 409

    def test_add_item_rejects_non_positive_quantity(self, client, cart_service):
        response = client.post("/carts/add", json={"book_id": "b1", "quantity": 0})

        assert response.status_code == 422
        cart_service.add_item.assert_not_called()

    def test_get_cart(self, client, cart_service):
        cart_service.get_cart.return_value = CartView(
            cart_id="abc",
            cart=Cart(items=[CartItem(book_id="b1", quantity=2)]),
            items=[CartItemDisplay(book_id="b1", title="Dune", price=Decimal("10"), quantity=2)],
            summary=CartSummary(total_items=2, total_price=Decimal("20")),
            meta=CartMeta(
                total_items=2,
                total_price=Decimal("20"),
                shipping_cost=Decimal("100"),
                grand_total=Decimal("120"),
            ),
        )

        response = client.get("/carts/abc")

        assert response.status_code == 200
        body = response.json()
        assert body["cart_id"] == "abc"
        assert body["items"][0]["title"] == "Dune"
        assert body["summary"]["total_items"] == 2
        assert Decimal(str(body["meta"]["grand_total"])) == Decimal("120")

    def test_get_missing_cart(self, client, cart_service):
        cart_service.get_cart.return_value = None

        assert client.get("/carts/abc").status_code == 404

    def test_store_down_is_503(self, client, cart_service):
        cart_service.get_cart.side_effect = StoreUnavailable("down")

        assert client.get("/carts/abc").status_code == 503

    def test_checkout_summary(self, client, cart_service):
        cart_service.get_checkout_summary.return_value = CheckoutSummary(
            total_items=7,
            total_price=Decimal("85"),
            shipping_cost=Decimal("100"),
            grand_total=Decimal("185"),
        )

        response = client.get("/carts/abc/checkout")

        assert response.status_code == 200
        assert Decimal(str(response.json()["grand_total"])) == Decimal("185")

    def test_checkout_missing_cart(self, client, cart_service):
        cart_service.get_checkout_summary.return_value = None

        assert client.get("/carts/abc/checkout").status_code == 404


class TestOrderRoutes:
    def test_create_order(self, client, order_service):
        order_service.create_order.return_value = Order(
            order_id=1,
            items=[OrderLineItem(book_id=None, title="Unknown Title", price=Decimal("0"), quantity=1)],
            total_price=Decimal("100"),
            shipping_address="addr",
            status=OrderStatus.PENDING,
            payment_session_id="cs_1",
        )

        response = client.post("/orders/", json={"cart_id": "abc", "shipping_address": "addr"})

        assert response.status_code == 201
        assert response.json()["status"] == "PENDING"
        assert response.json()["payment_session_id"] == "cs_1"
        order_service.create_order.assert_called_once_with("abc", "addr")

    def test_payment_failure_is_502(self, client, order_service):
        order_service.create_order.side_effect = PaymentSessionFailed("Failed to create payment session")

        response = client.post("/orders/", json={"cart_id": "abc", "shipping_address": "addr"})

        assert response.status_code == 502

    def test_missing_order_is_404(self, client, order_service):
        order_service.get_order.side_effect = OrderNotFound("nope")

        assert client.get("/orders/5").status_code == 404


def test_payment_session_route(client, payment_gateway):
    payment_gateway.create_payment_session.return_value = "cs_9"

    response = client.post("/payments/session", json={"amount": "10", "currency": "USD", "order_id": "abc"})

    assert response.status_code == 200
    assert response.json() == {"session_id": "cs_9"}

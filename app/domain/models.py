# app/domain/models.py
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class CartItem(BaseModel):
    """
    Pozycja koszyka w redisie.
    W jsonie klucze `_id` i `qty` - tak zapisywal koszyki stary serwis.
    """

    book_id: str = Field(..., alias="_id", min_length=1)
    quantity: int = Field(..., alias="qty", gt=0)

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class Cart(BaseModel):
    items: List[CartItem] = Field(default_factory=list)

    def book_ids(self) -> List[str]:
        return [item.book_id for item in self.items]


class BookRecord(BaseModel):
    """Odczyt z katalogu, nigdy nie modyfikowany przez koszyk."""

    book_id: str
    title: str
    genre: List[str] = Field(default_factory=list)
    price: Decimal = Field(..., ge=0)
    stock: int = Field(..., ge=0)

    model_config = ConfigDict(from_attributes=True, frozen=True)


class CartItemDisplay(BaseModel):
    book_id: str
    title: str
    price: Decimal
    quantity: int


class CartSummary(BaseModel):
    total_items: int
    total_price: Decimal


class CheckoutSummary(CartSummary):
    shipping_cost: Decimal
    grand_total: Decimal


class CartMeta(CartSummary):
    """Podsumowanie na stronie koszyka - wysylka tylko gdy total > 0."""

    shipping_cost: Decimal
    grand_total: Decimal
    messages: List[str] = Field(default_factory=list)


class RemovalReason(str, Enum):
    NOT_FOUND = "book not found"
    INSUFFICIENT_STOCK = "insufficient stock"


class RemovedItem(BaseModel):
    book_id: str
    quantity: int
    reason: RemovalReason


class CartView(BaseModel):
    cart_id: str
    cart: Cart
    items: List[CartItemDisplay]
    summary: CartSummary
    meta: CartMeta
    removed: List[RemovedItem] = Field(default_factory=list)


class AddItemResult(BaseModel):
    cart_id: str
    cart: Cart


class OrderStatus(str, Enum):
    PENDING = "PENDING"
    PAID = "PAID"
    FAILED = "FAILED"


class OrderLineItem(BaseModel):
    """Cena zamrozona w chwili skladania zamowienia."""

    book_id: str | None
    title: str
    price: Decimal
    quantity: int

    model_config = ConfigDict(from_attributes=True)


class Order(BaseModel):
    order_id: int
    items: List[OrderLineItem]
    total_price: Decimal
    shipping_address: str
    status: OrderStatus
    payment_session_id: str
    created_at: datetime | None = None


class PaymentResult(BaseModel):
    session_id: str
    success: bool
    message: str = ""
    url: str = ""

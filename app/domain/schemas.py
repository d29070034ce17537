# app/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict
from typing import List
from decimal import Decimal
from datetime import datetime

from app.domain.models import (
    Cart,
    CartItemDisplay,
    CartMeta,
    CartSummary,
    OrderLineItem,
    OrderStatus,
    RemovedItem,
)


class BookOut(BaseModel):
    """Schema dla ksiazki z katalogu (response)."""

    book_id: str
    title: str
    genre: List[str]
    price: Decimal
    stock: int

    model_config = ConfigDict(from_attributes=True)


class AddItemIn(BaseModel):
    """Schema dla dodawania ksiazki do koszyka."""

    book_id: str = Field(..., min_length=1, description="ID ksiazki")
    quantity: int = Field(..., gt=0, description="Ilosc (musi byc > 0)")
    cart_id: str | None = Field(None, description="Klucz istniejacego koszyka")


class AddItemOut(BaseModel):
    cart_id: str
    cart: Cart


class CartOut(BaseModel):
    """Schema dla koszyka po uzgodnieniu z katalogiem (response)."""

    cart_id: str
    cart: Cart
    items: List[CartItemDisplay]
    summary: CartSummary
    meta: CartMeta
    removed: List[RemovedItem]


class CheckoutOut(BaseModel):
    total_items: int
    total_price: Decimal
    shipping_cost: Decimal
    grand_total: Decimal


class OrderCreate(BaseModel):
    """Schema dla tworzenia zamowienia."""

    cart_id: str = Field(..., min_length=1)
    shipping_address: str = Field(..., min_length=1, max_length=500)


class OrderOut(BaseModel):
    """Schema dla zamowienia (response)."""

    order_id: int
    items: List[OrderLineItem]
    total_price: Decimal
    shipping_address: str
    status: OrderStatus
    payment_session_id: str
    created_at: datetime | None = None


class PaymentSessionIn(BaseModel):
    amount: Decimal = Field(..., ge=0)
    currency: str = Field("USD", min_length=3, max_length=3)
    order_id: str = Field(..., min_length=1)


class PaymentSessionOut(BaseModel):
    session_id: str


class PaymentProcessIn(BaseModel):
    session_id: str = Field(..., min_length=1)
    success: bool


class PaymentProcessOut(BaseModel):
    session_id: str
    success: bool
    message: str
    url: str

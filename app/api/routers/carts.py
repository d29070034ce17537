#app/api/routers/carts.py
from fastapi import APIRouter, Depends, HTTPException

from app.api.dependencies import get_cart_service
from app.api.errors import to_http
from app.domain.exceptions import BookstoreError
from app.domain.schemas import AddItemIn, AddItemOut, CartOut, CheckoutOut
from app.services.cart_service import CartService

router = APIRouter(prefix="/carts", tags=["carts"])


@router.post("/add", response_model=AddItemOut, status_code=201)
def add_item(payload: AddItemIn, svc: CartService = Depends(get_cart_service)):
    try:
        result = svc.add_item(payload.book_id, payload.quantity, payload.cart_id)
    except BookstoreError as e:
        raise to_http(e)
    if result is None:
        # brak stocku albo koszyk juz istnieje - serwis tego nie rozroznia
        raise HTTPException(status_code=409, detail="Nie utworzono koszyka")
    return result


@router.get("/{cart_id}", response_model=CartOut)
def get_cart(cart_id: str, svc: CartService = Depends(get_cart_service)):
    try:
        cart = svc.get_cart(cart_id)
    except BookstoreError as e:
        raise to_http(e)
    if cart is None:
        raise HTTPException(status_code=404, detail="Koszyk nie znaleziony")
    return cart


@router.get("/{cart_id}/checkout", response_model=CheckoutOut)
def get_checkout_summary(cart_id: str, svc: CartService = Depends(get_cart_service)):
    try:
        summary = svc.get_checkout_summary(cart_id)
    except BookstoreError as e:
        raise to_http(e)
    if summary is None:
        raise HTTPException(status_code=404, detail="Koszyk nie znaleziony")
    return summary

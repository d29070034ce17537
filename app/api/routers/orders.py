# app/api/routers/orders.py
from fastapi import APIRouter, Depends

from app.api.dependencies import get_order_service
from app.api.errors import to_http
from app.domain.exceptions import BookstoreError
from app.domain.schemas import OrderCreate, OrderOut
from app.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("/", response_model=OrderOut, status_code=201)
def create_order(payload: OrderCreate, svc: OrderService = Depends(get_order_service)):
    """
    Tworzy zamowienie PENDING z koszyka i otwiera sesje platnosci.
    """
    try:
        return svc.create_order(payload.cart_id, payload.shipping_address)
    except BookstoreError as e:
        raise to_http(e)


@router.get("/{order_id}", response_model=OrderOut)
def get_order(order_id: int, svc: OrderService = Depends(get_order_service)):
    try:
        return svc.get_order(order_id)
    except BookstoreError as e:
        raise to_http(e)

# app/api/routers/payments.py
from fastapi import APIRouter, Depends

from app.api.dependencies import get_payment_gateway
from app.api.errors import to_http
from app.domain.exceptions import PaymentSessionFailed
from app.domain.schemas import (
    PaymentProcessIn,
    PaymentProcessOut,
    PaymentSessionIn,
    PaymentSessionOut,
)
from app.services.payment_gateway import PaymentGateway

router = APIRouter(prefix="/payments", tags=["payments"])


@router.post("/session", response_model=PaymentSessionOut)
def create_session(payload: PaymentSessionIn, gateway: PaymentGateway = Depends(get_payment_gateway)):
    try:
        session_id = gateway.create_payment_session(payload.amount, payload.currency, payload.order_id)
    except PaymentSessionFailed as e:
        raise to_http(e)
    return PaymentSessionOut(session_id=session_id)


@router.post("/process", response_model=PaymentProcessOut)
def process_payment(payload: PaymentProcessIn, gateway: PaymentGateway = Depends(get_payment_gateway)):
    try:
        return gateway.process_payment(payload.session_id, payload.success)
    except PaymentSessionFailed as e:
        raise to_http(e)

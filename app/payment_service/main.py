# payment_service/main.py
import uuid
from decimal import Decimal

from fastapi import FastAPI, Header, HTTPException
from pydantic import BaseModel, Field

app = FastAPI(title="Payment Service (dev mock)")

SESSIONS: dict = {}
IDEMPOTENCY_KEYS: dict = {}


class PayIn(BaseModel):
    amount: Decimal = Field(..., ge=0)
    currency: str
    orderId: str = Field(..., min_length=1)


class ProcessIn(BaseModel):
    sessionId: str
    success: bool


@app.post("/payments/pay")
def create_session(payload: PayIn, idempotency_key: str | None = Header(None)):
    # ten sam klucz = ta sama sesja, powtorzony POST nie otwiera drugiej
    if idempotency_key and idempotency_key in IDEMPOTENCY_KEYS:
        return {"sessionId": IDEMPOTENCY_KEYS[idempotency_key]}

    session_id = f"cs_{uuid.uuid4().hex}"
    SESSIONS[session_id] = payload
    if idempotency_key:
        IDEMPOTENCY_KEYS[idempotency_key] = session_id
    return {"sessionId": session_id}


@app.post("/payments/process")
def process(payload: ProcessIn):
    if payload.sessionId not in SESSIONS:
        raise HTTPException(status_code=404, detail="Session not found")
    return {
        "sessionId": payload.sessionId,
        "success": payload.success,
        "message": "Payment succeeded" if payload.success else "Payment failed",
        "url": f"http://localhost:6969/checkout/{payload.sessionId}",
    }

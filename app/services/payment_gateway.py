# app/services/payment_gateway.py
import uuid
from decimal import Decimal

import requests
from requests import RequestException

from app.domain.exceptions import PaymentSessionFailed
from app.domain.models import PaymentResult
from app.utils.retry import http_retry
from app.utils.settings import PAYMENT_SERVICE_URL, PAYMENT_TIMEOUT_SECONDS
from app.utils.logging import get_logger

logger = get_logger(__name__)


class PaymentGateway:
    """
    Klient HTTP dostawcy platnosci.
    Retry (tenacity) tylko gdy polaczenie sie nie udalo, potem PaymentSessionFailed.
    Kazda proba tej samej sesji idzie z tym samym Idempotency-Key.
    """

    def __init__(self, base_url: str | None = None, timeout: float = PAYMENT_TIMEOUT_SECONDS):
        self.base_url = (base_url or PAYMENT_SERVICE_URL).rstrip("/")
        self.timeout = timeout

    @http_retry()
    def _post(self, path: str, payload: dict, idempotency_key: str | None = None) -> dict:
        url = f"{self.base_url}{path}"
        logger.info(f"PaymentGateway POST {url}")

        headers = {"Idempotency-Key": idempotency_key} if idempotency_key else None
        resp = requests.post(url, json=payload, headers=headers, timeout=self.timeout)
        resp.raise_for_status()
        return resp.json()

    def create_payment_session(self, amount: Decimal, currency: str, reference_id: str) -> str:
        try:
            data = self._post(
                "/payments/pay",
                # provider oczekuje liczby w jsonie
                {"amount": float(amount), "currency": currency, "orderId": reference_id},
                idempotency_key=str(uuid.uuid4()),
            )
        except (RequestException, ValueError) as e:
            logger.error(f"Payment session request for {reference_id} failed: {e}")
            raise PaymentSessionFailed("Failed to create payment session") from e

        session_id = data.get("sessionId") if isinstance(data, dict) else None
        if not session_id:
            logger.error(f"Payment provider returned no sessionId for {reference_id}")
            raise PaymentSessionFailed("Failed to create payment session")

        return session_id

    def process_payment(self, session_id: str, success: bool) -> PaymentResult:
        try:
            data = self._post("/payments/process", {"sessionId": session_id, "success": success})
        except (RequestException, ValueError) as e:
            logger.error(f"Processing payment {session_id} failed: {e}")
            raise PaymentSessionFailed("Failed to process payment") from e

        if not isinstance(data, dict):
            raise PaymentSessionFailed("Failed to process payment")

        return PaymentResult(
            session_id=data.get("sessionId", session_id),
            success=bool(data.get("success", False)),
            message=data.get("message", ""),
            url=data.get("url", ""),
        )

# app/services/notification_service.py
from decimal import Decimal

from app.celery_worker import celery_app
from app.utils.logging import get_logger

logger = get_logger(__name__)


class NotificationService:
    """
    Powiadomienia o zamowieniach, wysylane przez Celery.
    """

    @staticmethod
    def send_order_placed(order_id: int, total_price: Decimal, payment_session_id: str):
        send_order_placed_task.delay(order_id, str(total_price), payment_session_id)


@celery_app.task(name="app.services.notification_service.send_order_placed_task")
def send_order_placed_task(order_id: int, total_price: str, payment_session_id: str):
    """
    Celery task - na razie tylko loguje, docelowo email z linkiem do platnosci.
    """
    logger.info(
        f"[NOTIFICATION] Order {order_id} placed, awaiting payment",
        total_price=total_price,
        payment_session_id=payment_session_id,
    )
    return {"order_id": order_id, "status": "sent"}

# app/repos/order_repo.py
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from app.data.models.order import OrderModel
from app.domain.exceptions import StoreUnavailable
from app.utils.logging import get_logger

logger = get_logger(__name__)


class OrderRepo:
    def __init__(self, db: Session):
        self.db = db

    def create_order(self, order: OrderModel) -> OrderModel:
        try:
            self.db.add(order)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Persisting order failed: {e}")
            raise StoreUnavailable("Nie udalo sie zapisac zamowienia") from e

        self.db.refresh(order)
        return order

    def get_order(self, order_id: int) -> OrderModel | None:
        try:
            return self.db.execute(
                select(OrderModel)
                .options(selectinload(OrderModel.items))
                .where(OrderModel.id == order_id)
            ).scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Order {order_id} lookup failed: {e}")
            raise StoreUnavailable("Magazyn zamowien niedostepny") from e

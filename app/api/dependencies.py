# app/api/dependencies.py
from functools import lru_cache

import redis
from fastapi import Depends
from sqlalchemy.orm import Session

from app.data.database import get_db
from app.repos.book_repo import BookRepo
from app.repos.cart_repo import CartRepo
from app.repos.order_repo import OrderRepo
from app.services.book_service import BookService
from app.services.cart_service import CartService
from app.services.notification_service import NotificationService
from app.services.order_service import OrderService
from app.services.payment_gateway import PaymentGateway
from app.utils.settings import REDIS_URL


@lru_cache
def get_redis() -> redis.Redis:
    #jeden pool polaczen na proces
    return redis.Redis.from_url(REDIS_URL, decode_responses=True)


def get_book_service(db: Session = Depends(get_db)) -> BookService:
    return BookService(BookRepo(db))


def get_cart_service(book_service: BookService = Depends(get_book_service)) -> CartService:
    return CartService(
        cart_repo=CartRepo(get_redis()),
        book_service=book_service,
    )


def get_payment_gateway() -> PaymentGateway:
    return PaymentGateway()


def get_order_service(
    db: Session = Depends(get_db),
    book_service: BookService = Depends(get_book_service),
    cart_service: CartService = Depends(get_cart_service),
    payment_gateway: PaymentGateway = Depends(get_payment_gateway),
) -> OrderService:
    return OrderService(
        cart_service=cart_service,
        book_service=book_service,
        payment_gateway=payment_gateway,
        order_repo=OrderRepo(db),
        notification_service=NotificationService(),
    )

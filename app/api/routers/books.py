# app/api/routers/books.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from app.api.dependencies import get_book_service
from app.api.errors import to_http
from app.domain.exceptions import UpstreamUnavailable
from app.domain.schemas import BookOut
from app.services.book_service import BookService

router = APIRouter(prefix="/books", tags=["books"])


@router.get("/", response_model=List[BookOut])
def get_default_books(svc: BookService = Depends(get_book_service)):
    try:
        return svc.get_default_books()
    except UpstreamUnavailable as e:
        raise to_http(e)


@router.get("/{book_id}", response_model=BookOut)
def get_book(book_id: str, svc: BookService = Depends(get_book_service)):
    try:
        book = svc.get_book(book_id)
    except UpstreamUnavailable as e:
        raise to_http(e)
    if book is None:
        raise HTTPException(status_code=404, detail="Ksiazka nie znaleziona")
    return book

# app/api/errors.py
from fastapi import HTTPException

from app.domain.exceptions import BookstoreError


def to_http(error: BookstoreError) -> HTTPException:
    return HTTPException(status_code=error.status_code, detail=error.message)

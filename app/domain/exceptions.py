# app/domain/exceptions.py


class BookstoreError(Exception):
    """Baza dla bledow domenowych, status_code uzywa warstwa HTTP."""

    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidArgument(BookstoreError):
    status_code = 400


class NotFound(BookstoreError):
    status_code = 404


class OrderNotFound(NotFound):
    pass


class Conflict(BookstoreError):
    status_code = 409


class CartAlreadyExists(Conflict):
    """SET NX nie przeszedl - pod tym kluczem juz jest koszyk."""

    def __init__(self, cart_id: str):
        self.cart_id = cart_id
        super().__init__(f"Koszyk {cart_id} juz istnieje")


class UpstreamUnavailable(BookstoreError):
    status_code = 503


class StoreUnavailable(UpstreamUnavailable):
    pass


class CatalogUnavailable(UpstreamUnavailable):
    pass


class PaymentSessionFailed(BookstoreError):
    status_code = 502

"""Errors raised by the cart service and its stores.

Every error carries the HTTP status the API layer answers with, so routers
never have to translate them one by one.
"""


class CartError(Exception):
    status_code = 400

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class InvalidArgument(CartError):
    status_code = 400


class NotFound(CartError):
    status_code = 404


class InsufficientFunds(CartError):
    status_code = 402


class StoreFailure(CartError):
    status_code = 503


class CartResetError(StoreFailure):
    """Payment went through but the cart could not be emptied afterwards.

    ``payment`` holds the computed payment so the caller can record it and
    retry the reset instead of charging again.
    """

    def __init__(self, detail: str, payment):
        super().__init__(detail)
        self.payment = payment

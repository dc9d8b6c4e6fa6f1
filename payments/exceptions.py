from typing import Iterable, Optional

from rest_framework import status


class PaymentError(Exception):
    def __init__(self, message: str, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(message)
        self.status_code = status_code


class UnknownPaymentMethod(PaymentError):
    """Raised when no processor exists for the requested payment method.

    `method` keeps the offending value as received, so callers can report it
    back without re-parsing the request.
    """

    def __init__(self, method, supported: Optional[Iterable[str]] = None):
        message = f"unsupported payment_method: {method!r}"
        if supported:
            message += f" (supported: {', '.join(supported)})"
        super().__init__(message, status.HTTP_422_UNPROCESSABLE_ENTITY)
        self.method = method


class InvalidAmount(PaymentError):
    def __init__(self, message: str = "amount must be a number"):
        super().__init__(message, status.HTTP_400_BAD_REQUEST)

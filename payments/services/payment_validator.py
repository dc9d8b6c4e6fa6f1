from decimal import Decimal
from typing import Tuple

from payments.exceptions import InvalidAmount, UnknownPaymentMethod
from payments.methods import PaymentMethod

from .processors import as_decimal


def validate_payment_method(payment_method) -> PaymentMethod:
    if payment_method is None or payment_method == "":
        raise UnknownPaymentMethod(payment_method, supported=PaymentMethod.values())
    return PaymentMethod.parse(payment_method)


def validate_amount(amount) -> Decimal:
    if amount is None:
        raise InvalidAmount("amount required")
    value = as_decimal(amount)
    if value <= 0:
        raise InvalidAmount("amount must be > 0")
    if Decimal(str(amount).strip()).as_tuple().exponent < -2:
        raise InvalidAmount("amount must have at most 2 decimal places")
    return value


def validate_payment_request_data(data: dict) -> Tuple[PaymentMethod, Decimal]:
    """Run all validations for a payment payload. Raises PaymentError on error."""
    method = validate_payment_method(data.get("payment_method"))
    amount = validate_amount(data.get("amount"))
    return method, amount

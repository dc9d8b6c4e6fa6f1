from payments.exceptions import UnknownPaymentMethod
from payments.methods import PaymentMethod

from .processors import CreditCardProcessor, PaymentProcessor, PaypalProcessor, PixProcessor


def create_processor(method: PaymentMethod) -> PaymentProcessor:
    """Construct the processor for `method` by switching over every member.

    Adding a PaymentMethod member without a branch here makes
    `build_manual_registry` fail at startup.
    """
    if method is PaymentMethod.CREDIT_CARD:
        return CreditCardProcessor()
    if method is PaymentMethod.PIX:
        return PixProcessor()
    if method is PaymentMethod.PAYPAL:
        return PaypalProcessor()
    raise UnknownPaymentMethod(method, supported=PaymentMethod.values())

import logging
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from types import MappingProxyType
from typing import Dict, Mapping, Type

from django.core.exceptions import ImproperlyConfigured

from payments.exceptions import InvalidAmount
from payments.methods import PaymentMethod

logger = logging.getLogger(__name__)

CURRENCY = "BRL"


def as_decimal(amount) -> Decimal:
    """Coerce `amount` to a Decimal with two places. Raises InvalidAmount."""
    if isinstance(amount, bool):
        raise InvalidAmount()
    try:
        value = Decimal(str(amount).strip())
    except (InvalidOperation, ValueError):
        raise InvalidAmount()
    if not value.is_finite():
        raise InvalidAmount()
    try:
        return value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    except InvalidOperation:
        # more digits than the decimal context can hold once rounded to cents
        raise InvalidAmount("amount out of range")


class PaymentProcessor:
    """Handles a payment for a single payment method.

    Processors are stateless: `process` has no effect other than writing
    one line to stdout and logging it. Subclasses are bound to their
    method by @register_processor.
    """

    method: PaymentMethod

    def describe(self, amount) -> str:
        return f"{self.method.label} payment processing {as_decimal(amount):.2f} {CURRENCY}"

    def process(self, amount) -> None:
        line = self.describe(amount)
        logger.info("%s payment processed", self.method.label, extra={"payment_method": self.method.value})
        print(line)


_processor_registry: Dict[PaymentMethod, Type[PaymentProcessor]] = {}


def register_processor(method: PaymentMethod):
    def _decorator(cls):
        if not (isinstance(cls, type) and issubclass(cls, PaymentProcessor)):
            raise ImproperlyConfigured(f"{cls!r} must inherit from PaymentProcessor")
        existing = _processor_registry.get(method)
        if existing is not None and existing is not cls:
            raise ImproperlyConfigured(
                f"{method.value} is already handled by {existing.__name__}, cannot register {cls.__name__}"
            )
        cls.method = method
        _processor_registry[method] = cls
        return cls

    return _decorator


def registered_processors() -> Mapping[PaymentMethod, Type[PaymentProcessor]]:
    """Return a read-only view of the declared processor classes."""
    return MappingProxyType(_processor_registry)


@register_processor(PaymentMethod.CREDIT_CARD)
class CreditCardProcessor(PaymentProcessor):
    """Card payments."""


@register_processor(PaymentMethod.PIX)
class PixProcessor(PaymentProcessor):
    """Instant transfers through Pix."""


@register_processor(PaymentMethod.PAYPAL)
class PaypalProcessor(PaymentProcessor):
    """Payments through a Paypal account."""

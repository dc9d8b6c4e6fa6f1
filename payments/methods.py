from enum import Enum
from typing import List, Tuple

from .exceptions import UnknownPaymentMethod


class PaymentMethod(str, Enum):
    """Closed set of payment methods a processor can be registered for."""

    CREDIT_CARD = "credit_card"
    PIX = "pix"
    PAYPAL = "paypal"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def parse(cls, value) -> "PaymentMethod":
        """Return the member matching `value` by value or name, ignoring case.

        Raises UnknownPaymentMethod for anything outside the enumeration.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if key in (member.value, member.name.lower()):
                    return member
        raise UnknownPaymentMethod(value, supported=cls.values())

    @classmethod
    def choices(cls) -> List[Tuple[str, str]]:
        return [(member.value, member.label) for member in cls]

    @classmethod
    def values(cls) -> List[str]:
        return [member.value for member in cls]


_LABELS = {
    PaymentMethod.CREDIT_CARD: "Credit card",
    PaymentMethod.PIX: "Pix",
    PaymentMethod.PAYPAL: "Paypal",
}

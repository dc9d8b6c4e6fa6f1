import logging
from decimal import Decimal
from typing import List, Optional, Tuple

from payments.methods import PaymentMethod

from .payment_validator import validate_amount, validate_payment_method
from .registry import StrategyRegistry, get_registry

logger = logging.getLogger(__name__)

DEMO_PAYMENTS: Tuple[Tuple[PaymentMethod, Decimal], ...] = (
    (PaymentMethod.PIX, Decimal("100")),
    (PaymentMethod.PAYPAL, Decimal("110")),
    (PaymentMethod.CREDIT_CARD, Decimal("300")),
)


def process_payment(payment_method, amount, registry: Optional[StrategyRegistry] = None) -> str:
    """Resolve the processor for `payment_method` and hand it `amount`.

    Returns the line the processor wrote. Raises UnknownPaymentMethod or
    InvalidAmount before any processor runs.
    """
    method = validate_payment_method(payment_method)
    value = validate_amount(amount)
    if registry is None:
        registry = get_registry()
    processor = registry.resolve(method)
    processor.process(value)
    return processor.describe(value)


def run_demo(registry: Optional[StrategyRegistry] = None) -> List[str]:
    if registry is None:
        registry = get_registry()
    logger.info("running payment demo with %r", registry)
    return [process_payment(method, amount, registry=registry) for method, amount in DEMO_PAYMENTS]

from .checkout import process_payment, run_demo
from .processors import PaymentProcessor, register_processor
from .registry import StrategyRegistry, get_registry

__all__ = [
    "PaymentProcessor",
    "StrategyRegistry",
    "get_registry",
    "process_payment",
    "register_processor",
    "run_demo",
]

import logging
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from payments.exceptions import UnknownPaymentMethod
from payments.methods import PaymentMethod

from .factory import create_processor
from .processors import PaymentProcessor, registered_processors

logger = logging.getLogger(__name__)

MANUAL = "manual"
REGISTERED = "registered"


class StrategyRegistry:
    """Read-only mapping from PaymentMethod to the processor that handles it.

    The mapping must cover every PaymentMethod member; a registry that cannot
    serve one of them is never built.
    """

    def __init__(self, processors: Mapping[PaymentMethod, PaymentProcessor], name: str = ""):
        missing = [m.value for m in PaymentMethod if m not in processors]
        if missing:
            raise ImproperlyConfigured(f"no processor registered for: {', '.join(missing)}")
        for method, processor in processors.items():
            if not isinstance(method, PaymentMethod):
                raise ImproperlyConfigured(f"registry keys must be PaymentMethod members, got {method!r}")
            if not isinstance(processor, PaymentProcessor):
                raise ImproperlyConfigured(f"{processor!r} is not a PaymentProcessor")
        self.name = name
        # enum order, independent of registration order
        self._processors = MappingProxyType({m: processors[m] for m in PaymentMethod})

    def resolve(self, method: PaymentMethod) -> PaymentProcessor:
        if not isinstance(method, PaymentMethod):
            raise UnknownPaymentMethod(method, supported=PaymentMethod.values())
        processor = self._processors.get(method)
        if processor is None:
            raise UnknownPaymentMethod(method, supported=PaymentMethod.values())
        logger.debug("resolved %s to %s", method.value, type(processor).__name__)
        return processor

    def methods(self) -> List[PaymentMethod]:
        return list(self._processors)

    def items(self) -> List[Tuple[PaymentMethod, PaymentProcessor]]:
        return list(self._processors.items())

    def __contains__(self, method) -> bool:
        return isinstance(method, PaymentMethod) and method in self._processors

    def __iter__(self) -> Iterator[PaymentMethod]:
        return iter(self._processors)

    def __len__(self) -> int:
        return len(self._processors)

    def __repr__(self):
        return f"<StrategyRegistry {self.name or 'unnamed'}: {', '.join(m.value for m in self._processors)}>"


def build_manual_registry() -> StrategyRegistry:
    """Build a registry by asking the factory for each member in turn."""
    processors: Dict[PaymentMethod, PaymentProcessor] = {}
    for method in PaymentMethod:
        try:
            processors[method] = create_processor(method)
        except UnknownPaymentMethod as e:
            raise ImproperlyConfigured(f"processor factory does not handle {method.value}: {e}")
    return StrategyRegistry(processors, name=MANUAL)


def build_registered_registry() -> StrategyRegistry:
    """Build a registry from the classes declared with @register_processor."""
    processors = {method: cls() for method, cls in registered_processors().items()}
    return StrategyRegistry(processors, name=REGISTERED)


_builders = {
    MANUAL: build_manual_registry,
    REGISTERED: build_registered_registry,
}

_registries: Dict[str, StrategyRegistry] = {}


def available_strategies() -> List[str]:
    return list(_builders.keys())


def get_registry(strategy: Optional[str] = None) -> StrategyRegistry:
    """Return the shared registry for `strategy`, building it on first use.

    When `strategy` is None the PAYMENT_REGISTRY_STRATEGY setting is used.
    """
    if strategy is None:
        strategy = getattr(settings, "PAYMENT_REGISTRY_STRATEGY", REGISTERED)
    if not isinstance(strategy, str):
        raise ImproperlyConfigured(f"payment registry strategy must be a string, got {strategy!r}")
    strategy = strategy.lower()
    builder = _builders.get(strategy)
    if builder is None:
        raise ImproperlyConfigured(
            f"unknown payment registry strategy: {strategy} (available: {', '.join(available_strategies())})"
        )
    registry = _registries.get(strategy)
    if registry is None:
        registry = builder()
        _registries[strategy] = registry
        logger.info("built %s payment registry with %d processors", strategy, len(registry))
    return registry


def reset_registries() -> None:
    _registries.clear()

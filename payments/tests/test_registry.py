import io
from contextlib import redirect_stdout

from django.apps import apps
from django.core.exceptions import ImproperlyConfigured
from django.test import SimpleTestCase, override_settings

from payments.exceptions import UnknownPaymentMethod
from payments.methods import PaymentMethod
from payments.services.processors import PaymentProcessor, PixProcessor
from payments.services.registry import (
    MANUAL,
    REGISTERED,
    StrategyRegistry,
    build_manual_registry,
    build_registered_registry,
    get_registry,
    reset_registries,
)


def captured(processor, amount):
    out = io.StringIO()
    with redirect_stdout(out):
        processor.process(amount)
    return out.getvalue()


class StrategyRegistryTests(SimpleTestCase):
    builders = (build_manual_registry, build_registered_registry)

    def test_resolves_every_method(self):
        for build in self.builders:
            registry = build()
            for method in PaymentMethod:
                processor = registry.resolve(method)
                self.assertIsInstance(processor, PaymentProcessor)
                self.assertIs(processor.method, method)
                captured(processor, 1)

    def test_scenarios(self):
        cases = [
            (PaymentMethod.PIX, 100, "Pix"),
            (PaymentMethod.PAYPAL, 110, "Paypal"),
            (PaymentMethod.CREDIT_CARD, 300, "Credit card"),
        ]
        for build in self.builders:
            registry = build()
            for method, amount, label in cases:
                output = captured(registry.resolve(method), amount)
                self.assertIn(label, output)
                self.assertIn(str(amount), output)

    def test_resolve_is_repeatable(self):
        registry = build_registered_registry()
        first = captured(registry.resolve(PaymentMethod.PAYPAL), 42)
        second = captured(registry.resolve(PaymentMethod.PAYPAL), 42)
        self.assertEqual(first, second)

    def test_both_strategies_behave_the_same(self):
        manual = build_manual_registry()
        registered = build_registered_registry()
        for method in PaymentMethod:
            self.assertEqual(
                captured(manual.resolve(method), "12.50"),
                captured(registered.resolve(method), "12.50"),
            )
            self.assertIs(type(manual.resolve(method)), type(registered.resolve(method)))

    def test_unknown_discriminant_raises(self):
        registry = build_registered_registry()
        sentinel = object()
        for value in ("pix", "Pix", None, sentinel, 0):
            with self.assertRaises(UnknownPaymentMethod) as ctx:
                registry.resolve(value)
            self.assertIs(ctx.exception.method, value)
            self.assertNotIn(value, registry)

    def test_incomplete_mapping_rejected(self):
        with self.assertRaises(ImproperlyConfigured) as ctx:
            StrategyRegistry({PaymentMethod.PIX: PixProcessor()})
        self.assertIn("credit_card", str(ctx.exception))
        self.assertIn("paypal", str(ctx.exception))

    def test_string_keys_rejected(self):
        processors = {m.value: PixProcessor() for m in PaymentMethod}
        with self.assertRaises(ImproperlyConfigured):
            StrategyRegistry(processors)

    def test_non_processor_values_rejected(self):
        with self.assertRaises(ImproperlyConfigured):
            StrategyRegistry({m: object() for m in PaymentMethod})

    def test_mapping_is_read_only(self):
        registry = build_manual_registry()
        with self.assertRaises(TypeError):
            registry._processors[PaymentMethod.PIX] = None

    def test_mapping_copied_at_construction(self):
        source = {m: PixProcessor() for m in PaymentMethod}
        registry = StrategyRegistry(source)
        source.pop(PaymentMethod.PAYPAL)
        self.assertIn(PaymentMethod.PAYPAL, registry)
        self.assertEqual(len(registry), 3)

    def test_methods_in_enum_order(self):
        registry = build_registered_registry()
        self.assertEqual(registry.methods(), list(PaymentMethod))
        self.assertEqual(list(registry), list(PaymentMethod))
        self.assertEqual([m for m, _ in registry.items()], list(PaymentMethod))


class GetRegistryTests(SimpleTestCase):
    def setUp(self):
        reset_registries()
        self.addCleanup(reset_registries)

    def test_built_once_per_strategy(self):
        self.assertIs(get_registry(MANUAL), get_registry(MANUAL))
        self.assertIsNot(get_registry(MANUAL), get_registry(REGISTERED))
        self.assertEqual(get_registry("MANUAL").name, MANUAL)

    @override_settings(PAYMENT_REGISTRY_STRATEGY="manual")
    def test_strategy_from_settings(self):
        self.assertEqual(get_registry().name, MANUAL)

    def test_defaults_to_registered(self):
        self.assertEqual(get_registry().name, REGISTERED)

    def test_unknown_strategy_rejected(self):
        with self.assertRaises(ImproperlyConfigured):
            get_registry("reflection")

    def test_non_string_strategy_rejected(self):
        for value in (None, 3, ["manual"]):
            with self.subTest(value=value), self.settings(PAYMENT_REGISTRY_STRATEGY=value):
                with self.assertRaises(ImproperlyConfigured):
                    get_registry()
        with self.assertRaises(ImproperlyConfigured):
            get_registry(3)


class PaymentsConfigTests(SimpleTestCase):
    def test_app_declares_no_model_settings(self):
        config = apps.get_app_config("payments")
        self.assertEqual(list(config.get_models()), [])
        self.assertNotIn("default_auto_field", type(config).__dict__)

from django.core.exceptions import ImproperlyConfigured
from django.core.management.base import BaseCommand, CommandError

from payments.exceptions import PaymentError
from payments.services.checkout import run_demo
from payments.services.registry import available_strategies, get_registry


class Command(BaseCommand):
    help = "Processes the demo payments (Pix 100, Paypal 110, Credit card 300) through a payment registry"

    def add_arguments(self, parser):
        parser.add_argument(
            "--registry",
            choices=available_strategies(),
            default=None,
            help="Registry construction strategy (defaults to PAYMENT_REGISTRY_STRATEGY)",
        )

    def handle(self, *args, **options):
        try:
            registry = get_registry(options["registry"])
            lines = run_demo(registry=registry)
        except (PaymentError, ImproperlyConfigured) as e:
            raise CommandError(str(e))
        self.stdout.write(self.style.SUCCESS(f"Processed {len(lines)} payments with the {registry.name} registry"))

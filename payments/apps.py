from django.apps import AppConfig


class PaymentsConfig(AppConfig):
    name = "payments"

    def ready(self):
        # build the configured registry once, before any request is served
        from payments.services.registry import get_registry

        get_registry()

from django.urls import path

from .views import PaymentMethodsView, PaymentView

urlpatterns = [
    path("payments", PaymentView.as_view(), name="payments"),
    path("payment-methods", PaymentMethodsView.as_view(), name="payment-methods"),
]

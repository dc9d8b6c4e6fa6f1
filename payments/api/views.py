import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from payments.exceptions import PaymentError
from payments.methods import PaymentMethod
from payments.services.checkout import process_payment
from payments.services.payment_validator import validate_payment_request_data
from payments.services.registry import get_registry

from .serializers import PaymentRequestSerializer, PaymentResponseSerializer

logger = logging.getLogger(__name__)


class PaymentMethodsView(APIView):
    def get(self, request):
        return Response([{"value": value, "label": label} for value, label in PaymentMethod.choices()])


class PaymentView(APIView):
    def post(self, request):
        serializer = PaymentRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            method, amount = validate_payment_request_data(data)
            registry = get_registry(data.get("registry"))
            message = process_payment(method, amount, registry=registry)
        except PaymentError as e:
            logger.warning("payment rejected: %s", e)
            return Response({"detail": str(e)}, status=e.status_code)

        resp = PaymentResponseSerializer(
            {"payment_method": method.value, "label": method.label, "amount": amount, "message": message}
        )
        return Response(resp.data, status=status.HTTP_200_OK)

from rest_framework import serializers

from payments.services.registry import available_strategies


class PaymentRequestSerializer(serializers.Serializer):
    amount = serializers.DecimalField(max_digits=12, decimal_places=2)
    payment_method = serializers.CharField()
    registry = serializers.ChoiceField(choices=available_strategies(), required=False, allow_null=True)


class PaymentResponseSerializer(serializers.Serializer):
    payment_method = serializers.CharField()
    label = serializers.CharField()
    amount = serializers.DecimalField(max_digits=12, decimal_places=2)
    message = serializers.CharField()

"""Serializers for purchase requests and responses.

Request serializers check the JSON shape only; ticket types, quantities and
account ids are passed through unchanged and validated by the domain.
"""

from rest_framework import serializers


class TicketRequestSerializer(serializers.Serializer):
    """One requested ticket type and quantity."""

    ticket_type = serializers.JSONField()
    quantity = serializers.JSONField()


class PurchaseRequestSerializer(serializers.Serializer):
    """Body of POST /api/purchases."""

    account_id = serializers.JSONField()
    tickets = TicketRequestSerializer(many=True, allow_empty=True)


class PurchaseResultSerializer(serializers.Serializer):
    """Serializer for the PurchaseResult domain model."""

    success = serializers.BooleanField()
    message = serializers.CharField()
    account_id = serializers.IntegerField(source="account_id.value")
    total_price = serializers.DecimalField(
        max_digits=12, decimal_places=2, source="total_price.amount"
    )
    total_seats = serializers.IntegerField()

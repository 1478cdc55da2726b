"""
apps.rate_tables.serializers
~~~~~~~~~~~~~~~~~~~~~~~~~~~~
I/O-only serializers for the Rate Tables API.
No business logic; shape validation only.
"""
from rest_framework import serializers


class ColumnSerializer(serializers.Serializer):
    key = serializers.CharField(max_length=191, allow_blank=True)
    label = serializers.CharField(max_length=255, allow_blank=True)


class RateTableSerializer(serializers.Serializer):
    """One table: ordered columns and rows keyed by column key."""

    columns = ColumnSerializer(many=True)
    rows = serializers.ListField(
        child=serializers.DictField(child=serializers.CharField(allow_blank=True)),
    )


class RateTableSetSerializer(serializers.Serializer):
    """Validates PUT /rate-tables/ and shapes GET /rate-tables/."""

    certificate_rates = RateTableSerializer()
    savings_rates = RateTableSerializer()

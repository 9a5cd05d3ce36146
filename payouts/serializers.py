from rest_framework import serializers

from .models import Payout
from .utils.months import is_overdue, validate_month_key


class PayoutInvestorSerializer(serializers.Serializer):
    id = serializers.UUIDField(read_only=True)
    name = serializers.CharField(read_only=True)
    email = serializers.EmailField(read_only=True)
    phone_number = serializers.CharField(read_only=True)
    invested_amount = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)


class PayoutSerializer(serializers.ModelSerializer):
    """Payout with the investor fields the payouts table shows"""

    investment = PayoutInvestorSerializer(read_only=True)
    is_overdue = serializers.SerializerMethodField()

    class Meta:
        model = Payout
        fields = [
            'id', 'investment', 'month_year', 'payout_amount', 'status',
            'date_paid', 'notes', 'is_overdue', 'created_at', 'updated_at'
        ]
        read_only_fields = fields

    def get_is_overdue(self, obj):
        return is_overdue(obj.status, obj.month_year, self.context.get('today'))


class MonthField(serializers.CharField):
    def to_internal_value(self, data):
        value = super().to_internal_value(data)
        validate_month_key(value)
        return value


class GeneratePayoutsSerializer(serializers.Serializer):
    month = MonthField(required=False)


class PayoutStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=Payout.STATUS_CHOICES)
    date_paid = serializers.DateField(required=False, allow_null=True)
    notes = serializers.CharField(required=False, allow_blank=True)


class MarkPaidSerializer(serializers.Serializer):
    date_paid = serializers.DateField(required=False, allow_null=True)
    notes = serializers.CharField(required=False, allow_blank=True)


class UndoPaidSerializer(serializers.Serializer):
    notes = serializers.CharField(required=False, allow_blank=True)


class PayoutSummarySerializer(serializers.Serializer):
    month = serializers.CharField()
    total_required = serializers.DecimalField(max_digits=16, decimal_places=2)
    total_paid = serializers.DecimalField(max_digits=16, decimal_places=2)
    pending_payouts = serializers.DecimalField(max_digits=16, decimal_places=2)
    paid_count = serializers.IntegerField()
    unpaid_count = serializers.IntegerField()

from rest_framework import serializers

from site_settings.models import SiteSettings
from .models import Investment
from .utils.calculations import derive_payout


class InvestmentSerializer(serializers.ModelSerializer):
    """Serializer for Investment model"""

    is_active = serializers.ReadOnlyField()

    class Meta:
        model = Investment
        fields = [
            'id', 'name', 'email', 'phone_number', 'invested_amount',
            'investment_date', 'investment_type', 'return_percentage',
            'monthly_payout', 'upi_transaction_id', 'total_paid_out', 'notes',
            'status', 'is_active', 'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'monthly_payout', 'created_at', 'updated_at']
        extra_kwargs = {
            'return_percentage': {'required': False},
        }

    def validate_invested_amount(self, value):
        if value < 0:
            raise serializers.ValidationError("Invested amount cannot be negative")
        return value

    def validate_return_percentage(self, value):
        if value < 0 or value > 100:
            raise serializers.ValidationError("Return percentage must be between 0 and 100")
        return value

    def validate_total_paid_out(self, value):
        if value < 0:
            raise serializers.ValidationError("Total paid out cannot be negative")
        return value

    def create(self, validated_data):
        """Apply the default return percentage and derive the monthly payout"""
        if 'return_percentage' not in validated_data:
            validated_data['return_percentage'] = SiteSettings.get_default_return_percentage()

        validated_data['monthly_payout'] = derive_payout(
            validated_data['invested_amount'],
            validated_data['return_percentage']
        )
        return super().create(validated_data)

    def update(self, instance, validated_data):
        """
        Re-derive the monthly payout when either term changes. Payout rows
        already generated keep the amount they were created with.
        """
        if 'invested_amount' in validated_data or 'return_percentage' in validated_data:
            validated_data['monthly_payout'] = derive_payout(
                validated_data.get('invested_amount', instance.invested_amount),
                validated_data.get('return_percentage', instance.return_percentage)
            )
        return super().update(instance, validated_data)


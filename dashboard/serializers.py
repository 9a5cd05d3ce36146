from rest_framework import serializers

from payouts.serializers import MonthField
from .models import Earnings


class EarningsSerializer(serializers.ModelSerializer):
    month_year = MonthField(max_length=7)

    class Meta:
        model = Earnings
        fields = ['id', 'month_year', 'total_earnings', 'created_at', 'updated_at']
        read_only_fields = ['id', 'created_at', 'updated_at']

    def validate_month_year(self, value):
        queryset = Earnings.objects.filter(month_year=value)
        if self.instance is not None:
            queryset = queryset.exclude(pk=self.instance.pk)
        if queryset.exists():
            raise serializers.ValidationError("Earnings for this month already exist")
        return value


class DashboardStatsSerializer(serializers.Serializer):
    month = serializers.CharField()
    total_users = serializers.IntegerField()
    active_investments = serializers.IntegerField()
    total_investment_received = serializers.DecimalField(max_digits=16, decimal_places=2)
    total_payout_this_month = serializers.DecimalField(max_digits=16, decimal_places=2)
    monthly_earnings = serializers.DecimalField(max_digits=16, decimal_places=2)
    total_profit_retained = serializers.DecimalField(max_digits=16, decimal_places=2)


class ChartPointSerializer(serializers.Serializer):
    month = serializers.CharField()
    month_year = serializers.CharField()
    total_investment = serializers.DecimalField(max_digits=16, decimal_places=2)
    monthly_earnings = serializers.DecimalField(max_digits=16, decimal_places=2)

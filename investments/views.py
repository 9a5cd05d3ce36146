import logging

from django.db.models import Sum, Count, Q
from django.utils import timezone
from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAdminUser
from rest_framework.response import Response

from reports.csv_export import export_investors_csv, csv_response
from .models import Investment
from .serializers import InvestmentSerializer

logger = logging.getLogger(__name__)


class InvestmentViewSet(viewsets.ModelViewSet):
    """Admin ViewSet for managing investors and their investment terms"""

    permission_classes = [IsAdminUser]
    serializer_class = InvestmentSerializer
    queryset = Investment.objects.all()

    ORDERING_FIELDS = [
        'name', 'email', 'phone_number', 'invested_amount', 'investment_date',
        'investment_type', 'return_percentage', 'monthly_payout',
        'total_paid_out', 'status', 'created_at', 'updated_at'
    ]
    DEFAULT_ORDERING = '-created_at'

    def get_queryset(self):
        queryset = super().get_queryset()

        # Filter by status
        status_filter = self.request.query_params.get('status', None)
        if status_filter:
            queryset = queryset.filter(status=status_filter)

        # Filter by investment type
        investment_type = self.request.query_params.get('investment_type', None)
        if investment_type:
            queryset = queryset.filter(investment_type=investment_type)

        search = self.request.query_params.get('search', None)
        if search:
            queryset = queryset.filter(
                Q(name__icontains=search) |
                Q(email__icontains=search)
            )

        ordering = self.request.query_params.get('ordering', None)
        if not ordering or ordering.lstrip('-') not in self.ORDERING_FIELDS:
            ordering = self.DEFAULT_ORDERING

        return queryset.order_by(ordering)

    def perform_create(self, serializer):
        investment = serializer.save()
        logger.info("Investment %s created for %s", investment.id, investment.email)

    def perform_update(self, serializer):
        investment = serializer.save()
        logger.info("Investment %s updated", investment.id)

    def perform_destroy(self, instance):
        investment_id = instance.id
        instance.delete()
        logger.info("Investment %s deleted", investment_id)

    @action(detail=False, methods=['get'])
    def active(self, request):
        """Get active investments"""
        active_investments = self.get_queryset().filter(
            status=Investment.STATUS_ACTIVE
        )
        serializer = self.get_serializer(active_investments, many=True)
        return Response(serializer.data)

    @action(detail=False, methods=['get'])
    def stats(self, request):
        """Get investor statistics"""
        totals = Investment.objects.aggregate(
            total_investors=Count('id'),
            active_investors=Count('id', filter=Q(status=Investment.STATUS_ACTIVE)),
            total_invested=Sum('invested_amount'),
            total_monthly_payout=Sum('monthly_payout', filter=Q(status=Investment.STATUS_ACTIVE)),
            total_paid_out=Sum('total_paid_out'),
        )

        return Response({
            'total_investors': totals['total_investors'],
            'active_investors': totals['active_investors'],
            'inactive_investors': totals['total_investors'] - totals['active_investors'],
            'total_invested': totals['total_invested'] or 0,
            'total_monthly_payout': totals['total_monthly_payout'] or 0,
            'total_paid_out': totals['total_paid_out'] or 0,
        }, status=status.HTTP_200_OK)

    @action(detail=False, methods=['get'])
    def export(self, request):
        """Download the (filtered) investor list as CSV"""
        investments = self.get_queryset()
        filename = f"investors-{timezone.localdate().isoformat()}.csv"
        return csv_response(export_investors_csv(investments), filename)

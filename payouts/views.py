import logging

from django.core.exceptions import ValidationError
from django.db import DatabaseError
from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAdminUser
from rest_framework.response import Response

from reports.csv_export import export_payouts_csv, csv_response
from .models import Payout
from .serializers import (
    PayoutSerializer,
    GeneratePayoutsSerializer,
    PayoutStatusSerializer,
    MarkPaidSerializer,
    UndoPaidSerializer,
    PayoutSummarySerializer,
)
from .services.payout_service import PayoutService
from .utils.months import current_month_key, month_options, validate_month_key

logger = logging.getLogger(__name__)


def _error_message(exc):
    return exc.messages[0] if getattr(exc, 'messages', None) else str(exc)


class PayoutViewSet(viewsets.GenericViewSet):
    """
    Admin ViewSet for monthly payouts.

    Listing a month generates any missing payout rows for Active investments
    before reading, so the table always covers every active investor.
    """

    permission_classes = [IsAdminUser]
    serializer_class = PayoutSerializer
    queryset = Payout.objects.select_related('investment')
    lookup_value_regex = '[0-9a-fA-F-]{36}'

    def get_service(self):
        return PayoutService()

    def get_month(self, request):
        month = request.query_params.get('month') or current_month_key()
        return validate_month_key(month)

    def list(self, request):
        """Get payouts for ?month=YYYY-MM (current month by default)"""
        try:
            month = self.get_month(request)
            payouts = self.get_service().list_for_month(month)
        except ValidationError as e:
            return Response({'error': _error_message(e)}, status=status.HTTP_400_BAD_REQUEST)
        except DatabaseError:
            logger.error("Failed to load payouts", exc_info=True)
            raise

        serializer = self.get_serializer(payouts, many=True)
        return Response(serializer.data)

    def retrieve(self, request, pk=None):
        try:
            payout = self.get_queryset().get(pk=pk)
        except Payout.DoesNotExist:
            return Response({'error': 'Payout not found'}, status=status.HTTP_404_NOT_FOUND)
        return Response(self.get_serializer(payout).data)

    @action(detail=False, methods=['post'])
    def generate(self, request):
        """Create missing payout rows for a month"""
        serializer = GeneratePayoutsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        month = serializer.validated_data.get('month') or current_month_key()

        try:
            created = self.get_service().ensure_payouts_for_month(month)
        except DatabaseError:
            logger.error("Payout generation failed for %s", month, exc_info=True)
            raise

        return Response({'month': month, 'created': created}, status=status.HTTP_200_OK)

    @action(detail=False, methods=['get'])
    def summary(self, request):
        """Get payout totals for ?month=YYYY-MM"""
        try:
            month = self.get_month(request)
        except ValidationError as e:
            return Response({'error': _error_message(e)}, status=status.HTTP_400_BAD_REQUEST)

        summary = self.get_service().summarize(month)
        return Response(PayoutSummarySerializer(summary).data)

    @action(detail=False, methods=['get'])
    def months(self, request):
        """Get the month picker options"""
        return Response({
            'current': current_month_key(),
            'options': month_options(),
        })

    @action(detail=False, methods=['get'])
    def export(self, request):
        """Download a month's payouts as CSV"""
        try:
            month = self.get_month(request)
        except ValidationError as e:
            return Response({'error': _error_message(e)}, status=status.HTTP_400_BAD_REQUEST)

        payouts = self.get_service().list_for_month(month)
        return csv_response(export_payouts_csv(payouts), f"payouts-{month}.csv")

    @action(detail=True, methods=['patch'], url_path='status')
    def set_status(self, request, pk=None):
        """Set a payout to Paid or Not Paid"""
        serializer = PayoutStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        return self._transition(
            pk,
            data['status'],
            date_paid=data.get('date_paid'),
            notes=data.get('notes'),
        )

    @action(detail=True, methods=['post'], url_path='mark-paid')
    def mark_paid(self, request, pk=None):
        """Mark a payout as paid"""
        serializer = MarkPaidSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        return self._transition(
            pk,
            Payout.STATUS_PAID,
            date_paid=data.get('date_paid'),
            notes=data.get('notes'),
        )

    @action(detail=True, methods=['post'])
    def undo(self, request, pk=None):
        """Revert a paid payout back to Not Paid"""
        serializer = UndoPaidSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        return self._transition(
            pk,
            Payout.STATUS_NOT_PAID,
            notes=serializer.validated_data.get('notes'),
        )

    def _transition(self, pk, new_status, date_paid=None, notes=None):
        try:
            payout = self.get_service().set_payout_status(
                pk, new_status, date_paid=date_paid, notes=notes
            )
        except Payout.DoesNotExist:
            return Response({'error': 'Payout not found'}, status=status.HTTP_404_NOT_FOUND)
        except ValidationError as e:
            return Response({'error': _error_message(e)}, status=status.HTTP_400_BAD_REQUEST)

        payout = self.get_queryset().get(pk=payout.pk)
        return Response(self.get_serializer(payout).data)

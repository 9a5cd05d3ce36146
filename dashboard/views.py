from rest_framework import viewsets
from rest_framework.permissions import IsAdminUser
from rest_framework.response import Response
from rest_framework.views import APIView

from .models import Earnings
from .serializers import EarningsSerializer, DashboardStatsSerializer, ChartPointSerializer
from .services.stats import dashboard_stats, chart_data


class DashboardStatsView(APIView):
    """Get the dashboard headline figures for the current month"""

    permission_classes = [IsAdminUser]

    def get(self, request):
        return Response(DashboardStatsSerializer(dashboard_stats()).data)


class ChartDataView(APIView):
    """Get the six month investment / earnings series"""

    permission_classes = [IsAdminUser]

    def get(self, request):
        return Response(ChartPointSerializer(chart_data(), many=True).data)


class EarningsViewSet(viewsets.ModelViewSet):
    """Admin ViewSet for monthly earnings figures"""

    permission_classes = [IsAdminUser]
    serializer_class = EarningsSerializer
    queryset = Earnings.objects.all()

    def get_queryset(self):
        queryset = super().get_queryset()

        month_year = self.request.query_params.get('month_year', None)
        if month_year:
            queryset = queryset.filter(month_year=month_year)

        return queryset

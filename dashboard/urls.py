from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

router = DefaultRouter()
router.register(r'earnings', views.EarningsViewSet, basename='earnings')

urlpatterns = [
    path('', include(router.urls)),
    path('stats/', views.DashboardStatsView.as_view(), name='dashboard-stats'),
    path('chart/', views.ChartDataView.as_view(), name='dashboard-chart'),
]

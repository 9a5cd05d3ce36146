"""
URL configuration for payout_desk project.
"""
from django.contrib import admin
from django.urls import path, include
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

urlpatterns = [
    # ===== ADMIN =====
    path('superadmin/', admin.site.urls),

    # ===== AUTH =====
    path('api/token/', TokenObtainPairView.as_view(), name='token_obtain_pair'),
    path('api/token/refresh/', TokenRefreshView.as_view(), name='token_refresh'),

    # ===== INVESTORS =====
    path('api/', include('investments.urls')),

    # ===== PAYOUTS =====
    path('api/', include('payouts.urls')),

    # ===== SETTINGS =====
    path('api/settings/', include('site_settings.urls')),

    # ===== DASHBOARD =====
    path('api/dashboard/', include('dashboard.urls')),
]

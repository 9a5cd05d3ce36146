from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

router = DefaultRouter()
router.register(r'investments', views.InvestmentViewSet, basename='investment')

urlpatterns = [
    path('', include(router.urls)),
]

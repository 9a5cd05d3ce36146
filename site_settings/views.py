import logging

from rest_framework import status
from rest_framework.permissions import IsAdminUser
from rest_framework.response import Response
from rest_framework.views import APIView

from .models import SiteSettings
from .serializers import SiteSettingsSerializer

logger = logging.getLogger(__name__)


class SiteSettingsView(APIView):
    """Read and update the global settings row"""

    permission_classes = [IsAdminUser]

    def get(self, request):
        instance = SiteSettings.load()
        if instance is None:
            # Nothing stored yet, report the defaults
            return Response({
                'default_return_percentage': str(SiteSettings.get_default_return_percentage()),
                'admin_email': None,
                'admin_contact_info': None,
                'created_at': None,
                'updated_at': None,
            })
        return Response(SiteSettingsSerializer(instance).data)

    def put(self, request):
        return self._save(request, partial=False)

    def patch(self, request):
        return self._save(request, partial=True)

    def _save(self, request, partial):
        serializer = SiteSettingsSerializer(
            SiteSettings.load(), data=request.data, partial=partial
        )
        serializer.is_valid(raise_exception=True)
        instance = SiteSettings.upsert(**serializer.validated_data)
        logger.info("Settings updated: %s", sorted(serializer.validated_data))
        return Response(SiteSettingsSerializer(instance).data, status=status.HTTP_200_OK)

from rest_framework import serializers
from .models import SiteSettings


class SiteSettingsSerializer(serializers.ModelSerializer):
    """Serializer for the global settings row"""

    class Meta:
        model = SiteSettings
        fields = [
            'default_return_percentage', 'admin_email', 'admin_contact_info',
            'created_at', 'updated_at'
        ]
        read_only_fields = ['created_at', 'updated_at']

from django.contrib import admin
from .models import Payout


@admin.register(Payout)
class PayoutAdmin(admin.ModelAdmin):
    list_display = ['investment', 'month_year', 'payout_amount', 'status', 'date_paid']
    list_filter = ['status', 'month_year']
    search_fields = ['investment__name', 'investment__email']
    readonly_fields = ['id', 'investment', 'month_year', 'payout_amount', 'created_at', 'updated_at']

    def has_add_permission(self, request):
        # Rows only come from monthly generation
        return False

    def has_delete_permission(self, request, obj=None):
        return False

from django.contrib import admin
from .models import Investment


@admin.register(Investment)
class InvestmentAdmin(admin.ModelAdmin):
    list_display = [
        'name', 'email', 'invested_amount', 'return_percentage',
        'monthly_payout', 'investment_type', 'status', 'investment_date'
    ]
    list_filter = ['status', 'investment_type']
    search_fields = ['name', 'email', 'phone_number', 'upi_transaction_id']
    readonly_fields = ['id', 'monthly_payout', 'created_at', 'updated_at']

    def save_model(self, request, obj, form, change):
        if not change or {'invested_amount', 'return_percentage'} & set(form.changed_data):
            obj.refresh_monthly_payout()
        super().save_model(request, obj, form, change)

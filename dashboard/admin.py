from django.contrib import admin
from .models import Earnings

admin.site.register(Earnings)

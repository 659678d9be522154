"""
URL configuration for product_vibes project.
"""
from django.urls import path, include

urlpatterns = [
    path('api/v1/', include('api.urls')),
]

"""
URL configuration for the medtrack project.

All API routes live in :mod:`practice.routers`.  OpenAPI documentation
is exposed at ``/swagger/`` and ``/redoc/``.
"""
from django.urls import path, include

from rest_framework import permissions
from drf_yasg.views import get_schema_view
from drf_yasg import openapi

# API metadata for Swagger/OpenAPI documentation
api_info = openapi.Info(
    title="Medtrack API",
    default_version='v1',
    description="Clinic, patient and prescription management for doctors.",
)

schema_view = get_schema_view(
    api_info,
    public=True,
    permission_classes=(permissions.AllowAny,),
)

urlpatterns = [
    path('', include('practice.routers')),
    # Swagger and ReDoc
    path('swagger/', schema_view.with_ui('swagger', cache_timeout=0), name='schema-swagger-ui'),
    path('redoc/', schema_view.with_ui('redoc', cache_timeout=0), name='schema-redoc'),
]

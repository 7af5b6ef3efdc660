"""
URL configuration for the institution portal backend.

The `urlpatterns` list routes URLs to views.  This module includes
both the Django admin and the API routes provided by the portal app.
OpenAPI documentation is exposed at ``/swagger/`` and ``/redoc/``.
Anything left unmatched falls through to a JSON 404.
"""
from django.contrib import admin
from django.urls import path, include, re_path

from rest_framework import permissions
from drf_yasg.views import get_schema_view
from drf_yasg import openapi

from portal.views.health import route_not_found

# API metadata for Swagger/OpenAPI documentation
api_info = openapi.Info(
    title="Institution Portal API",
    default_version='v1',
    description="Departments, students, coordinators, programs, homepage images, "
                "student reports and officer accounts.",
)

schema_view = get_schema_view(
    api_info,
    public=True,
    permission_classes=(permissions.AllowAny,),
)

urlpatterns = [
    # Django admin site (useful for development)
    path('admin/', admin.site.urls),
    # Include API routes from the portal app
    path('', include('portal.routers')),
    # Swagger and ReDoc
    path('swagger/', schema_view.with_ui('swagger', cache_timeout=0), name='schema-swagger-ui'),
    path('redoc/', schema_view.with_ui('redoc', cache_timeout=0), name='schema-redoc'),
    # Catch-all must stay last
    re_path(r'^.*$', route_not_found, name='route_not_found'),
]

handler500 = 'portal.views.health.server_error'

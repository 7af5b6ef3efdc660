"""
URL mappings for the portal API.

Each resource is mounted under ``/api/<resource>`` with the collection
at the bare prefix and single records at ``/api/<resource>/<id>``.
Fixed sub-paths such as ``/login`` are registered before the ``<id>``
pattern.  Trailing slashes are deliberately omitted.
"""
from django.urls import path, include

from .views import health
from .views.coordinators import coordinators, coordinator_detail
from .views.departments import departments, department_detail
from .views.homepage_images import homepage_images, homepage_image_detail
from .views.officers import officers, officer_detail, officer_login
from .views.programs import programs, program_detail
from .views.student_reports import student_reports, student_report_detail
from .views.students import (
    students,
    student_detail,
    student_login,
    student_set_password,
    student_change_password,
)


urlpatterns = [
    # Prometheus exposition at /metrics
    path('', include('django_prometheus.urls')),
    # Health
    path('health', health.health, name='health'),
    path('healthz', health.healthz, name='healthz'),
    path('api/health', health.api_health, name='api_health'),
    # Departments
    path('api/departments', departments, name='departments'),
    path('api/departments/<str:pk>', department_detail, name='department_detail'),
    # Students
    path('api/students', students, name='students'),
    path('api/students/login', student_login, name='student_login'),
    path('api/students/set-password', student_set_password, name='student_set_password'),
    path('api/students/change-password', student_change_password, name='student_change_password'),
    path('api/students/<str:pk>', student_detail, name='student_detail'),
    # Coordinators
    path('api/coordinators', coordinators, name='coordinators'),
    path('api/coordinators/<str:pk>', coordinator_detail, name='coordinator_detail'),
    # Programs
    path('api/programs', programs, name='programs'),
    path('api/programs/<str:pk>', program_detail, name='program_detail'),
    # Homepage images
    path('api/homepage-images', homepage_images, name='homepage_images'),
    path('api/homepage-images/<str:pk>', homepage_image_detail, name='homepage_image_detail'),
    # Student reports
    path('api/student-reports', student_reports, name='student_reports'),
    path('api/student-reports/<str:pk>', student_report_detail, name='student_report_detail'),
    # Officers
    path('api/officers', officers, name='officers'),
    path('api/officers/login', officer_login, name='officer_login'),
    path('api/officers/<str:pk>', officer_detail, name='officer_detail'),
]

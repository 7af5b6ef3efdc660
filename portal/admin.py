"""
Django admin registrations for the portal models.

Credential columns are excluded from the admin forms and lists so that
they can only be changed through the API flows.
"""

from django.contrib import admin

from .models import (
    Department,
    Coordinator,
    RegisteredStudent,
    OfficerCredential,
    Program,
    HomepageImage,
    StudentReport,
)


@admin.register(Department)
class DepartmentAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'is_active', 'created_at')
    list_filter = ('is_active',)
    search_fields = ('id', 'name')


@admin.register(Coordinator)
class CoordinatorAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'email', 'department', 'position', 'is_active')
    list_filter = ('is_active', 'department')
    search_fields = ('id', 'name', 'email')


@admin.register(RegisteredStudent)
class RegisteredStudentAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'email', 'department', 'year', 'enrollment_number', 'is_active')
    list_filter = ('is_active', 'department', 'year')
    search_fields = ('id', 'name', 'email', 'enrollment_number')
    exclude = ('password_hash',)


@admin.register(OfficerCredential)
class OfficerCredentialAdmin(admin.ModelAdmin):
    list_display = ('id', 'username', 'name', 'role', 'is_active')
    list_filter = ('role', 'is_active')
    search_fields = ('id', 'username', 'name', 'email')
    exclude = ('password_hash',)


@admin.register(Program)
class ProgramAdmin(admin.ModelAdmin):
    list_display = ('id', 'title', 'type', 'start_date', 'end_date', 'registration_open')
    list_filter = ('type', 'registration_open', 'department')
    search_fields = ('id', 'title', 'coordinator')


@admin.register(HomepageImage)
class HomepageImageAdmin(admin.ModelAdmin):
    list_display = ('id', 'type', 'order', 'is_active')
    list_filter = ('type', 'is_active')
    search_fields = ('id', 'url')


@admin.register(StudentReport)
class StudentReportAdmin(admin.ModelAdmin):
    list_display = ('id', 'student_id', 'student_name', 'department', 'year', 'updated_at')
    list_filter = ('department', 'year')
    search_fields = ('id', 'student_id', 'student_name')

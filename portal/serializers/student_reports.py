from rest_framework import serializers

from .base import CleanCharField, StrictSerializer, TimestampFieldsMixin


class StudentReportSerializer(TimestampFieldsMixin, StrictSerializer):
    id = serializers.CharField(max_length=64)
    studentId = serializers.CharField(source='student_id', max_length=64)
    studentName = CleanCharField(source='student_name', max_length=255)
    department = serializers.CharField(max_length=255)
    year = serializers.CharField(max_length=32)
    activities = serializers.ListField(child=serializers.JSONField(), default=list)
    coordinatedPrograms = serializers.ListField(
        source='coordinated_programs', child=serializers.JSONField(), default=list
    )


def student_report_payload(r) -> dict:
    return {
        'id': r.id,
        'studentId': r.student_id,
        'studentName': r.student_name,
        'department': r.department,
        'year': r.year,
        'activities': r.activities,
        'coordinatedPrograms': r.coordinated_programs,
        'createdAt': r.created_at,
        'updatedAt': r.updated_at,
    }

"""
Request records and response shaping for registered students.

``password`` is write-only input; the stored hash never appears in any
payload produced here.
"""
from rest_framework import serializers

from .base import CleanCharField, StrictSerializer, TimestampFieldsMixin


class StudentSerializer(TimestampFieldsMixin, StrictSerializer):
    id = serializers.CharField(max_length=64)
    name = CleanCharField(max_length=255)
    email = serializers.EmailField(max_length=255)
    phone = serializers.CharField(max_length=32)
    department = serializers.CharField(max_length=255)
    year = serializers.CharField(max_length=32)
    enrollmentNumber = serializers.CharField(source='enrollment_number', max_length=64)
    password = serializers.CharField(required=False, allow_blank=True, write_only=True, trim_whitespace=False)
    isActive = serializers.BooleanField(source='is_active', default=True)


class StudentLoginSerializer(serializers.Serializer):
    email = serializers.CharField()
    password = serializers.CharField(trim_whitespace=False)

    def validate_email(self, v):
        v = (v or '').strip()
        if not v:
            raise serializers.ValidationError('Email is required')
        return v


class SetPasswordSerializer(serializers.Serializer):
    email = serializers.CharField()
    enrollmentNumber = serializers.CharField()
    password = serializers.CharField(trim_whitespace=False)


class ChangePasswordSerializer(serializers.Serializer):
    email = serializers.CharField()
    currentPassword = serializers.CharField(trim_whitespace=False)
    newPassword = serializers.CharField(trim_whitespace=False)


def student_payload(s) -> dict:
    return {
        'id': s.id,
        'name': s.name,
        'email': s.email,
        'phone': s.phone,
        'department': s.department,
        'year': s.year,
        'enrollmentNumber': s.enrollment_number,
        'isActive': s.is_active,
        'createdAt': s.created_at,
        'updatedAt': s.updated_at,
    }

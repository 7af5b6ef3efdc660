from rest_framework import serializers

from .base import CleanCharField, StrictSerializer, TimestampFieldsMixin


class DepartmentSerializer(TimestampFieldsMixin, StrictSerializer):
    id = serializers.CharField(max_length=64)
    name = CleanCharField(max_length=255)
    isActive = serializers.BooleanField(source='is_active', default=True)


def department_payload(d) -> dict:
    return {
        'id': d.id,
        'name': d.name,
        'isActive': d.is_active,
        'createdAt': d.created_at,
        'updatedAt': d.updated_at,
    }

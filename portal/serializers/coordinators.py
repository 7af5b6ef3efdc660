from rest_framework import serializers

from .base import CleanCharField, StrictSerializer, TimestampFieldsMixin


class CoordinatorSerializer(TimestampFieldsMixin, StrictSerializer):
    id = serializers.CharField(max_length=64)
    name = CleanCharField(max_length=255)
    email = serializers.EmailField(max_length=255)
    phone = serializers.CharField(max_length=32)
    department = serializers.CharField(max_length=255)
    position = CleanCharField(max_length=255)
    isActive = serializers.BooleanField(source='is_active', default=True)


def coordinator_payload(c) -> dict:
    return {
        'id': c.id,
        'name': c.name,
        'email': c.email,
        'phone': c.phone,
        'department': c.department,
        'position': c.position,
        'isActive': c.is_active,
        'createdAt': c.created_at,
        'updatedAt': c.updated_at,
    }

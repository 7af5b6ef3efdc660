"""
Request records and response shaping for officer accounts.

Officers register with a ``passwordHash`` value chosen by the front-end
and log in by presenting the same value, so it is handled as an opaque
credential string.  It is write-only and never returned.
"""
from rest_framework import serializers

from .base import CleanCharField, StrictSerializer, TimestampFieldsMixin


class OfficerCreateSerializer(TimestampFieldsMixin, StrictSerializer):
    id = serializers.CharField(max_length=64)
    username = serializers.CharField(max_length=150)
    passwordHash = serializers.CharField(source='password_hash', max_length=255, write_only=True,
                                         trim_whitespace=False)
    name = CleanCharField(max_length=255)
    email = serializers.EmailField(max_length=255)
    role = serializers.CharField(max_length=32, default='officer')
    isActive = serializers.BooleanField(source='is_active', default=True)


class OfficerUpdateSerializer(TimestampFieldsMixin, StrictSerializer):
    username = serializers.CharField(max_length=150)
    password = serializers.CharField(source='password_hash', max_length=255, write_only=True,
                                     trim_whitespace=False)
    name = CleanCharField(max_length=255)
    email = serializers.EmailField(max_length=255)
    role = serializers.CharField(max_length=32)
    isActive = serializers.BooleanField(source='is_active')


class OfficerLoginSerializer(serializers.Serializer):
    username = serializers.CharField()
    passwordHash = serializers.CharField(trim_whitespace=False)

    def validate_username(self, v):
        v = (v or '').strip()
        if not v:
            raise serializers.ValidationError('Username is required')
        return v


def officer_payload(o) -> dict:
    return {
        'id': o.id,
        'username': o.username,
        'name': o.name,
        'email': o.email,
        'role': o.role,
        'isActive': o.is_active,
        'createdAt': o.created_at,
        'updatedAt': o.updated_at,
    }

from rest_framework import serializers

from .base import CleanCharField, DateValueField, StrictSerializer, TimestampFieldsMixin


class ProgramSerializer(TimestampFieldsMixin, StrictSerializer):
    id = serializers.CharField(max_length=64)
    title = CleanCharField(max_length=255)
    description = CleanCharField(allow_blank=True, default='')
    type = serializers.CharField(max_length=64, default='academic')
    startDate = DateValueField(source='start_date')
    endDate = DateValueField(source='end_date')
    maxParticipants = serializers.IntegerField(source='max_participants', min_value=1)
    registrationOpen = serializers.BooleanField(source='registration_open', default=True)
    department = serializers.CharField(max_length=255)
    coordinator = serializers.CharField(max_length=255)

    def validate(self, attrs):
        # Only checked when both ends arrive in the same request
        start, end = attrs.get('start_date'), attrs.get('end_date')
        if start and end and end < start:
            raise serializers.ValidationError({'endDate': ['End date must not precede start date.']})
        return attrs


def program_payload(p) -> dict:
    return {
        'id': p.id,
        'title': p.title,
        'description': p.description,
        'type': p.type,
        'startDate': p.start_date,
        'endDate': p.end_date,
        'maxParticipants': p.max_participants,
        'registrationOpen': p.registration_open,
        'department': p.department,
        'coordinator': p.coordinator,
        'createdAt': p.created_at,
        'updatedAt': p.updated_at,
    }

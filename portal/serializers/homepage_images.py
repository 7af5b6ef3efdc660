from rest_framework import serializers

from .base import StrictSerializer, TimestampFieldsMixin

IMAGE_TYPES = ('left', 'right')


class HomepageImageSerializer(TimestampFieldsMixin, StrictSerializer):
    id = serializers.CharField(max_length=64)
    url = serializers.CharField(max_length=1024)
    type = serializers.ChoiceField(
        choices=IMAGE_TYPES,
        error_messages={'invalid_choice': 'Type must be either "left" or "right"'},
    )
    order = serializers.IntegerField(default=0)
    isActive = serializers.BooleanField(source='is_active', default=True)


class HomepageImageListQuerySerializer(serializers.Serializer):
    """Optional ``?type=`` filter, matched by plain equality."""
    type = serializers.CharField(required=False, allow_blank=True)


def homepage_image_payload(img) -> dict:
    return {
        'id': img.id,
        'url': img.url,
        'type': img.type,
        'order': img.order,
        'isActive': img.is_active,
        'createdAt': img.created_at,
        'updatedAt': img.updated_at,
    }

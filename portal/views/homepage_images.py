"""
Homepage image endpoints.

Images sit in a ``left`` or ``right`` column and are listed by their
``order`` value.  Any other ``type`` is rejected before the store is
touched.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from ..models import HomepageImage
from ..serializers.base import PROTECTED_UPDATE_FIELDS, request_body, validated
from ..serializers.homepage_images import (
    HomepageImageListQuerySerializer,
    HomepageImageSerializer,
    homepage_image_payload,
)
from ..services import records

LABEL = 'homepage image'


@api_view(['GET', 'POST'])
@permission_classes([AllowAny])
def homepage_images(request):
    """List active images (optionally one column via ``?type=``) or create one."""
    if request.method == 'GET':
        q = HomepageImageListQuerySerializer(data=request.query_params)
        q.is_valid(raise_exception=True)
        filters = {'is_active': True}
        if q.validated_data.get('type'):
            filters['type'] = q.validated_data['type']
        rows = records.list_records(HomepageImage, label=LABEL, order_by=['order'], filters=filters)
        return Response([homepage_image_payload(img) for img in rows])

    data = validated(HomepageImageSerializer, request_body(request))
    image = records.create_record(HomepageImage, data, label=LABEL)
    return Response(homepage_image_payload(image), status=status.HTTP_201_CREATED)


@api_view(['PUT', 'DELETE'])
@permission_classes([AllowAny])
def homepage_image_detail(request, pk: str):
    if request.method == 'DELETE':
        records.delete_record(HomepageImage, pk, label=LABEL)
        return Response(status=status.HTTP_204_NO_CONTENT)

    changes = validated(HomepageImageSerializer, request_body(request, strip=PROTECTED_UPDATE_FIELDS), partial=True)
    image = records.update_record(HomepageImage, pk, changes, label=LABEL)
    return Response(homepage_image_payload(image))

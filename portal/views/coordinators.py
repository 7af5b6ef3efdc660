"""
Coordinator endpoints.

Only active coordinators are listed; inactive ones stay reachable by id
for update and delete.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from ..models import Coordinator
from ..serializers.base import PROTECTED_UPDATE_FIELDS, request_body, validated
from ..serializers.coordinators import CoordinatorSerializer, coordinator_payload
from ..services import records

LABEL = 'coordinator'


@api_view(['GET', 'POST'])
@permission_classes([AllowAny])
def coordinators(request):
    if request.method == 'GET':
        rows = records.list_records(Coordinator, label=LABEL, order_by=['name'], filters={'is_active': True})
        return Response([coordinator_payload(c) for c in rows])

    data = validated(CoordinatorSerializer, request_body(request))
    coordinator = records.create_record(Coordinator, data, label=LABEL)
    return Response(coordinator_payload(coordinator), status=status.HTTP_201_CREATED)


@api_view(['PUT', 'DELETE'])
@permission_classes([AllowAny])
def coordinator_detail(request, pk: str):
    if request.method == 'DELETE':
        records.delete_record(Coordinator, pk, label=LABEL)
        return Response(status=status.HTTP_204_NO_CONTENT)

    changes = validated(CoordinatorSerializer, request_body(request, strip=PROTECTED_UPDATE_FIELDS), partial=True)
    coordinator = records.update_record(Coordinator, pk, changes, label=LABEL)
    return Response(coordinator_payload(coordinator))

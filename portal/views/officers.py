"""
Officer account endpoints.

Officer login matches the submitted ``passwordHash`` value literally
against the stored column; no hashing happens on this path.  This
mirrors how the administrative front-end registers officers and differs
from the student login on purpose.
"""
from __future__ import annotations

import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from ..exceptions import InvalidCredentials
from ..models import OfficerCredential
from ..serializers.base import PROTECTED_UPDATE_FIELDS, request_body, validated
from ..serializers.officers import (
    OfficerCreateSerializer,
    OfficerLoginSerializer,
    OfficerUpdateSerializer,
    officer_payload,
)
from ..services import records

logger = logging.getLogger(__name__)

LABEL = 'officer'
CONFLICT_MESSAGE = 'Officer with this ID or username already exists'


@api_view(['GET', 'POST'])
@permission_classes([AllowAny])
def officers(request):
    if request.method == 'GET':
        rows = records.list_records(OfficerCredential, label=LABEL, order_by=['name'], filters={'is_active': True})
        return Response([officer_payload(o) for o in rows])

    data = validated(OfficerCreateSerializer, request_body(request))
    officer = records.create_record(OfficerCredential, data, label=LABEL, conflict_message=CONFLICT_MESSAGE)
    return Response(officer_payload(officer), status=status.HTTP_201_CREATED)


@api_view(['PUT', 'DELETE'])
@permission_classes([AllowAny])
def officer_detail(request, pk: str):
    if request.method == 'DELETE':
        records.delete_record(OfficerCredential, pk, label=LABEL)
        return Response(status=status.HTTP_204_NO_CONTENT)

    changes = validated(OfficerUpdateSerializer, request_body(request, strip=PROTECTED_UPDATE_FIELDS), partial=True)
    officer = records.update_record(OfficerCredential, pk, changes, label=LABEL, conflict_message=CONFLICT_MESSAGE)
    return Response(officer_payload(officer))


@api_view(['POST'])
@permission_classes([AllowAny])
def officer_login(request):
    vd = validated(OfficerLoginSerializer, request.data)

    officer = records.find_first(
        OfficerCredential, label=LABEL,
        username=vd['username'], password_hash=vd['passwordHash'], is_active=True,
    )
    if not officer:
        logger.info('Officer login failed for %s', vd['username'])
        raise InvalidCredentials()

    return Response({'success': True, 'officer': officer_payload(officer)})

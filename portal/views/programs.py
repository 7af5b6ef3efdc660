"""
Program endpoints.

Programs are listed newest start date first.  ``startDate`` and
``endDate`` arrive as text and are parsed into timestamps before they
reach the store.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from ..models import Program
from ..serializers.base import PROTECTED_UPDATE_FIELDS, request_body, validated
from ..serializers.programs import ProgramSerializer, program_payload
from ..services import records

LABEL = 'program'


@api_view(['GET', 'POST'])
@permission_classes([AllowAny])
def programs(request):
    if request.method == 'GET':
        rows = records.list_records(Program, label=LABEL, order_by=['-start_date'])
        return Response([program_payload(p) for p in rows])

    data = validated(ProgramSerializer, request_body(request))
    program = records.create_record(Program, data, label=LABEL)
    return Response(program_payload(program), status=status.HTTP_201_CREATED)


@api_view(['PUT', 'DELETE'])
@permission_classes([AllowAny])
def program_detail(request, pk: str):
    if request.method == 'DELETE':
        records.delete_record(Program, pk, label=LABEL)
        return Response(status=status.HTTP_204_NO_CONTENT)

    changes = validated(ProgramSerializer, request_body(request, strip=PROTECTED_UPDATE_FIELDS), partial=True)
    program = records.update_record(Program, pk, changes, label=LABEL)
    return Response(program_payload(program))

"""
Department endpoints.

``GET`` lists every department ordered by name, ``POST`` creates one,
``PUT``/``DELETE`` on ``/api/departments/<id>`` update or remove it.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from ..models import Department
from ..serializers.base import PROTECTED_UPDATE_FIELDS, request_body, validated
from ..serializers.departments import DepartmentSerializer, department_payload
from ..services import records

LABEL = 'department'


@api_view(['GET', 'POST'])
@permission_classes([AllowAny])
def departments(request):
    if request.method == 'GET':
        rows = records.list_records(Department, label=LABEL, order_by=['name'])
        return Response([department_payload(d) for d in rows])

    data = validated(DepartmentSerializer, request_body(request))
    department = records.create_record(Department, data, label=LABEL)
    return Response(department_payload(department), status=status.HTTP_201_CREATED)


@api_view(['PUT', 'DELETE'])
@permission_classes([AllowAny])
def department_detail(request, pk: str):
    if request.method == 'DELETE':
        records.delete_record(Department, pk, label=LABEL)
        return Response(status=status.HTTP_204_NO_CONTENT)

    changes = validated(DepartmentSerializer, request_body(request, strip=PROTECTED_UPDATE_FIELDS), partial=True)
    department = records.update_record(Department, pk, changes, label=LABEL)
    return Response(department_payload(department))

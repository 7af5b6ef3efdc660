"""
Student report endpoints.

Reports are listed most recently updated first and are the only resource
that can also be fetched individually by id.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from ..models import StudentReport
from ..serializers.base import PROTECTED_UPDATE_FIELDS, request_body, validated
from ..serializers.student_reports import StudentReportSerializer, student_report_payload
from ..services import records

LABEL = 'student report'


@api_view(['GET', 'POST'])
@permission_classes([AllowAny])
def student_reports(request):
    if request.method == 'GET':
        rows = records.list_records(StudentReport, label=LABEL, order_by=['-updated_at'])
        return Response([student_report_payload(r) for r in rows])

    data = validated(StudentReportSerializer, request_body(request))
    report = records.create_record(StudentReport, data, label=LABEL)
    return Response(student_report_payload(report), status=status.HTTP_201_CREATED)


@api_view(['GET', 'PUT', 'DELETE'])
@permission_classes([AllowAny])
def student_report_detail(request, pk: str):
    if request.method == 'GET':
        report = records.get_record(StudentReport, pk, label=LABEL)
        return Response(student_report_payload(report))

    if request.method == 'DELETE':
        records.delete_record(StudentReport, pk, label=LABEL)
        return Response(status=status.HTTP_204_NO_CONTENT)

    changes = validated(StudentReportSerializer, request_body(request, strip=PROTECTED_UPDATE_FIELDS), partial=True)
    report = records.update_record(StudentReport, pk, changes, label=LABEL)
    return Response(student_report_payload(report))

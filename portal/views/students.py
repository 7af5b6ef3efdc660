"""
Registered student endpoints and the student password flows.

The list is returned newest first and, unlike coordinators and officers,
is not filtered on ``isActive``.  Login, set-password and change-password
only ever consider active students.

* ``login`` verifies a plaintext password against the stored hash.
* ``set-password`` is the first-time / forgotten password path: the
  email and enrollment number together stand in for an existing session.
* ``change-password`` requires the current password to verify first.
"""
from __future__ import annotations

import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import NotFound
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from ..exceptions import InvalidCredentials
from ..models import RegisteredStudent
from ..serializers.base import PROTECTED_UPDATE_FIELDS, request_body, validated
from ..serializers.students import (
    ChangePasswordSerializer,
    SetPasswordSerializer,
    StudentLoginSerializer,
    StudentSerializer,
    student_payload,
)
from ..services import records
from ..services.credentials import hash_password, verify_password

logger = logging.getLogger(__name__)

LABEL = 'student'
CONFLICT_MESSAGE = 'Student with this ID, email, or enrollment number already exists'
PASSWORD_NOT_SET = 'Password not set. Please set your password first.'


def _with_password_hash(data: dict) -> dict:
    """Replace a plaintext ``password`` entry by its hash."""
    password = data.pop('password', None)
    if password:
        data['password_hash'] = hash_password(password)
    return data


@api_view(['GET', 'POST'])
@permission_classes([AllowAny])
def students(request):
    if request.method == 'GET':
        rows = records.list_records(RegisteredStudent, label=LABEL, order_by=['-created_at'])
        return Response([student_payload(s) for s in rows])

    data = _with_password_hash(validated(StudentSerializer, request_body(request)))
    student = records.create_record(RegisteredStudent, data, label=LABEL, conflict_message=CONFLICT_MESSAGE)
    return Response(student_payload(student), status=status.HTTP_201_CREATED)


@api_view(['PUT', 'DELETE'])
@permission_classes([AllowAny])
def student_detail(request, pk: str):
    if request.method == 'DELETE':
        records.delete_record(RegisteredStudent, pk, label=LABEL)
        return Response(status=status.HTTP_204_NO_CONTENT)

    changes = validated(StudentSerializer, request_body(request, strip=PROTECTED_UPDATE_FIELDS), partial=True)
    student = records.update_record(
        RegisteredStudent, pk, _with_password_hash(changes), label=LABEL, conflict_message=CONFLICT_MESSAGE
    )
    return Response(student_payload(student))


@api_view(['POST'])
@permission_classes([AllowAny])
def student_login(request):
    vd = validated(StudentLoginSerializer, request.data)

    student = records.find_first(RegisteredStudent, label=LABEL, email=vd['email'], is_active=True)
    if not student:
        raise InvalidCredentials()
    if not student.password_hash:
        raise InvalidCredentials(PASSWORD_NOT_SET)
    if not verify_password(vd['password'], student.password_hash):
        logger.info('Student login failed for %s', student.id)
        raise InvalidCredentials()

    return Response({'success': True, 'student': student_payload(student)})


@api_view(['POST'])
@permission_classes([AllowAny])
def student_set_password(request):
    vd = validated(SetPasswordSerializer, request.data)

    student = records.find_first(
        RegisteredStudent, label=LABEL,
        email=vd['email'], enrollment_number=vd['enrollmentNumber'], is_active=True,
    )
    if not student:
        raise NotFound('Student not found or credentials do not match')

    records.update_record(RegisteredStudent, student.id, {'password_hash': hash_password(vd['password'])},
                          label=LABEL)
    return Response({'success': True, 'message': 'Password set successfully'})


@api_view(['POST'])
@permission_classes([AllowAny])
def student_change_password(request):
    vd = validated(ChangePasswordSerializer, request.data)

    student = records.find_first(RegisteredStudent, label=LABEL, email=vd['email'], is_active=True)
    if not student or not student.password_hash:
        raise InvalidCredentials()
    if not verify_password(vd['currentPassword'], student.password_hash):
        logger.info('Student password change refused for %s', student.id)
        raise InvalidCredentials('Current password is incorrect')

    records.update_record(RegisteredStudent, student.id, {'password_hash': hash_password(vd['newPassword'])},
                          label=LABEL)
    return Response({'success': True, 'message': 'Password changed successfully'})

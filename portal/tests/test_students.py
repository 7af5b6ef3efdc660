import datetime

import pytest
from django.urls import reverse
from django.utils import timezone
from rest_framework.test import APIClient

from portal.models import RegisteredStudent
from portal.services.credentials import hash_password, verify_password

pytestmark = pytest.mark.django_db


def student(**overrides):
    data = {
        'id': 's1',
        'name': 'Meera Iyer',
        'email': 'meera@example.edu',
        'phone': '9000000010',
        'department': 'Computer Science',
        'year': '3',
        'enrollmentNumber': 'EN001',
    }
    data.update(overrides)
    return data


@pytest.fixture
def client():
    return APIClient()


def test_create_with_password_never_returns_hash(client):
    r = client.post('/api/students', student(password='Secret#1'), format='json')
    assert r.status_code == 201
    assert 'passwordHash' not in r.data
    assert 'password' not in r.data
    stored = RegisteredStudent.objects.get(id='s1')
    assert stored.password_hash and stored.password_hash != 'Secret#1'
    assert verify_password('Secret#1', stored.password_hash)


def test_create_without_password_leaves_hash_null(client):
    r = client.post('/api/students', student(), format='json')
    assert r.status_code == 201
    assert RegisteredStudent.objects.get(id='s1').password_hash is None


def test_create_requires_all_profile_fields(client):
    payload = student()
    del payload['enrollmentNumber']
    r = client.post('/api/students', payload, format='json')
    assert r.status_code == 400
    assert 'enrollmentNumber' in r.data['error']['message']
    assert not RegisteredStudent.objects.exists()


def test_duplicate_email_conflicts(client):
    client.post('/api/students', student(), format='json')
    r = client.post('/api/students', student(id='s2', enrollmentNumber='EN002'), format='json')
    assert r.status_code == 409
    assert r.data['error']['message'] == 'Student with this ID, email, or enrollment number already exists'
    assert list(RegisteredStudent.objects.values_list('id', flat=True)) == ['s1']


def test_list_is_newest_first_includes_inactive_and_hides_hash(client):
    client.post('/api/students', student(password='pw-one'), format='json')
    client.post('/api/students', student(id='s2', email='b@example.edu', enrollmentNumber='EN002',
                                         isActive=False), format='json')
    now = timezone.now()
    RegisteredStudent.objects.filter(id='s1').update(created_at=now - datetime.timedelta(days=1))
    RegisteredStudent.objects.filter(id='s2').update(created_at=now)

    r = client.get('/api/students', {'includeHash': '1'})
    assert r.status_code == 200
    assert [s['id'] for s in r.data] == ['s2', 's1']
    assert all('passwordHash' not in s for s in r.data)


def test_update_strips_identifier_and_hash(client):
    client.post('/api/students', student(password='original'), format='json')
    before = RegisteredStudent.objects.get(id='s1').password_hash

    r = client.put('/api/students/s1', {'id': 'other', 'passwordHash': 'forged', 'year': '4'}, format='json')
    assert r.status_code == 200
    assert r.data['id'] == 's1'
    assert r.data['year'] == '4'
    assert 'passwordHash' not in r.data
    after = RegisteredStudent.objects.get(id='s1')
    assert after.password_hash == before
    assert not RegisteredStudent.objects.filter(id='other').exists()


def test_update_with_password_rehashes(client):
    client.post('/api/students', student(password='original'), format='json')
    r = client.put('/api/students/s1', {'password': 'replaced'}, format='json')
    assert r.status_code == 200
    stored = RegisteredStudent.objects.get(id='s1').password_hash
    assert verify_password('replaced', stored)
    assert not verify_password('original', stored)


def test_update_and_delete_missing_student(client):
    assert client.put('/api/students/ghost', {'name': 'x'}, format='json').status_code == 404
    assert client.delete('/api/students/ghost').status_code == 404
    assert not RegisteredStudent.objects.exists()


def test_login_wrong_then_right_password(client):
    client.post('/api/students', student(password='P@ssw0rd1'), format='json')

    bad = client.post(reverse('student_login'), {'email': 'meera@example.edu', 'password': 'nope'}, format='json')
    assert bad.status_code == 401
    assert bad.data['error']['message'] == 'Invalid credentials'

    good = client.post(reverse('student_login'), {'email': 'meera@example.edu', 'password': 'P@ssw0rd1'},
                       format='json')
    assert good.status_code == 200
    assert good.data['success'] is True
    assert good.data['student']['id'] == 's1'
    assert 'passwordHash' not in good.data['student']


def test_login_unknown_email_and_inactive_student(client):
    RegisteredStudent.objects.create(
        id='s1', name='Meera', email='meera@example.edu', phone='1', department='CS', year='1',
        enrollment_number='EN001', password_hash=hash_password('pw'), is_active=False,
    )
    for email in ('nobody@example.edu', 'meera@example.edu'):
        r = client.post(reverse('student_login'), {'email': email, 'password': 'pw'}, format='json')
        assert r.status_code == 401
        assert r.data['error']['message'] == 'Invalid credentials'


def test_login_without_password_set_has_distinct_message(client):
    client.post('/api/students', student(), format='json')
    r = client.post(reverse('student_login'), {'email': 'meera@example.edu', 'password': 'anything'},
                    format='json')
    assert r.status_code == 401
    assert r.data['error']['code'] == 'unauthorized'
    assert r.data['error']['message'] == 'Password not set. Please set your password first.'


def test_login_requires_email_and_password(client):
    r = client.post(reverse('student_login'), {'email': 'meera@example.edu'}, format='json')
    assert r.status_code == 400


def test_set_password_then_login(client):
    client.post('/api/students', student(), format='json')
    r = client.post(reverse('student_set_password'), {
        'email': 'meera@example.edu', 'enrollmentNumber': 'EN001', 'password': 'first-time',
    }, format='json')
    assert r.status_code == 200
    assert r.data == {'success': True, 'message': 'Password set successfully'}

    login = client.post(reverse('student_login'), {'email': 'meera@example.edu', 'password': 'first-time'},
                        format='json')
    assert login.status_code == 200


def test_set_password_with_wrong_enrollment_number(client):
    client.post('/api/students', student(), format='json')
    r = client.post(reverse('student_set_password'), {
        'email': 'meera@example.edu', 'enrollmentNumber': 'EN999', 'password': 'x',
    }, format='json')
    assert r.status_code == 404
    assert r.data['error']['message'] == 'Student not found or credentials do not match'
    assert RegisteredStudent.objects.get(id='s1').password_hash is None


def test_change_password_with_wrong_current_keeps_old_password(client):
    client.post('/api/students', student(password='old-pass'), format='json')
    r = client.post(reverse('student_change_password'), {
        'email': 'meera@example.edu', 'currentPassword': 'wrong', 'newPassword': 'new-pass',
    }, format='json')
    assert r.status_code == 401
    assert r.data['error']['message'] == 'Current password is incorrect'

    old = client.post(reverse('student_login'), {'email': 'meera@example.edu', 'password': 'old-pass'},
                      format='json')
    assert old.status_code == 200


def test_change_password_success(client):
    client.post('/api/students', student(password='old-pass'), format='json')
    r = client.post(reverse('student_change_password'), {
        'email': 'meera@example.edu', 'currentPassword': 'old-pass', 'newPassword': 'new-pass',
    }, format='json')
    assert r.status_code == 200
    assert r.data['message'] == 'Password changed successfully'
    stored = RegisteredStudent.objects.get(id='s1').password_hash
    assert verify_password('new-pass', stored)
    assert not verify_password('old-pass', stored)


def test_change_password_without_existing_password(client):
    client.post('/api/students', student(), format='json')
    r = client.post(reverse('student_change_password'), {
        'email': 'meera@example.edu', 'currentPassword': 'x', 'newPassword': 'y',
    }, format='json')
    assert r.status_code == 401
    assert r.data['error']['message'] == 'Invalid credentials'

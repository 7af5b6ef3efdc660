import pytest
from django.urls import reverse
from rest_framework.test import APIClient

from portal.models import OfficerCredential

pytestmark = pytest.mark.django_db


def officer(**overrides):
    data = {
        'id': 'o1',
        'username': 'officer1',
        'passwordHash': 'opaque-credential',
        'name': 'Program Officer',
        'email': 'officer1@example.edu',
    }
    data.update(overrides)
    return data


@pytest.fixture
def client():
    return APIClient()


def test_create_applies_defaults_and_hides_credential(client):
    r = client.post('/api/officers', officer(), format='json')
    assert r.status_code == 201
    assert r.data['role'] == 'officer'
    assert r.data['isActive'] is True
    assert 'passwordHash' not in r.data
    assert OfficerCredential.objects.get(id='o1').password_hash == 'opaque-credential'


def test_create_requires_credential(client):
    payload = officer()
    del payload['passwordHash']
    r = client.post('/api/officers', payload, format='json')
    assert r.status_code == 400
    assert 'passwordHash' in r.data['error']['message']


def test_duplicate_username_conflicts(client):
    client.post('/api/officers', officer(), format='json')
    r = client.post('/api/officers', officer(id='o2'), format='json')
    assert r.status_code == 409
    assert r.data['error']['message'] == 'Officer with this ID or username already exists'
    assert OfficerCredential.objects.count() == 1


def test_list_only_active_by_name_without_credential(client):
    client.post('/api/officers', officer(id='o1', username='u1', name='Zara'), format='json')
    client.post('/api/officers', officer(id='o2', username='u2', name='Anil'), format='json')
    client.post('/api/officers', officer(id='o3', username='u3', name='Maya', isActive=False), format='json')
    r = client.get('/api/officers')
    assert r.status_code == 200
    assert [o['name'] for o in r.data] == ['Anil', 'Zara']
    assert all('passwordHash' not in o for o in r.data)


def test_login_compares_credential_literally(client):
    client.post('/api/officers', officer(), format='json')
    r = client.post(reverse('officer_login'), {'username': 'officer1', 'passwordHash': 'opaque-credential'},
                    format='json')
    assert r.status_code == 200
    assert r.data['success'] is True
    assert r.data['officer']['username'] == 'officer1'
    assert 'passwordHash' not in r.data['officer']

    bad = client.post(reverse('officer_login'), {'username': 'officer1', 'passwordHash': 'other'}, format='json')
    assert bad.status_code == 401
    assert bad.data['error']['message'] == 'Invalid credentials'


def test_login_refuses_inactive_officer(client):
    client.post('/api/officers', officer(isActive=False), format='json')
    r = client.post(reverse('officer_login'), {'username': 'officer1', 'passwordHash': 'opaque-credential'},
                    format='json')
    assert r.status_code == 401


def test_login_requires_both_fields(client):
    r = client.post(reverse('officer_login'), {'username': 'officer1'}, format='json')
    assert r.status_code == 400


def test_update_strips_credential_and_identifier(client):
    client.post('/api/officers', officer(), format='json')
    r = client.put('/api/officers/o1', {'id': 'o9', 'passwordHash': 'forged', 'role': 'admin'}, format='json')
    assert r.status_code == 200
    assert r.data['id'] == 'o1'
    assert r.data['role'] == 'admin'
    stored = OfficerCredential.objects.get(id='o1')
    assert stored.password_hash == 'opaque-credential'
    assert not OfficerCredential.objects.filter(id='o9').exists()


def test_update_with_password_replaces_credential(client):
    client.post('/api/officers', officer(), format='json')
    r = client.put('/api/officers/o1', {'password': 'new-credential'}, format='json')
    assert r.status_code == 200
    login = client.post(reverse('officer_login'), {'username': 'officer1', 'passwordHash': 'new-credential'},
                        format='json')
    assert login.status_code == 200


def test_update_and_delete_missing_officer(client):
    assert client.put('/api/officers/ghost', {'name': 'x'}, format='json').status_code == 404
    assert client.delete('/api/officers/ghost').status_code == 404
    client.post('/api/officers', officer(), format='json')
    assert client.delete('/api/officers/o1').status_code == 204
    assert not OfficerCredential.objects.exists()

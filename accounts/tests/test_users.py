import pytest

from accounts.models import Account

pytestmark = pytest.mark.django_db


def test_admin_created_account_is_approved(api_client, make_lecturer):
    lecturer = make_lecturer('Dr. Silva')
    payload = {
        'name': 'Sunil',
        'email': 'Sunil@Example.com',
        'password': 'pw',
        'role': 'student',
        'isApproved': False,
        'permittedCourses': [' Maths ', 'Maths', 'Physics'],
        'assignedLecturers': [lecturer.pk],
    }

    response = api_client.post('/admin/users/', payload, format='json')

    assert response.status_code == 201
    assert 'password' not in response.data
    assert response.data['isApproved'] is True
    assert response.data['assignedLecturers'] == [lecturer.pk]
    assert response.data['lecturers'][0]['name'] == 'Dr. Silva'
    account = Account.objects.get(email='sunil@example.com')
    assert account.permitted_courses == ['Maths', 'Physics']
    assert account.check_password('pw')


def test_admin_create_requires_password(api_client):
    response = api_client.post('/admin/users/', {'email': 'x@example.com'}, format='json')

    assert response.status_code == 400
    assert not Account.objects.exists()


def test_admin_create_duplicate_email(api_client, make_account):
    make_account(email='x@example.com')

    response = api_client.post('/admin/users/', {'email': 'X@example.com', 'password': 'pw'}, format='json')

    assert response.status_code == 409


def test_update_courses_and_password(api_client, make_account):
    account = make_account(password='old')

    response = api_client.patch(
        f'/admin/users/{account.pk}/',
        {'permittedCourses': ['English'], 'password': 'new'},
        format='json',
    )

    assert response.status_code == 200
    account.refresh_from_db()
    assert account.permitted_courses == ['English']
    assert account.check_password('new')


def test_list_users_includes_lecturers(api_client, make_account, make_lecturer):
    lecturer = make_lecturer('Dr. Perera')
    make_account(email='a@example.com', lecturers=[lecturer])
    make_account(email='b@example.com')

    response = api_client.get('/admin/users/')

    assert response.status_code == 200
    by_email = {row['email']: row for row in response.data}
    assert by_email['a@example.com']['assignedLecturers'] == [lecturer.pk]
    assert by_email['b@example.com']['lecturers'] == []


def test_pending_users(api_client, make_account):
    make_account(email='approved@example.com')
    make_account(email='waiting@example.com', is_approved=False)

    response = api_client.get('/admin/pending-users/')

    assert [row['email'] for row in response.data] == ['waiting@example.com']


def test_approve_user_with_lecturers(api_client, make_account, make_lecturer):
    lecturer = make_lecturer()
    account = make_account(is_approved=False)

    response = api_client.post(
        f'/admin/approve-user/{account.pk}/', {'assignedLecturers': [lecturer.pk]}, format='json'
    )

    assert response.status_code == 200
    account.refresh_from_db()
    assert account.is_approved is True
    assert list(account.assigned_lecturers.values_list('id', flat=True)) == [lecturer.pk]


def test_approve_unknown_user(api_client):
    response = api_client.post('/admin/approve-user/9999/', {}, format='json')

    assert response.status_code == 404
    assert response.data['code'] == 'not_found'


def test_reject_user_deletes_account(api_client, make_account):
    account = make_account(is_approved=False)

    response = api_client.delete(f'/admin/reject-user/{account.pk}/')

    assert response.status_code == 200
    assert not Account.objects.filter(pk=account.pk).exists()

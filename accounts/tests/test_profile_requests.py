import pytest

from accounts import services
from accounts.models import Account, ProfileChangeRequest
from core.choices import RequestStatus

pytestmark = pytest.mark.django_db

SUBMIT_URL = '/student/profile-requests/'


@pytest.fixture
def student(make_account):
    return make_account(email='kamal@example.com', name='Kamal', phone='0711111111')


def submit(api_client, student_id, changes):
    return api_client.post(SUBMIT_URL, {'studentId': student_id, 'requestedChanges': changes}, format='json')


class TestSubmit:

    def test_snapshot_and_pending_status(self, api_client, student):
        response = submit(api_client, student.pk, {'phone': '0722222222', 'address': ''})

        assert response.status_code == 201
        change_request = ProfileChangeRequest.objects.get()
        assert change_request.status == RequestStatus.PENDING
        assert change_request.student_name == 'Kamal'
        assert change_request.student_email == 'kamal@example.com'
        assert change_request.requested_changes == {'phone': '0722222222'}
        assert response.data['request']['studentId'] == student.pk

    def test_empty_changeset_is_rejected(self, api_client, student):
        response = submit(api_client, student.pk, {'name': '', 'email': None})

        assert response.status_code == 400
        assert not ProfileChangeRequest.objects.exists()

    def test_unknown_student(self, api_client):
        response = submit(api_client, 9999, {'name': 'Ghost'})

        assert response.status_code == 404

    def test_student_lists_own_requests(self, api_client, student, make_account):
        other = make_account(email='other@example.com')
        services.submit_profile_request(student.pk, {'name': 'K. Perera'})
        services.submit_profile_request(other.pk, {'name': 'Other'})

        response = api_client.get(SUBMIT_URL, {'studentId': student.pk})

        assert response.status_code == 200
        assert [r['requestedChanges'] for r in response.data] == [{'name': 'K. Perera'}]

    def test_list_requires_student_id(self, api_client):
        assert api_client.get(SUBMIT_URL).status_code == 400


class TestResolve:

    def url(self, change_request):
        return f'/admin/profile-requests/{change_request.pk}/'

    def test_approve_copies_fields(self, api_client, student):
        change_request = services.submit_profile_request(
            student.pk, {'email': 'New@Example.COM', 'address': 'Colombo 07'}
        )

        response = api_client.put(self.url(change_request), {'status': 'approved', 'adminComment': 'ok'}, format='json')

        assert response.status_code == 200
        assert response.data['request']['status'] == 'approved'
        student.refresh_from_db()
        assert student.email == 'new@example.com'
        assert student.address == 'Colombo 07'
        assert student.phone == '0711111111'
        change_request.refresh_from_db()
        assert change_request.admin_comment == 'ok'
        assert change_request.resolved_at is not None

    def test_reject_leaves_account_untouched(self, api_client, student):
        change_request = services.submit_profile_request(student.pk, {'name': 'Someone Else'})

        response = api_client.put(self.url(change_request), {'status': 'rejected'}, format='json')

        assert response.status_code == 200
        student.refresh_from_db()
        assert student.name == 'Kamal'

    def test_approve_after_account_deleted(self, api_client, student):
        change_request = services.submit_profile_request(student.pk, {'name': 'Gone'})
        Account.objects.filter(pk=student.pk).delete()

        response = api_client.put(self.url(change_request), {'status': 'approved'}, format='json')

        assert response.status_code == 200
        change_request.refresh_from_db()
        assert change_request.status == RequestStatus.APPROVED

    def test_approve_after_account_deleted_with_taken_email(self, api_client, student, make_account):
        make_account(email='taken@example.com')
        change_request = services.submit_profile_request(student.pk, {'email': 'TAKEN@example.com'})
        Account.objects.filter(pk=student.pk).delete()

        response = api_client.put(self.url(change_request), {'status': 'approved'}, format='json')

        assert response.status_code == 200
        change_request.refresh_from_db()
        assert change_request.status == RequestStatus.APPROVED
        assert Account.objects.get().email == 'taken@example.com'

    def test_resolving_twice_is_rejected(self, api_client, student):
        change_request = services.submit_profile_request(student.pk, {'name': 'Once'})
        api_client.put(self.url(change_request), {'status': 'rejected'}, format='json')

        response = api_client.put(self.url(change_request), {'status': 'approved'}, format='json')

        assert response.status_code == 400
        change_request.refresh_from_db()
        assert change_request.status == RequestStatus.REJECTED

    def test_pending_is_not_a_resolution(self, api_client, student):
        change_request = services.submit_profile_request(student.pk, {'name': 'Once'})

        response = api_client.put(self.url(change_request), {'status': 'pending'}, format='json')

        assert response.status_code == 400

    def test_email_taken_by_another_account(self, api_client, student, make_account):
        make_account(email='taken@example.com')
        change_request = services.submit_profile_request(student.pk, {'email': 'taken@example.com'})

        response = api_client.put(self.url(change_request), {'status': 'approved'}, format='json')

        assert response.status_code == 409
        change_request.refresh_from_db()
        assert change_request.status == RequestStatus.PENDING


class TestAdminQueue:

    def test_status_filter(self, api_client, student):
        pending = services.submit_profile_request(student.pk, {'name': 'A'})
        done = services.submit_profile_request(student.pk, {'name': 'B'})
        services.resolve_profile_request(done, RequestStatus.REJECTED)

        response = api_client.get('/admin/profile-requests/', {'status': 'pending'})

        assert [r['id'] for r in response.data] == [pending.pk]

    def test_unknown_status_filter(self, api_client):
        response = api_client.get('/admin/profile-requests/', {'status': 'archived'})
        assert response.status_code == 400

    def test_delete_is_idempotent(self, api_client, student):
        change_request = services.submit_profile_request(student.pk, {'name': 'A'})
        url = f'/admin/profile-requests/{change_request.pk}/'

        first = api_client.delete(url)
        second = api_client.delete(url)

        assert first.status_code == 200
        assert second.status_code == 200
        assert second.data == {'msg': 'Request deleted successfully'}
        assert not ProfileChangeRequest.objects.exists()

import pytest

from core.choices import RequestStatus, Role
from core.exceptions import _first_message


@pytest.mark.parametrize('role, expected', [
    (Role.ADMIN, False),
    (Role.STUDENT, True),
    (Role.LECTURER, True),
])
def test_role_requires_approval(role, expected):
    assert role.requires_approval is expected


def test_only_pending_is_open():
    assert [s for s in RequestStatus if not s.is_terminal] == [RequestStatus.PENDING]


def test_first_message_walks_nested_detail():
    assert _first_message({'requestedChanges': {'non_field_errors': ['Pick one.']}}) == 'Pick one.'
    assert _first_message({'detail': 'Not found.'}) == 'Not found.'
    assert _first_message([]) == ''

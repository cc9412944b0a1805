import pytest
from rest_framework.test import APIClient

from accounts.models import Account
from catalog.models import Lecturer, Material
from core.choices import MaterialKind, Role


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def make_lecturer(db):
    counter = {'n': 0}

    def _make(name=None, **kwargs):
        counter['n'] += 1
        name = name or f"Lecturer {counter['n']}"
        kwargs.setdefault('email', f"lecturer{counter['n']}@tuition.test")
        return Lecturer.objects.create(name=name, **kwargs)

    return _make


@pytest.fixture
def make_material(db):
    def _make(title='Material', course_name=None, lecturer=None, kind=MaterialKind.RECORDING, **kwargs):
        if kind == MaterialKind.RECORDING:
            kwargs.setdefault('video_url', 'https://www.youtube.com/watch?v=abc123')
        else:
            kwargs.setdefault('file_url', 'https://res.cloudinary.com/demo/raw/upload/notes.pdf')
        return Material.objects.create(
            title=title, course_name=course_name, lecturer=lecturer, kind=kind, **kwargs
        )

    return _make


@pytest.fixture
def make_account(db):
    def _make(email='student@test.com', password='student123', role=Role.STUDENT,
              is_approved=True, permitted_courses=None, lecturers=None, **kwargs):
        account = Account(
            email=email,
            role=role,
            is_approved=is_approved,
            permitted_courses=list(permitted_courses or []),
            **kwargs,
        )
        account.set_password(password)
        account.save()
        if lecturers:
            account.assigned_lecturers.set(lecturers)
        return account

    return _make

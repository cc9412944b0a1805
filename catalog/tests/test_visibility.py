from datetime import timedelta

import pytest
from django.utils import timezone
from rest_framework.exceptions import ValidationError

from catalog.models import Lecturer
from catalog.visibility import (
    lecturer_index,
    normalize_courses,
    parse_lecturer_ids,
    split_param_values,
    visible_materials,
)

pytestmark = pytest.mark.django_db


def titles(materials):
    return [m.title for m in materials]


def test_split_param_values_flattens_repeats_and_commas():
    assert split_param_values(['Maths, Physics', '', ' Chemistry ']) == ['Maths', 'Physics', 'Chemistry']
    assert split_param_values(None) == []


def test_normalize_courses_trims_lowercases_and_dedupes():
    assert normalize_courses([' Maths', 'maths ', 'PHYSICS', '', None]) == ['maths', 'physics']


def test_parse_lecturer_ids_rejects_non_integers():
    assert parse_lecturer_ids(['1,2', '3']) == [1, 2, 3]
    with pytest.raises(ValidationError):
        parse_lecturer_ids(['1,abc'])


def test_public_course_material_only(make_lecturer, make_material):
    lecturer = make_lecturer()
    make_material('M1', course_name='Maths')
    make_material('M2', course_name='Physics')
    make_material('M3', lecturer=lecturer)

    assert titles(visible_materials(['Maths'], [])) == ['M1']


def test_assigned_lecturer_materials_are_visible(make_lecturer, make_material):
    mine = make_lecturer('Dr. Silva')
    other = make_lecturer('Dr. Perera')
    make_material('Mine', course_name='Maths', lecturer=mine)
    make_material('Other', course_name='Maths', lecturer=other)
    make_material('Public', course_name='Maths')

    result = titles(visible_materials(['Maths'], [mine.pk]))

    assert sorted(result) == ['Mine', 'Public']


def test_course_match_is_trimmed_and_case_insensitive(make_material):
    make_material('Tagged', course_name='maths ')
    make_material('Upper', course_name='MATHS')

    assert sorted(titles(visible_materials([' Maths'], []))) == ['Tagged', 'Upper']


def test_untagged_material_passes_course_filter(make_material):
    make_material('Untagged', course_name=None)
    make_material('Blank', course_name='   ')
    make_material('Physics', course_name='Physics')

    assert sorted(titles(visible_materials(['Maths'], []))) == ['Blank', 'Untagged']


def test_no_permitted_courses_skips_course_filter(make_lecturer, make_material):
    lecturer = make_lecturer()
    make_material('Maths', course_name='Maths')
    make_material('Physics', course_name='Physics')
    make_material('Private', course_name='Physics', lecturer=lecturer)

    assert sorted(titles(visible_materials([], []))) == ['Maths', 'Physics']


def test_results_are_newest_first(make_material):
    now = timezone.now()
    make_material('Old', created_at=now - timedelta(days=2))
    make_material('New', created_at=now)
    make_material('Middle', created_at=now - timedelta(days=1))

    assert titles(visible_materials([], [])) == ['New', 'Middle', 'Old']


def test_lecturer_index_omits_deleted_lecturers(make_lecturer, make_material):
    kept = make_lecturer('Kept')
    gone = make_lecturer('Gone')
    m1 = make_material('A', lecturer=kept)
    m2 = make_material('B', lecturer=gone)
    Lecturer.objects.filter(pk=gone.pk).delete()
    m2.refresh_from_db()

    index = lecturer_index([m1, m2])

    assert list(index) == [kept.pk]
    assert m2.lecturer_id == gone.pk

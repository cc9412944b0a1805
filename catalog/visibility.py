"""
catalog/visibility.py

Decides which materials a student may list.

Two filters are combined with AND:

- lecturer: the material is public (no lecturer) or belongs to one of the
  student's assigned lecturers. With no assigned lecturers only public
  materials pass.
- course: the material is untagged or its tag matches one of the permitted
  courses, compared trimmed and case-insensitively. With no permitted courses
  this filter is skipped altogether.

The two filters treat an empty input differently. A student with neither
permitted courses nor assigned lecturers sees every public material, course
tagged or not; tagged public materials are not held back in that case.
"""
import logging

from django.db.models import Q
from django.db.models.functions import Lower, Trim
from rest_framework.exceptions import ValidationError

from .models import Lecturer, Material

logger = logging.getLogger(__name__)


def split_param_values(values):
    """Flatten repeated and comma-separated query values, dropping blanks."""
    items = []
    for value in values or ():
        for part in str(value).split(','):
            part = part.strip()
            if part:
                items.append(part)
    return items


def normalize_courses(courses):
    """Lower-cased, trimmed course keys in first-seen order."""
    keys = []
    for course in courses or ():
        key = (course or '').strip().lower()
        if key and key not in keys:
            keys.append(key)
    return keys


def parse_lecturer_ids(values):
    ids = []
    for value in split_param_values(values):
        try:
            ids.append(int(value))
        except (TypeError, ValueError):
            raise ValidationError({"lecturers": f"Invalid lecturer id '{value}'."})
    return ids


def visible_materials(permitted_courses, assigned_lecturer_ids):
    """Return the materials visible to a student, newest first."""
    lecturer_ids = set(assigned_lecturer_ids or ())

    lecturer_filter = Q(lecturer_id__isnull=True)
    if lecturer_ids:
        lecturer_filter |= Q(lecturer_id__in=lecturer_ids)
    queryset = Material.objects.filter(lecturer_filter)

    course_keys = normalize_courses(permitted_courses)
    if course_keys:
        queryset = queryset.annotate(course_key=Lower(Trim('course_name'))).filter(
            Q(course_name__isnull=True) | Q(course_key='') | Q(course_key__in=course_keys)
        )

    logger.debug(
        "Resolving materials for courses=%s lecturers=%s",
        course_keys, sorted(lecturer_ids),
    )
    return queryset.order_by('-created_at', '-id')


def materials_for_account(account):
    return visible_materials(
        account.permitted_courses,
        account.assigned_lecturers.values_list('id', flat=True),
    )


def lecturer_index(materials):
    """
    Resolve the lecturers referenced by ``materials`` in a single query.

    Returns a dict of lecturer id -> Lecturer. Ids that no longer resolve are
    simply absent, so callers render them as an unknown lecturer.
    """
    ids = {m.lecturer_id for m in materials if m.lecturer_id is not None}
    if not ids:
        return {}
    return Lecturer.objects.in_bulk(ids)

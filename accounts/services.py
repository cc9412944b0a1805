# accounts/services.py
"""
Account directory and profile change request workflow.

Views stay thin and call into these functions; every rule about who may log
in and how an approved change lands on an account lives here.
"""
import logging
from collections import defaultdict

from django.db import IntegrityError
from django.utils import timezone
from rest_framework.exceptions import ValidationError

from catalog.models import Lecturer
from core.choices import RequestStatus, Role
from core.exceptions import AuthError, DuplicateError, NotFoundError, PendingApprovalError
from .models import Account, ProfileChangeRequest, normalize_email

logger = logging.getLogger(__name__)


def ensure_email_available(email, exclude_pk=None):
    email = normalize_email(email)
    qs = Account.objects.filter(email=email)
    if exclude_pk is not None:
        qs = qs.exclude(pk=exclude_pk)
    if qs.exists():
        raise DuplicateError("User with that email already exists.")
    return email


def _save_new_account(account, raw_password, lecturers=None):
    account.set_password(raw_password)
    try:
        account.save()
    except IntegrityError as e:
        # two signups racing past the existence check
        logger.warning("IntegrityError creating account %s: %s", account.email, e)
        raise DuplicateError("User with that email already exists.") from e
    if lecturers:
        account.assigned_lecturers.set(lecturers)
    return account


def signup(name, email, password):
    """Self-signup: always a student, never approved, no courses."""
    email = ensure_email_available(email)
    account = Account(
        name=name,
        email=email,
        role=Role.STUDENT,
        is_approved=False,
        permitted_courses=[],
    )
    _save_new_account(account, password)
    logger.info("New signup %s awaiting approval", account.email)
    return account


def create_account(email, password, name='', role=None, permitted_courses=None, lecturers=None, **extra):
    """Admin-created accounts are approved immediately."""
    email = ensure_email_available(email)
    account = Account(
        name=name,
        email=email,
        role=role or Role.STUDENT,
        is_approved=True,
        permitted_courses=list(permitted_courses or []),
        **extra,
    )
    _save_new_account(account, password, lecturers)
    logger.info("Admin created account %s (%s)", account.email, account.role)
    return account


def authenticate(email, password):
    """
    Check credentials and the approval gate.

    Raises AuthError for an unknown email or a wrong password (with distinct
    messages) and PendingApprovalError for unapproved non-admin accounts.
    """
    email = normalize_email(email)
    logger.info("Checking login for %s", email)

    account = Account.objects.filter(email=email).first()
    if account is None:
        logger.warning("Login failed for %s: user not found", email)
        raise AuthError("User not found", code='user_not_found')

    if not account.check_password(password):
        logger.warning("Login failed for %s: wrong password", email)
        raise AuthError("Wrong password", code='wrong_password')

    if not account.can_log_in:
        logger.warning("Login refused for %s: pending approval", email)
        raise PendingApprovalError()

    logger.info("Login successful for %s (%s)", email, account.role)
    return account


def assigned_lecturer_index(accounts):
    """
    Resolve assigned lecturers for many accounts in two queries.

    Returns account id -> list of Lecturer, ordered by lecturer name.
    """
    through = Account.assigned_lecturers.through
    account_ids = [a.pk for a in accounts]
    if not account_ids:
        return {}
    pairs = list(
        through.objects.filter(account_id__in=account_ids).values_list('account_id', 'lecturer_id')
    )
    lecturers = Lecturer.objects.in_bulk({lecturer_id for _, lecturer_id in pairs})
    index = defaultdict(list)
    for account_id, lecturer_id in pairs:
        lecturer = lecturers.get(lecturer_id)
        if lecturer is not None:
            index[account_id].append(lecturer)
    for assigned in index.values():
        assigned.sort(key=lambda lecturer: (lecturer.name, lecturer.pk))
    return dict(index)


def login_payload(account):
    """The only authorization artifact the client keeps after login."""
    lecturers = assigned_lecturer_index([account]).get(account.pk, [])
    return {
        'id': account.pk,
        'name': account.name,
        'email': account.email,
        'role': account.role,
        'permittedCourses': list(account.permitted_courses or []),
        'assignedLecturers': [lecturer.pk for lecturer in lecturers],
        'lecturers': [{'id': lecturer.pk, 'name': lecturer.name} for lecturer in lecturers],
    }


def approve_account(account, lecturers=None):
    account.is_approved = True
    account.save(update_fields=['is_approved', 'updated_at'])
    if lecturers is not None:
        account.assigned_lecturers.set(lecturers)
    logger.info("Approved account %s", account.email)
    return account


def reject_account(account):
    logger.info("Rejecting and deleting account %s", account.email)
    account.delete()


def submit_profile_request(student_id, changes):
    """Queue a student's changeset for admin review; status is always pending."""
    if not student_id:
        raise ValidationError({"studentId": "Student id is required."})
    changes = {
        field: value
        for field, value in (changes or {}).items()
        if field in ProfileChangeRequest.CHANGE_FIELDS and value not in (None, '')
    }
    if not changes:
        raise ValidationError({"requestedChanges": "At least one of name, email, phone or address is required."})

    student = Account.objects.filter(pk=student_id).first()
    if student is None:
        raise NotFoundError("Student not found.")

    change_request = ProfileChangeRequest.objects.create(
        student=student,
        student_name=student.name,
        student_email=student.email,
        requested_changes=changes,
        status=RequestStatus.PENDING,
    )
    logger.info("Profile change request %s submitted by %s", change_request.pk, student.email)
    return change_request


def _apply_changes(change_request, account):
    if account is None:
        logger.warning(
            "Profile change request %s approved but account %s no longer exists; skipping field copy",
            change_request.pk, change_request.student_id,
        )
        return None

    for field in ProfileChangeRequest.CHANGE_FIELDS:
        value = change_request.requested_changes.get(field)
        if value in (None, ''):
            continue
        if field == 'email':
            value = normalize_email(value)
        setattr(account, field, value)
    account.save()
    return account


def resolve_profile_request(change_request, status, comment=None):
    """
    Approve or reject a pending request in place.

    Approval copies the present fields onto the student's account. A missing
    account skips the copy but the status change is still saved.
    """
    current = RequestStatus(change_request.status)
    if current.is_terminal:
        raise ValidationError({"status": f"Request {change_request.pk} is already {current.value}."})

    target = RequestStatus(status)
    if not target.is_terminal:
        raise ValidationError({"status": "Status must be 'approved' or 'rejected'."})

    account = None
    if target is RequestStatus.APPROVED:
        account = Account.objects.filter(pk=change_request.student_id).first()
        new_email = change_request.requested_changes.get('email')
        # only a live account can clash with another account's email
        if account is not None and new_email:
            ensure_email_available(new_email, exclude_pk=account.pk)

    change_request.status = target.value
    change_request.admin_comment = comment or ''
    change_request.resolved_at = timezone.now()
    change_request.save(update_fields=['status', 'admin_comment', 'resolved_at'])

    if target is RequestStatus.APPROVED:
        _apply_changes(change_request, account)

    logger.info("Profile change request %s %s", change_request.pk, target.value)
    return change_request


def delete_profile_request(pk):
    """Remove a request; deleting an absent id is not an error."""
    deleted, _ = ProfileChangeRequest.objects.filter(pk=pk).delete()
    logger.info("Profile change request %s delete (%s rows)", pk, deleted)
    return deleted

# core/choices.py
from django.db import models


class Role(models.TextChoices):
    ADMIN = 'admin', 'Admin'
    STUDENT = 'student', 'Student'
    LECTURER = 'lecturer', 'Lecturer (admin view)'

    @property
    def requires_approval(self):
        """Admins may log in without the approval flag; every other role needs it."""
        if self is Role.ADMIN:
            return False
        if self in (Role.STUDENT, Role.LECTURER):
            return True
        raise ValueError(f"Unhandled role {self!r}")


class MaterialKind(models.TextChoices):
    RECORDING = 'recording', 'Recording'
    DOCUMENT = 'document', 'Document'


class RequestStatus(models.TextChoices):
    PENDING = 'pending', 'Pending Approval'
    APPROVED = 'approved', 'Approved'
    REJECTED = 'rejected', 'Rejected'

    @property
    def is_terminal(self):
        if self is RequestStatus.PENDING:
            return False
        if self in (RequestStatus.APPROVED, RequestStatus.REJECTED):
            return True
        raise ValueError(f"Unhandled request status {self!r}")

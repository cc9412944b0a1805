# accounts/models.py
from django.contrib.auth.hashers import check_password, make_password
from django.db import models
from django.utils import timezone

from core.choices import RequestStatus, Role


def normalize_email(email):
    return (email or '').strip().lower()


class Account(models.Model):
    """
    A login-capable portal account (student, admin or lecturer view).

    Portal accounts are separate from Django's auth users, which only serve
    the Django admin site.
    """
    name = models.CharField(max_length=255, blank=True)
    email = models.EmailField(max_length=255, unique=True)
    password = models.CharField(max_length=128)
    phone = models.CharField(max_length=50, blank=True)
    address = models.TextField(blank=True)
    role = models.CharField(max_length=20, choices=Role.choices, default=Role.STUDENT)
    is_approved = models.BooleanField(default=False)
    permitted_courses = models.JSONField(default=list, blank=True)  # e.g. ["Maths", "Physics"]
    assigned_lecturers = models.ManyToManyField('catalog.Lecturer', blank=True, related_name='students')
    created_at = models.DateTimeField(default=timezone.now, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at', '-id']

    def save(self, *args, **kwargs):
        self.email = normalize_email(self.email)
        super().save(*args, **kwargs)

    def set_password(self, raw_password):
        self.password = make_password(raw_password)

    def check_password(self, raw_password):
        return check_password(raw_password, self.password)

    @property
    def can_log_in(self):
        return self.is_approved or not Role(self.role).requires_approval

    def __str__(self):
        return f"{self.email} ({self.role})"


class ProfileChangeRequest(models.Model):
    """
    A student's proposed edit to their own account, applied on admin approval.

    The student reference may dangle once the account is deleted.
    """
    CHANGE_FIELDS = ('name', 'email', 'phone', 'address')

    student = models.ForeignKey(
        Account,
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name='profile_requests',
    )
    student_name = models.CharField(max_length=255, blank=True)
    student_email = models.EmailField(max_length=255)
    requested_changes = models.JSONField(default=dict)
    status = models.CharField(max_length=20, choices=RequestStatus.choices, default=RequestStatus.PENDING)
    admin_comment = models.TextField(blank=True)
    created_at = models.DateTimeField(default=timezone.now, db_index=True)
    resolved_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        ordering = ['-created_at', '-id']

    def __str__(self):
        return f"Request {self.pk} by {self.student_email} ({self.status})"

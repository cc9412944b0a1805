# catalog/models.py
from django.db import models
from django.utils import timezone

from core.choices import MaterialKind


class Lecturer(models.Model):
    """Lecturer profile used to attribute materials. Lecturers do not log in."""
    name = models.CharField(max_length=255)
    email = models.EmailField(max_length=255, unique=True)
    department = models.CharField(max_length=255, blank=True)
    bio = models.TextField(blank=True)
    photo_url = models.CharField(max_length=1000, blank=True)
    roles = models.JSONField(default=list, blank=True)
    qualifications = models.JSONField(default=list, blank=True)
    achievements = models.JSONField(default=list, blank=True)
    specializations = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['name']

    def save(self, *args, **kwargs):
        self.email = (self.email or '').strip().lower()
        super().save(*args, **kwargs)

    def __str__(self):
        return self.name


class Material(models.Model):
    title = models.CharField(max_length=255)
    kind = models.CharField(max_length=20, choices=MaterialKind.choices, default=MaterialKind.RECORDING)

    # exactly one of these is set, depending on kind
    video_url = models.CharField(max_length=1000, blank=True)
    file_url = models.CharField(max_length=1000, blank=True)

    course_name = models.CharField(max_length=255, null=True, blank=True, db_index=True)

    # Deleting a lecturer leaves the id behind; readers treat it as unresolved.
    lecturer = models.ForeignKey(
        Lecturer,
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        null=True,
        blank=True,
        related_name='materials',
    )
    description = models.TextField(blank=True)
    created_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        ordering = ['-created_at', '-id']

    def save(self, *args, **kwargs):
        if self.course_name is not None:
            self.course_name = self.course_name.strip() or None
        super().save(*args, **kwargs)

    @property
    def content_url(self):
        kind = MaterialKind(self.kind)
        if kind is MaterialKind.RECORDING:
            return self.video_url
        if kind is MaterialKind.DOCUMENT:
            return self.file_url
        raise ValueError(f"Unhandled material kind {kind!r}")

    def __str__(self):
        return self.title

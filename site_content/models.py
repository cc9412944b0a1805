# site_content/models.py
from django.db import models
from django.utils import timezone

DEFAULT_HERO_TITLE = 'Advanced Masterclass in Academic English Communication & Presentation Skills'
DEFAULT_HERO_SUBTITLE = (
    'Mode: 100% Online | Duration: 2 Months | '
    'Course Fee: LKR 12,000/- (Payable in two installments)'
)


class Banner(models.Model):
    title = models.CharField(max_length=255)
    image_url = models.CharField(max_length=1000)
    link_url = models.CharField(max_length=1000, blank=True)
    active = models.BooleanField(default=True)
    order = models.IntegerField(default=0)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ['order', '-created_at', '-id']

    def __str__(self):
        return self.title


class HomeContent(models.Model):
    """Hero text and background for the home page. There is only ever one row."""
    hero_title = models.CharField(max_length=500, default=DEFAULT_HERO_TITLE)
    hero_subtitle = models.CharField(max_length=1000, default=DEFAULT_HERO_SUBTITLE)
    background_url = models.CharField(max_length=1000, blank=True, default='')
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name_plural = 'home content'

    @classmethod
    def load(cls):
        """The stored row, or an unsaved instance carrying the defaults."""
        return cls.objects.order_by('pk').first() or cls()

    def __str__(self):
        return self.hero_title

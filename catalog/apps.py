"""
catalog/apps.py
App configuration for the lecturer directory and material catalog
"""
from django.apps import AppConfig


class CatalogConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'catalog'
    verbose_name = 'Lecturers & Materials'

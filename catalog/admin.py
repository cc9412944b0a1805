# catalog/admin.py
from django.contrib import admin
from django.utils.html import format_html

from .models import Lecturer, Material


@admin.register(Lecturer)
class LecturerAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'email', 'department', 'created_at')
    search_fields = ('name', 'email', 'department')
    readonly_fields = ('created_at',)


@admin.register(Material)
class MaterialAdmin(admin.ModelAdmin):
    list_display = ('id', 'title', 'kind', 'course_name', 'lecturer_id', 'created_at', 'content_link')
    search_fields = ('title', 'course_name', 'description')
    list_filter = ('kind', 'course_name', 'created_at')
    raw_id_fields = ('lecturer',)

    def content_link(self, obj):
        if obj.content_url:
            return format_html('<a href="{}" target="_blank">Open</a>', obj.content_url)
        return "-"
    content_link.short_description = 'Content'

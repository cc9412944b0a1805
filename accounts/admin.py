# accounts/admin.py
from django.contrib import admin, messages
from django.utils.html import format_html
from rest_framework.exceptions import APIException

from core.choices import RequestStatus
from . import services
from .models import Account, ProfileChangeRequest


@admin.register(Account)
class AccountAdmin(admin.ModelAdmin):
    list_display = ('id', 'email', 'name', 'role', 'is_approved', 'created_at')
    list_filter = ('role', 'is_approved', 'created_at')
    search_fields = ('email', 'name', 'phone')
    readonly_fields = ('password', 'created_at', 'updated_at')
    filter_horizontal = ('assigned_lecturers',)
    actions = ['approve_accounts']

    def approve_accounts(self, request, queryset):
        count = 0
        for account in queryset.filter(is_approved=False):
            services.approve_account(account)
            count += 1
        self.message_user(request, f'{count} accounts approved')
    approve_accounts.short_description = "Approve selected accounts"


@admin.register(ProfileChangeRequest)
class ProfileChangeRequestAdmin(admin.ModelAdmin):
    list_display = ('id', 'student_email', 'student_name', 'requested_fields', 'status_badge', 'created_at')
    list_filter = ('status', 'created_at')
    search_fields = ('student_email', 'student_name')
    readonly_fields = ('student', 'student_name', 'student_email', 'requested_changes', 'created_at', 'resolved_at')
    actions = ['approve_requests', 'reject_requests']
    list_per_page = 25

    def requested_fields(self, obj):
        return ', '.join(sorted(obj.requested_changes or {})) or '-'
    requested_fields.short_description = 'Fields'

    def status_badge(self, obj):
        color = {
            RequestStatus.PENDING: 'orange',
            RequestStatus.APPROVED: 'green',
            RequestStatus.REJECTED: 'red',
        }.get(obj.status, 'gray')

        return format_html(
            '<span style="background-color: {}; color: white; padding: 3px 8px; border-radius: 12px;">{}</span>',
            color,
            obj.get_status_display(),
        )
    status_badge.short_description = 'Status'

    def _resolve(self, request, queryset, target):
        resolved = 0
        for change_request in queryset.filter(status=RequestStatus.PENDING):
            try:
                services.resolve_profile_request(change_request, target)
                resolved += 1
            except APIException as exc:
                self.message_user(request, f'Request {change_request.pk}: {exc.detail}', level=messages.ERROR)
        self.message_user(request, f'{resolved} requests {target}')

    def approve_requests(self, request, queryset):
        self._resolve(request, queryset, RequestStatus.APPROVED)
    approve_requests.short_description = "Approve selected requests"

    def reject_requests(self, request, queryset):
        self._resolve(request, queryset, RequestStatus.REJECTED)
    reject_requests.short_description = "Reject selected requests"

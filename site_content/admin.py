# site_content/admin.py
from django.contrib import admin

from .models import Banner, HomeContent


@admin.register(Banner)
class BannerAdmin(admin.ModelAdmin):
    list_display = ('title', 'active', 'order', 'created_at')
    list_filter = ('active',)
    list_editable = ('active', 'order')
    search_fields = ('title',)


@admin.register(HomeContent)
class HomeContentAdmin(admin.ModelAdmin):
    list_display = ['hero_title', 'updated_at']

    def has_add_permission(self, request):
        # Only allow one home content row
        return HomeContent.objects.count() == 0

    def has_delete_permission(self, request, obj=None):
        return False

# tuition_portal/urls.py
from django.contrib import admin
from django.urls import include, path

from accounts import urls as account_urls
from catalog import urls as catalog_urls
from site_content import urls as site_urls

urlpatterns = [
    # Django's own admin site; the portal's admin API lives under /admin/
    path('django-admin/', admin.site.urls),

    path('auth/', include(account_urls.auth_urlpatterns)),
    path('admin/', include(catalog_urls.admin_urlpatterns)),
    path('admin/', include(account_urls.admin_urlpatterns)),
    path('admin/', include(site_urls.admin_urlpatterns)),
    path('student/', include(catalog_urls.student_urlpatterns)),
    path('student/', include(account_urls.student_urlpatterns)),
    path('api/', include(site_urls.public_urlpatterns)),
]

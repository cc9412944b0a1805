# site_content/urls.py
from django.urls import path
from rest_framework.routers import SimpleRouter

from .views import ActiveBannerListView, AssetUploadView, BannerViewSet, HomeContentView, StatsView

router = SimpleRouter()
router.register('banners', BannerViewSet, basename='banner')

# mounted under /admin/
admin_urlpatterns = router.urls + [
    path('home-content/', HomeContentView.as_view(http_method_names=['put', 'options']), name='admin-home-content'),
    path('uploads/<str:asset_class>/', AssetUploadView.as_view(), name='asset-upload'),
]

# mounted under /api/
public_urlpatterns = [
    path('banners/', ActiveBannerListView.as_view(), name='active-banners'),
    path('home-content/', HomeContentView.as_view(http_method_names=['get', 'head', 'options']), name='home-content'),
    path('admin/stats/', StatsView.as_view(), name='admin-stats'),
]

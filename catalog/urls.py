# catalog/urls.py
from django.urls import path
from rest_framework.routers import SimpleRouter

from .views import LecturerViewSet, MaterialViewSet, StudentMaterialListView

router = SimpleRouter()
router.register('materials', MaterialViewSet, basename='material')
router.register('lecturers', LecturerViewSet, basename='lecturer')

# mounted under /admin/
admin_urlpatterns = router.urls + [
    path('upload/', MaterialViewSet.as_view({'post': 'create'}), name='material-upload'),
]

# mounted under /student/
student_urlpatterns = [
    path('my-materials/', StudentMaterialListView.as_view(), name='student-materials'),
]

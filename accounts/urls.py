# accounts/urls.py
from django.urls import path
from rest_framework.routers import SimpleRouter

from .views import (
    AccountViewSet,
    ApproveAccountView,
    LoginAPIView,
    PendingAccountListView,
    ProfileRequestAdminViewSet,
    RejectAccountView,
    SignupAPIView,
    StudentProfileRequestView,
)

router = SimpleRouter()
router.register('users', AccountViewSet, basename='account')
router.register('profile-requests', ProfileRequestAdminViewSet, basename='profile-request')

# mounted under /auth/
auth_urlpatterns = [
    path('login/', LoginAPIView.as_view(), name='login'),
    path('signup/', SignupAPIView.as_view(), name='signup'),
]

# mounted under /admin/
admin_urlpatterns = router.urls + [
    path('pending-users/', PendingAccountListView.as_view(), name='pending-users'),
    path('approve-user/<int:pk>/', ApproveAccountView.as_view(), name='approve-user'),
    path('reject-user/<int:pk>/', RejectAccountView.as_view(), name='reject-user'),
]

# mounted under /student/
student_urlpatterns = [
    path('profile-requests/', StudentProfileRequestView.as_view(), name='student-profile-requests'),
]

# Make accounts.views a proper package and re-export common view symbols
from .auth import LoginAPIView, SignupAPIView
from .users import AccountViewSet, PendingAccountListView, ApproveAccountView, RejectAccountView
from .profile_requests import StudentProfileRequestView, ProfileRequestAdminViewSet

__all__ = [
    "LoginAPIView",
    "SignupAPIView",
    "AccountViewSet",
    "PendingAccountListView",
    "ApproveAccountView",
    "RejectAccountView",
    "StudentProfileRequestView",
    "ProfileRequestAdminViewSet",
]

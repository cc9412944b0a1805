# accounts/views/users.py
import logging

from rest_framework import generics, status, viewsets
from rest_framework.generics import get_object_or_404
from rest_framework.response import Response
from rest_framework.views import APIView

from .. import services
from ..models import Account
from ..serializers import AccountSerializer, ApproveAccountSerializer

logger = logging.getLogger(__name__)


class AccountListMixin:
    """Serialize account lists with assigned lecturers resolved in bulk."""

    def list(self, request, *args, **kwargs):
        accounts = list(self.filter_queryset(self.get_queryset()))
        context = self.get_serializer_context()
        context['assigned_lecturers'] = services.assigned_lecturer_index(accounts)
        serializer = self.get_serializer(accounts, many=True, context=context)
        return Response(serializer.data)


class AccountViewSet(AccountListMixin, viewsets.ModelViewSet):
    """Admin CRUD for portal accounts. Accounts created here are pre-approved."""
    queryset = Account.objects.all().order_by('-created_at', '-id')
    serializer_class = AccountSerializer
    lookup_value_regex = r'\d+'

    def perform_destroy(self, instance):
        logger.info("Deleting account %s", instance.email)
        instance.delete()


class PendingAccountListView(AccountListMixin, generics.ListAPIView):
    """GET /admin/pending-users/ - accounts still waiting for approval."""
    queryset = Account.objects.filter(is_approved=False).order_by('-created_at', '-id')
    serializer_class = AccountSerializer


class ApproveAccountView(APIView):
    """
    POST /admin/approve-user/<id>/
    Optional body: { "assignedLecturers": [1, 2] }
    """

    def post(self, request, pk):
        account = get_object_or_404(Account, pk=pk)
        serializer = ApproveAccountSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        services.approve_account(account, serializer.validated_data.get('assignedLecturers'))
        return Response({
            "msg": "User approved successfully",
            "user": AccountSerializer(account).data,
        }, status=status.HTTP_200_OK)


class RejectAccountView(APIView):
    """DELETE /admin/reject-user/<id>/ - removes the account outright."""

    def delete(self, request, pk):
        account = get_object_or_404(Account, pk=pk)
        services.reject_account(account)
        return Response({"msg": "User rejected and deleted successfully"}, status=status.HTTP_200_OK)

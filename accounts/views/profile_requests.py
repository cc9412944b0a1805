# accounts/views/profile_requests.py
import logging

from rest_framework import mixins, status, viewsets
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import APIView

from core.choices import RequestStatus
from .. import services
from ..models import ProfileChangeRequest
from ..serializers import (
    ProfileRequestResolveSerializer,
    ProfileRequestSerializer,
    ProfileRequestSubmitSerializer,
)

logger = logging.getLogger(__name__)


class StudentProfileRequestView(APIView):
    """
    POST /student/profile-requests/  { studentId, requestedChanges: {name?, email?, phone?, address?} }
    GET  /student/profile-requests/?studentId=<id>
    """

    def get(self, request):
        student_id = request.query_params.get('studentId')
        if not student_id:
            raise ValidationError({"studentId": "Student id is required."})
        try:
            student_id = int(student_id)
        except (TypeError, ValueError):
            raise ValidationError({"studentId": "Student id must be an integer."})

        change_requests = ProfileChangeRequest.objects.filter(student_id=student_id).order_by('-created_at', '-id')
        return Response(ProfileRequestSerializer(change_requests, many=True).data)

    def post(self, request):
        serializer = ProfileRequestSubmitSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        change_request = services.submit_profile_request(
            serializer.validated_data['studentId'],
            serializer.validated_data['requestedChanges'],
        )
        return Response({
            "msg": "Profile change request submitted",
            "request": ProfileRequestSerializer(change_request).data,
        }, status=status.HTTP_201_CREATED)


class ProfileRequestAdminViewSet(mixins.ListModelMixin,
                                 mixins.RetrieveModelMixin,
                                 viewsets.GenericViewSet):
    """
    Admin queue of profile change requests.
    PUT resolves (approve/reject); DELETE removes and always reports success.
    """
    serializer_class = ProfileRequestSerializer
    lookup_value_regex = r'\d+'

    def get_queryset(self):
        qs = ProfileChangeRequest.objects.all().order_by('-created_at', '-id')
        status_filter = self.request.query_params.get('status')
        if status_filter:
            if status_filter not in RequestStatus.values:
                raise ValidationError({"status": f"Unknown status '{status_filter}'."})
            qs = qs.filter(status=status_filter)
        return qs

    def update(self, request, pk=None):
        change_request = self.get_object()
        serializer = ProfileRequestResolveSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        services.resolve_profile_request(
            change_request,
            serializer.validated_data['status'],
            serializer.validated_data.get('adminComment'),
        )
        return Response({
            "msg": f"Request {change_request.status}",
            "request": ProfileRequestSerializer(change_request).data,
        }, status=status.HTTP_200_OK)

    def destroy(self, request, pk=None):
        services.delete_profile_request(pk)
        return Response({"msg": "Request deleted successfully"}, status=status.HTTP_200_OK)

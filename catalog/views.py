# catalog/views.py
import logging

from rest_framework import generics, status, viewsets
from rest_framework.generics import get_object_or_404
from rest_framework.response import Response

from accounts.models import Account
from core.choices import Role
from core.exceptions import PendingApprovalError
from .models import Lecturer, Material
from .serializers import LecturerSerializer, MaterialSerializer
from .visibility import (
    lecturer_index,
    materials_for_account,
    parse_lecturer_ids,
    split_param_values,
    visible_materials,
)

logger = logging.getLogger(__name__)


class LecturerViewSet(viewsets.ModelViewSet):
    """
    Admin CRUD for lecturer profiles.
    Deleting a lecturer leaves their materials in place.
    """
    queryset = Lecturer.objects.all().order_by('name')
    serializer_class = LecturerSerializer

    def perform_create(self, serializer):
        lecturer = serializer.save()
        logger.info("Lecturer %s added (%s)", lecturer.pk, lecturer.email)

    def perform_destroy(self, instance):
        logger.info("Deleting lecturer %s; %s materials keep the reference", instance.pk, instance.materials.count())
        instance.delete()


class MaterialViewSet(viewsets.ModelViewSet):
    """Admin CRUD for learning materials, newest first."""
    queryset = Material.objects.all().order_by('-created_at', '-id')
    serializer_class = MaterialSerializer

    def list(self, request, *args, **kwargs):
        materials = list(self.filter_queryset(self.get_queryset()))
        context = self.get_serializer_context()
        context['lecturers'] = lecturer_index(materials)
        serializer = self.get_serializer(materials, many=True, context=context)
        return Response(serializer.data)

    def perform_create(self, serializer):
        material = serializer.save()
        logger.info("Material %s uploaded (%s, course=%s)", material.pk, material.kind, material.course_name)


class StudentMaterialListView(generics.ListAPIView):
    """
    GET /student/my-materials/?courses=Maths,Physics&lecturers=1,2
    GET /student/my-materials/?studentId=<id>

    Lists the materials the student may see. Course and lecturer sets come
    from the query string, or from the stored account when ``studentId`` is
    given.
    """
    serializer_class = MaterialSerializer

    def get_queryset(self):
        params = self.request.query_params
        student_id = params.get('studentId')
        if student_id:
            account = get_object_or_404(Account, pk=student_id)
            if Role(account.role).requires_approval and not account.is_approved:
                raise PendingApprovalError()
            return materials_for_account(account)

        courses = split_param_values(params.getlist('courses'))
        lecturer_ids = parse_lecturer_ids(params.getlist('lecturers'))
        return visible_materials(courses, lecturer_ids)

    def list(self, request, *args, **kwargs):
        materials = list(self.get_queryset())
        context = self.get_serializer_context()
        context['lecturers'] = lecturer_index(materials)
        serializer = self.get_serializer(materials, many=True, context=context)
        return Response(serializer.data, status=status.HTTP_200_OK)

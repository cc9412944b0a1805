# site_content/views.py
import logging
from datetime import timedelta

from django.db.models import Count
from django.utils import timezone
from rest_framework import generics, status, viewsets
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.models import Account
from catalog.models import Lecturer, Material
from core.choices import Role
from core.cloudinary_utils import upload_asset
from .models import Banner, HomeContent
from .serializers import AssetUploadSerializer, BannerSerializer, HomeContentSerializer

logger = logging.getLogger(__name__)


class BannerViewSet(viewsets.ModelViewSet):
    """Admin CRUD for home page and dashboard banners."""
    queryset = Banner.objects.all().order_by('order', '-created_at', '-id')
    serializer_class = BannerSerializer


class ActiveBannerListView(generics.ListAPIView):
    """GET /api/banners/ - active banners in display order."""
    queryset = Banner.objects.filter(active=True).order_by('order', '-created_at', '-id')
    serializer_class = BannerSerializer


class HomeContentView(APIView):
    """
    GET /api/home-content/ (public) returns the stored hero content or the defaults.
    PUT /admin/home-content/ updates it, creating the row on first write.
    """

    def get(self, request):
        return Response(HomeContentSerializer(HomeContent.load()).data)

    def put(self, request):
        content = HomeContent.load()
        serializer = HomeContentSerializer(content, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        logger.info("Home content updated")
        return Response(serializer.data, status=status.HTTP_200_OK)


class StatsView(APIView):
    """GET /api/admin/stats/ - headline counts for the admin dashboard."""

    def get(self, request):
        seven_days_ago = timezone.now() - timedelta(days=7)
        top_courses = (
            Material.objects.values('course_name')
            .annotate(count=Count('id'))
            .order_by('-count', 'course_name')[:5]
        )

        return Response({
            'totalStudents': Account.objects.filter(role=Role.STUDENT).count(),
            'totalAdmins': Account.objects.filter(role=Role.ADMIN).count(),
            'pendingCount': Account.objects.filter(is_approved=False).count(),
            'totalMaterials': Material.objects.count(),
            'totalLecturers': Lecturer.objects.count(),
            'signupsLast7Days': Account.objects.filter(created_at__gte=seven_days_ago).count(),
            'topCourses': [
                {'courseName': row['course_name'], 'count': row['count']}
                for row in top_courses
            ],
            'status': 'Operational',
        })


class AssetUploadView(APIView):
    """
    POST /admin/uploads/<asset_class>/ (multipart/form-data, field "file")
    asset_class is one of banner, lecturer, document.
    Returns: { "url": "https://..." }
    """
    parser_classes = (MultiPartParser, FormParser)

    def post(self, request, asset_class):
        serializer = AssetUploadSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        url = upload_asset(serializer.validated_data['file'], asset_class)
        return Response({'url': url}, status=status.HTTP_201_CREATED)

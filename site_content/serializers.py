# site_content/serializers.py
from rest_framework import serializers

from .models import Banner, HomeContent


class BannerSerializer(serializers.ModelSerializer):
    imageUrl = serializers.CharField(source='image_url', max_length=1000)
    linkUrl = serializers.CharField(source='link_url', required=False, allow_blank=True, max_length=1000)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Banner
        fields = ('id', 'title', 'imageUrl', 'linkUrl', 'active', 'order', 'createdAt')
        read_only_fields = ('id', 'createdAt')


class HomeContentSerializer(serializers.ModelSerializer):
    heroTitle = serializers.CharField(source='hero_title', required=False, max_length=500)
    heroSubtitle = serializers.CharField(source='hero_subtitle', required=False, max_length=1000)
    backgroundUrl = serializers.CharField(source='background_url', required=False, allow_blank=True, max_length=1000)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = HomeContent
        fields = ('heroTitle', 'heroSubtitle', 'backgroundUrl', 'updatedAt')


class AssetUploadSerializer(serializers.Serializer):
    file = serializers.FileField()

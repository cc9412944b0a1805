# catalog/serializers.py
from rest_framework import serializers

from core.choices import MaterialKind
from core.exceptions import DuplicateError
from .models import Lecturer, Material


class LecturerSerializer(serializers.ModelSerializer):
    email = serializers.EmailField(max_length=255)
    photoUrl = serializers.CharField(source='photo_url', required=False, allow_blank=True, max_length=1000)
    roles = serializers.ListField(child=serializers.CharField(), required=False)
    qualifications = serializers.ListField(child=serializers.CharField(), required=False)
    achievements = serializers.ListField(child=serializers.CharField(), required=False)
    specializations = serializers.ListField(child=serializers.CharField(), required=False)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Lecturer
        fields = (
            'id', 'name', 'email', 'department', 'bio', 'photoUrl',
            'roles', 'qualifications', 'achievements', 'specializations', 'createdAt',
        )
        read_only_fields = ('id', 'createdAt')

    def validate_email(self, value):
        """Lecturer emails are unique regardless of case."""
        value = value.strip().lower()
        qs = Lecturer.objects.filter(email=value)
        if self.instance is not None:
            qs = qs.exclude(pk=self.instance.pk)
        if qs.exists():
            raise DuplicateError("Lecturer with that email already exists.")
        return value


class LecturerLiteSerializer(serializers.ModelSerializer):
    """Small lecturer representation inlined into materials and accounts."""
    photoUrl = serializers.CharField(source='photo_url', read_only=True)

    class Meta:
        model = Lecturer
        fields = ('id', 'name', 'photoUrl')


class MaterialSerializer(serializers.ModelSerializer):
    type = serializers.ChoiceField(source='kind', choices=MaterialKind.choices, required=False)
    videoUrl = serializers.CharField(source='video_url', required=False, allow_blank=True, max_length=1000)
    fileUrl = serializers.CharField(source='file_url', required=False, allow_blank=True, max_length=1000)
    courseName = serializers.CharField(
        source='course_name', required=False, allow_blank=True, allow_null=True, max_length=255
    )
    lecturerId = serializers.PrimaryKeyRelatedField(
        source='lecturer', queryset=Lecturer.objects.all(), required=False, allow_null=True
    )
    lecturer = serializers.SerializerMethodField()
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Material
        fields = (
            'id', 'title', 'type', 'videoUrl', 'fileUrl', 'courseName',
            'lecturerId', 'lecturer', 'description', 'createdAt',
        )
        read_only_fields = ('id', 'lecturer', 'createdAt')

    def get_lecturer(self, obj):
        """
        Inline the lecturer's display fields.

        Uses the ``lecturers`` index from the context when the view resolved
        it up front (see ``catalog.visibility.lecturer_index``); otherwise
        looks the single lecturer up. Dangling ids render as None.
        """
        if obj.lecturer_id is None:
            return None
        index = self.context.get('lecturers')
        if index is None:
            lecturer = Lecturer.objects.filter(pk=obj.lecturer_id).first()
        else:
            lecturer = index.get(obj.lecturer_id)
        if lecturer is None:
            return None
        return LecturerLiteSerializer(lecturer).data

    def validate(self, attrs):
        instance = self.instance
        kind = attrs.get('kind', getattr(instance, 'kind', MaterialKind.RECORDING))
        video_url = attrs.get('video_url', getattr(instance, 'video_url', ''))
        file_url = attrs.get('file_url', getattr(instance, 'file_url', ''))

        kind = MaterialKind(kind)
        if kind is MaterialKind.RECORDING:
            if not video_url:
                raise serializers.ValidationError({"videoUrl": "A recording needs a video URL."})
            if file_url:
                raise serializers.ValidationError({"fileUrl": "A recording cannot carry a document URL."})
        elif kind is MaterialKind.DOCUMENT:
            if not file_url:
                raise serializers.ValidationError({"fileUrl": "A document needs a document URL."})
            if video_url:
                raise serializers.ValidationError({"videoUrl": "A document cannot carry a video URL."})
        else:
            raise serializers.ValidationError({"type": f"Unhandled material type '{kind}'."})

        attrs['kind'] = kind.value
        return attrs

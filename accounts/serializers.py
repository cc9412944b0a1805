# accounts/serializers.py
from rest_framework import serializers

from catalog.models import Lecturer
from catalog.serializers import LecturerLiteSerializer
from core.choices import RequestStatus, Role
from . import services
from .models import Account, ProfileChangeRequest


class AccountSerializer(serializers.ModelSerializer):
    """
    Admin view of an account.

    ``assignedLecturers`` is written as a list of lecturer ids and read back as
    ids, with a ``lecturers`` list of display names alongside. The view may pass
    a pre-resolved ``assigned_lecturers`` index (see
    ``services.assigned_lecturer_index``) in the context.
    """
    email = serializers.EmailField(max_length=255)
    password = serializers.CharField(write_only=True, required=False, min_length=1)
    role = serializers.ChoiceField(choices=Role.choices, required=False)
    isApproved = serializers.BooleanField(source='is_approved', required=False)
    permittedCourses = serializers.ListField(
        source='permitted_courses', child=serializers.CharField(), required=False
    )
    assignedLecturers = serializers.PrimaryKeyRelatedField(
        source='assigned_lecturers', queryset=Lecturer.objects.all(), many=True, required=False, write_only=True
    )
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Account
        fields = (
            'id', 'name', 'email', 'password', 'phone', 'address', 'role', 'isApproved',
            'permittedCourses', 'assignedLecturers', 'createdAt',
        )
        read_only_fields = ('id', 'createdAt')

    def validate_email(self, value):
        exclude_pk = self.instance.pk if self.instance is not None else None
        return services.ensure_email_available(value, exclude_pk=exclude_pk)

    def validate_permittedCourses(self, value):
        courses = []
        for course in value:
            course = course.strip()
            if course and course not in courses:
                courses.append(course)
        return courses

    def create(self, validated_data):
        password = validated_data.pop('password', None)
        if not password:
            raise serializers.ValidationError({"password": "Password is required."})
        lecturers = validated_data.pop('assigned_lecturers', None)
        validated_data.pop('is_approved', None)
        return services.create_account(password=password, lecturers=lecturers, **validated_data)

    def update(self, instance, validated_data):
        password = validated_data.pop('password', None)
        lecturers = validated_data.pop('assigned_lecturers', None)
        for attr, value in validated_data.items():
            setattr(instance, attr, value)
        if password:
            instance.set_password(password)
        instance.save()
        if lecturers is not None:
            instance.assigned_lecturers.set(lecturers)
        return instance

    def to_representation(self, instance):
        data = super().to_representation(instance)
        index = self.context.get('assigned_lecturers')
        if index is None:
            index = services.assigned_lecturer_index([instance])
        lecturers = index.get(instance.pk, [])
        data['assignedLecturers'] = [lecturer.pk for lecturer in lecturers]
        data['lecturers'] = LecturerLiteSerializer(lecturers, many=True).data
        return data


class SignupSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    email = serializers.EmailField(max_length=255)
    password = serializers.CharField(write_only=True)


class LoginSerializer(serializers.Serializer):
    email = serializers.CharField()
    password = serializers.CharField(trim_whitespace=False)


class ApproveAccountSerializer(serializers.Serializer):
    assignedLecturers = serializers.PrimaryKeyRelatedField(
        queryset=Lecturer.objects.all(), many=True, required=False
    )


class ChangesetSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255, required=False, allow_blank=True, allow_null=True)
    email = serializers.EmailField(max_length=255, required=False, allow_blank=True, allow_null=True)
    phone = serializers.CharField(max_length=50, required=False, allow_blank=True, allow_null=True)
    address = serializers.CharField(required=False, allow_blank=True, allow_null=True)

    def validate(self, attrs):
        changes = {field: value for field, value in attrs.items() if value not in (None, '')}
        if not changes:
            raise serializers.ValidationError("At least one of name, email, phone or address is required.")
        return changes


class ProfileRequestSubmitSerializer(serializers.Serializer):
    studentId = serializers.IntegerField()
    requestedChanges = ChangesetSerializer()


class ProfileRequestSerializer(serializers.ModelSerializer):
    studentId = serializers.IntegerField(source='student_id', read_only=True)
    studentName = serializers.CharField(source='student_name', read_only=True)
    studentEmail = serializers.CharField(source='student_email', read_only=True)
    requestedChanges = serializers.JSONField(source='requested_changes', read_only=True)
    adminComment = serializers.CharField(source='admin_comment', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    resolvedAt = serializers.DateTimeField(source='resolved_at', read_only=True)

    class Meta:
        model = ProfileChangeRequest
        fields = (
            'id', 'studentId', 'studentName', 'studentEmail', 'requestedChanges',
            'status', 'adminComment', 'createdAt', 'resolvedAt',
        )
        read_only_fields = fields


class ProfileRequestResolveSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=[
        (RequestStatus.APPROVED.value, RequestStatus.APPROVED.label),
        (RequestStatus.REJECTED.value, RequestStatus.REJECTED.label),
    ])
    adminComment = serializers.CharField(required=False, allow_blank=True, allow_null=True)

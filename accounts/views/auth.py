# accounts/views/auth.py
import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from .. import services
from ..serializers import LoginSerializer, SignupSerializer

logger = logging.getLogger(__name__)


class SignupAPIView(APIView):
    """
    Accepts: name, email, password
    Creates an unapproved student account; an admin approves it later.
    """

    def post(self, request):
        serializer = SignupSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        services.signup(**serializer.validated_data)
        return Response({"msg": "User registered successfully!"}, status=status.HTTP_201_CREATED)


class LoginAPIView(APIView):
    """
    Accepts: email, password
    Returns: { id, name, email, role, permittedCourses, assignedLecturers, lecturers }
    There is no token; the client keeps this payload to drive its UI.
    """

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        account = services.authenticate(
            serializer.validated_data['email'],
            serializer.validated_data['password'],
        )
        return Response(services.login_payload(account), status=status.HTTP_200_OK)

"""
Doctor registration and login.

Kept apart from :mod:`practice.authentication` so that DRF can load the
authentication class without importing any view module.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from practice.serializers.auth import LoginSerializer
from practice.serializers.doctor import serialize_doctor
from practice.services import auth as auth_service
from practice.services.doctors import create_doctor


@api_view(['POST'])
@permission_classes([AllowAny])
def register_view(request):
    """Register a doctor account.

    Accepts ``fullname``, ``email``, ``password`` and optionally
    ``degree`` and ``phoneNo``.  Duplicate emails answer 409.
    """
    doctor = create_doctor(request.data)
    return Response({
        'success': True,
        'message': 'Doctor registered successfully',
        'doctorId': doctor.id,
        'data': serialize_doctor(doctor),
    }, status=status.HTTP_201_CREATED)


@api_view(['POST'])
@permission_classes([AllowAny])
def login_view(request):
    """Exchange email/password for a bearer token and the public profile."""
    s = LoginSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    token, doctor = auth_service.login(s.validated_data['email'], s.validated_data['password'])
    return Response({
        'success': True,
        'message': 'Doctor logged in',
        'token': token,
        'doctor': serialize_doctor(doctor),
    }, status=status.HTTP_200_OK)

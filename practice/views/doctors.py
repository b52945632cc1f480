"""
Doctor profile endpoints.

All three verbs require a bearer token and only act on the caller's own
profile.  A missing profile answers 404 before ownership is considered.
"""
from __future__ import annotations

from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.exceptions import PermissionDenied
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from practice.authentication import BearerTokenAuthentication
from practice.serializers.doctor import serialize_doctor
from practice.services import doctors as doctor_service


def _check_profile_owner(user, pk: int):
    doctor = doctor_service.get_doctor(pk)
    if user.pk != doctor.pk:
        raise PermissionDenied('You can only manage your own profile')
    return doctor


@api_view(['GET', 'PUT', 'DELETE'])
@authentication_classes([BearerTokenAuthentication])
@permission_classes([IsAuthenticated])
def doctor_profile(request, pk: int):
    doctor = _check_profile_owner(request.user, pk)
    if request.method == 'GET':
        return Response({'success': True, 'data': serialize_doctor(doctor)})
    if request.method == 'PUT':
        doctor = doctor_service.update_doctor(pk, request.data)
        return Response({
            'success': True,
            'message': 'Profile updated successfully',
            'data': serialize_doctor(doctor),
        })
    doctor_service.delete_doctor(pk)
    return Response({'success': True, 'message': 'Doctor deleted successfully'})

"""
Clinic endpoints.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from practice.serializers.clinic import ClinicListQuerySerializer, serialize_clinic
from practice.services import clinics as clinic_service


def _list_response(clinics) -> Response:
    return Response({'success': True, 'count': len(clinics), 'data': [serialize_clinic(c) for c in clinics]})


@api_view(['GET', 'POST'])
@permission_classes([AllowAny])
def clinics_list(request):
    if request.method == 'GET':
        q = ClinicListQuerySerializer(data=request.query_params)
        q.is_valid(raise_exception=True)
        return _list_response(clinic_service.list_clinics(doctor_id=q.validated_data.get('doctor_id')))
    clinic = clinic_service.create_clinic(request.data)
    return Response({
        'success': True,
        'message': 'Clinic created successfully',
        'data': serialize_clinic(clinic),
    }, status=status.HTTP_201_CREATED)


@api_view(['GET'])
@permission_classes([AllowAny])
def clinics_by_doctor(request, doctor_id: int):
    return _list_response(clinic_service.list_clinics(doctor_id=doctor_id))


@api_view(['GET', 'PUT', 'DELETE'])
@permission_classes([AllowAny])
def clinic_detail(request, pk: int):
    if request.method == 'GET':
        return Response({'success': True, 'data': serialize_clinic(clinic_service.get_clinic(pk))})
    if request.method == 'PUT':
        clinic = clinic_service.update_clinic(pk, request.data)
        return Response({
            'success': True,
            'message': 'Clinic updated successfully',
            'data': serialize_clinic(clinic),
        })
    clinic_service.delete_clinic(pk)
    return Response({'success': True, 'message': 'Clinic deleted successfully'})

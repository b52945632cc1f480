"""
Patient endpoints.

Patients are listed per clinic or per doctor; neither listing is
paginated.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from practice.serializers.patient import serialize_patient
from practice.services import patients as patient_service


def _list_response(patients) -> Response:
    return Response({'success': True, 'count': len(patients), 'data': [serialize_patient(p) for p in patients]})


@api_view(['POST'])
@permission_classes([AllowAny])
def patient_create(request):
    patient = patient_service.create_patient(request.data)
    return Response({
        'success': True,
        'message': 'Patient added successfully',
        'data': serialize_patient(patient),
    }, status=status.HTTP_201_CREATED)


@api_view(['GET'])
@permission_classes([AllowAny])
def patients_by_clinic(request, clinic_id: int):
    return _list_response(patient_service.list_patients(clinic_id=clinic_id))


@api_view(['GET'])
@permission_classes([AllowAny])
def patients_by_doctor(request, doctor_id: int):
    return _list_response(patient_service.list_patients(doctor_id=doctor_id))


@api_view(['GET', 'PUT', 'DELETE'])
@permission_classes([AllowAny])
def patient_detail(request, pk: int):
    if request.method == 'GET':
        return Response({'success': True, 'data': serialize_patient(patient_service.get_patient(pk))})
    if request.method == 'PUT':
        patient = patient_service.update_patient(pk, request.data)
        return Response({
            'success': True,
            'message': 'Patient updated successfully',
            'data': serialize_patient(patient),
        })
    patient_service.delete_patient(pk)
    return Response({'success': True, 'message': 'Patient deleted successfully'})

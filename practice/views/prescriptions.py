"""
Prescription endpoints, including a patient's medication history with
the dosing schedule of every prescription nested inside it.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from practice.serializers.prescription import (
    PrescriptionListQuerySerializer,
    serialize_prescription,
    serialize_prescription_with_doses,
)
from practice.services import prescriptions as prescription_service


def _list_response(prescriptions) -> Response:
    return Response({
        'success': True,
        'count': len(prescriptions),
        'data': [serialize_prescription(p) for p in prescriptions],
    })


@api_view(['GET', 'POST'])
@permission_classes([AllowAny])
def prescriptions_list(request):
    if request.method == 'GET':
        q = PrescriptionListQuerySerializer(data=request.query_params)
        q.is_valid(raise_exception=True)
        return _list_response(prescription_service.list_prescriptions(patient_id=q.validated_data.get('patient_id')))
    prescription = prescription_service.create_prescription(request.data)
    return Response({
        'success': True,
        'message': 'Prescription created successfully',
        'data': serialize_prescription(prescription),
    }, status=status.HTTP_201_CREATED)


@api_view(['GET'])
@permission_classes([AllowAny])
def prescriptions_with_doses_by_patient(request, patient_id: int):
    prescriptions = prescription_service.list_patient_prescriptions(patient_id, with_doses=True)
    return Response({
        'success': True,
        'patientId': patient_id,
        'prescriptions': [serialize_prescription_with_doses(p) for p in prescriptions],
    })


@api_view(['GET'])
@permission_classes([AllowAny])
def prescriptions_by_patient(request, patient_id: int):
    return _list_response(prescription_service.list_patient_prescriptions(patient_id))


@api_view(['GET', 'PUT', 'DELETE'])
@permission_classes([AllowAny])
def prescription_detail(request, pk: int):
    if request.method == 'GET':
        return Response({'success': True, 'data': serialize_prescription(prescription_service.get_prescription(pk))})
    if request.method == 'PUT':
        prescription = prescription_service.update_prescription(pk, request.data)
        return Response({
            'success': True,
            'message': 'Prescription updated successfully',
            'data': serialize_prescription(prescription),
        })
    prescription_service.delete_prescription(pk)
    return Response({'success': True, 'message': 'Prescription deleted successfully'})

"""
Dose endpoints (``/pdose``): one medicine line of a prescription.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from practice.serializers.dose import DoseListQuerySerializer, serialize_dose
from practice.services import doses as dose_service


def _list_response(doses) -> Response:
    return Response({'success': True, 'count': len(doses), 'data': [serialize_dose(d) for d in doses]})


@api_view(['GET', 'POST'])
@permission_classes([AllowAny])
def doses_list(request):
    if request.method == 'GET':
        q = DoseListQuerySerializer(data=request.query_params)
        q.is_valid(raise_exception=True)
        return _list_response(dose_service.list_doses(pres_id=q.validated_data.get('pres_id')))
    dose = dose_service.create_dose(request.data)
    return Response({
        'success': True,
        'message': 'Dose created successfully',
        'data': serialize_dose(dose),
    }, status=status.HTTP_201_CREATED)


@api_view(['GET'])
@permission_classes([AllowAny])
def doses_by_prescription(request, pres_id: int):
    return _list_response(dose_service.list_doses(pres_id=pres_id))


@api_view(['GET', 'PUT', 'DELETE'])
@permission_classes([AllowAny])
def dose_detail(request, pk: int):
    if request.method == 'GET':
        return Response({'success': True, 'data': serialize_dose(dose_service.get_dose(pk))})
    if request.method == 'PUT':
        dose = dose_service.update_dose(pk, request.data)
        return Response({
            'success': True,
            'message': 'Dose updated successfully',
            'data': serialize_dose(dose),
        })
    dose_service.delete_dose(pk)
    return Response({'success': True, 'message': 'Dose deleted successfully'})

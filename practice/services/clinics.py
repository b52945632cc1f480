import logging
from typing import Optional, Mapping

from django.db import transaction

from practice.models import Clinic, Doctor
from practice.serializers.clinic import ClinicSerializer
from practice.services.common import apply_changes, ensure_exists, get_or_not_found, validated

logger = logging.getLogger(__name__)


def _clinics():
    return Clinic.objects.select_related('doctor')


@transaction.atomic
def create_clinic(data: Optional[Mapping]) -> Clinic:
    fields = validated(ClinicSerializer, data)
    ensure_exists(Doctor, fields['doctor_id'], 'Doctor')
    clinic = Clinic.objects.create(**fields)
    logger.info('Clinic %s created for doctor %s', clinic.id, clinic.doctor_id)
    return get_clinic(clinic.id)


def get_clinic(pk) -> Clinic:
    return get_or_not_found(_clinics(), pk, 'Clinic')


def list_clinics(*, doctor_id=None) -> list[Clinic]:
    qs = _clinics()
    if doctor_id is not None:
        qs = qs.filter(doctor_id=doctor_id)
    return list(qs.order_by('-created_at', '-id'))


@transaction.atomic
def update_clinic(pk, data: Optional[Mapping]) -> Clinic:
    clinic = get_clinic(pk)
    changes = validated(ClinicSerializer, data, partial=True)
    if 'doctor_id' in changes and changes['doctor_id'] != clinic.doctor_id:
        ensure_exists(Doctor, changes['doctor_id'], 'Doctor')
    if changes:
        fields = apply_changes(clinic, changes)
        clinic.save(update_fields=fields + ['updated_at'])
        logger.info('Clinic %s updated (%s)', clinic.id, ', '.join(sorted(fields)))
    return get_clinic(pk)


@transaction.atomic
def delete_clinic(pk) -> bool:
    clinic = get_clinic(pk)
    clinic.delete()
    logger.info('Clinic %s deleted with its patients', pk)
    return True

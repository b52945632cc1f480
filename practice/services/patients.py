import logging
from typing import Optional, Mapping

from django.db import transaction

from practice.models import Clinic, Doctor, Patient
from practice.serializers.patient import PatientSerializer, age_from_dob
from practice.services.common import apply_changes, ensure_exists, get_or_not_found, validated

logger = logging.getLogger(__name__)


def _patients():
    return Patient.objects.select_related('doctor', 'clinic')


@transaction.atomic
def create_patient(data: Optional[Mapping]) -> Patient:
    fields = validated(PatientSerializer, data)
    ensure_exists(Doctor, fields['doctor_id'], 'Doctor')
    ensure_exists(Clinic, fields['clinic_id'], 'Clinic')
    if fields.get('age') is None:
        fields['age'] = age_from_dob(fields['dob'])
    patient = Patient.objects.create(**fields)
    logger.info('Patient %s created in clinic %s', patient.id, patient.clinic_id)
    return get_patient(patient.id)


def get_patient(pk) -> Patient:
    return get_or_not_found(_patients(), pk, 'Patient')


def list_patients(*, clinic_id=None, doctor_id=None) -> list[Patient]:
    """Most recent first; unpaginated."""
    qs = _patients()
    if clinic_id is not None:
        qs = qs.filter(clinic_id=clinic_id)
    if doctor_id is not None:
        qs = qs.filter(doctor_id=doctor_id)
    return list(qs.order_by('-created_at', '-id'))


@transaction.atomic
def update_patient(pk, data: Optional[Mapping]) -> Patient:
    patient = get_patient(pk)
    changes = validated(PatientSerializer, data, partial=True)
    if 'doctor_id' in changes and changes['doctor_id'] != patient.doctor_id:
        ensure_exists(Doctor, changes['doctor_id'], 'Doctor')
    if 'clinic_id' in changes and changes['clinic_id'] != patient.clinic_id:
        ensure_exists(Clinic, changes['clinic_id'], 'Clinic')
    if 'dob' in changes and 'age' not in changes:
        changes['age'] = age_from_dob(changes['dob'])
    if changes:
        fields = apply_changes(patient, changes)
        patient.save(update_fields=fields + ['updated_at'])
        logger.info('Patient %s updated (%s)', patient.id, ', '.join(sorted(fields)))
    return get_patient(pk)


@transaction.atomic
def delete_patient(pk) -> bool:
    patient = get_patient(pk)
    patient.delete()
    logger.info('Patient %s deleted with its prescriptions', pk)
    return True

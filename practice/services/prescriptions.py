import logging
from typing import Optional, Mapping

from django.db import transaction
from django.db.models import Prefetch

from practice.models import Dose, Patient, Prescription
from practice.serializers.prescription import PrescriptionSerializer
from practice.services.common import apply_changes, ensure_exists, get_or_not_found, validated

logger = logging.getLogger(__name__)


def _prescriptions():
    return Prescription.objects.select_related('patient')


@transaction.atomic
def create_prescription(data: Optional[Mapping]) -> Prescription:
    fields = validated(PrescriptionSerializer, data)
    ensure_exists(Patient, fields['patient_id'], 'Patient')
    prescription = Prescription.objects.create(**fields)
    logger.info('Prescription %s created for patient %s', prescription.id, prescription.patient_id)
    return get_prescription(prescription.id)


def get_prescription(pk) -> Prescription:
    return get_or_not_found(_prescriptions(), pk, 'Prescription')


def list_prescriptions(*, patient_id=None) -> list[Prescription]:
    qs = _prescriptions()
    if patient_id is not None:
        qs = qs.filter(patient_id=patient_id)
    return list(qs.order_by('-created_at', '-id'))


def list_patient_prescriptions(patient_id, *, with_doses: bool = False) -> list[Prescription]:
    """Prescriptions of an existing patient, most recent first."""
    ensure_exists(Patient, patient_id, 'Patient')
    qs = _prescriptions().filter(patient_id=patient_id)
    if with_doses:
        qs = qs.prefetch_related(Prefetch('doses', queryset=Dose.objects.order_by('created_at', 'id')))
    return list(qs.order_by('-created_at', '-id'))


@transaction.atomic
def update_prescription(pk, data: Optional[Mapping]) -> Prescription:
    prescription = get_prescription(pk)
    changes = validated(PrescriptionSerializer, data, partial=True)
    if 'patient_id' in changes and changes['patient_id'] != prescription.patient_id:
        ensure_exists(Patient, changes['patient_id'], 'Patient')
    if changes:
        fields = apply_changes(prescription, changes)
        prescription.save(update_fields=fields + ['updated_at'])
        logger.info('Prescription %s updated (%s)', prescription.id, ', '.join(sorted(fields)))
    return get_prescription(pk)


@transaction.atomic
def delete_prescription(pk) -> bool:
    prescription = get_prescription(pk)
    prescription.delete()
    logger.info('Prescription %s deleted with its doses', pk)
    return True

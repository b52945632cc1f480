import logging
from typing import Optional, Mapping

from django.db import transaction

from practice.models import Dose, Prescription
from practice.serializers.dose import DoseSerializer
from practice.services.common import apply_changes, ensure_exists, get_or_not_found, validated

logger = logging.getLogger(__name__)


def _doses():
    return Dose.objects.select_related('prescription')


@transaction.atomic
def create_dose(data: Optional[Mapping]) -> Dose:
    fields = validated(DoseSerializer, data)
    ensure_exists(Prescription, fields['prescription_id'], 'Prescription')
    dose = Dose.objects.create(**fields)
    logger.info('Dose %s added to prescription %s', dose.id, dose.prescription_id)
    return get_dose(dose.id)


def get_dose(pk) -> Dose:
    return get_or_not_found(_doses(), pk, 'Dose')


def list_doses(*, pres_id=None) -> list[Dose]:
    """All doses newest first; the schedule of one prescription reads oldest first."""
    qs = _doses()
    if pres_id is not None:
        return list(qs.filter(prescription_id=pres_id).order_by('created_at', 'id'))
    return list(qs.order_by('-created_at', '-id'))


@transaction.atomic
def update_dose(pk, data: Optional[Mapping]) -> Dose:
    dose = get_dose(pk)
    changes = validated(DoseSerializer, data, partial=True)
    if 'prescription_id' in changes and changes['prescription_id'] != dose.prescription_id:
        ensure_exists(Prescription, changes['prescription_id'], 'Prescription')
    if changes:
        fields = apply_changes(dose, changes)
        dose.save(update_fields=fields + ['updated_at'])
        logger.info('Dose %s updated (%s)', dose.id, ', '.join(sorted(fields)))
    return get_dose(pk)


@transaction.atomic
def delete_dose(pk) -> bool:
    dose = get_dose(pk)
    dose.delete()
    logger.info('Dose %s deleted', pk)
    return True

"""
Doctor entity access.

Passwords are hashed here, explicitly, right before every write that
sets one; the model itself has no save hooks.
"""
import logging
from typing import Optional, Mapping

from django.db import IntegrityError, transaction

from practice.exceptions import ConflictError
from practice.models import Doctor
from practice.serializers.auth import RegisterSerializer
from practice.serializers.doctor import DoctorUpdateSerializer
from practice.services.auth import hash_password
from practice.services.common import apply_changes, get_or_not_found, validated

logger = logging.getLogger(__name__)


def _prepare_for_write(fields: dict) -> dict:
    if 'email' in fields:
        fields['email'] = Doctor.objects.normalize_email(fields['email'])
    if fields.get('password'):
        fields['password'] = hash_password(fields['password'])
    return fields


def _ensure_email_free(email: str, *, exclude_pk=None) -> None:
    qs = Doctor.objects.filter(email__iexact=email)
    if exclude_pk is not None:
        qs = qs.exclude(pk=exclude_pk)
    if qs.exists():
        raise ConflictError('Email already exists')


def create_doctor(data: Optional[Mapping]) -> Doctor:
    fields = _prepare_for_write(validated(RegisterSerializer, data))
    _ensure_email_free(fields['email'])
    try:
        with transaction.atomic():
            doctor = Doctor.objects.create(**fields)
    except IntegrityError:
        # Lost a race against a concurrent registration of the same email
        raise ConflictError('Email already exists')
    logger.info('Doctor %s registered', doctor.id)
    return doctor


def get_doctor(pk) -> Doctor:
    return get_or_not_found(Doctor.objects.all(), pk, 'Doctor')


def list_doctors() -> list[Doctor]:
    return list(Doctor.objects.order_by('-created_at', '-id'))


def update_doctor(pk, data: Optional[Mapping]) -> Doctor:
    doctor = get_doctor(pk)
    changes = _prepare_for_write(validated(DoctorUpdateSerializer, data, partial=True))
    if 'email' in changes and changes['email'].lower() != doctor.email.lower():
        _ensure_email_free(changes['email'], exclude_pk=doctor.pk)
    if not changes:
        return doctor
    fields = apply_changes(doctor, changes)
    try:
        with transaction.atomic():
            doctor.save(update_fields=fields + ['updated_at'])
    except IntegrityError:
        raise ConflictError('Email already exists')
    logger.info('Doctor %s updated (%s)', doctor.id, ', '.join(sorted(fields)))
    return doctor


@transaction.atomic
def delete_doctor(pk) -> bool:
    doctor = get_doctor(pk)
    doctor.delete()
    logger.info('Doctor %s deleted with all clinics, patients and prescriptions', pk)
    return True

from django.utils import timezone
from rest_framework import serializers

from practice.models import Patient
from .clinic import clinic_summary
from .common import clean_required_text, clean_text, decimal_str, iso
from .doctor import doctor_summary

ADDRESS_MAX_LENGTH = 500


class PatientSerializer(serializers.Serializer):
    """Patient input.  Use ``partial=True`` for updates."""
    name = serializers.CharField(max_length=255)
    gender = serializers.CharField(max_length=20)
    contact = serializers.CharField(max_length=32)
    dob = serializers.DateField()
    age = serializers.IntegerField(required=False, allow_null=True, min_value=0, max_value=150)
    address = serializers.CharField(max_length=ADDRESS_MAX_LENGTH, required=False, allow_blank=True, allow_null=True,
                                    error_messages={'max_length': 'Address must not exceed 500 characters'})
    height = serializers.DecimalField(max_digits=6, decimal_places=2, min_value=0, required=False, allow_null=True)
    weight = serializers.DecimalField(max_digits=6, decimal_places=2, min_value=0, required=False, allow_null=True)
    photo = serializers.CharField(max_length=500, required=False, allow_blank=True, allow_null=True)
    doctorId = serializers.IntegerField(source='doctor_id', min_value=1)
    clinicId = serializers.IntegerField(source='clinic_id', min_value=1)

    def validate_name(self, v):
        return clean_required_text(v, 'Name')

    def validate_address(self, v):
        v = clean_text(v)
        if v and len(v) > ADDRESS_MAX_LENGTH:
            raise serializers.ValidationError('Address must not exceed 500 characters')
        return v or None

    def validate_dob(self, v):
        if v > timezone.localdate():
            raise serializers.ValidationError('Date of birth cannot be in the future')
        return v


def age_from_dob(dob, today=None) -> int:
    today = today or timezone.localdate()
    return today.year - dob.year - ((today.month, today.day) < (dob.month, dob.day))


def patient_summary(patient: Patient) -> dict:
    return {
        'id': patient.id,
        'name': patient.name,
        'age': patient.age,
        'gender': patient.gender,
        'contact': patient.contact,
    }


def serialize_patient(patient: Patient, *, with_relations: bool = True) -> dict:
    data = {
        'id': patient.id,
        'name': patient.name,
        'gender': patient.gender,
        'contact': patient.contact,
        'dob': iso(patient.dob),
        'age': patient.age,
        'address': patient.address,
        'height': decimal_str(patient.height),
        'weight': decimal_str(patient.weight),
        'photo': patient.photo,
        'doctorId': patient.doctor_id,
        'clinicId': patient.clinic_id,
        'createdAt': iso(patient.created_at),
        'updatedAt': iso(patient.updated_at),
    }
    if with_relations:
        data['doctor'] = doctor_summary(patient.doctor)
        data['clinic'] = clinic_summary(patient.clinic)
    return data

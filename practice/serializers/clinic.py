from rest_framework import serializers

from practice.models import Clinic
from .common import clean_required_text, clean_text, iso
from .doctor import doctor_summary


class ClinicSerializer(serializers.Serializer):
    """Clinic input.  Use ``partial=True`` for updates."""
    name = serializers.CharField(max_length=255)
    landlineNo = serializers.CharField(source='landline_no', max_length=32, required=False,
                                       allow_blank=True, allow_null=True)
    doctorName = serializers.CharField(source='doctor_name', max_length=255)
    address = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    price_per_day = serializers.CharField(max_length=50, required=False, allow_blank=True, allow_null=True)
    doctor_id = serializers.IntegerField(min_value=1)

    def validate_name(self, v):
        return clean_required_text(v, 'Name')

    def validate_doctorName(self, v):
        return clean_required_text(v, 'Doctor name')

    def validate_address(self, v):
        return clean_text(v)


class ClinicListQuerySerializer(serializers.Serializer):
    doctor_id = serializers.IntegerField(required=False, min_value=1)


def clinic_summary(clinic: Clinic) -> dict:
    return {
        'id': clinic.id,
        'name': clinic.name,
        'landlineNo': clinic.landline_no,
        'doctorName': clinic.doctor_name,
        'address': clinic.address,
    }


def serialize_clinic(clinic: Clinic, *, with_doctor: bool = True) -> dict:
    data = clinic_summary(clinic)
    data.update({
        'price_per_day': clinic.price_per_day,
        'doctor_id': clinic.doctor_id,
        'createdAt': iso(clinic.created_at),
        'updatedAt': iso(clinic.updated_at),
    })
    if with_doctor:
        data['doctor'] = doctor_summary(clinic.doctor)
    return data

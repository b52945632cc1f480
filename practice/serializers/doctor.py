from django.conf import settings
from rest_framework import serializers

from practice.models import Doctor
from .common import clean_required_text, iso


class DoctorUpdateSerializer(serializers.Serializer):
    """Partial update of a doctor; every field is optional."""
    fullname = serializers.CharField(max_length=255, required=False)
    email = serializers.EmailField(max_length=255, required=False)
    degree = serializers.CharField(max_length=255, required=False, allow_blank=True, allow_null=True)
    phoneNo = serializers.CharField(source='phone_no', max_length=32, required=False,
                                    allow_blank=True, allow_null=True)
    password = serializers.CharField(min_length=settings.PASSWORD_MIN_LENGTH, max_length=128,
                                     required=False, trim_whitespace=False, write_only=True)

    def validate_fullname(self, v):
        return clean_required_text(v, 'Fullname')


def doctor_summary(doctor: Doctor) -> dict:
    return {
        'id': doctor.id,
        'fullname': doctor.fullname,
        'email': doctor.email,
        'degree': doctor.degree,
        'phoneNo': doctor.phone_no,
    }


def serialize_doctor(doctor: Doctor) -> dict:
    """Public projection of a doctor; the password hash never leaves the service."""
    data = doctor_summary(doctor)
    data.update({
        'createdAt': iso(doctor.created_at),
        'updatedAt': iso(doctor.updated_at),
    })
    return data

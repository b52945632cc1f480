from rest_framework import serializers

from practice.models import Prescription
from .common import decimal_str, iso
from .patient import patient_summary


class PrescriptionSerializer(serializers.Serializer):
    """Prescription input.  Use ``partial=True`` for updates."""
    patient_id = serializers.IntegerField(min_value=1)
    date = serializers.DateField()
    dieases = serializers.CharField(source='diseases', max_length=255)
    symptoms = serializers.CharField(max_length=255)
    payment_mode = serializers.ChoiceField(choices=Prescription.PAYMENT_MODE_CHOICES)
    payment_amount = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0,
                                              required=False, allow_null=True)
    paid_amount = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0,
                                           required=False, allow_null=True)


class PrescriptionListQuerySerializer(serializers.Serializer):
    patient_id = serializers.IntegerField(required=False, min_value=1)


def prescription_summary(prescription: Prescription) -> dict:
    return {
        'id': prescription.id,
        'date': iso(prescription.date),
        'dieases': prescription.diseases,
        'symptoms': prescription.symptoms,
    }


def serialize_prescription(prescription: Prescription, *, with_patient: bool = True) -> dict:
    data = prescription_summary(prescription)
    data.update({
        'patient_id': prescription.patient_id,
        'payment_mode': prescription.payment_mode,
        'payment_amount': decimal_str(prescription.payment_amount),
        'paid_amount': decimal_str(prescription.paid_amount),
        'createdAt': iso(prescription.created_at),
        'updatedAt': iso(prescription.updated_at),
    })
    if with_patient:
        data['patient'] = patient_summary(prescription.patient)
    return data


def serialize_prescription_with_doses(prescription: Prescription) -> dict:
    """Shape used by the patient medication history: doses nested, no patient."""
    return {
        'id': prescription.id,
        'disease': prescription.diseases,
        'date': iso(prescription.date),
        'symptoms': prescription.symptoms,
        'payment_mode': prescription.payment_mode,
        'payment_amount': decimal_str(prescription.payment_amount),
        'paid_amount': decimal_str(prescription.paid_amount),
        'createdAt': iso(prescription.created_at),
        'updatedAt': iso(prescription.updated_at),
        'doses': [{
            'id': d.id,
            'medicine_name': d.medicine_name,
            'medicine_type': d.medicine_type,
            'days': d.days,
            'quantity': d.quantity,
            'time_of_day': d.time_of_day,
            'meal_time': d.meal_time,
        } for d in prescription.doses.all()],
    }

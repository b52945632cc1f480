from rest_framework import serializers

from practice.models import Dose
from .common import clean_required_text, iso
from .prescription import prescription_summary


class DoseSerializer(serializers.Serializer):
    """Dose input.  Use ``partial=True`` for updates."""
    pres_id = serializers.IntegerField(source='prescription_id', min_value=1)
    days = serializers.IntegerField(min_value=1)
    medicine_type = serializers.ChoiceField(choices=Dose.MEDICINE_TYPE_CHOICES, required=False)
    medicine_name = serializers.CharField(max_length=255)
    time_of_day = serializers.ChoiceField(choices=Dose.TIME_OF_DAY_CHOICES)
    meal_time = serializers.ChoiceField(choices=Dose.MEAL_TIME_CHOICES)
    quantity = serializers.IntegerField(min_value=1, required=False)

    def validate_medicine_name(self, v):
        return clean_required_text(v, 'Medicine name')


class DoseListQuerySerializer(serializers.Serializer):
    pres_id = serializers.IntegerField(required=False, min_value=1)


def serialize_dose(dose: Dose, *, with_prescription: bool = True) -> dict:
    data = {
        'id': dose.id,
        'pres_id': dose.prescription_id,
        'days': dose.days,
        'medicine_type': dose.medicine_type,
        'medicine_name': dose.medicine_name,
        'time_of_day': dose.time_of_day,
        'meal_time': dose.meal_time,
        'quantity': dose.quantity,
        'createdAt': iso(dose.created_at),
        'updatedAt': iso(dose.updated_at),
    }
    if with_prescription:
        data['prescription'] = prescription_summary(dose.prescription)
    return data

"""
Entity access layer: required fields, parent checks, merge updates and
cascading deletes.
"""
import pytest

from practice.exceptions import ConflictError, NotFoundError, ValidationError
from practice.models import Clinic, Doctor, Dose, Patient, Prescription
from practice.services import clinics, doctors, doses, patients, prescriptions

pytestmark = pytest.mark.django_db


# ---------------------------------------------------------------------------
# Required fields
# ---------------------------------------------------------------------------

def test_doctor_requires_email_fullname_password():
    with pytest.raises(ValidationError) as exc:
        doctors.create_doctor({'fullname': 'No Email', 'password': 'secret1'})
    assert 'email' in exc.value.detail
    with pytest.raises(ValidationError):
        doctors.create_doctor({'email': 'x@example.com', 'fullname': 'No Password'})
    assert Doctor.objects.count() == 0


def test_doctor_password_must_be_six_characters():
    with pytest.raises(ValidationError) as exc:
        doctors.create_doctor({'fullname': 'Short', 'email': 's@example.com', 'password': '12345'})
    assert 'password' in exc.value.detail
    assert Doctor.objects.count() == 0


def test_clinic_requires_name_doctor_name_and_doctor(doctor):
    with pytest.raises(ValidationError) as exc:
        clinics.create_clinic({'name': 'Nameless', 'doctor_id': doctor.id})
    assert 'doctorName' in exc.value.detail
    assert Clinic.objects.count() == 0


def test_patient_requires_core_fields(doctor, clinic):
    with pytest.raises(ValidationError) as exc:
        patients.create_patient({'name': 'Only Name', 'doctorId': doctor.id, 'clinicId': clinic.id})
    assert {'gender', 'contact', 'dob'} <= set(exc.value.detail)
    assert Patient.objects.count() == 0


def test_prescription_and_dose_required_fields(patient, prescription):
    with pytest.raises(ValidationError):
        prescriptions.create_prescription({'patient_id': patient.id, 'date': '2024-01-01'})
    with pytest.raises(ValidationError):
        doses.create_dose({'pres_id': prescription.id, 'medicine_name': 'ORS'})
    assert Prescription.objects.count() == 1
    assert Dose.objects.count() == 0


def test_enum_fields_reject_unknown_values(patient, prescription):
    with pytest.raises(ValidationError) as exc:
        prescriptions.create_prescription({'patient_id': patient.id, 'date': '2024-01-01', 'dieases': 'Cold',
                                           'symptoms': 'cough', 'payment_mode': 'cheque'})
    assert 'payment_mode' in exc.value.detail
    with pytest.raises(ValidationError) as exc:
        doses.create_dose({'pres_id': prescription.id, 'days': 3, 'medicine_name': 'ORS',
                           'medicine_type': 'tablet', 'time_of_day': 'night', 'meal_time': 'during'})
    assert {'medicine_type', 'time_of_day', 'meal_time'} <= set(exc.value.detail)


def test_patient_address_limited_to_500_characters(doctor, clinic):
    data = {'name': 'Long Address', 'gender': 'female', 'contact': '1', 'dob': '2000-01-01',
            'address': 'x' * 501, 'doctorId': doctor.id, 'clinicId': clinic.id}
    with pytest.raises(ValidationError) as exc:
        patients.create_patient(data)
    assert 'address' in exc.value.detail
    data['address'] = 'x' * 500
    assert len(patients.create_patient(data).address) == 500


def test_cleaned_address_never_grows_past_the_limit(doctor, clinic):
    data = {'name': 'Amp Lane', 'gender': 'male', 'contact': '1', 'dob': '2000-01-01',
            'address': '&' * 500, 'doctorId': doctor.id, 'clinicId': clinic.id}
    stored = patients.get_patient(patients.create_patient(data).id)
    assert stored.address == '&' * 500

    updated = patients.update_patient(stored.id, {'address': '12 <i>Hill</i> Road & Co, A < B'})
    assert updated.address == '12 Hill Road & Co, A < B'


def test_free_text_round_trips_unescaped(doctor):
    clinic = clinics.create_clinic({'name': 'Smith & Sons', 'doctorName': 'Dr. "Q" O\'Neil',
                                    'doctor_id': doctor.id})
    clinic = clinics.get_clinic(clinic.id)
    assert clinic.name == 'Smith & Sons'
    assert clinic.doctor_name == 'Dr. "Q" O\'Neil'


# ---------------------------------------------------------------------------
# Parent existence
# ---------------------------------------------------------------------------

def test_create_with_missing_parent_is_not_found(doctor, clinic, patient, prescription):
    with pytest.raises(NotFoundError, match='Doctor not found'):
        clinics.create_clinic({'name': 'Ghost', 'doctorName': 'Nobody', 'doctor_id': 9999})
    with pytest.raises(NotFoundError, match='Clinic not found'):
        patients.create_patient({'name': 'P', 'gender': 'male', 'contact': '1', 'dob': '2000-01-01',
                                 'doctorId': doctor.id, 'clinicId': 9999})
    with pytest.raises(NotFoundError, match='Patient not found'):
        prescriptions.create_prescription({'patient_id': 9999, 'date': '2024-01-01', 'dieases': 'Cold',
                                           'symptoms': 'cough', 'payment_mode': 'online'})
    with pytest.raises(NotFoundError, match='Prescription not found'):
        doses.create_dose({'pres_id': 9999, 'days': 2, 'medicine_name': 'ORS',
                           'time_of_day': 'evening', 'meal_time': 'before'})
    assert Clinic.objects.count() == 1
    assert Patient.objects.count() == 1
    assert Prescription.objects.count() == 1
    assert Dose.objects.count() == 0


def test_update_to_missing_parent_is_not_found(clinic, patient):
    with pytest.raises(NotFoundError):
        clinics.update_clinic(clinic.id, {'doctor_id': 9999})
    with pytest.raises(NotFoundError):
        patients.update_patient(patient.id, {'clinicId': 9999})
    clinic.refresh_from_db()
    patient.refresh_from_db()
    assert clinic.doctor_id == patient.doctor_id


def test_update_can_move_clinic_to_another_doctor(clinic):
    other = doctors.create_doctor({'fullname': 'Dr. Other', 'email': 'other@example.com', 'password': 'secret2'})
    moved = clinics.update_clinic(clinic.id, {'doctor_id': other.id})
    assert moved.doctor_id == other.id
    assert moved.doctor.email == 'other@example.com'


def test_get_missing_rows_is_not_found():
    for getter in (doctors.get_doctor, clinics.get_clinic, patients.get_patient,
                   prescriptions.get_prescription, doses.get_dose):
        with pytest.raises(NotFoundError):
            getter(12345)


# ---------------------------------------------------------------------------
# Unique email
# ---------------------------------------------------------------------------

def test_duplicate_email_is_a_conflict(doctor):
    with pytest.raises(ConflictError):
        doctors.create_doctor({'fullname': 'Copy', 'email': 'asha@example.com', 'password': 'secret9'})
    with pytest.raises(ConflictError):
        doctors.create_doctor({'fullname': 'Copy', 'email': 'ASHA@example.com', 'password': 'secret9'})
    assert Doctor.objects.count() == 1


def test_changing_email_to_a_taken_one_is_a_conflict(doctor):
    other = doctors.create_doctor({'fullname': 'Dr. B', 'email': 'b@example.com', 'password': 'secret2'})
    with pytest.raises(ConflictError):
        doctors.update_doctor(other.id, {'email': 'asha@example.com'})


# ---------------------------------------------------------------------------
# Merge-patch updates
# ---------------------------------------------------------------------------

def test_partial_update_keeps_unspecified_fields(patient):
    before = patients.get_patient(patient.id)
    patients.update_patient(patient.id, {'contact': '9899999999'})
    after = patients.get_patient(patient.id)
    assert after.contact == '9899999999'
    for field in ('name', 'gender', 'dob', 'age', 'address', 'height', 'weight', 'photo', 'doctor_id', 'clinic_id'):
        assert getattr(after, field) == getattr(before, field)


def test_partial_update_of_clinic_and_dose(clinic, dose):
    clinics.update_clinic(clinic.id, {'price_per_day': '650'})
    clinic = clinics.get_clinic(clinic.id)
    assert clinic.price_per_day == '650'
    assert clinic.name == 'Rao Family Clinic'
    assert clinic.landline_no == '020-555-0101'

    doses.update_dose(dose.id, {'quantity': 2})
    dose = doses.get_dose(dose.id)
    assert dose.quantity == 2
    assert (dose.days, dose.medicine_name, dose.time_of_day, dose.meal_time) == (5, 'Paracetamol 500', 'morning', 'after')


def test_partial_update_of_prescription(prescription):
    prescriptions.update_prescription(prescription.id, {'paid_amount': '150.00'})
    p = prescriptions.get_prescription(prescription.id)
    assert str(p.paid_amount) == '150.00'
    assert str(p.payment_amount) == '300.00'
    assert p.diseases == 'Viral fever'


def test_doctor_update_rehashes_password_and_keeps_other_fields(doctor):
    old_hash = doctor.password
    updated = doctors.update_doctor(doctor.id, {'password': 'newsecret'})
    assert updated.password != 'newsecret'
    assert updated.password != old_hash
    assert updated.check_password('newsecret')
    assert updated.fullname == 'Dr. Asha Rao'
    assert updated.phone_no == '9800000001'


# ---------------------------------------------------------------------------
# Listing and defaults
# ---------------------------------------------------------------------------

def test_patient_age_is_derived_from_dob_when_missing(doctor, clinic):
    p = patients.create_patient({'name': 'Baby', 'gender': 'female', 'contact': '1', 'dob': '2020-01-01',
                                 'doctorId': doctor.id, 'clinicId': clinic.id})
    assert p.age is not None and p.age >= 4


def test_dose_defaults(prescription):
    d = doses.create_dose({'pres_id': prescription.id, 'days': 3, 'medicine_name': 'Cetirizine',
                           'time_of_day': 'evening', 'meal_time': 'after'})
    assert d.quantity == 1
    assert d.medicine_type == 'capsule'


def test_lists_are_newest_first_except_doses_of_a_prescription(prescription):
    first = doses.create_dose({'pres_id': prescription.id, 'days': 1, 'medicine_name': 'A',
                               'time_of_day': 'morning', 'meal_time': 'before'})
    second = doses.create_dose({'pres_id': prescription.id, 'days': 1, 'medicine_name': 'B',
                                'time_of_day': 'evening', 'meal_time': 'after'})
    assert [d.id for d in doses.list_doses()] == [second.id, first.id]
    assert [d.id for d in doses.list_doses(pres_id=prescription.id)] == [first.id, second.id]


def test_list_filters(doctor, clinic, patient):
    other = doctors.create_doctor({'fullname': 'Dr. Z', 'email': 'z@example.com', 'password': 'secret3'})
    clinics.create_clinic({'name': 'Z Clinic', 'doctorName': 'Dr. Z', 'doctor_id': other.id})
    assert [c.id for c in clinics.list_clinics(doctor_id=doctor.id)] == [clinic.id]
    assert len(clinics.list_clinics()) == 2
    assert [p.id for p in patients.list_patients(clinic_id=clinic.id)] == [patient.id]
    assert patients.list_patients(doctor_id=other.id) == []


def test_patient_prescriptions_require_existing_patient(prescription):
    with pytest.raises(NotFoundError):
        prescriptions.list_patient_prescriptions(9999)
    rows = prescriptions.list_patient_prescriptions(prescription.patient_id, with_doses=True)
    assert [p.id for p in rows] == [prescription.id]


# ---------------------------------------------------------------------------
# Cascades
# ---------------------------------------------------------------------------

def test_deleting_doctor_cascades_to_every_dependent_row(doctor, dose):
    survivor = doctors.create_doctor({'fullname': 'Dr. Keep', 'email': 'keep@example.com', 'password': 'secret4'})
    kept_clinic = clinics.create_clinic({'name': 'Keep', 'doctorName': 'Dr. Keep', 'doctor_id': survivor.id})

    assert doctors.delete_doctor(doctor.id) is True

    assert not Doctor.objects.filter(pk=doctor.id).exists()
    assert list(Clinic.objects.values_list('id', flat=True)) == [kept_clinic.id]
    assert Patient.objects.count() == 0
    assert Prescription.objects.count() == 0
    assert Dose.objects.count() == 0


def test_deleting_clinic_removes_its_patients_only(doctor, clinic, dose):
    clinics.delete_clinic(clinic.id)
    assert Doctor.objects.filter(pk=doctor.id).exists()
    assert Patient.objects.count() == 0
    assert Prescription.objects.count() == 0
    assert Dose.objects.count() == 0


def test_deleting_prescription_removes_its_doses(patient, prescription, dose):
    prescriptions.delete_prescription(prescription.id)
    assert Patient.objects.filter(pk=patient.id).exists()
    assert Dose.objects.count() == 0


def test_delete_missing_row_is_not_found():
    with pytest.raises(NotFoundError):
        doses.delete_dose(424242)

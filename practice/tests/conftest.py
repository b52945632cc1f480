import pytest
from rest_framework.test import APIClient

from practice.services.clinics import create_clinic
from practice.services.doctors import create_doctor
from practice.services.doses import create_dose
from practice.services.patients import create_patient
from practice.services.prescriptions import create_prescription


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def doctor(db):
    return create_doctor({'fullname': 'Dr. Asha Rao', 'email': 'asha@example.com', 'password': 'secret1',
                          'degree': 'MBBS', 'phoneNo': '9800000001'})


@pytest.fixture
def clinic(doctor):
    return create_clinic({'name': 'Rao Family Clinic', 'doctorName': doctor.fullname, 'doctor_id': doctor.id,
                          'landlineNo': '020-555-0101', 'address': '12 Hill Road', 'price_per_day': '500'})


@pytest.fixture
def patient(doctor, clinic):
    return create_patient({'name': 'Ravi Kumar', 'gender': 'male', 'contact': '9811111111', 'dob': '1990-05-01',
                           'age': 34, 'address': '4 Lake View', 'height': '172.5', 'weight': '70',
                           'doctorId': doctor.id, 'clinicId': clinic.id})


@pytest.fixture
def prescription(patient):
    return create_prescription({'patient_id': patient.id, 'date': '2024-03-10', 'dieases': 'Viral fever',
                                'symptoms': 'fever, body ache', 'payment_mode': 'cash',
                                'payment_amount': '300.00', 'paid_amount': '300.00'})


@pytest.fixture
def dose(prescription):
    return create_dose({'pres_id': prescription.id, 'days': 5, 'medicine_name': 'Paracetamol 500',
                        'time_of_day': 'morning', 'meal_time': 'after'})

"""
URL mappings for the medtrack API.

Trailing slashes are deliberately omitted.  Static segments are listed
before ``<int:pk>`` routes sharing the same prefix.
"""
from django.urls import path

from .auth_views import login_view, register_view
from .views import clinics, doctors, doses, health, patients, prescriptions


urlpatterns = [
    # Health
    path('test', health.server_status, name='server_status'),
    path('healthz', health.healthz, name='healthz'),
    # Doctors
    path('doctor/register', register_view, name='doctor_register'),
    path('doctor/login', login_view, name='doctor_login'),
    path('doctor/profile/<int:pk>', doctors.doctor_profile, name='doctor_profile'),
    # Clinics
    path('clinics', clinics.clinics_list, name='clinics'),
    path('clinics/doctors/<int:doctor_id>', clinics.clinics_by_doctor, name='clinics_by_doctor'),
    path('clinics/<int:pk>', clinics.clinic_detail, name='clinic_detail'),
    # Patients
    path('patient', patients.patient_create, name='patient_create'),
    path('patient/clinic/<int:clinic_id>', patients.patients_by_clinic, name='patients_by_clinic'),
    path('patient/doctor/<int:doctor_id>', patients.patients_by_doctor, name='patients_by_doctor'),
    path('patient/<int:pk>', patients.patient_detail, name='patient_detail'),
    # Prescriptions
    path('prescriptions', prescriptions.prescriptions_list, name='prescriptions'),
    path('prescriptions/patient/<int:patient_id>', prescriptions.prescriptions_with_doses_by_patient,
         name='prescriptions_with_doses_by_patient'),
    path('prescriptions/patientprescription/<int:patient_id>', prescriptions.prescriptions_by_patient,
         name='prescriptions_by_patient'),
    path('prescriptions/<int:pk>', prescriptions.prescription_detail, name='prescription_detail'),
    # Doses
    path('pdose', doses.doses_list, name='doses'),
    path('pdose/prescription/<int:pres_id>', doses.doses_by_prescription, name='doses_by_prescription'),
    path('pdose/<int:pk>', doses.dose_detail, name='dose_detail'),
]

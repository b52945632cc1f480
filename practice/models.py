"""
Database models for the clinic backend.

The five tables form an ownership chain::

    Doctor -> Clinic -> Patient -> Prescription -> Dose

with Patient additionally pointing straight at its Doctor.  Every
foreign key is declared with ``on_delete=CASCADE`` so deleting a parent
removes all dependent rows transitively, inside the single transaction
Django's deletion collector opens.  Wire names (``doctorName``,
``pres_id`` ...) are mapped onto these fields by the serializers in
:mod:`practice.serializers`.
"""
from __future__ import annotations

from django.contrib.auth.base_user import AbstractBaseUser, BaseUserManager
from django.db import models


class TimestampedModel(models.Model):
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class DoctorManager(BaseUserManager):
    """Manager used by Django's auth machinery to look doctors up by email."""

    use_in_migrations = True

    def create_user(self, email: str, password: str | None = None, **extra_fields) -> "Doctor":
        if not email:
            raise ValueError('email is required')
        doctor = self.model(email=self.normalize_email(email), **extra_fields)
        doctor.set_password(password)
        doctor.save(using=self._db)
        return doctor


class Doctor(AbstractBaseUser, TimestampedModel):
    """A doctor account.

    Doctors own clinics and patients.  The ``password`` column only ever
    holds a salted one-way hash; see :mod:`practice.services.auth`.
    """
    email = models.EmailField(max_length=255, unique=True)
    fullname = models.CharField(max_length=255)
    degree = models.CharField(max_length=255, blank=True, null=True)
    phone_no = models.CharField(max_length=32, blank=True, null=True)

    objects = DoctorManager()

    USERNAME_FIELD = 'email'
    EMAIL_FIELD = 'email'
    REQUIRED_FIELDS = ['fullname']

    class Meta:
        db_table = 'doctor'

    def __str__(self) -> str:
        return f"{self.fullname} <{self.email}>"


class Clinic(TimestampedModel):
    doctor = models.ForeignKey(Doctor, on_delete=models.CASCADE, related_name='clinics')
    name = models.CharField(max_length=255)
    landline_no = models.CharField(max_length=32, blank=True, null=True)
    # Display copy of the owning doctor's name, as printed on prescriptions
    doctor_name = models.CharField(max_length=255)
    address = models.TextField(blank=True, null=True)
    price_per_day = models.CharField(max_length=50, blank=True, null=True)

    class Meta:
        db_table = 'clinic'

    def __str__(self) -> str:
        return f"{self.name} ({self.id})"


class Patient(TimestampedModel):
    doctor = models.ForeignKey(Doctor, on_delete=models.CASCADE, related_name='patients')
    clinic = models.ForeignKey(Clinic, on_delete=models.CASCADE, related_name='patients')
    name = models.CharField(max_length=255)
    gender = models.CharField(max_length=20)
    contact = models.CharField(max_length=32)
    dob = models.DateField()
    age = models.PositiveIntegerField(null=True, blank=True)
    address = models.CharField(max_length=500, blank=True, null=True)
    height = models.DecimalField(max_digits=6, decimal_places=2, null=True, blank=True)
    weight = models.DecimalField(max_digits=6, decimal_places=2, null=True, blank=True)
    photo = models.CharField(max_length=500, blank=True, null=True)

    class Meta:
        db_table = 'patients'

    def __str__(self) -> str:
        return f"{self.name} ({self.id})"


class Prescription(TimestampedModel):
    PAYMENT_CASH = 'cash'
    PAYMENT_ONLINE = 'online'
    PAYMENT_MODE_CHOICES = ((PAYMENT_CASH, 'cash'), (PAYMENT_ONLINE, 'online'))

    patient = models.ForeignKey(Patient, on_delete=models.CASCADE, related_name='prescriptions')
    date = models.DateField()
    diseases = models.CharField(max_length=255)
    symptoms = models.CharField(max_length=255)
    payment_mode = models.CharField(max_length=10, choices=PAYMENT_MODE_CHOICES)
    payment_amount = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    paid_amount = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)

    class Meta:
        db_table = 'prescription'

    def __str__(self) -> str:
        return f"Prescription {self.id} for patient {self.patient_id}"


class Dose(TimestampedModel):
    MEDICINE_TYPE_CHOICES = (('capsule', 'capsule'), ('syrup', 'syrup'))
    TIME_OF_DAY_CHOICES = (('morning', 'morning'), ('afternoon', 'afternoon'), ('evening', 'evening'))
    MEAL_TIME_CHOICES = (('before', 'before'), ('after', 'after'))

    prescription = models.ForeignKey(Prescription, on_delete=models.CASCADE, related_name='doses')
    days = models.PositiveIntegerField()
    medicine_type = models.CharField(max_length=10, choices=MEDICINE_TYPE_CHOICES, default='capsule')
    medicine_name = models.CharField(max_length=255)
    time_of_day = models.CharField(max_length=10, choices=TIME_OF_DAY_CHOICES)
    meal_time = models.CharField(max_length=10, choices=MEAL_TIME_CHOICES)
    quantity = models.PositiveIntegerField(default=1)

    class Meta:
        db_table = 'pdose'

    def __str__(self) -> str:
        return f"{self.medicine_name} x{self.quantity} ({self.time_of_day}, {self.meal_time} meal)"

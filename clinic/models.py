"""
Database models for the MediCare backend.

Four collections back the API: users (patients and administrators),
the doctor directory, appointments and feedback.  Appointments keep
copies of the doctor and patient display fields taken at booking time
so listings stay stable if the referenced rows change later.
"""
from __future__ import annotations

from django.contrib.auth.models import AbstractUser, BaseUserManager
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models


class UserManager(BaseUserManager):
    """Manager for the email-keyed user model."""

    use_in_migrations = True

    def _create_user(self, email, password, **extra_fields):
        if not email:
            raise ValueError('The email must be set')
        email = self.normalize_email(email).lower()
        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_user(self, email, password=None, **extra_fields):
        extra_fields.setdefault('role', User.ROLE_PATIENT)
        extra_fields.setdefault('is_staff', False)
        extra_fields.setdefault('is_superuser', False)
        return self._create_user(email, password, **extra_fields)

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault('role', User.ROLE_ADMIN)
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        return self._create_user(email, password, **extra_fields)


class User(AbstractUser):
    """Account identified by email with a patient or admin role.

    ``date_joined`` from :class:`AbstractUser` is the join timestamp and
    ``is_active`` the account flag; the username column is dropped.
    """
    ROLE_PATIENT = 'patient'
    ROLE_ADMIN = 'admin'
    ROLE_CHOICES = [
        (ROLE_PATIENT, 'Patient'),
        (ROLE_ADMIN, 'Administrator'),
    ]

    username = None
    first_name = None
    last_name = None
    email = models.EmailField(unique=True)
    name = models.CharField(max_length=128)
    phone = models.CharField(max_length=20)
    role = models.CharField(max_length=10, choices=ROLE_CHOICES, default=ROLE_PATIENT, db_index=True)

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = ['name', 'phone']

    objects = UserManager()

    def get_full_name(self) -> str:
        return self.name

    def get_short_name(self) -> str:
        return self.name

    def __str__(self) -> str:
        return f"{self.email} ({self.role})"


class Doctor(models.Model):
    """A bookable doctor in the public directory."""
    name = models.CharField(max_length=128)
    specialty = models.CharField(max_length=64, db_index=True)
    rating = models.FloatField(
        default=4.5, validators=[MinValueValidator(0), MaxValueValidator(5)]
    )
    reviews = models.PositiveIntegerField(default=0)
    location = models.CharField(max_length=255)
    availability = models.CharField(max_length=128)
    fee = models.CharField(max_length=32)
    image = models.CharField(max_length=500)

    def __str__(self) -> str:
        return f"{self.name} ({self.specialty})"


class Appointment(models.Model):
    STATUS_PENDING = 'pending'
    STATUS_CONFIRMED = 'confirmed'
    STATUS_CANCELLED = 'cancelled'
    STATUS_CHOICES = [
        (STATUS_PENDING, 'Pending'),
        (STATUS_CONFIRMED, 'Confirmed'),
        (STATUS_CANCELLED, 'Cancelled'),
    ]

    doctor = models.ForeignKey(Doctor, on_delete=models.PROTECT, related_name='appointments')
    doctor_name = models.CharField(max_length=128)
    specialty = models.CharField(max_length=64)
    patient = models.ForeignKey(User, on_delete=models.PROTECT, related_name='appointments')
    patient_name = models.CharField(max_length=128)
    date = models.DateField()
    time = models.CharField(max_length=5)
    symptoms = models.TextField()
    phone = models.CharField(max_length=20)
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default=STATUS_PENDING, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self) -> str:
        return f"{self.patient_name} with {self.doctor_name} on {self.date} {self.time}"


class Feedback(models.Model):
    patient = models.CharField(max_length=128, blank=True)
    doctor = models.ForeignKey(
        Doctor, null=True, blank=True, on_delete=models.SET_NULL, related_name='feedback'
    )
    rating = models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(5)])
    comment = models.TextField()
    date = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name_plural = 'feedback'

    def __str__(self) -> str:
        return f"{self.rating}/5 from {self.patient or 'anonymous'}"

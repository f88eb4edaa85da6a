"""
Appointment booking and cancellation.

Booking checks that the doctor and the patient exist, then inserts one
row with the doctor's name/specialty and the patient's name copied in.
There is no slot conflict check: the same doctor, date and time can be
booked any number of times.
"""
import logging
from datetime import date as date_type

from clinic.exceptions import NotFoundError
from clinic.models import Appointment, Doctor, User

logger = logging.getLogger(__name__)


def book_appointment(*, patient_id, doctor_id: int, date: date_type, time: str, symptoms: str, phone: str) -> Appointment:
    doctor = Doctor.objects.filter(pk=doctor_id).first()
    if doctor is None:
        raise NotFoundError('Doctor not found')
    patient = User.objects.filter(pk=patient_id).first()
    if patient is None:
        raise NotFoundError('User not found')

    appt = Appointment.objects.create(
        doctor=doctor,
        doctor_name=doctor.name,
        specialty=doctor.specialty,
        patient=patient,
        patient_name=patient.name,
        date=date,
        time=time,
        symptoms=symptoms,
        phone=phone,
        status=Appointment.STATUS_CONFIRMED,
    )
    logger.info('Booked appointment %s: patient=%s doctor=%s %s %s', appt.pk, patient.pk, doctor.pk, date, time)
    return appt


def appointments_for_patient(patient_id):
    return Appointment.objects.filter(patient_id=patient_id).order_by('-date', '-created_at')


def cancel_appointment(appt: Appointment) -> Appointment:
    """Move ``appt`` to cancelled; cancelling twice is a no-op."""
    if appt.status != Appointment.STATUS_CANCELLED:
        appt.status = Appointment.STATUS_CANCELLED
        appt.save(update_fields=['status'])
        logger.info('Cancelled appointment %s', appt.pk)
    return appt

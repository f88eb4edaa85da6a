"""
Integration tests for appointment booking, listing and cancellation.

These tests exercise the booking contract end to end through the API:
token authentication, denormalized doctor/patient fields, ownership
checks on cancellation and the idempotent cancelled state.  They use
Django REST Framework's APIClient within the APITestCase base class.
"""
from django.contrib.auth.hashers import make_password
from django.test import override_settings
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient, APITestCase

from ..models import Appointment, Doctor, User
from ..services.bootstrap import seed_initial_data
from ..services.tokens import issue_token_pair

BOOKING = {
    'date': '2025-06-01',
    'time': '09:30',
    'symptoms': 'fever for 3 days',
    'phone': '9999999999',
}


@override_settings(PASSWORD_HASHERS=['django.contrib.auth.hashers.MD5PasswordHasher'])
class AppointmentAPITests(APITestCase):
    def setUp(self) -> None:
        """Seed doctors and create two patients and an administrator."""
        seed_initial_data()
        self.doctor = Doctor.objects.get(name='Dr. Sarah Johnson')
        self.patient1 = User.objects.create(
            email='patient1@example.com', name='Patient One', phone='1234567890',
            role='patient', password=make_password('patientpass'),
        )
        self.patient2 = User.objects.create(
            email='patient2@example.com', name='Patient Two', phone='1234567891',
            role='patient', password=make_password('patientpass'),
        )
        self.admin = User.objects.get(role='admin')

    def authenticate(self, user: User) -> APIClient:
        """Return an APIClient carrying a bearer access token for the given user."""
        client = APIClient()
        access = issue_token_pair(user.id, user.role)['accessToken']
        client.credentials(HTTP_AUTHORIZATION=f'Bearer {access}')
        return client

    def book(self, user: User, **overrides):
        payload = {'doctorId': self.doctor.id, **BOOKING, **overrides}
        return self.authenticate(user).post(reverse('appointments'), payload, format='json')

    def test_book_appointment_for_seeded_doctor(self):
        response = self.book(self.patient1)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        appt = response.data['appointment']
        self.assertEqual(appt['status'], 'confirmed')
        self.assertEqual(appt['doctorName'], 'Dr. Sarah Johnson')
        self.assertEqual(appt['specialty'], 'Cardiology')
        self.assertEqual(appt['patientName'], 'Patient One')
        self.assertEqual(appt['patientId'], self.patient1.id)
        self.assertEqual(appt['date'], '2025-06-01')
        self.assertEqual(appt['time'], '09:30')

    def test_book_unknown_doctor_is_not_found(self):
        response = self.book(self.patient1, doctorId=999999)
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertFalse(Appointment.objects.exists())

    def test_book_requires_authentication(self):
        response = APIClient().post(reverse('appointments'), {'doctorId': self.doctor.id, **BOOKING}, format='json')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertFalse(Appointment.objects.exists())

    def test_book_with_token_for_missing_user_is_not_found(self):
        client = APIClient()
        access = issue_token_pair(987654, 'patient')['accessToken']
        client.credentials(HTTP_AUTHORIZATION=f'Bearer {access}')
        response = client.post(reverse('appointments'), {'doctorId': self.doctor.id, **BOOKING}, format='json')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertFalse(Appointment.objects.exists())

    def test_book_validates_payload(self):
        cases = [
            {'date': '01/06/2025'},
            {'date': '2025-02-30'},
            {'time': '24:00'},
            {'time': '9.30'},
            {'symptoms': 'cough'},
            {'phone': 'call me'},
            {'doctorId': 'abc'},
        ]
        for overrides in cases:
            with self.subTest(overrides=overrides):
                response = self.book(self.patient1, **overrides)
                self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(Appointment.objects.exists())

    def test_single_digit_hour_is_accepted(self):
        response = self.book(self.patient1, time='9:05')
        self.assertEqual(response.status_code, status.HTTP_200_OK)

    def test_double_booking_same_slot_is_allowed(self):
        self.assertEqual(self.book(self.patient1).status_code, status.HTTP_200_OK)
        self.assertEqual(self.book(self.patient2).status_code, status.HTTP_200_OK)
        self.assertEqual(
            Appointment.objects.filter(doctor=self.doctor, date='2025-06-01', time='09:30').count(), 2
        )

    def test_denormalized_names_are_snapshots(self):
        appt_id = self.book(self.patient1).data['appointment']['id']
        self.doctor.name = 'Dr. Sarah Johnson-Lee'
        self.doctor.save()
        appt = Appointment.objects.get(pk=appt_id)
        self.assertEqual(appt.doctor_name, 'Dr. Sarah Johnson')

    def test_list_my_appointments_only_and_newest_first(self):
        self.book(self.patient1, date='2025-06-01')
        self.book(self.patient1, date='2025-07-15')
        self.book(self.patient2)
        response = self.authenticate(self.patient1).get(reverse('appointments'))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([a['date'] for a in response.data], ['2025-07-15', '2025-06-01'])
        self.assertTrue(all(a['patientId'] == self.patient1.id for a in response.data))

    def test_owner_can_cancel_and_cancel_is_idempotent(self):
        appt_id = self.book(self.patient1).data['appointment']['id']
        client = self.authenticate(self.patient1)
        url = reverse('appointment_cancel', args=[appt_id])
        for _ in range(2):
            response = client.patch(url)
            self.assertEqual(response.status_code, status.HTTP_200_OK)
            self.assertEqual(response.data['status'], 'cancelled')
        self.assertEqual(Appointment.objects.get(pk=appt_id).status, 'cancelled')

    def test_other_patient_cannot_cancel(self):
        appt_id = self.book(self.patient1).data['appointment']['id']
        response = self.authenticate(self.patient2).patch(reverse('appointment_cancel', args=[appt_id]))
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(Appointment.objects.get(pk=appt_id).status, 'confirmed')

    def test_admin_can_cancel_any_appointment(self):
        appt_id = self.book(self.patient1).data['appointment']['id']
        response = self.authenticate(self.admin).patch(reverse('appointment_cancel', args=[appt_id]))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(Appointment.objects.get(pk=appt_id).status, 'cancelled')

    def test_cancel_missing_appointment_is_not_found(self):
        response = self.authenticate(self.patient1).patch(reverse('appointment_cancel', args=[424242]))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_symptoms_keep_ampersands_and_comparisons(self):
        response = self.book(self.patient1, symptoms='fever & cough, temp > 39')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['appointment']['symptoms'], 'fever & cough, temp > 39')
        self.assertEqual(Appointment.objects.get().symptoms, 'fever & cough, temp > 39')

"""
URL mappings for the MediCare API.

This module registers all API endpoints with their corresponding view
functions.  Note that trailing slashes are deliberately omitted; the
client calls every path without one.
"""
from django.urls import path, include

from .auth_views import login_view, refresh_view, register_view
from .views import health
from .views.appointments import appointment_cancel, appointments
from .views.dashboard import admin_appointments, admin_feedback, admin_stats, admin_users
from .views.doctors import doctor_detail, doctors
from .views.feedback import feedback


urlpatterns = [
    path('', include('django_prometheus.urls')),
    path('healthz', health.healthz),
    # Authentication
    path('api/auth/register', register_view, name='register_view'),
    path('api/auth/login', login_view, name='login_view'),
    path('api/auth/refresh', refresh_view, name='refresh_view'),
    # Doctors
    path('api/doctors', doctors, name='doctors'),
    path('api/doctors/<int:pk>', doctor_detail, name='doctor_detail'),
    # Appointments
    path('api/appointments', appointments, name='appointments'),
    path('api/appointments/<int:pk>/cancel', appointment_cancel, name='appointment_cancel'),
    # Admin
    path('api/admin/stats', admin_stats, name='admin_stats'),
    path('api/admin/appointments', admin_appointments, name='admin_appointments'),
    path('api/admin/users', admin_users, name='admin_users'),
    path('api/admin/feedback', admin_feedback, name='admin_feedback'),
    # Feedback
    path('api/feedback', feedback, name='feedback'),
]

"""
Django admin registrations for the clinic models.

Superusers can inspect accounts, the doctor directory, appointments and
feedback under ``/admin/``.  Passwords are only ever shown as hashes.
"""

from django.contrib import admin

from .models import Appointment, Doctor, Feedback, User


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = ('email', 'name', 'role', 'is_active', 'date_joined')
    list_filter = ('role', 'is_active')
    search_fields = ('email', 'name', 'phone')
    exclude = ('password',)
    ordering = ('-date_joined',)


@admin.register(Doctor)
class DoctorAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'specialty', 'rating', 'reviews', 'fee')
    list_filter = ('specialty',)
    search_fields = ('name', 'specialty', 'location')


@admin.register(Appointment)
class AppointmentAdmin(admin.ModelAdmin):
    list_display = ('id', 'patient_name', 'doctor_name', 'date', 'time', 'status', 'created_at')
    list_filter = ('status', 'specialty')
    search_fields = ('patient_name', 'doctor_name', 'patient__email')
    readonly_fields = ('doctor_name', 'specialty', 'patient_name', 'created_at')


@admin.register(Feedback)
class FeedbackAdmin(admin.ModelAdmin):
    list_display = ('id', 'patient', 'doctor', 'rating', 'date')
    list_filter = ('rating',)
    search_fields = ('patient', 'comment')

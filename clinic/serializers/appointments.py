from rest_framework import serializers

from clinic.models import Appointment
from clinic.serializers.auth import PHONE_REGEX, clean_text

TIME_REGEX = r'^([0-1]?[0-9]|2[0-3]):[0-5][0-9]$'


class AppointmentCreateSerializer(serializers.Serializer):
    doctorId = serializers.IntegerField(min_value=1)
    date = serializers.DateField(input_formats=['%Y-%m-%d'])
    time = serializers.RegexField(TIME_REGEX, error_messages={'invalid': 'Time must be HH:MM (24-hour).'})
    symptoms = serializers.CharField(min_length=10)
    phone = serializers.RegexField(PHONE_REGEX, error_messages={'invalid': 'Enter a valid phone number.'})

    def validate_symptoms(self, v):
        v = clean_text(v)
        if len(v) < 10:
            raise serializers.ValidationError('Please describe your symptoms (at least 10 characters).')
        return v


class AppointmentSerializer(serializers.ModelSerializer):
    doctorId = serializers.IntegerField(source='doctor_id', read_only=True)
    doctorName = serializers.CharField(source='doctor_name', read_only=True)
    patientId = serializers.IntegerField(source='patient_id', read_only=True)
    patientName = serializers.CharField(source='patient_name', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Appointment
        fields = [
            'id', 'doctorId', 'doctorName', 'specialty', 'patientId', 'patientName',
            'date', 'time', 'symptoms', 'phone', 'status', 'createdAt',
        ]
        read_only_fields = fields


class AdminAppointmentSerializer(AppointmentSerializer):
    """Adds the patient's current email for the admin listing."""
    patientEmail = serializers.EmailField(source='patient.email', read_only=True)

    class Meta(AppointmentSerializer.Meta):
        fields = AppointmentSerializer.Meta.fields + ['patientEmail']
        read_only_fields = fields

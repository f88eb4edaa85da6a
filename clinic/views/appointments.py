"""
Appointment endpoints for authenticated callers.

Patients book and list their own appointments and may cancel them;
administrators may cancel any appointment.
"""
from __future__ import annotations

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from clinic.exceptions import ForbiddenError, NotFoundError
from clinic.models import Appointment
from clinic.permissions import IsOwnerOrAdmin
from clinic.serializers.appointments import AppointmentCreateSerializer, AppointmentSerializer
from clinic.services.appointments import appointments_for_patient, book_appointment, cancel_appointment


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def appointments(request):
    if request.method == 'POST':
        s = AppointmentCreateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        vd = s.validated_data
        appt = book_appointment(
            patient_id=request.user.id,
            doctor_id=vd['doctorId'],
            date=vd['date'],
            time=vd['time'],
            symptoms=vd['symptoms'],
            phone=vd['phone'],
        )
        return Response({'message': 'Appointment booked', 'appointment': AppointmentSerializer(appt).data})

    qs = appointments_for_patient(request.user.id)
    return Response(AppointmentSerializer(qs, many=True).data)


@api_view(['PATCH'])
@permission_classes([IsAuthenticated])
def appointment_cancel(request, pk: int):
    appt = Appointment.objects.filter(pk=pk).first()
    if appt is None:
        raise NotFoundError('Appointment not found')
    if not IsOwnerOrAdmin().has_object_permission(request, None, appt):
        raise ForbiddenError(IsOwnerOrAdmin.message)
    appt = cancel_appointment(appt)
    return Response(AppointmentSerializer(appt).data)

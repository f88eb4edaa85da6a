"""
Doctor directory endpoints.

The directory is public for reading; adding a doctor requires the
admin role.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.response import Response

from clinic.authentication import PublicEndpointAuthentication, ReadPublicBearerAuthentication
from clinic.exceptions import NotFoundError
from clinic.models import Doctor
from clinic.permissions import IsAdminRole, ReadOnly
from clinic.serializers.doctors import DoctorListQuerySerializer, DoctorSerializer
from clinic.services.doctors import list_doctors


@api_view(['GET', 'POST'])
@authentication_classes([ReadPublicBearerAuthentication])
@permission_classes([ReadOnly | IsAdminRole])
def doctors(request):
    """List doctors or (admin) add one.

    Query params for GET:
      - specialty: exact specialty match
      - search: case-insensitive substring of the doctor's name
    """
    if request.method == 'POST':
        s = DoctorSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        s.save()
        return Response(s.data, status=status.HTTP_201_CREATED)

    q = DoctorListQuerySerializer(data=request.query_params)
    q.is_valid(raise_exception=True)
    qs = list_doctors(
        specialty=(q.validated_data.get('specialty') or '').strip() or None,
        search=(q.validated_data.get('search') or '').strip() or None,
    )
    return Response(DoctorSerializer(qs, many=True).data)


@api_view(['GET'])
@authentication_classes([PublicEndpointAuthentication])
@permission_classes([ReadOnly])
def doctor_detail(request, pk: int):
    doctor = Doctor.objects.filter(pk=pk).first()
    if doctor is None:
        raise NotFoundError('Doctor not found')
    return Response(DoctorSerializer(doctor).data)

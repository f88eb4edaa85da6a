"""
Administrative endpoints.

Counts and unfiltered listings over every collection.  Only the admin
role may access them.
"""
from __future__ import annotations

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from ..models import Appointment, Feedback, User
from ..permissions import IsAdminRole
from ..serializers.appointments import AdminAppointmentSerializer
from ..serializers.auth import PublicUserSerializer
from ..serializers.feedback import FeedbackSerializer
from ..services.stats import dashboard_counts


@api_view(['GET'])
@permission_classes([IsAuthenticated, IsAdminRole])
def admin_stats(request):
    """Return patient, appointment and doctor totals."""
    return Response(dashboard_counts())


@api_view(['GET'])
@permission_classes([IsAuthenticated, IsAdminRole])
def admin_appointments(request):
    qs = Appointment.objects.select_related('patient').order_by('-created_at', '-id')
    return Response(AdminAppointmentSerializer(qs, many=True).data)


@api_view(['GET'])
@permission_classes([IsAuthenticated, IsAdminRole])
def admin_users(request):
    # password is not part of PublicUserSerializer
    qs = User.objects.order_by('-date_joined', '-id')
    return Response(PublicUserSerializer(qs, many=True).data)


@api_view(['GET'])
@permission_classes([IsAuthenticated, IsAdminRole])
def admin_feedback(request):
    qs = Feedback.objects.order_by('-date', '-id')
    return Response(FeedbackSerializer(qs, many=True).data)

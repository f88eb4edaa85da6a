from clinic.models import Appointment, Doctor, User


def dashboard_counts() -> dict:
    return {
        'totalUsers': User.objects.filter(role=User.ROLE_PATIENT).count(),
        'totalAppointments': Appointment.objects.count(),
        'totalDoctors': Doctor.objects.count(),
    }

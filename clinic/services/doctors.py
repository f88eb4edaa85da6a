from typing import Optional

from django.db.models import QuerySet

from clinic.models import Doctor


def list_doctors(*, specialty: Optional[str] = None, search: Optional[str] = None) -> QuerySet:
    qs = Doctor.objects.all()
    if specialty:
        qs = qs.filter(specialty=specialty)
    if search:
        qs = qs.filter(name__icontains=search)
    return qs.order_by('id')

"""
Idempotent seeding of baseline data.

``seed_initial_data`` inserts the doctor roster when the directory is
empty and the administrator account when there are no users at all.
It is called once per process from the WSGI/ASGI entry points (see
``seed_on_startup``) and by ``manage.py seed_data``.
"""
import logging

from django.conf import settings
from django.db import DatabaseError

from clinic.models import Doctor, User
from clinic.services.tokens import hash_password

logger = logging.getLogger(__name__)

DOCTOR_ROSTER = [
    {'name': 'Dr. Sarah Johnson', 'specialty': 'Cardiology', 'rating': 4.8, 'reviews': 245,
     'location': 'Downtown Medical Center', 'availability': 'Mon-Fri 9AM-5PM', 'fee': '$100',
     'image': 'https://placehold.co/600x400/007bff/ffffff?text=Dr+Johnson'},
    {'name': 'Dr. Michael Chen', 'specialty': 'Dermatology', 'rating': 4.9, 'reviews': 312,
     'location': 'Skin Care Clinic', 'availability': 'Mon-Sat 10AM-6PM', 'fee': '$80',
     'image': 'https://placehold.co/600x400/28a745/ffffff?text=Dr+Chen'},
    {'name': 'Dr. Emily Rodriguez', 'specialty': 'Pediatrics', 'rating': 4.7, 'reviews': 189,
     'location': "Children's Hospital", 'availability': 'Tue-Thu 8AM-4PM', 'fee': '$90',
     'image': 'https://placehold.co/600x400/ffc107/ffffff?text=Dr+Rodriguez'},
    {'name': 'Dr. James Wilson', 'specialty': 'Orthopedics', 'rating': 4.6, 'reviews': 278,
     'location': 'Sports Medicine Center', 'availability': 'Mon-Fri 9AM-5PM', 'fee': '$120',
     'image': 'https://placehold.co/600x400/17a2b8/ffffff?text=Dr+Wilson'},
    {'name': 'Dr. Lisa Anderson', 'specialty': 'Neurology', 'rating': 4.9, 'reviews': 156,
     'location': 'Neurological Institute', 'availability': 'Wed-Fri 1PM-7PM', 'fee': '$110',
     'image': 'https://placehold.co/600x400/6610f2/ffffff?text=Dr+Anderson'},
    {'name': 'Dr. Robert Martinez', 'specialty': 'General Medicine', 'rating': 4.5, 'reviews': 423,
     'location': 'Primary Care Clinic', 'availability': 'Mon-Sun 9AM-9PM', 'fee': '$70',
     'image': 'https://placehold.co/600x400/dc3545/ffffff?text=Dr+Martinez'},
    {'name': 'Dr. Raj Kankane', 'specialty': 'General Medicine', 'rating': 4.5, 'reviews': 423,
     'location': 'Primary Care Clinic', 'availability': 'Mon-Sun 9AM-9PM', 'fee': '$70',
     'image': 'https://placehold.co/600x400/dc3545/ffffff?text=Dr+Raj'},
]


def seed_initial_data(using: str = 'default') -> dict:
    """Populate doctors and the admin account on database ``using``.

    Returns how many rows of each kind were created.
    """
    created = {'doctors': 0, 'admins': 0}

    if not Doctor.objects.using(using).exists():
        Doctor.objects.using(using).bulk_create([Doctor(**d) for d in DOCTOR_ROSTER])
        created['doctors'] = len(DOCTOR_ROSTER)
        logger.info('Seeded %d doctors', created['doctors'])

    if not User.objects.using(using).exists():
        admin = User(
            name='Admin',
            email=settings.ADMIN_EMAIL.lower(),
            phone='9999999999',
            role=User.ROLE_ADMIN,
            is_staff=True,
        )
        admin.password = hash_password(settings.ADMIN_PASSWORD)
        admin.save(using=using)
        created['admins'] = 1
        logger.info('Created admin user %s', admin.email)

    return created


def seed_on_startup(using: str = 'default') -> None:
    """Run the seed when ``SEED_ON_STARTUP`` is enabled.

    A database that is not migrated yet is logged and skipped so the
    server can still come up and serve ``/healthz``.
    """
    if not getattr(settings, 'SEED_ON_STARTUP', False):
        return
    try:
        seed_initial_data(using=using)
    except DatabaseError:
        logger.exception('Seeding skipped: database not ready (run "manage.py migrate")')

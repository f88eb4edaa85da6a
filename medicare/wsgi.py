"""
WSGI config for the medicare project.

It exposes the WSGI callable as a module-level variable named ``application``
and runs the idempotent seed once, when the process loads the application.
"""
import os

from django.core.wsgi import get_wsgi_application  # type: ignore

# Set the default settings module for the 'django' program.
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'medicare.settings')

# Obtain the WSGI application for use by the server
application = get_wsgi_application()

from clinic.services.bootstrap import seed_on_startup  # noqa: E402

seed_on_startup()

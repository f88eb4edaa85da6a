import logging

from django.contrib.auth import authenticate
from django.db import IntegrityError

from clinic.exceptions import AuthError, ConflictError
from clinic.models import User
from clinic.services.tokens import hash_password

logger = logging.getLogger(__name__)


def register_patient(*, name: str, email: str, phone: str, password: str) -> User:
    """Create a patient account; email must not be taken."""
    email = email.lower()
    if User.objects.filter(email=email).exists():
        raise ConflictError('Email already exists')
    user = User(name=name, email=email, phone=phone, role=User.ROLE_PATIENT)
    user.password = hash_password(password)
    try:
        user.save()
    except IntegrityError:
        # lost a race against a concurrent registration
        raise ConflictError('Email already exists')
    logger.info('Registered patient %s (id=%s)', email, user.pk)
    return user


def authenticate_credentials(email: str, password: str, request=None) -> User:
    """Return the account for ``email``/``password``.

    Unknown email, wrong password and inactive accounts all raise the
    same :class:`AuthError`.  The auth backend hashes the password even
    when no account matches, so both paths cost the same.
    """
    user = authenticate(request, email=email.lower(), password=password)
    if user is None:
        logger.info('Failed login for %s', email)
        raise AuthError('Invalid credentials')
    logger.info('Login for %s (id=%s)', email, user.pk)
    return user

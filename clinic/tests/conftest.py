import pytest
from rest_framework.test import APIClient

from clinic.models import User
from clinic.services.bootstrap import seed_initial_data
from clinic.services.tokens import hash_password, issue_token_pair


@pytest.fixture(autouse=True)
def fast_hasher(settings):
    settings.PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]


def make_user(email, password="secret1", role=User.ROLE_PATIENT, name="Test User"):
    user = User(email=email, name=name, phone="1234567890", role=role)
    user.password = hash_password(password)
    user.save()
    return user


def bearer_client(user):
    c = APIClient()
    tokens = issue_token_pair(user.id, user.role)
    c.credentials(HTTP_AUTHORIZATION=f"Bearer {tokens['accessToken']}")
    return c


@pytest.fixture
def patient(db):
    return make_user("patient@example.com", name="Pat Patient")


@pytest.fixture
def other_patient(db):
    return make_user("other@example.com", name="Olive Other")


@pytest.fixture
def admin_user(db):
    return make_user("admin@example.com", role=User.ROLE_ADMIN, name="Admin")


@pytest.fixture
def patient_client(patient):
    return bearer_client(patient)


@pytest.fixture
def admin_client(admin_user):
    return bearer_client(admin_user)


@pytest.fixture
def seeded(db):
    return seed_initial_data()

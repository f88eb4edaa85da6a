import pytest
from django.urls import reverse
from rest_framework.test import APIClient

from clinic.models import Doctor, Feedback

pytestmark = pytest.mark.django_db


def test_submit_feedback_anonymously():
    r = APIClient().post(reverse('feedback'), {'patient': 'John Doe', 'rating': 5, 'comment': 'Excellent service!'}, format='json')
    assert r.status_code == 201
    assert r.data['rating'] == 5
    assert r.data['doctorId'] is None
    assert Feedback.objects.count() == 1


def test_submit_feedback_for_doctor(seeded):
    doctor = Doctor.objects.get(name='Dr. Emily Rodriguez')
    r = APIClient().post(reverse('feedback'), {'rating': 4, 'comment': 'Good experience', 'doctorId': doctor.id}, format='json')
    assert r.status_code == 201
    assert Feedback.objects.get().doctor == doctor


@pytest.mark.parametrize('payload', [
    {'rating': 0, 'comment': 'too low'},
    {'rating': 6, 'comment': 'too high'},
    {'rating': 3},
    {'comment': 'no rating'},
    {'rating': 3, 'comment': '<b></b>'},
])
def test_submit_feedback_validation(payload):
    r = APIClient().post(reverse('feedback'), payload, format='json')
    assert r.status_code == 400
    assert not Feedback.objects.exists()


def test_comment_markup_is_stripped():
    r = APIClient().post(reverse('feedback'), {'rating': 5, 'comment': '<script>x</script>Great'}, format='json')
    assert r.status_code == 201
    assert '<' not in r.data['comment']


def test_list_feedback_newest_first():
    client = APIClient()
    client.post(reverse('feedback'), {'rating': 5, 'comment': 'first'}, format='json')
    client.post(reverse('feedback'), {'rating': 4, 'comment': 'second'}, format='json')
    r = client.get(reverse('feedback'))
    assert r.status_code == 200
    assert [f['comment'] for f in r.data] == ['second', 'first']


def test_comment_text_is_stored_unescaped():
    r = APIClient().post(reverse('feedback'), {'patient': 'Tom & Jerry', 'rating': 5, 'comment': 'Quick & kind, 10 > 5'}, format='json')
    assert r.status_code == 201
    fb = Feedback.objects.get()
    assert fb.patient == 'Tom & Jerry'
    assert fb.comment == 'Quick & kind, 10 > 5'

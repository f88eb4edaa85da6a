import html

import bleach
from django.contrib.auth import password_validation
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import serializers

from clinic.models import User

PHONE_REGEX = r'^[\d+\-\s]{10,15}$'
EMAIL_MAX_LENGTH = 254


def clean_text(v: str) -> str:
    # bleach escapes &, < and >; values are stored as plain text, not HTML
    return html.unescape(bleach.clean((v or '').strip(), tags=set(), strip=True)).strip()


class RegisterSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=128)
    email = serializers.EmailField(max_length=EMAIL_MAX_LENGTH)
    phone = serializers.RegexField(PHONE_REGEX, error_messages={'invalid': 'Enter a valid phone number.'})
    password = serializers.CharField(min_length=6, write_only=True, trim_whitespace=False)
    confirmPassword = serializers.CharField(write_only=True, trim_whitespace=False)

    def validate_name(self, v):
        v = clean_text(v)
        if not v:
            raise serializers.ValidationError('Name is required')
        return v

    def validate_email(self, v):
        return v.strip().lower()

    def validate_password(self, v):
        try:
            password_validation.validate_password(v)
        except DjangoValidationError as e:
            raise serializers.ValidationError(list(e.messages))
        return v

    def validate(self, attrs):
        if attrs['password'] != attrs['confirmPassword']:
            raise serializers.ValidationError({'confirmPassword': "Passwords don't match"})
        return attrs


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField(max_length=EMAIL_MAX_LENGTH)
    password = serializers.CharField(trim_whitespace=False)

    def validate_email(self, v):
        return v.strip().lower()


class RefreshSerializer(serializers.Serializer):
    token = serializers.CharField(required=False, allow_blank=True)


class PublicUserSerializer(serializers.ModelSerializer):
    """User fields safe to return to clients (never the password)."""
    joinDate = serializers.DateTimeField(source='date_joined', read_only=True)
    isActive = serializers.BooleanField(source='is_active', read_only=True)

    class Meta:
        model = User
        fields = ['id', 'name', 'email', 'phone', 'role', 'joinDate', 'isActive']
        read_only_fields = fields

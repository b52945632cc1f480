from django.conf import settings
from rest_framework import serializers

from .common import clean_required_text


class LoginSerializer(serializers.Serializer):
    email = serializers.CharField()
    password = serializers.CharField(trim_whitespace=False)

    def validate_email(self, v):
        v = (v or '').strip()
        if not v:
            raise serializers.ValidationError('Email is required')
        return v

    def validate_password(self, v):
        if not v:
            raise serializers.ValidationError('Password is required')
        return v


class RegisterSerializer(serializers.Serializer):
    fullname = serializers.CharField(max_length=255)
    email = serializers.EmailField(max_length=255)
    password = serializers.CharField(min_length=settings.PASSWORD_MIN_LENGTH, max_length=128,
                                     trim_whitespace=False, write_only=True)
    degree = serializers.CharField(max_length=255, required=False, allow_blank=True, allow_null=True)
    phoneNo = serializers.CharField(source='phone_no', max_length=32, required=False,
                                    allow_blank=True, allow_null=True)

    def validate_fullname(self, v):
        return clean_required_text(v, 'Fullname')

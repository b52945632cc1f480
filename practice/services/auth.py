"""
Password hashing and bearer-token helpers.

Only doctors authenticate.  Hashing goes through Django's password
hasher framework (salted PBKDF2 by default) and tokens are
``djangorestframework-simplejwt`` access tokens signed with the
configured ``JWT_SECRET``.
"""
from __future__ import annotations

import logging
from typing import Tuple

from django.contrib.auth.hashers import check_password, make_password
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import AccessToken

from practice.exceptions import AuthError
from practice.models import Doctor

logger = logging.getLogger(__name__)


def hash_password(plaintext: str) -> str:
    """Return a salted one-way hash of ``plaintext``; never the input itself."""
    return make_password(plaintext)


def verify_password(plaintext: str, hashed: str) -> bool:
    if not plaintext or not hashed:
        return False
    return check_password(plaintext, hashed)


def issue_token(doctor: Doctor) -> str:
    """Signed access token asserting the doctor's id and email."""
    token = AccessToken.for_user(doctor)
    token['email'] = doctor.email
    return str(token)


def verify_token(raw_token) -> AccessToken:
    if isinstance(raw_token, bytes):
        raw_token = raw_token.decode()
    try:
        return AccessToken(raw_token)
    except TokenError:
        raise AuthError('Invalid or expired token')


def login(email: str, password: str) -> Tuple[str, Doctor]:
    """Authenticate a doctor and return ``(token, doctor)``.

    Unknown email and wrong password fail with the same ``AuthError`` so
    callers cannot probe which accounts exist.
    """
    doctor = Doctor.objects.filter(email__iexact=(email or '').strip()).first()
    if doctor is None:
        # Spend the same hashing time as a real check
        hash_password(password or '')
        logger.warning('Login failed for %s', email)
        raise AuthError('Invalid credentials')
    if not verify_password(password, doctor.password):
        logger.warning('Login failed for %s', email)
        raise AuthError('Invalid credentials')
    return issue_token(doctor), doctor

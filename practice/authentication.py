"""
Bearer-token authentication for doctors.

A thin subclass of simplejwt's ``JWTAuthentication`` that routes token
validation through :func:`practice.services.auth.verify_token`, so an
invalid, tampered or expired token always produces the same 401 payload.

Only the doctor profile endpoints use it; public routes ignore any
``Authorization`` header a client sends.
"""
from __future__ import annotations

from rest_framework_simplejwt.authentication import JWTAuthentication

from practice.services.auth import verify_token


class BearerTokenAuthentication(JWTAuthentication):
    """``Authorization: Bearer <token>`` authentication."""

    def get_validated_token(self, raw_token):
        return verify_token(raw_token)

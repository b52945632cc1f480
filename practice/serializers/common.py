import html

import bleach
from rest_framework import serializers


def clean_text(value):
    """Strip markup from free text typed by users.

    bleach escapes what it keeps; the escaping is undone so that stored
    text is never longer than what the client sent and ``&`` stays ``&``.
    """
    if value is None:
        return None
    text = html.unescape(str(value).strip())
    return html.unescape(bleach.clean(text, tags=[], strip=True)).strip()


def clean_required_text(value, label: str):
    value = clean_text(value)
    if not value:
        raise serializers.ValidationError(f'{label} cannot be blank')
    return value


def iso(value):
    return value.isoformat() if value else None


def decimal_str(value):
    return str(value) if value is not None else None

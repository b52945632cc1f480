from typing import Any, Dict, Mapping, Optional, Type

from django.db import models
from rest_framework import serializers

from practice.exceptions import NotFoundError


def validated(serializer_class: Type[serializers.Serializer], data: Optional[Mapping], *, partial: bool = False) -> Dict[str, Any]:
    """Run ``serializer_class`` over raw input and return validated data keyed by model field."""
    s = serializer_class(data=data if data is not None else {}, partial=partial)
    s.is_valid(raise_exception=True)
    return dict(s.validated_data)


def get_or_not_found(queryset: models.QuerySet, pk, label: str):
    obj = queryset.filter(pk=pk).first()
    if obj is None:
        raise NotFoundError(f'{label} not found')
    return obj


def ensure_exists(model: Type[models.Model], pk, label: str) -> None:
    """Reject a write that names a parent row which does not exist."""
    if not model.objects.filter(pk=pk).exists():
        raise NotFoundError(f'{label} not found')


def apply_changes(instance: models.Model, changes: Mapping[str, Any]) -> list[str]:
    """Merge-patch ``changes`` onto ``instance``; returns the touched field names."""
    fields = []
    for field, value in changes.items():
        setattr(instance, field, value)
        fields.append(field)
    return fields

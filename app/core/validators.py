"""
Custom validators for Django models and forms.

These validators are generic infrastructure - they have no knowledge
of domain concepts like users or accounts.

Usage:
    from core.validators import validate_not_blank

    class MyModel(models.Model):
        title = models.CharField(max_length=50, validators=[validate_not_blank])
"""

from __future__ import annotations

from django.core.exceptions import ValidationError


def validate_not_blank(value: str):
    """
    Validate that a string contains at least one non-whitespace character.

    Django's `blank=False` only rejects the empty string; this also rejects
    values made entirely of whitespace.

    Args:
        value: String to validate

    Raises:
        ValidationError: If the value is empty or whitespace only
    """
    if not value or not value.strip():
        raise ValidationError("This field cannot be blank.", code="blank")

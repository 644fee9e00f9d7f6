"""
Model mixins providing reusable functionality for Django models.

This module contains abstract mixin classes that can be combined with
Django's model base classes. These are generic infrastructure classes with
no domain-specific logic.

Available Mixins:
    UUIDPrimaryKeyMixin: Use UUID as primary key

Usage:
    from core.model_mixins import UUIDPrimaryKeyMixin

    class User(UUIDPrimaryKeyMixin, AbstractUser):
        ...

Note:
    - Always list mixins before the concrete base class in inheritance
    - Mixins are abstract and don't create database tables
"""

from __future__ import annotations

import uuid

from django.db import models


class UUIDPrimaryKeyMixin(models.Model):
    """
    Use UUID as primary key instead of auto-increment integer.

    Benefits:
        - Non-guessable IDs
        - Can be generated before database insert
        - URLs don't reveal record count or order

    Fields:
        id: UUIDField as primary key (auto-generated)

    The user model relies on this so account URLs and admin links never
    expose sequential ids.
    """

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for this record",
    )

    class Meta:
        abstract = True

"""
Authentication models.

This module defines the user record for the account subsystem:
- User: Django's standard user extended with a UUID primary key and
  required, length-bounded first and last names

Related files:
    - managers.py: Custom user manager (email required and normalized)
    - forms.py: Signup and manage-account forms that collect the names
    - adapters.py: allauth adapter (username derived from email)

Everything else about identity (password hashing, groups/roles, permissions,
email confirmation records, sessions) is owned by django.contrib.auth and
django-allauth.
"""

from django.contrib.auth.models import AbstractUser
from django.db import models

from authentication.managers import UserManager
from core.model_mixins import UUIDPrimaryKeyMixin
from core.validators import validate_not_blank

NAME_MAX_LENGTH = 50

# Fields validated on every write that touches them
NAME_FIELDS = frozenset({"first_name", "last_name"})


class User(UUIDPrimaryKeyMixin, AbstractUser):
    """
    Custom User model with required first and last names.

    Fields (in addition to AbstractUser):
        id: UUID primary key, generated on creation
        first_name: Required, 1-50 characters, not whitespace only
        last_name: Required, 1-50 characters, not whitespace only

    Usage:
        user = User.objects.create_user(
            email="user@example.com",
            password="securepassword",
            first_name="Ada",
            last_name="Lovelace",
        )

    Note:
        save() runs field validation for the name fields whenever they are
        written, so invalid names never reach the database regardless of
        which code path creates or updates the user.
    """

    first_name = models.CharField(
        "first name",
        max_length=NAME_MAX_LENGTH,
        validators=[validate_not_blank],
        help_text="User's first name (required, up to 50 characters)",
    )
    last_name = models.CharField(
        "last name",
        max_length=NAME_MAX_LENGTH,
        validators=[validate_not_blank],
        help_text="User's last name (required, up to 50 characters)",
    )

    # Prompted for by createsuperuser in addition to USERNAME_FIELD
    REQUIRED_FIELDS = ["email", "first_name", "last_name"]

    objects = UserManager()

    class Meta:
        db_table = "authentication_user"
        verbose_name = "user"
        verbose_name_plural = "users"

    def __str__(self):
        """Return the user's email, or username when no email is set."""
        return self.email or self.username

    def save(self, *args, **kwargs):
        """Validate the name fields before they are written."""
        update_fields = kwargs.get("update_fields")
        if update_fields is None or NAME_FIELDS.intersection(update_fields):
            self.clean_fields(
                exclude=[
                    field.name
                    for field in self._meta.fields
                    if field.name not in NAME_FIELDS
                ]
            )
        super().save(*args, **kwargs)

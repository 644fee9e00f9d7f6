"""
Custom adapter for django-allauth.

This module customizes email/password registration:
- The username is taken from the email address (login is by email, so the
  username only needs to be unique and stable)
- Registrations are logged

Related files:
    - models.py: User model
    - forms.py: SignupForm collecting first/last name
    - settings.py: ACCOUNT_ADAPTER setting
"""

import logging

from allauth.account.adapter import DefaultAccountAdapter
from allauth.account.utils import user_email, user_username
from django.contrib.auth import get_user_model

logger = logging.getLogger(__name__)


class CustomAccountAdapter(DefaultAccountAdapter):
    """
    Custom adapter for email/password registration.

    Usage:
        Configure in settings.py:
        ACCOUNT_ADAPTER = 'authentication.adapters.CustomAccountAdapter'
    """

    def populate_username(self, request, user):
        """
        Use the email as username, falling back to allauth's generator.

        The fallback covers emails longer than the username column and
        usernames already taken.

        Args:
            request: The HTTP request
            user: The user instance being created (not saved yet)
        """
        email = user_email(user)
        if email and not user_username(user):
            User = get_user_model()
            max_length = User._meta.get_field("username").max_length
            taken = User.objects.filter(username__iexact=email).exists()
            if len(email) <= max_length and not taken:
                user_username(user, email)
                return
        super().populate_username(request, user)

    def save_user(self, request, user, form, commit=True):
        """
        Save the user created by the signup form.

        Args:
            request: The HTTP request
            user: The user instance being created
            form: The registration form
            commit: Whether to save the user to database

        Returns:
            User: The saved user instance
        """
        user = super().save_user(request, user, form, commit=commit)

        if commit:
            logger.info(
                "Email user registered",
                extra={"user_id": str(user.pk), "email": user.email},
            )

        return user

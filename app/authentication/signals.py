"""
Django signals for authentication.

This module defines signal handlers for logging authentication events:
- Sign-up (allauth)
- Email confirmation (allauth)
- Login, logout, and failed login attempts (django.contrib.auth)

Related files:
    - apps.py: Signal import in ready()

Usage:
    Signals are automatically connected when the app is ready.
    See apps.py for the import that triggers connection.
"""

import logging

from allauth.account.signals import email_confirmed, user_signed_up
from django.contrib.auth.signals import (
    user_logged_in,
    user_logged_out,
    user_login_failed,
)
from django.dispatch import receiver

logger = logging.getLogger(__name__)


@receiver(user_signed_up)
def log_user_signed_up(sender, request, user, **kwargs):
    """Log a completed registration."""
    logger.info(
        "User signed up",
        extra={"user_id": str(user.pk), "email": user.email},
    )


@receiver(email_confirmed)
def log_email_confirmed(sender, request, email_address, **kwargs):
    """Log a confirmed email address. Confirmation is not required to sign in."""
    logger.info(f"Email confirmed: {email_address.email}")


@receiver(user_logged_in)
def log_user_logged_in(sender, request, user, **kwargs):
    """Log a successful login."""
    logger.info(
        "User logged in",
        extra={"user_id": str(user.pk), "email": user.email},
    )


@receiver(user_logged_out)
def log_user_logged_out(sender, request, user, **kwargs):
    """Log a logout. `user` is None when the session was anonymous."""
    if user is not None:
        logger.info(
            "User logged out",
            extra={"user_id": str(user.pk), "email": user.email},
        )


@receiver(user_login_failed)
def log_user_login_failed(sender, credentials, request=None, **kwargs):
    """
    Log a failed login attempt.

    Django scrubs sensitive credential values before sending this signal;
    only the non-secret identifiers are logged.
    """
    identifier = credentials.get("email") or credentials.get("username") or ""
    logger.warning(
        "Login failed",
        extra={"identifier": identifier},
    )

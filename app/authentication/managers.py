"""
Custom user manager for email-first user creation.

This module provides the UserManager class that requires an email address
for every user and uses it as the username unless one is given explicitly.

Related files:
    - models.py: User model that uses this manager

Security:
    - Passwords are hashed by Django (make_password)
    - Email addresses are normalized (lowercase domain)
"""

from django.contrib.auth.models import UserManager as DjangoUserManager


class UserManager(DjangoUserManager):
    """
    Custom manager for the User model.

    Usage:
        # Create a regular user (username defaults to the email)
        user = User.objects.create_user(
            email='user@example.com',
            password='securepassword',
            first_name='Ada',
            last_name='Lovelace',
        )

        # Create a superuser
        admin = User.objects.create_superuser(
            email='admin@example.com',
            password='adminpassword',
            first_name='Grace',
            last_name='Hopper',
        )
    """

    def create_user(self, email=None, password=None, username=None, **extra_fields):
        """
        Create and save a regular user with the given email and password.

        Args:
            email: User's email address (required)
            password: User's password (optional; unusable password if omitted)
            username: Login name (defaults to the normalized email)
            **extra_fields: Additional fields to set on the user

        Returns:
            User: The created user instance

        Raises:
            ValueError: If email is not provided
            ValidationError: If first_name or last_name is missing or too long
        """
        if not email:
            raise ValueError("The Email field must be set")

        # Normalize email (lowercase the domain portion)
        email = self.normalize_email(email)

        # Set default values for required fields
        extra_fields.setdefault("is_staff", False)
        extra_fields.setdefault("is_superuser", False)

        return self._create_user(username or email, email, password, **extra_fields)

    def create_superuser(self, email=None, password=None, username=None, **extra_fields):
        """
        Create and save a superuser with the given email and password.

        Args:
            email: Superuser's email address (required)
            password: Superuser's password
            username: Login name (defaults to the normalized email)
            **extra_fields: Additional fields to set on the user

        Returns:
            User: The created superuser instance

        Raises:
            ValueError: If is_staff or is_superuser is not True
        """
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)

        if extra_fields.get("is_staff") is not True:
            raise ValueError("Superuser must have is_staff=True.")
        if extra_fields.get("is_superuser") is not True:
            raise ValueError("Superuser must have is_superuser=True.")

        return self.create_user(email, password, username=username, **extra_fields)

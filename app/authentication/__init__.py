"""
Authentication application.

This app provides the user record and account pages for the application,
on top of django.contrib.auth and django-allauth.

Key components:
    - User model: Django user with UUID id and required first/last name
    - SignupForm: Registration fields collected by allauth's signup page
    - CustomAccountAdapter: Username derived from email, registration logging
    - ManageAccountView: Signed-in users update their first/last name

Usage:
    from authentication.models import User
"""

"""
URL configuration for authentication app.

This module defines URL patterns for custom account pages. The identity
pages themselves (login, logout, signup, password and email management)
come from django-allauth and are included in config/urls.py:
    - /accounts/login/
    - /accounts/logout/
    - /accounts/signup/
    - /accounts/password/change/
    - /accounts/password/reset/
    - /accounts/email/

URL structure:
    /accounts/manage/                 - Update first/last name (login required)
"""

from django.urls import path

from authentication.views import ManageAccountView

app_name = "authentication"

urlpatterns = [
    path("manage/", ManageAccountView.as_view(), name="manage"),
]

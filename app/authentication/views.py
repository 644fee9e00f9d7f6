"""
Authentication views.

This module provides the account management page:
- ManageAccountView: Signed-in users update their first and last name

Related files:
    - forms.py: ManageAccountForm
    - urls.py: URL routing

Note:
    Identity pages are handled by django-allauth:
    - Login: /accounts/login/
    - Logout: /accounts/logout/
    - Signup: /accounts/signup/
    - Password change: /accounts/password/change/
    - Password reset: /accounts/password/reset/
    - Email addresses: /accounts/email/
"""

import logging

from django.contrib import messages
from django.contrib.auth.mixins import LoginRequiredMixin
from django.urls import reverse_lazy
from django.views.generic import UpdateView

from authentication.forms import ManageAccountForm

logger = logging.getLogger(__name__)


class ManageAccountView(LoginRequiredMixin, UpdateView):
    """
    Update the signed-in user's first and last name.

    GET /accounts/manage/
        Renders the form pre-filled with the current names.

    POST /accounts/manage/
        Validates and saves the names, then redirects back with a
        success message. Invalid input re-renders the form (200).

    Anonymous users are redirected to the login page.
    """

    form_class = ManageAccountForm
    template_name = "account/manage.html"
    success_url = reverse_lazy("authentication:manage")

    def get_object(self, queryset=None):
        """Always edit the current user."""
        return self.request.user

    def form_valid(self, form):
        """Save the names and report success."""
        response = super().form_valid(form)
        logger.info(
            "Account names updated",
            extra={"user_id": str(self.object.pk)},
        )
        messages.success(self.request, "Your profile has been updated.")
        return response

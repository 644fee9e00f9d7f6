"""
Forms for the account pages.

- SignupForm: extra registration fields merged into allauth's signup form
  (configured via ACCOUNT_SIGNUP_FORM_CLASS)
- ManageAccountForm: lets a signed-in user update their first and last name
"""

from django import forms

from authentication.models import NAME_MAX_LENGTH, User
from core.validators import validate_not_blank


class SignupForm(forms.Form):
    """
    Additional fields for the allauth signup page.

    allauth builds its signup form on top of this class, so these fields are
    rendered and validated alongside email and password. The account adapter
    copies them onto the user before the first save; signup() runs after.
    """

    first_name = forms.CharField(
        label="First name",
        max_length=NAME_MAX_LENGTH,
        validators=[validate_not_blank],
        widget=forms.TextInput(attrs={"autocomplete": "given-name"}),
    )
    last_name = forms.CharField(
        label="Last name",
        max_length=NAME_MAX_LENGTH,
        validators=[validate_not_blank],
        widget=forms.TextInput(attrs={"autocomplete": "family-name"}),
    )

    def signup(self, request, user):
        """Called by allauth once the new user has been saved."""
        user.first_name = self.cleaned_data["first_name"]
        user.last_name = self.cleaned_data["last_name"]
        user.save(update_fields=["first_name", "last_name"])


class ManageAccountForm(forms.ModelForm):
    """Update form for the account management page."""

    class Meta:
        model = User
        fields = ["first_name", "last_name"]

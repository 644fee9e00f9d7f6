"""
Tests for account forms.

- SignupForm: extra registration fields merged into allauth's signup form
- ManageAccountForm: first/last name updates
"""

import pytest

from authentication.forms import ManageAccountForm, SignupForm
from authentication.models import NAME_MAX_LENGTH, User
from authentication.tests.factories import UserFactory


class TestSignupForm:
    """Tests for SignupForm field validation and the signup() hook."""

    def test_valid_names(self):
        form = SignupForm(data={"first_name": "Ada", "last_name": "Lovelace"})

        assert form.is_valid(), form.errors

    @pytest.mark.parametrize("field", ["first_name", "last_name"])
    def test_missing_name_invalid(self, field):
        data = {"first_name": "Ada", "last_name": "Lovelace"}
        del data[field]

        form = SignupForm(data=data)

        assert not form.is_valid()
        assert field in form.errors

    @pytest.mark.parametrize("field", ["first_name", "last_name"])
    def test_whitespace_name_invalid(self, field):
        data = {"first_name": "Ada", "last_name": "Lovelace", field: "    "}

        form = SignupForm(data=data)

        assert not form.is_valid()
        assert field in form.errors

    @pytest.mark.parametrize("field", ["first_name", "last_name"])
    def test_name_too_long_invalid(self, field):
        data = {
            "first_name": "Ada",
            "last_name": "Lovelace",
            field: "x" * (NAME_MAX_LENGTH + 1),
        }

        form = SignupForm(data=data)

        assert not form.is_valid()
        assert field in form.errors

    def test_signup_hook_stores_names(self, db):
        user = UserFactory(first_name="Old", last_name="Name")
        form = SignupForm(data={"first_name": " Ada ", "last_name": "Lovelace"})
        assert form.is_valid()

        form.signup(request=None, user=user)

        user.refresh_from_db()
        # Form fields strip surrounding whitespace
        assert user.first_name == "Ada"
        assert user.last_name == "Lovelace"


class TestManageAccountForm:
    """Tests for ManageAccountForm."""

    def test_updates_names(self, db):
        user = UserFactory(first_name="Ada", last_name="Lovelace")
        form = ManageAccountForm(
            data={"first_name": "Augusta", "last_name": "King"}, instance=user
        )

        assert form.is_valid(), form.errors
        form.save()

        reloaded = User.objects.get(pk=user.pk)
        assert reloaded.first_name == "Augusta"
        assert reloaded.last_name == "King"

    def test_only_exposes_name_fields(self):
        assert list(ManageAccountForm.base_fields) == ["first_name", "last_name"]

    @pytest.mark.parametrize(
        "data",
        [
            {"first_name": "", "last_name": "King"},
            {"first_name": "Augusta", "last_name": "   "},
            {"first_name": "x" * (NAME_MAX_LENGTH + 1), "last_name": "King"},
        ],
    )
    def test_invalid_names_rejected(self, db, data):
        user = UserFactory(first_name="Ada", last_name="Lovelace")
        form = ManageAccountForm(data=data, instance=user)

        assert not form.is_valid()

        user.refresh_from_db()
        assert (user.first_name, user.last_name) == ("Ada", "Lovelace")

"""
Tests for authentication app.

This package contains test modules for:
- test_models.py: User model field validation and persistence
- test_managers.py: UserManager creation helpers
- test_forms.py: Signup and manage-account forms
- test_adapters.py: allauth account adapter
- test_signals.py: Authentication event logging
- test_views.py: Account management page
- test_integration.py: Register, log in, and manage account end to end

Usage:
    pytest authentication/tests/
    pytest authentication/tests/test_models.py
"""

"""
Tests for home app.

- test_views.py: Home controller pages and the default route
- test_error_handling.py: Generic error page vs. development diagnostics
- urls.py: URLconf adding a failing view for error handling tests
"""

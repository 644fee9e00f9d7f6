"""
URL configuration for the Django application.

The `urlpatterns` list routes URLs to views. This is the root URL configuration
that includes all app-specific routes.

URL Structure:
    /admin/                        - Django admin interface
    /health/                       - Health check endpoint (for load balancers, Docker)
    /accounts/                     - Identity pages (django-allauth)
        login/                     - Email/password login
        logout/                    - Logout
        signup/                    - Registration (email, password, first/last name)
        password/change/           - Change password
        password/reset/            - Request password reset
        email/                     - Manage email addresses
        manage/                    - Update first/last name (custom)
    /{controller=home}/{action=index}/{id?}/
        /                          - Home / Index
        home/privacy/              - Home / Privacy
        home/error/                - Home / Error (generic error page)

Unhandled exceptions outside development are rendered by `handler500`.

For more information, see:
https://docs.djangoproject.com/en/5.2/topics/http/urls/
"""

from django.contrib import admin
from django.urls import include, path

from core.routing import controller_routes
from core.views import health_check
from home import views as home_views

# =============================================================================
# Controllers
# =============================================================================
# controller -> action -> view, expanded into the default route pattern
controllers = {
    "home": {
        "index": home_views.index,
        "privacy": home_views.privacy,
        "error": home_views.error,
    },
}

urlpatterns = [
    # Admin
    path("admin/", admin.site.urls),
    # Health check (Docker, Kubernetes, load balancers)
    path("health/", health_check, name="health_check"),
    # Identity pages: custom account management first, then allauth
    path("accounts/", include("authentication.urls")),
    path("accounts/", include("allauth.urls")),
    # Default route: {controller=home}/{action=index}/{id?}
    *controller_routes(controllers, default_controller="home", default_action="index"),
]

# =============================================================================
# Error Handlers
# =============================================================================
handler500 = "home.views.error"

# =============================================================================
# Admin Site Customization
# =============================================================================
admin.site.site_header = "Application Admin"
admin.site.site_title = "Admin Portal"
admin.site.index_title = "Welcome to the Admin Portal"

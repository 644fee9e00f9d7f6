"""
ASGI config for the Django application.

ASGI (Asynchronous Server Gateway Interface) is the successor to WSGI,
designed to handle async Python web applications. This file exposes the
ASGI callable as a module-level variable named `application`.

Uvicorn uses this entry point to serve the application:

    uvicorn config.asgi:application --host 0.0.0.0 --port 8000

For more information on this file, see:
https://docs.djangoproject.com/en/5.2/howto/deployment/asgi/
"""

import os

from django.core.asgi import get_asgi_application

# Set the default Django settings module for the ASGI application
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")

# Servers never fall back to the committed development file
os.environ.setdefault("ENV_FILE", "")

application = get_asgi_application()

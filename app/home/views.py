"""
Home controller views.

Actions:
    index: Landing page
    privacy: Privacy policy page
    error: Generic error page; also registered as `handler500`

Every action accepts the optional `id` segment of the default route.
"""

import uuid

from django.http import HttpResponseServerError
from django.shortcuts import render
from django.template import loader
from django.views.decorators.csrf import requires_csrf_token

REQUEST_ID_HEADER = "HTTP_X_REQUEST_ID"


def index(request, id=None):
    """Landing page."""
    return render(request, "home/index.html")


def privacy(request, id=None):
    """Privacy policy page."""
    return render(request, "home/privacy.html")


@requires_csrf_token
def error(request, id=None):
    """
    Render the generic error page with status 500.

    Used as `handler500` outside development, so it must not depend on
    anything that might itself be failing: the template is rendered without
    the request context (no session, user, or database access).

    The request id comes from the X-Request-ID header when a proxy supplies
    one, otherwise a new id is generated so the user can quote it.
    """
    request_id = request.META.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
    template = loader.get_template("home/error.html")
    return HttpResponseServerError(template.render({"request_id": request_id}))

"""
Conventional controller/action routing.

Expands a table of controllers and their actions into Django URL patterns
following the `{controller=<default>}/{action=<default>}/{id?}` convention.

For a table like:

    controllers = {
        "home": {"index": views.index, "privacy": views.privacy},
    }

`controller_routes(controllers, default_controller="home")` produces:

    ""                      -> home.index
    "home/"                 -> home.index
    "home/index/"           -> home.index            (name: "home-index")
    "home/index/<id>/"      -> home.index            (name: "home-index-id")
    "home/privacy/"         -> home.privacy          (name: "home-privacy")
    "home/privacy/<id>/"    -> home.privacy          (name: "home-privacy-id")

Views receive the optional segment as the `id` keyword argument and must
accept `id=None`.

Usage:
    urlpatterns = [
        *controller_routes(controllers, default_controller="home"),
    ]
"""

from __future__ import annotations

from typing import Callable, Mapping

from django.urls import URLPattern, path

View = Callable[..., object]


def route_name(controller: str, action: str, with_id: bool = False) -> str:
    """Return the URL name used for a controller action."""
    name = f"{controller}-{action}"
    return f"{name}-id" if with_id else name


def controller_routes(
    controllers: Mapping[str, Mapping[str, View]],
    default_controller: str = "home",
    default_action: str = "index",
) -> list[URLPattern]:
    """
    Build URL patterns for every controller action.

    Args:
        controllers: Mapping of controller name to a mapping of action name to view
        default_controller: Controller served when the path is empty
        default_action: Action served when only the controller is given

    Returns:
        list[URLPattern]: Patterns ordered so explicit routes match first

    Raises:
        ValueError: If the default controller or action does not exist
    """
    if default_controller not in controllers:
        raise ValueError(f"Unknown default controller: {default_controller}")
    if default_action not in controllers[default_controller]:
        raise ValueError(
            f"Controller '{default_controller}' has no '{default_action}' action"
        )

    patterns = []
    defaults = []

    for controller, actions in controllers.items():
        for action, view in actions.items():
            patterns.append(
                path(
                    f"{controller}/{action}/",
                    view,
                    name=route_name(controller, action),
                )
            )
            patterns.append(
                path(
                    f"{controller}/{action}/<str:id>/",
                    view,
                    name=route_name(controller, action, with_id=True),
                )
            )

        # {action=<default>}: controller prefix alone maps to the default action
        if default_action in actions:
            defaults.append(path(f"{controller}/", actions[default_action]))

    # {controller=<default>}: empty path maps to the default controller/action
    defaults.append(path("", controllers[default_controller][default_action]))

    return patterns + defaults

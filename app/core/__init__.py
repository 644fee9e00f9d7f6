"""
Core Application - Infrastructure & Base Classes

This app contains infrastructure code shared by the domain apps:

- Generic, reusable base classes (no domain-specific logic)
- Routing helpers for the conventional controller/action URL scheme
- Infrastructure endpoints

Model Mixins (import from core.model_mixins):
    - UUIDPrimaryKeyMixin: UUID as primary key

Routing (import from core.routing):
    - controller_routes: Expand {controller}/{action}/{id?} into URL patterns

Views (import from core.views):
    - health_check: Database connectivity probe
"""

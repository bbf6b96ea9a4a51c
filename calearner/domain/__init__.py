"""
Domain layer.

The domain layer contains the core business logic of the application.
It has no dependencies on external frameworks or infrastructure.

This layer contains:
- Entities and value objects: tracks, lessons, progress, subscriptions
- Domain Services: entitlement, lesson resolution, streak bookkeeping
"""

"""Custom Dishka scopes for bloglist."""

from dishka import BaseScope, new_scope


class Scope(BaseScope):  # type: ignore[misc]  # BaseScope is designed to be subclassed
    """bloglist dependency injection scopes.

    Hierarchy: APP -> UOW

    - APP: Application lifetime (engine, session factory, password hasher)
    - UOW: Unit of Work (one HTTP request, one database session)
    """

    APP = new_scope("APP")
    UOW = new_scope("UOW")

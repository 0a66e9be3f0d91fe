"""Custom Dishka scopes for rolekeeper."""

from dishka import BaseScope, new_scope


class Scope(BaseScope):  # type: ignore[misc]  # BaseScope is designed to be subclassed
    """rolekeeper dependency injection scopes.

    Hierarchy: APP -> UOW

    - APP: Application lifetime (config, role catalog, engine)
    - UOW: Unit of Work (one invocation against the ACL)
    """

    APP = new_scope("APP")
    UOW = new_scope("UOW")

"""Results of checked ACL mutations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Unauthorized:
    """The caller is not an admin of the role; nothing was changed."""


@dataclass(frozen=True)
class Applied:
    """The caller was authorized and the unchecked operation ran.

    ``changed`` is False when the target was already in the requested state.
    """

    changed: bool


Outcome = Unauthorized | Applied

UNAUTHORIZED = Unauthorized()


def applied(changed: bool) -> Applied:
    return Applied(changed=changed)

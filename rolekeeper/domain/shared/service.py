"""Service base class.

The ACL registries, the guard and the emitter subclass Service and declare
their collaborators (`_catalog`, `_store`, `_emitter`, ...) as fields; the
metaclass turns each subclass into a dataclass so `Acl` wires them by keyword.
"""

from dataclasses import dataclass
from typing import dataclass_transform


@dataclass_transform()
class _ServiceMeta(type):
    """Metaclass that applies @dataclass to subclasses."""

    def __new__(mcs, name: str, bases: tuple, namespace: dict):
        cls = super().__new__(mcs, name, bases, namespace)
        if any(isinstance(b, mcs) for b in bases):
            return dataclass(cls)
        return cls


class Service(metaclass=_ServiceMeta):
    """Base class for domain services. Subclasses are automatically dataclasses."""

    pass

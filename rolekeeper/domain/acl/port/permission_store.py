"""Repository port for per-principal permission masks."""

from abc import abstractmethod
from typing import Protocol

from rolekeeper.domain.acl.model.permission import PermissionSet
from rolekeeper.domain.acl.model.value import AccountId
from rolekeeper.domain.shared.port import Port


class PermissionStore(Port, Protocol):
    """Durable mapping AccountId -> PermissionSet.

    Entries are created lazily and never deleted; an all-zero entry is
    equivalent to a missing one.
    """

    @abstractmethod
    def peek(self, account_id: AccountId) -> PermissionSet:
        """Return the stored set, or the empty set. Never writes."""
        ...

    @abstractmethod
    def get_for_mutation(self, account_id: AccountId) -> PermissionSet:
        """Return the stored set, inserting an empty entry first if absent."""
        ...

    @abstractmethod
    def store(self, account_id: AccountId, permissions: PermissionSet) -> None:
        """Overwrite the entry for ``account_id``."""
        ...

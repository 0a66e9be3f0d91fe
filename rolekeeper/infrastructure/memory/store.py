"""In-memory adapters with a snapshot journal for rollback."""

from rolekeeper.domain.acl.model.permission import PermissionSet
from rolekeeper.domain.acl.model.value import AccountId
from rolekeeper.domain.acl.port.audit_log import AuditLog
from rolekeeper.domain.acl.port.permission_store import PermissionStore


class InMemoryPermissionStore(PermissionStore):
    """Dict-backed PermissionStore.

    PermissionSet values are immutable, so a shallow copy of the dict is a
    complete snapshot.
    """

    def __init__(self) -> None:
        self._entries: dict[AccountId, PermissionSet] = {}

    def peek(self, account_id: AccountId) -> PermissionSet:
        return self._entries.get(account_id, PermissionSet.empty())

    def get_for_mutation(self, account_id: AccountId) -> PermissionSet:
        return self._entries.setdefault(account_id, PermissionSet.empty())

    def store(self, account_id: AccountId, permissions: PermissionSet) -> None:
        self._entries[account_id] = permissions

    def __contains__(self, account_id: object) -> bool:
        return account_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def snapshot(self) -> dict[AccountId, PermissionSet]:
        return dict(self._entries)

    def restore(self, snapshot: dict[AccountId, PermissionSet]) -> None:
        self._entries = dict(snapshot)


class InMemoryAuditLog(AuditLog):
    """List-backed AuditLog."""

    def __init__(self) -> None:
        self._records: list[str] = []

    def append(self, record: str) -> None:
        self._records.append(record)

    def records(self) -> list[str]:
        return list(self._records)

    def snapshot(self) -> int:
        return len(self._records)

    def restore(self, snapshot: int) -> None:
        del self._records[snapshot:]

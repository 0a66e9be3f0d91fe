"""Port for the append-only audit log sink."""

from abc import abstractmethod
from typing import Protocol

from rolekeeper.domain.shared.port import Port


class AuditLog(Port, Protocol):
    """Accepts serialized AclEvent records in emission order."""

    @abstractmethod
    def append(self, record: str) -> None:
        """Append one serialized record."""
        ...

    @abstractmethod
    def records(self) -> list[str]:
        """All records appended so far, oldest first."""
        ...

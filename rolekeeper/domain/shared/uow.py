from abc import ABC, abstractmethod
from types import TracebackType
from typing import Optional, Type


class UnitOfWork(ABC):
    """All-or-nothing boundary of a single invocation.

    Leaving the ``with`` block normally commits; leaving it with an exception
    rolls back every permission write and audit record made inside it. The
    exception is never suppressed.

    Nested ``with`` blocks on the same instance join the outermost one: only
    the outermost exit commits or rolls back.
    """

    _depth: int = 0

    def begin(self) -> None:
        """Hook called on entry. Journaling implementations take their snapshot here."""

    @abstractmethod
    def commit(self) -> None: ...

    @abstractmethod
    def rollback(self) -> None: ...

    def __enter__(self) -> "UnitOfWork":
        if self._depth == 0:
            self.begin()
        self._depth += 1
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]] = None,
        exc: Optional[BaseException] = None,
        tb: Optional[TracebackType] = None,
    ) -> None:
        self._depth -= 1
        if self._depth > 0:
            return
        if exc is not None:
            self.rollback()
        else:
            self.commit()

"""Counter: a sample business service guarded by the ACL."""

import logging
from enum import Enum

import logfire

from rolekeeper.domain.acl.model.role import RoleCatalog
from rolekeeper.domain.acl.model.value import CallContext
from rolekeeper.domain.acl.port.audit_log import AuditLog
from rolekeeper.domain.acl.port.permission_store import PermissionStore
from rolekeeper.domain.acl.service.acl import Acl
from rolekeeper.domain.shared.uow import UnitOfWork

logger = logging.getLogger(__name__)


class CounterRole(Enum):
    L1 = "l1"
    L2 = "l2"
    L3 = "l3"


class Counter:
    """Counter whose operations require roles.

    - ``increase``: any of L2
    - ``increase_any``: any of L1, L2
    - ``reset``: all of L1, L3

    Every operation runs in a unit of work; a failed guard raises
    EnforcementError and leaves both the counter and the ACL untouched.
    """

    def __init__(self, acl: Acl, uow: UnitOfWork, value: int = 0) -> None:
        self.acl = acl
        self._uow = uow
        self._value = value

    @classmethod
    def new(
        cls,
        ctx: CallContext,
        store: PermissionStore,
        audit_log: AuditLog,
        uow: UnitOfWork,
    ) -> "Counter":
        """Create the counter; the creating account becomes admin of every role."""
        with uow:
            acl = Acl.new(RoleCatalog(CounterRole), store, audit_log, ctx)
        return cls(acl, uow)

    @property
    def value(self) -> int:
        return self._value

    def increase(self, ctx: CallContext) -> int:
        with logfire.span("Counter.increase", predecessor=str(ctx.predecessor)), self._uow:
            self.acl.check_any(self.acl.catalog.flags(CounterRole.L2), ctx.predecessor)
            self._value += 1
        return self._value

    def increase_any(self, ctx: CallContext) -> int:
        with logfire.span("Counter.increase_any", predecessor=str(ctx.predecessor)), self._uow:
            self.acl.check_any(
                self.acl.catalog.flags(CounterRole.L1, CounterRole.L2), ctx.predecessor
            )
            self._value += 1
        return self._value

    def reset(self, ctx: CallContext) -> int:
        with logfire.span("Counter.reset", predecessor=str(ctx.predecessor)), self._uow:
            self.acl.check_all(
                self.acl.catalog.flags(CounterRole.L1, CounterRole.L3), ctx.predecessor
            )
            logger.info("Counter reset: predecessor=%s previous=%d", ctx.predecessor, self._value)
            self._value = 0
        return self._value

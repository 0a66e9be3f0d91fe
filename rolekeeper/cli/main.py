"""Main CLI application using Cyclopts.

Every command runs one unit of work against the database named by
ROLEKEEPER_DATABASE__URL. The default in-memory database does not outlive
the process; point the URL at a file (e.g. ``sqlite:///~/.rolekeeper/acl.db``)
to keep state between invocations.
"""

import sys
from collections.abc import Callable
from typing import TypeVar

import cyclopts
import logfire

from rolekeeper.application.di import create_container
from rolekeeper.cli.console import Console
from rolekeeper.config import Config, configure_logging
from rolekeeper.domain.acl.model.outcome import Outcome, Unauthorized
from rolekeeper.domain.acl.model.value import AccountId, CallContext
from rolekeeper.domain.acl.port.audit_log import AuditLog
from rolekeeper.domain.acl.service.acl import Acl
from rolekeeper.domain.shared.error import AclError
from rolekeeper.domain.shared.uow import UnitOfWork

T = TypeVar("T")

app = cyclopts.App(
    name="rolekeeper",
    help="Role-based access control engine - CLI",
)

console = Console()


def _invoke(name: str, fn: Callable[[Acl], T]) -> T:
    """Run ``fn`` inside one unit of work; exit 1 on domain errors."""
    config = Config()  # type: ignore[call-arg]
    configure_logging(config.logging)
    container = create_container(config)
    try:
        with logfire.span(f"cli.{name}"), container() as uow_container:
            uow = uow_container.get(UnitOfWork)
            acl = uow_container.get(Acl)
            with uow:
                return fn(acl)
    except AclError as e:
        console.error(e.message, hint=f"code: {e.code}")
        sys.exit(1)
    finally:
        container.close()


def _report(outcome: Outcome, done: str, unchanged: str) -> None:
    if isinstance(outcome, Unauthorized):
        console.error("Unauthorized: caller is not an admin of this role")
        sys.exit(1)
    if outcome.changed:
        console.success(done)
    else:
        console.warning(unchanged)


@app.command
def init(*, caller: str) -> None:
    """Create the ACL tables and make CALLER admin of every role.

    Args:
        caller: Account that bootstraps the ACL.
    """
    _invoke("init", lambda acl: acl.bootstrap(CallContext.of(caller)))
    console.success(f"{caller} is admin of every role")


@app.command
def is_admin(role: str, account: str) -> None:
    """Print whether ACCOUNT is an admin of ROLE."""

    def run(acl: Acl) -> bool:
        return acl.is_admin(acl.catalog.role(role), AccountId.parse(account))

    console.print(str(_invoke("is_admin", run)).lower())


@app.command
def has_role(role: str, account: str) -> None:
    """Print whether ACCOUNT has been granted ROLE."""

    def run(acl: Acl) -> bool:
        return acl.has_role(acl.catalog.role(role), AccountId.parse(account))

    console.print(str(_invoke("has_role", run)).lower())


@app.command
def add_admin(role: str, account: str, *, caller: str) -> None:
    """Make ACCOUNT an admin of ROLE (CALLER must be an admin of ROLE)."""

    def run(acl: Acl) -> Outcome:
        return acl.add_admin(
            acl.catalog.role(role), AccountId.parse(account), CallContext.of(caller)
        )

    _report(
        _invoke("add_admin", run),
        f"{account} is now admin of {role}",
        f"{account} already is admin of {role}",
    )


@app.command
def revoke_admin(role: str, account: str, *, caller: str) -> None:
    """Revoke admin rights for ROLE from ACCOUNT (CALLER must be an admin of ROLE)."""

    def run(acl: Acl) -> Outcome:
        return acl.revoke_admin(
            acl.catalog.role(role), AccountId.parse(account), CallContext.of(caller)
        )

    _report(
        _invoke("revoke_admin", run),
        f"{account} is no longer admin of {role}",
        f"{account} was not admin of {role}",
    )


@app.command
def renounce_admin(role: str, *, caller: str) -> None:
    """Drop CALLER's own admin rights for ROLE."""

    def run(acl: Acl) -> bool:
        return acl.renounce_admin(acl.catalog.role(role), CallContext.of(caller))

    if _invoke("renounce_admin", run):
        console.success(f"{caller} renounced admin of {role}")
    else:
        console.warning(f"{caller} was not admin of {role}")


@app.command
def grant_role(role: str, account: str, *, caller: str) -> None:
    """Grant ROLE to ACCOUNT (CALLER must be an admin of ROLE)."""

    def run(acl: Acl) -> Outcome:
        return acl.grant_role(
            acl.catalog.role(role), AccountId.parse(account), CallContext.of(caller)
        )

    _report(
        _invoke("grant_role", run),
        f"Granted {role} to {account}",
        f"{account} already has {role}",
    )


@app.command
def revoke_role(role: str, account: str, *, caller: str) -> None:
    """Revoke ROLE from ACCOUNT (CALLER must be an admin of ROLE)."""

    def run(acl: Acl) -> Outcome:
        return acl.revoke_role(
            acl.catalog.role(role), AccountId.parse(account), CallContext.of(caller)
        )

    _report(
        _invoke("revoke_role", run),
        f"Revoked {role} from {account}",
        f"{account} did not have {role}",
    )


@app.command
def renounce_role(role: str, *, caller: str) -> None:
    """Drop ROLE from CALLER."""

    def run(acl: Acl) -> bool:
        return acl.renounce_role(acl.catalog.role(role), CallContext.of(caller))

    if _invoke("renounce_role", run):
        console.success(f"{caller} renounced {role}")
    else:
        console.warning(f"{caller} did not have {role}")


@app.command
def events() -> None:
    """Print the ACL audit log in emission order."""
    config = Config()  # type: ignore[call-arg]
    configure_logging(config.logging)
    container = create_container(config)
    try:
        with container() as uow_container:
            records = uow_container.get(AuditLog).records()
    finally:
        container.close()
    console.events(records)

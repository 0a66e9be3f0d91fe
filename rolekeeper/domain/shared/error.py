"""Error hierarchy for rolekeeper.

Error layers:
- AclError: Base class for all rolekeeper errors
- DomainError: Rule violations raised while serving a call (the call is aborted)
- InfrastructureError: Misconfiguration and storage failures

Checked mutations do not raise when the caller lacks admin rights. They return
the UNAUTHORIZED sentinel from ``rolekeeper.domain.acl.model.outcome`` instead.
"""


class AclError(Exception):
    """Base class for all rolekeeper errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors (abort the current call)
# =============================================================================


class DomainError(AclError):
    """Base class for domain errors."""


class ValidationError(DomainError):
    """Input validation failed."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field


class EnforcementError(DomainError):
    """The caller does not hold the permissions required by a guard."""

    def __init__(self, message: str, account_id: str, required: list[str]) -> None:
        super().__init__(message, code="enforcement_failed")
        self.account_id = account_id
        self.required = required


# =============================================================================
# Infrastructure Errors (fatal, raised at startup or by the backend)
# =============================================================================


class InfrastructureError(AclError):
    """Base class for infrastructure/system errors."""


class StorageUnavailableError(InfrastructureError):
    """Storage backend (database) is unavailable."""


class ConfigurationError(InfrastructureError):
    """System misconfiguration detected."""

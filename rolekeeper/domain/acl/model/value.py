"""Value objects for the ACL domain."""

from dataclasses import dataclass
from functools import total_ordering

from pydantic import ConfigDict, RootModel, field_validator
from pydantic import ValidationError as PydanticValidationError

from rolekeeper.domain.shared.error import ValidationError


@total_ordering
class AccountId(RootModel[str]):
    """Opaque identifier of a principal (e.g. ``alice.near``).

    Totally ordered and hashable so it can key permission entries. Frozen so
    the hash cannot change once the id is used as a key.
    """

    model_config = ConfigDict(frozen=True)

    @field_validator("root")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v or v.strip() != v:
            raise ValueError(f"Invalid account id: {v!r}")
        return v

    @classmethod
    def parse(cls, value: str) -> "AccountId":
        """Build an AccountId, raising the domain ValidationError on bad input."""
        try:
            return cls(value)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid account id: {value!r}", field="account_id") from e

    def __str__(self) -> str:
        return self.root

    def __hash__(self) -> int:
        return hash(self.root)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, AccountId):
            return NotImplemented
        return self.root < other.root


@dataclass(frozen=True)
class CallContext:
    """Identity of the account invoking the current operation.

    Supplied by the host for every call; the engine never reads the caller
    from global state.
    """

    predecessor: AccountId

    @classmethod
    def of(cls, account_id: str | AccountId) -> "CallContext":
        if isinstance(account_id, AccountId):
            return cls(predecessor=account_id)
        return cls(predecessor=AccountId.parse(account_id))

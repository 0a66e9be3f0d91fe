"""Role catalog: the closed, ordered set of roles and their bit layout."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import Enum

from rolekeeper.domain.acl.model.permission import (
    MAX_BIT_INDEX,
    SUPER_ADMIN_BIT,
    PermissionKind,
    PermissionSet,
    bit_index,
)
from rolekeeper.domain.shared.error import ConfigurationError


class RoleCatalog:
    """Fixed enumeration of roles with stable ordinals 0..N-1.

    The ordinal of a role is its position in the Enum definition. Bit
    positions for every (role, kind) pair are computed once here and never
    change for the lifetime of the catalog.

    Invariants:
    - the catalog is non-empty and immutable after construction
    - every assigned bit is <= max_bit_index (checked at construction)
    - bit assignment is injective; the super-admin bit is never a role bit
    """

    def __init__(self, roles: type[Enum], max_bit_index: int = MAX_BIT_INDEX) -> None:
        members = list(roles)
        if not members:
            raise ConfigurationError(f"Role catalog {roles.__name__} has no roles")

        highest = bit_index(len(members) - 1, PermissionKind.ADMIN)
        if highest > max_bit_index:
            raise ConfigurationError(
                f"Role catalog {roles.__name__} needs bit {highest} but the permission "
                f"mask only addresses bits 0..{max_bit_index}",
                code="role_out_of_bounds",
            )

        self._enum = roles
        self._roles: tuple[Enum, ...] = tuple(members)
        self._max_bit_index = max_bit_index
        self._ordinals: dict[Enum, int] = {role: i for i, role in enumerate(members)}
        self._flags: dict[tuple[Enum, PermissionKind], PermissionSet] = {
            (role, kind): PermissionSet.from_bit(bit_index(i, kind))
            for role, i in self._ordinals.items()
            for kind in PermissionKind
        }

    @classmethod
    def from_names(
        cls,
        names: Iterable[str],
        max_bit_index: int = MAX_BIT_INDEX,
        enum_name: str = "Role",
    ) -> RoleCatalog:
        """Build a catalog from role names, e.g. as read from configuration."""
        names = list(names)
        # Enum drops or rejects names with a leading underscore
        invalid = [n for n in names if not n.isidentifier() or n.startswith("_")]
        if invalid:
            raise ConfigurationError(f"Invalid role names: {invalid}")
        # Lookup by name is case-insensitive, so uniqueness is too
        folded = [n.lower() for n in names]
        duplicates = sorted({n for n in names if folded.count(n.lower()) > 1})
        if duplicates:
            raise ConfigurationError(f"Duplicate role names: {duplicates}")
        if not names:
            raise ConfigurationError(f"Role catalog {enum_name} has no roles")
        roles = Enum(enum_name, names)  # type: ignore[misc]
        if len(roles) != len(names):
            raise ConfigurationError(
                f"Role catalog {enum_name} lost roles: {names} -> {[r.name for r in roles]}"
            )
        return cls(roles, max_bit_index=max_bit_index)

    @property
    def max_bit_index(self) -> int:
        return self._max_bit_index

    def __iter__(self) -> Iterator[Enum]:
        return iter(self._roles)

    def __len__(self) -> int:
        return len(self._roles)

    def __contains__(self, role: object) -> bool:
        return role in self._ordinals

    def ordinal(self, role: Enum) -> int:
        try:
            return self._ordinals[role]
        except KeyError:
            raise ConfigurationError(
                f"Role {role!r} is not part of catalog {self._enum.__name__}",
                code="unknown_role",
            ) from None

    def role(self, name: str) -> Enum:
        """Resolve a role by name (case-insensitive)."""
        for role in self._roles:
            if role.name.lower() == name.lower():
                return role
        raise ConfigurationError(
            f"Unknown role {name!r}; expected one of {[r.name for r in self._roles]}",
            code="unknown_role",
        )

    def grant_flag(self, role: Enum) -> PermissionSet:
        """The bit that marks ``role`` as granted."""
        return self._flags[(self._checked(role), PermissionKind.GRANT)]

    def admin_flag(self, role: Enum) -> PermissionSet:
        """The bit that marks its holder as admin of ``role``."""
        return self._flags[(self._checked(role), PermissionKind.ADMIN)]

    def flags(self, *roles: Enum) -> PermissionSet:
        """Union of the grant flags of ``roles`` (input to check_any/check_all)."""
        result = PermissionSet.empty()
        for role in roles:
            result = result | self.grant_flag(role)
        return result

    def admin_flags(self, *roles: Enum) -> PermissionSet:
        """Union of the admin flags of ``roles``."""
        result = PermissionSet.empty()
        for role in roles:
            result = result | self.admin_flag(role)
        return result

    def describe(self, permissions: PermissionSet) -> list[str]:
        """Human-readable names of the bits in ``permissions``.

        Grant flags render as the role name, admin flags as ``<ROLE>_ADMIN``
        and the reserved bit as ``SUPER_ADMIN``. Bits outside the catalog
        render as ``BIT_<n>``.
        """
        names: list[str] = []
        for index in permissions:
            if index == SUPER_ADMIN_BIT:
                names.append("SUPER_ADMIN")
                continue
            ordinal, offset = divmod(index - 1, 2)
            if ordinal >= len(self._roles):
                names.append(f"BIT_{index}")
            elif offset == 0:
                names.append(self._roles[ordinal].name)
            else:
                names.append(f"{self._roles[ordinal].name}_ADMIN")
        return names

    def _checked(self, role: Enum) -> Enum:
        if role not in self._ordinals:
            raise ConfigurationError(
                f"Role {role!r} is not part of catalog {self._enum.__name__}",
                code="unknown_role",
            )
        return role

    def __repr__(self) -> str:
        return f"RoleCatalog({self._enum.__name__}: {[r.name for r in self._roles]})"

"""Bitmask representation of the permissions held by one principal."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum

SUPER_ADMIN_BIT = 0
"""Bit reserved for the super-admin flag. Role bits start right after it."""

MAX_BIT_INDEX = 127
"""Highest addressable bit of the default 128-bit mask."""


class PermissionKind(StrEnum):
    """The two flags every role owns in the mask."""

    GRANT = "grant"
    ADMIN = "admin"


def bit_index(ordinal: int, kind: PermissionKind) -> int:
    """Bit position of a role flag.

    Grant flags sit at odd positions, admin flags at even positions > 0:
    ordinal 0 -> grant 1, admin 2; ordinal 1 -> grant 3, admin 4; ...
    """
    if ordinal < 0:
        raise ValueError(f"Role ordinal must be >= 0, got {ordinal}")
    if kind is PermissionKind.GRANT:
        return 2 * ordinal + 1
    return 2 * ordinal + 2


@dataclass(frozen=True)
class PermissionSet:
    """Immutable set of permission bits.

    Absence of a stored entry is equivalent to ``PermissionSet.empty()``.
    Mutating helpers (``insert``/``remove``) return new instances; a changed
    set only takes effect once written back to the PermissionStore.
    """

    bits: int = 0

    def __post_init__(self) -> None:
        if self.bits < 0:
            raise ValueError("PermissionSet bits must be non-negative")

    @classmethod
    def empty(cls) -> PermissionSet:
        return cls(0)

    @classmethod
    def super_admin(cls) -> PermissionSet:
        return cls(1 << SUPER_ADMIN_BIT)

    @classmethod
    def from_bit(cls, index: int) -> PermissionSet:
        return cls(1 << index)

    def __or__(self, other: PermissionSet) -> PermissionSet:
        return PermissionSet(self.bits | other.bits)

    def __and__(self, other: PermissionSet) -> PermissionSet:
        return PermissionSet(self.bits & other.bits)

    def __sub__(self, other: PermissionSet) -> PermissionSet:
        return PermissionSet(self.bits & ~other.bits)

    def __bool__(self) -> bool:
        return self.bits != 0

    def __iter__(self) -> Iterator[int]:
        """Iterate over the indexes of the set bits, lowest first."""
        bits = self.bits
        index = 0
        while bits:
            if bits & 1:
                yield index
            bits >>= 1
            index += 1

    def is_empty(self) -> bool:
        return self.bits == 0

    def contains(self, other: PermissionSet) -> bool:
        """True if every bit of ``other`` is set here (superset check)."""
        return self.bits & other.bits == other.bits

    def intersects(self, other: PermissionSet) -> bool:
        """True if at least one bit of ``other`` is set here."""
        return self.bits & other.bits != 0

    def insert(self, other: PermissionSet) -> PermissionSet:
        return self | other

    def remove(self, other: PermissionSet) -> PermissionSet:
        return self - other

    def has_super_admin(self) -> bool:
        return bool(self.bits >> SUPER_ADMIN_BIT & 1)

    def __repr__(self) -> str:
        return f"PermissionSet({self.bits:#b})"

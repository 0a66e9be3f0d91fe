"""Marker base for domain ports (interfaces implemented by infrastructure)."""

from typing import Protocol


class Port(Protocol):
    """Base protocol for all ports."""

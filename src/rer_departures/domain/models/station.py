"""Station domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Station:
    """Represents an upstream stop area."""

    id: str
    name: str

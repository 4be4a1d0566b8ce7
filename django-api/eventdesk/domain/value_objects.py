"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass, field
from typing import Self


@dataclass(frozen=True)
class EventId:
    """Opaque identifier assigned to an event by the remote store."""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("Event ID cannot be empty")

    @classmethod
    def from_raw(cls, value: int | str | None) -> Self:
        if value is None or isinstance(value, bool):
            raise ValueError("Invalid event ID")
        return cls(value=str(value).strip())

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class BearerToken:
    """Credential issued at login or registration."""

    value: str = field(repr=False)

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("Bearer token cannot be empty")

    @property
    def header(self) -> str:
        return f"Bearer {self.value}"

"""Result values returned by the gateway instead of raising."""

from dataclasses import dataclass
from typing import Generic, TypeVar

from eventdesk.domain.errors import DomainError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    error: DomainError

    @property
    def ok(self) -> bool:
        return False


Result = Ok[T] | Err

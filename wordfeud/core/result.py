from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from wordfeud.errors import RemoteError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Err:
    error: RemoteError

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def type(self) -> str:
        return self.error.type

    def unwrap(self) -> object:
        raise self.error


Result = Ok[T] | Err

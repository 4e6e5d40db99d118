from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Success-or-failure container returned by the catalog client. Never holds both."""

    value: Optional[T] = None
    error: Optional[str] = None

    def __post_init__(self):
        if self.value is not None and self.error is not None:
            raise ValueError("A Result cannot hold both a value and an error.")

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: str) -> "Result[T]":
        # An empty message would read as success downstream
        return cls(error=error or "Unknown error")

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def is_failure(self) -> bool:
        return self.error is not None

    def get_or_none(self) -> Optional[T]:
        return self.value

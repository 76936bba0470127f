"""Named device capabilities with typed values."""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass
from typing import Any, Callable, Optional

_UINT32_MAX = 0xFFFFFFFF


@dataclass(frozen=True)
class CapabilityValue(abc.ABC):
    """A capability value that knows how to render itself."""

    value: Any

    @abc.abstractmethod
    def to_string(self) -> str:
        """Textual form of the value."""


@dataclass(frozen=True)
class BoolCapability(CapabilityValue):
    value: bool

    def to_string(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class UnsignedCapability(CapabilityValue):
    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= _UINT32_MAX:
            raise ValueError(f"value {self.value} does not fit in 32 unsigned bits")

    def to_string(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class EnumCapability(CapabilityValue):
    value: enum.Enum
    printer: Optional[Callable[[enum.Enum], str]] = None

    def to_string(self) -> str:
        if self.printer is not None:
            return self.printer(self.value)
        return self.value.name


@dataclass(frozen=True)
class Capability:
    """A capability name paired with its value."""

    name: str
    data: CapabilityValue

    def value_string(self) -> str:
        return self.data.to_string()

    def __str__(self) -> str:
        return f"{self.name}: {self.value_string()}"


Capabilities = dict[str, Capability]


def make_capability(name: str, value: Any) -> Capability:
    """Wrap a bool, unsigned integer or enum value as a named capability."""
    data: CapabilityValue
    if isinstance(value, bool):
        data = BoolCapability(value)
    elif isinstance(value, enum.Enum):
        data = EnumCapability(value)
    elif isinstance(value, int):
        data = UnsignedCapability(value)
    else:
        raise TypeError(f"unsupported capability value type: {type(value).__name__}")
    return Capability(name, data)
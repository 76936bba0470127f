"""GPU devices and the process-wide registry of available devices."""

from __future__ import annotations

import abc
import enum

from offloadkit.capabilities import Capabilities
from offloadkit.pipeline import Pipeline


class GPUAPI(enum.Enum):
    """Graphics APIs a device may be driven through."""

    UNKNOWN = "Unknown"
    DIRECTX = "DirectX"
    VULKAN = "Vulkan"
    METAL = "Metal"


class Device(abc.ABC):
    """A device able to run a compute pipeline."""

    def __init__(self, description: str = "") -> None:
        self.description = description

    @abc.abstractmethod
    def capabilities(self) -> Capabilities:
        """Capabilities the device reports, keyed by name."""

    @abc.abstractmethod
    def api_name(self) -> str:
        """Human-readable name of the API the device is driven through."""

    @abc.abstractmethod
    def api(self) -> GPUAPI:
        """The API the device is driven through."""

    @abc.abstractmethod
    def execute_program(self, pipeline: Pipeline) -> None:
        """Run the pipeline, writing read-write buffers back into it."""

    def print_extra(self) -> str:
        """Additional device information for display; empty by default."""
        return ""


_registry: list[Device] = []


def register_device(device: Device) -> None:
    """Add a device to the registry of available devices."""
    if not isinstance(device, Device):
        raise TypeError(f"expected a Device, got {type(device).__name__}")
    _registry.append(device)


def devices() -> tuple[Device, ...]:
    """Registered devices in registration order."""
    return tuple(_registry)


def uninitialize() -> None:
    """Forget every registered device."""
    _registry.clear()
"""Raw image descriptions over byte data."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from offloadkit.pipeline import Buffer, DataFormat

_FLOAT_FORMATS = frozenset({DataFormat.FLOAT32, DataFormat.FLOAT64})


@dataclass(frozen=True)
class ImageRef:
    """A view of pixel data with its dimensions and element layout."""

    height: int
    width: int
    depth: int
    channels: int
    is_float: bool
    data: Union[bytes, bytearray, memoryview] = b""

    def __post_init__(self) -> None:
        if self.channels not in (3, 4):
            raise ValueError(f"channels must be 3 or 4, got {self.channels}")
        if self.depth <= 0 or self.depth & (self.depth - 1):
            raise ValueError(f"depth must be a power of 2, got {self.depth}")
        if self.depth > 8:
            raise ValueError(f"depth must be <= 8 (64-bit), got {self.depth}")
        expected = self.height * self.width * self.depth * self.channels
        if len(self.data) != expected:
            raise ValueError(
                f"data size {len(self.data)} does not match properties ({expected})"
            )

    def bit_depth(self) -> int:
        """Bits per channel."""
        return self.depth * 8

    def size(self) -> int:
        """Size of the pixel data in bytes."""
        return len(self.data)

    def empty(self) -> bool:
        return len(self.data) == 0

    @classmethod
    def from_buffer(cls, buffer: Buffer) -> ImageRef:
        """View a pipeline buffer as an image using its output properties."""
        return cls(
            buffer.output_props.height,
            buffer.output_props.width,
            buffer.single_element_size(),
            buffer.channels,
            buffer.format in _FLOAT_FORMATS,
            buffer.data,
        )


@dataclass(frozen=True)
class Image(ImageRef):
    """An image that owns a mutable pixel buffer."""

    @classmethod
    def blank(
        cls, height: int, width: int, depth: int, channels: int, is_float: bool
    ) -> Image:
        """A zero-filled image of the given shape."""
        return cls(
            height,
            width,
            depth,
            channels,
            is_float,
            bytearray(height * width * depth * channels),
        )
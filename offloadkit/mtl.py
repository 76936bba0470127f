"""Resource layout rules for running pipelines through Metal."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

from offloadkit.pipeline import DataFormat, Pipeline, Resource


class PixelFormat(enum.Enum):
    """Texture formats used for typed buffer resources."""

    INVALID = "Invalid"
    R32_SINT = "R32Sint"
    RG32_SINT = "RG32Sint"
    RGBA32_SINT = "RGBA32Sint"
    R32_FLOAT = "R32Float"
    RG32_FLOAT = "RG32Float"
    RGBA32_FLOAT = "RGBA32Float"


_FORMATS = {
    DataFormat.INT32: {
        1: PixelFormat.R32_SINT,
        2: PixelFormat.RG32_SINT,
        4: PixelFormat.RGBA32_SINT,
    },
    DataFormat.FLOAT32: {
        1: PixelFormat.R32_FLOAT,
        2: PixelFormat.RG32_FLOAT,
        4: PixelFormat.RGBA32_FLOAT,
    },
}


def mtl_format(data_format: DataFormat, channels: int) -> PixelFormat:
    """Pixel format for a typed buffer; INVALID for unsupported channel counts."""
    by_channels = _FORMATS.get(data_format)
    if by_channels is None:
        raise ValueError(f"unsupported resource format: {data_format.value}")
    return by_channels.get(channels, PixelFormat.INVALID)


@dataclass(frozen=True)
class MTLDescriptor:
    """How one resource is placed in the argument buffer."""

    heap_index: int
    resource: Resource
    is_buffer: bool
    slot: int
    size: int
    width: Optional[int] = None
    format: Optional[PixelFormat] = None

    @property
    def writable(self) -> bool:
        return self.resource.is_read_write()


def texture_width(resource: Resource) -> int:
    """Number of elements of a typed buffer viewed as a 1D texture."""
    return resource.size() // resource.element_size()


def descriptor_plan(pipeline: Pipeline) -> list[MTLDescriptor]:
    """Descriptors for every resource in set order.

    Raw resources become buffers and typed ones become textures; ``slot`` is
    the position within the buffer or texture list respectively.
    """
    plan: list[MTLDescriptor] = []
    buffers = textures = 0
    resources = (r for d in pipeline.sets for r in d.resources)
    for heap_index, res in enumerate(resources):
        if res.is_raw():
            plan.append(MTLDescriptor(heap_index, res, True, buffers, res.size()))
            buffers += 1
        else:
            buf = res.buffer
            assert buf is not None
            plan.append(
                MTLDescriptor(
                    heap_index,
                    res,
                    False,
                    textures,
                    res.size(),
                    texture_width(res),
                    mtl_format(buf.format, buf.channels),
                )
            )
            textures += 1
    return plan


def grid_size(
    threads_per_group: int, dispatch_size: tuple[int, int, int]
) -> tuple[int, int, int]:
    """Thread grid for a dispatch whose groups are threads_per_group wide."""
    x, y, z = dispatch_size
    return threads_per_group * x, y, z
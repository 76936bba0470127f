"""Format and view rules for binding pipeline resources through DirectX 12."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from offloadkit.pipeline import DataFormat, Resource, ResourceKind


class DXResourceKind(enum.Enum):
    """How a resource is viewed by a DirectX shader."""

    UAV = "UAV"
    SRV = "SRV"
    CBV = "CBV"


class DXGIFormat(enum.IntEnum):
    """The DXGI element formats used for buffer views."""

    UNKNOWN = 0
    R32G32B32A32_FLOAT = 2
    R32G32B32A32_SINT = 4
    R32G32B32_FLOAT = 6
    R32G32B32_SINT = 8
    R32G32_FLOAT = 16
    R32G32_SINT = 18
    R32_TYPELESS = 39
    R32_FLOAT = 41
    R32_SINT = 43


_DX_KINDS = {
    ResourceKind.BUFFER: DXResourceKind.SRV,
    ResourceKind.STRUCTURED_BUFFER: DXResourceKind.SRV,
    ResourceKind.BYTE_ADDRESS_BUFFER: DXResourceKind.SRV,
    ResourceKind.RW_BUFFER: DXResourceKind.UAV,
    ResourceKind.RW_STRUCTURED_BUFFER: DXResourceKind.UAV,
    ResourceKind.RW_BYTE_ADDRESS_BUFFER: DXResourceKind.UAV,
    ResourceKind.CONSTANT_BUFFER: DXResourceKind.CBV,
}

_TYPED_FORMATS = {
    DataFormat.INT32: {
        1: DXGIFormat.R32_SINT,
        2: DXGIFormat.R32G32_SINT,
        3: DXGIFormat.R32G32B32_SINT,
        4: DXGIFormat.R32G32B32A32_SINT,
    },
    DataFormat.FLOAT32: {
        1: DXGIFormat.R32_FLOAT,
        2: DXGIFormat.R32G32_FLOAT,
        3: DXGIFormat.R32G32B32_FLOAT,
        4: DXGIFormat.R32G32B32A32_FLOAT,
    },
}

_RAW_FORMATS = frozenset(
    {DataFormat.HEX32, DataFormat.UINT32, DataFormat.INT32, DataFormat.FLOAT32}
)

_CBV_ALIGN_MASK = 0xFFFFFFFFFFFFFF00
_SIZE_T_MASK = 0xFFFFFFFFFFFFFFFF


def dx_kind(kind: ResourceKind) -> DXResourceKind:
    """The view type a resource kind is bound as."""
    return _DX_KINDS[kind]


def dx_format(data_format: DataFormat, channels: int) -> DXGIFormat:
    """Typed-buffer format; UNKNOWN for unsupported channel counts."""
    by_channels = _TYPED_FORMATS.get(data_format)
    if by_channels is None:
        raise ValueError(f"unsupported resource format: {data_format.value}")
    return by_channels.get(channels, DXGIFormat.UNKNOWN)


def raw_dx_format(resource: Resource) -> DXGIFormat:
    """Format of a raw view: typeless 32-bit for byte-address buffers."""
    if not resource.is_byte_address_buffer():
        return DXGIFormat.UNKNOWN
    if resource.buffer is None:
        raise ValueError(f"resource {resource.name!r} has no buffer bound")
    if resource.buffer.format not in _RAW_FORMATS:
        raise ValueError(
            f"unsupported resource format: {resource.buffer.format.value}"
        )
    return DXGIFormat.R32_TYPELESS


def cbv_size(size: int) -> int:
    """Size rounded up to the 256-byte alignment constant buffers require."""
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    return ((size + 255) & _SIZE_T_MASK) & _CBV_ALIGN_MASK


@dataclass(frozen=True)
class BufferViewDesc:
    """Description of a shader-resource or unordered-access buffer view."""

    kind: DXResourceKind
    format: DXGIFormat
    first_element: int
    num_elements: int
    structure_byte_stride: int
    raw: bool


def buffer_view(resource: Resource) -> BufferViewDesc:
    """The SRV or UAV description a resource is bound with."""
    kind = dx_kind(resource.kind)
    if kind is DXResourceKind.CBV:
        raise ValueError(
            f"resource {resource.name!r} is a constant buffer and has no buffer view"
        )
    if resource.buffer is None:
        raise ValueError(f"resource {resource.name!r} has no buffer bound")
    element_size = resource.element_size()
    if element_size <= 0:
        raise ValueError(f"resource {resource.name!r} has no element size")
    if resource.is_raw():
        fmt = raw_dx_format(resource)
    else:
        fmt = dx_format(resource.buffer.format, resource.buffer.channels)
    return BufferViewDesc(
        kind=kind,
        format=fmt,
        first_element=0,
        num_elements=resource.size() // element_size,
        structure_byte_stride=element_size if resource.is_structured_buffer() else 0,
        raw=resource.is_byte_address_buffer(),
    )
"""Description of a GPU compute pipeline: shaders, buffers, bindings and results."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional, Union


class Stages(enum.Enum):
    """Shader stages a pipeline may contain."""

    COMPUTE = "Compute"


class Rule(enum.Enum):
    """How an actual buffer is compared against its expected contents."""

    BUFFER_EXACT = "BufferExact"
    BUFFER_FUZZY = "BufferFuzzy"


class DenormMode(enum.Enum):
    """Handling of denormal floating point values during comparison."""

    ANY = "Any"
    FTZ = "FTZ"
    PRESERVE = "Preserve"


class DataFormat(enum.Enum):
    """Element formats a buffer may hold."""

    HEX8 = "Hex8"
    HEX16 = "Hex16"
    HEX32 = "Hex32"
    HEX64 = "Hex64"
    UINT16 = "UInt16"
    UINT32 = "UInt32"
    UINT64 = "UInt64"
    INT16 = "Int16"
    INT32 = "Int32"
    INT64 = "Int64"
    FLOAT16 = "Float16"
    FLOAT32 = "Float32"
    FLOAT64 = "Float64"
    BOOL = "Bool"


_ELEMENT_SIZES = {
    DataFormat.HEX8: 1,
    DataFormat.HEX16: 2,
    DataFormat.UINT16: 2,
    DataFormat.INT16: 2,
    DataFormat.FLOAT16: 2,
    DataFormat.HEX32: 4,
    DataFormat.UINT32: 4,
    DataFormat.INT32: 4,
    DataFormat.FLOAT32: 4,
    DataFormat.BOOL: 4,
    DataFormat.HEX64: 8,
    DataFormat.UINT64: 8,
    DataFormat.INT64: 8,
    DataFormat.FLOAT64: 8,
}


class ResourceKind(enum.Enum):
    """Shader-visible resource types."""

    BUFFER = "Buffer"
    STRUCTURED_BUFFER = "StructuredBuffer"
    BYTE_ADDRESS_BUFFER = "ByteAddressBuffer"
    RW_BUFFER = "RWBuffer"
    RW_STRUCTURED_BUFFER = "RWStructuredBuffer"
    RW_BYTE_ADDRESS_BUFFER = "RWByteAddressBuffer"
    CONSTANT_BUFFER = "ConstantBuffer"


_RAW_KINDS = frozenset(
    {
        ResourceKind.STRUCTURED_BUFFER,
        ResourceKind.RW_STRUCTURED_BUFFER,
        ResourceKind.BYTE_ADDRESS_BUFFER,
        ResourceKind.RW_BYTE_ADDRESS_BUFFER,
        ResourceKind.CONSTANT_BUFFER,
    }
)
_BYTE_ADDRESS_KINDS = frozenset(
    {ResourceKind.BYTE_ADDRESS_BUFFER, ResourceKind.RW_BYTE_ADDRESS_BUFFER}
)
_STRUCTURED_KINDS = frozenset(
    {ResourceKind.STRUCTURED_BUFFER, ResourceKind.RW_STRUCTURED_BUFFER}
)
_READ_WRITE_KINDS = frozenset(
    {
        ResourceKind.RW_BUFFER,
        ResourceKind.RW_STRUCTURED_BUFFER,
        ResourceKind.RW_BYTE_ADDRESS_BUFFER,
    }
)


class RootParamKind(enum.Enum):
    """Kinds of DirectX root signature parameters."""

    CONSTANT = "Constant"
    DESCRIPTOR_TABLE = "DescriptorTable"
    ROOT_DESCRIPTOR = "RootDescriptor"


@dataclass
class DirectXBinding:
    """Register and register space of a DirectX binding."""

    register: int = 0
    space: int = 0


@dataclass
class VulkanBinding:
    """Binding slot of a Vulkan descriptor."""

    binding: int = 0


@dataclass
class OutputProperties:
    """Image dimensions of a buffer that is rendered as an image."""

    height: int = 0
    width: int = 0
    depth: int = 0


@dataclass
class Buffer:
    """A named block of data in a given format."""

    name: str
    format: DataFormat
    channels: int = 1
    stride: int = 0
    data: bytearray = field(default_factory=bytearray)
    output_props: OutputProperties = field(default_factory=OutputProperties)

    def size(self) -> int:
        """Size of the data in bytes."""
        return len(self.data)

    def single_element_size(self) -> int:
        """Size in bytes of one channel of one element."""
        return _ELEMENT_SIZES[self.format]

    def element_size(self) -> int:
        """Size in bytes of a whole element; the stride if one is set."""
        if self.stride > 0:
            return self.stride
        return self.single_element_size() * self.channels


@dataclass
class Result:
    """A check comparing an actual buffer with an expected one."""

    name: str
    rule: Rule
    actual: str
    expected: str
    actual_buffer: Optional[Buffer] = None
    expected_buffer: Optional[Buffer] = None
    denorm_mode: DenormMode = DenormMode.ANY
    ulp_tolerance: int = 0


@dataclass
class Resource:
    """A buffer bound to a shader as a resource of some kind."""

    kind: ResourceKind
    name: str
    dx_binding: DirectXBinding = field(default_factory=DirectXBinding)
    vk_binding: Optional[VulkanBinding] = None
    buffer: Optional[Buffer] = None

    def is_raw(self) -> bool:
        return self.kind in _RAW_KINDS

    def is_byte_address_buffer(self) -> bool:
        return self.kind in _BYTE_ADDRESS_KINDS

    def is_structured_buffer(self) -> bool:
        return self.kind in _STRUCTURED_KINDS

    def is_read_write(self) -> bool:
        return self.kind in _READ_WRITE_KINDS

    def _bound_buffer(self) -> Buffer:
        if self.buffer is None:
            raise ValueError(f"resource {self.name!r} has no buffer bound")
        return self.buffer

    def element_size(self) -> int:
        """Element size of the bound buffer."""
        return self._bound_buffer().element_size()

    def size(self) -> int:
        """Byte size of the bound buffer."""
        return self._bound_buffer().size()


@dataclass
class DescriptorSet:
    """A group of resources bound together."""

    resources: list[Resource] = field(default_factory=list)


@dataclass
class RootResource(Resource):
    """A resource bound directly as a root descriptor."""


@dataclass
class RootConstant:
    """A buffer whose contents are passed as root constants."""

    buffer: Buffer
    name: str


@dataclass
class RootParameter:
    """One parameter of a DirectX root signature."""

    kind: RootParamKind
    data: Union[RootConstant, RootResource, None] = None


@dataclass
class DXSettings:
    """DirectX-specific pipeline settings."""

    root_params: list[RootParameter] = field(default_factory=list)


@dataclass
class RuntimeSettings:
    """Per-API runtime settings of a pipeline."""

    dx: DXSettings = field(default_factory=DXSettings)


@dataclass
class Shader:
    """A compiled shader program and how to dispatch it."""

    stage: Stages
    entry: str
    shader: bytes = b""
    dispatch_size: tuple[int, int, int] = (1, 1, 1)


@dataclass
class Pipeline:
    """A complete description of a GPU program run."""

    shaders: list[Shader] = field(default_factory=list)
    settings: RuntimeSettings = field(default_factory=RuntimeSettings)
    buffers: list[Buffer] = field(default_factory=list)
    results: list[Result] = field(default_factory=list)
    sets: list[DescriptorSet] = field(default_factory=list)

    def descriptor_count(self) -> int:
        """Total number of resources across all descriptor sets."""
        return sum(len(d.resources) for d in self.sets)

    def get_buffer(self, name: str) -> Optional[Buffer]:
        """The first buffer with the given name, or None."""
        return next((b for b in self.buffers if b.name == name), None)
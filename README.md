# offloadkit

Building blocks for describing and checking GPU compute shader tests. The
package has no dependencies beyond the standard library.

## Modules

- `offloadkit.pipeline`: dataclasses describing a compute pipeline:
  `Pipeline`, `Shader`, `Buffer`, `Resource`, `DescriptorSet`, `Result`,
  `RootParameter`, `RootConstant`, `RootResource`, `DXSettings`,
  `RuntimeSettings` and the bindings `DirectXBinding`, `VulkanBinding` and
  `OutputProperties`, plus the enums `Stages`, `Rule`, `DenormMode`,
  `DataFormat`, `ResourceKind` and `RootParamKind`.
  `Buffer.single_element_size()` and `Buffer.element_size()` come from the
  buffer's `DataFormat`, channel count and stride. `Resource` tells raw,
  structured, byte-address and read-write kinds apart (`is_raw()`,
  `is_structured_buffer()`, `is_byte_address_buffer()`, `is_read_write()`).
  `Pipeline.descriptor_count()` counts resources across all sets and
  `Pipeline.get_buffer(name)` finds a buffer by name or returns `None`.
- `offloadkit.capabilities`: typed capability values (`BoolCapability`,
  `UnsignedCapability`, `EnumCapability`) wrapped in a named `Capability`,
  built with `make_capability(name, value)`. Unsigned values must fit in
  32 bits.
- `offloadkit.color`: `Color` in `ColorSpace.RGB`, `XYZ` or `LAB` (sRGB with a
  D65 white point), `translate_space()`, component-wise absolute difference
  with `-`, conversion to and from fixed-width integers (`to_ints`,
  `from_ints`, `to_int`, `to_double`) and the CIE76 distance
  `cie75_distance(left, right)`.
- `offloadkit.image`: `ImageRef`, a validated view of pixel bytes (3 or 4
  channels, a power-of-two depth up to 8 bytes, data length matching the
  shape), `ImageRef.from_buffer()` for a pipeline buffer, and `Image.blank()`
  for a zero-filled image.
- `offloadkit.comparators`: the `ImageComparator` base and
  `ImageComparatorDistance`, which accumulates per-pixel CIE76 distances,
  counts pixels beyond the just-noticeable distance of 2.3, keeps a 10-bin
  histogram of them and produces a text summary with `report()`.
  `CompareCheck` and `CheckType` describe thresholds.
- `offloadkit.device`: the abstract `Device` (`capabilities()`, `api_name()`,
  `api()`, `execute_program()`, `print_extra()`), the `GPUAPI` enum, and a
  process-wide registry: `register_device()`, `devices()`, `uninitialize()`.
- `offloadkit.hresult`: `check_hresult(hr, message)` raises `HResultError`
  (an `OSError`) for failing HRESULT codes.
- `offloadkit.dx_formats`: DirectX view rules: `dx_kind()` (SRV, UAV or CBV),
  `dx_format()` and `raw_dx_format()` giving a `DXGIFormat`, `cbv_size()`
  rounding up to 256 bytes, and `buffer_view()` giving a `BufferViewDesc`.
- `offloadkit.dx_layout`: `descriptor_tables()` and `descriptor_ranges()`
  (one table per descriptor set) and `root_bindings()` giving a
  `RootBinding` per root parameter, falling back to one descriptor table per
  set when no root parameters are given.
- `offloadkit.mtl`: Metal layout rules: `mtl_format()` giving a
  `PixelFormat`, `texture_width()`, `descriptor_plan()` giving an
  `MTLDescriptor` per resource (raw resources as buffers, typed ones as
  textures) and `grid_size()`.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from offloadkit.pipeline import Buffer, DataFormat, OutputProperties
from offloadkit.image import ImageRef
from offloadkit.color import Color, cie75_distance
from offloadkit.capabilities import make_capability

buf = Buffer(
    name="In",
    format=DataFormat.FLOAT32,
    channels=4,
    data=bytearray(64),
    output_props=OutputProperties(height=2, width=2),
)
print(buf.element_size())                 # 16
print(ImageRef.from_buffer(buf).bit_depth())  # 32

print(cie75_distance(Color(1.0, 0.0, 0.0), Color(0.0, 1.0, 0.0)))

print(make_capability("WaveOps", True))   # WaveOps: true
```

Comparing two images pixel by pixel:

```python
from offloadkit.comparators import ImageComparatorDistance

cmp = ImageComparatorDistance()
cmp.process_pixel(Color(0.5, 0.5, 0.5), Color(0.5, 0.5, 0.5))
print(cmp.visible_diffs)   # 0
print(cmp.report())
```

DirectX helpers:

```python
from offloadkit.dx_formats import cbv_size, dx_format
from offloadkit.hresult import HResultError, check_hresult

print(cbv_size(100))                          # 256
print(dx_format(DataFormat.FLOAT32, 4).name)  # R32G32B32A32_FLOAT

try:
    check_hresult(0x80004005, "Failed to create device")
except HResultError as err:
    print(err)   # Failed to create device (HRESULT 0x80004005)
```

## What the package does not do

- It does not talk to a GPU. `Device` is abstract and no concrete DirectX,
  Vulkan or Metal device is included; the DirectX and Metal modules only work
  out formats, views and layouts.
- It does not read pipeline descriptions from YAML or any other file format;
  pipelines are built in Python.
- It does not read or write PNG files.
- It does not verify `Result` entries against buffers.
- `ImageComparatorDistance` stores its `CompareCheck` list but does not
  evaluate it: `result()` comes from the base class and always returns
  `True`.
- There is no command-line program.
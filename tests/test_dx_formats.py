import pytest

from offloadkit.dx_formats import (
    BufferViewDesc,
    DXGIFormat,
    DXResourceKind,
    buffer_view,
    cbv_size,
    dx_format,
    dx_kind,
    raw_dx_format,
)
from offloadkit.pipeline import Buffer, DataFormat, Resource, ResourceKind


def _resource(kind, fmt=DataFormat.FLOAT32, channels=1, count=4, stride=0):
    elt = Buffer("b", fmt, channels=channels, stride=stride).element_size()
    buf = Buffer(
        "b", fmt, channels=channels, stride=stride, data=bytearray(elt * count)
    )
    return Resource(kind, "r", buffer=buf)


@pytest.mark.parametrize(
    "kind,expected",
    [
        (ResourceKind.BUFFER, DXResourceKind.SRV),
        (ResourceKind.STRUCTURED_BUFFER, DXResourceKind.SRV),
        (ResourceKind.BYTE_ADDRESS_BUFFER, DXResourceKind.SRV),
        (ResourceKind.RW_BUFFER, DXResourceKind.UAV),
        (ResourceKind.RW_STRUCTURED_BUFFER, DXResourceKind.UAV),
        (ResourceKind.RW_BYTE_ADDRESS_BUFFER, DXResourceKind.UAV),
        (ResourceKind.CONSTANT_BUFFER, DXResourceKind.CBV),
    ],
)
def test_dx_kind(kind, expected):
    assert dx_kind(kind) is expected


def test_uav_kinds_are_read_write():
    for kind in ResourceKind:
        res = Resource(kind, "r")
        assert (dx_kind(kind) is DXResourceKind.UAV) == res.is_read_write()


@pytest.mark.parametrize(
    "fmt,channels,expected",
    [
        (DataFormat.INT32, 1, DXGIFormat.R32_SINT),
        (DataFormat.INT32, 2, DXGIFormat.R32G32_SINT),
        (DataFormat.INT32, 3, DXGIFormat.R32G32B32_SINT),
        (DataFormat.INT32, 4, DXGIFormat.R32G32B32A32_SINT),
        (DataFormat.FLOAT32, 1, DXGIFormat.R32_FLOAT),
        (DataFormat.FLOAT32, 2, DXGIFormat.R32G32_FLOAT),
        (DataFormat.FLOAT32, 3, DXGIFormat.R32G32B32_FLOAT),
        (DataFormat.FLOAT32, 4, DXGIFormat.R32G32B32A32_FLOAT),
    ],
)
def test_dx_format(fmt, channels, expected):
    assert dx_format(fmt, channels) is expected


def test_dx_format_unknown_channel_count():
    assert dx_format(DataFormat.FLOAT32, 5) is DXGIFormat.UNKNOWN


@pytest.mark.parametrize("fmt", [DataFormat.UINT32, DataFormat.FLOAT64, DataFormat.HEX8])
def test_dx_format_unsupported(fmt):
    with pytest.raises(ValueError):
        dx_format(fmt, 1)


def test_dxgi_values_match_the_api():
    assert dx_format(DataFormat.FLOAT32, 5) == 0
    res = _resource(ResourceKind.BYTE_ADDRESS_BUFFER, DataFormat.UINT32)
    assert raw_dx_format(res) == 39


@pytest.mark.parametrize(
    "fmt", [DataFormat.HEX32, DataFormat.UINT32, DataFormat.INT32, DataFormat.FLOAT32]
)
def test_raw_format_for_byte_address(fmt):
    res = _resource(ResourceKind.RW_BYTE_ADDRESS_BUFFER, fmt)
    assert raw_dx_format(res) is DXGIFormat.R32_TYPELESS


def test_raw_format_unknown_for_structured():
    res = _resource(ResourceKind.STRUCTURED_BUFFER, DataFormat.FLOAT64)
    assert raw_dx_format(res) is DXGIFormat.UNKNOWN


def test_raw_format_unsupported():
    res = _resource(ResourceKind.BYTE_ADDRESS_BUFFER, DataFormat.FLOAT16)
    with pytest.raises(ValueError):
        raw_dx_format(res)


def test_cbv_size_pins():
    assert cbv_size(0) == 0
    assert cbv_size(1) == 256
    assert cbv_size(256) == 256


@pytest.mark.parametrize("size", [3, 100, 255, 257, 511, 512, 1000, 4096])
def test_cbv_size_invariants(size):
    out = cbv_size(size)
    assert out % 256 == 0
    assert size <= out < size + 256
    assert cbv_size(out) == out


def test_cbv_size_negative():
    with pytest.raises(ValueError):
        cbv_size(-1)


def test_buffer_view_typed():
    res = _resource(ResourceKind.RW_BUFFER, DataFormat.INT32, channels=4, count=6)
    view = buffer_view(res)
    assert view == BufferViewDesc(
        kind=DXResourceKind.UAV,
        format=DXGIFormat.R32G32B32A32_SINT,
        first_element=0,
        num_elements=6,
        structure_byte_stride=0,
        raw=False,
    )


def test_buffer_view_structured_uses_stride():
    res = _resource(
        ResourceKind.STRUCTURED_BUFFER, DataFormat.FLOAT32, count=5, stride=12
    )
    view = buffer_view(res)
    assert view.kind is DXResourceKind.SRV
    assert view.structure_byte_stride == res.element_size()
    assert view.num_elements == 5
    assert view.format is DXGIFormat.UNKNOWN
    assert view.raw is False


def test_buffer_view_byte_address_is_raw():
    res = _resource(ResourceKind.BYTE_ADDRESS_BUFFER, DataFormat.UINT32, count=8)
    view = buffer_view(res)
    assert view.raw is True
    assert view.format is DXGIFormat.R32_TYPELESS
    assert view.structure_byte_stride == 0
    assert view.num_elements * res.element_size() == res.size()


def test_buffer_view_rejects_constant_buffer():
    res = _resource(ResourceKind.CONSTANT_BUFFER)
    with pytest.raises(ValueError):
        buffer_view(res)


def test_buffer_view_requires_buffer():
    with pytest.raises(ValueError):
        buffer_view(Resource(ResourceKind.BUFFER, "r"))
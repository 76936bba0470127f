import pytest

from offloadkit.pipeline import (
    Buffer,
    DataFormat,
    DescriptorSet,
    Pipeline,
    Resource,
    ResourceKind,
    RootConstant,
    RootParameter,
    RootParamKind,
    RootResource,
)


def _buffer(name="In", fmt=DataFormat.INT32, channels=1, stride=0, size=16):
    return Buffer(name=name, format=fmt, channels=channels, stride=stride,
                  data=bytearray(size))


@pytest.mark.parametrize(
    "fmt,expected",
    [
        (DataFormat.HEX8, 1),
        (DataFormat.FLOAT16, 2),
        (DataFormat.BOOL, 4),
        (DataFormat.UINT32, 4),
        (DataFormat.FLOAT64, 8),
        (DataFormat.INT64, 8),
    ],
)
def test_single_element_size(fmt, expected):
    assert _buffer(fmt=fmt).single_element_size() == expected


def test_every_format_has_a_size():
    for fmt in DataFormat:
        assert _buffer(fmt=fmt).single_element_size() in (1, 2, 4, 8)


def test_element_size_uses_channels_without_stride():
    buf = _buffer(fmt=DataFormat.FLOAT32, channels=3)
    assert buf.element_size() == buf.single_element_size() * 3


def test_element_size_prefers_stride():
    buf = _buffer(fmt=DataFormat.FLOAT32, channels=3, stride=20)
    assert buf.element_size() == 20


def test_buffer_size_is_data_length():
    assert _buffer(size=24).size() == 24


def test_resource_kind_predicates():
    for kind in ResourceKind:
        res = Resource(kind=kind, name="r")
        assert res.is_read_write() == kind.value.startswith("RW")
        assert res.is_byte_address_buffer() == ("ByteAddress" in kind.value)
        assert res.is_structured_buffer() == ("Structured" in kind.value)
        assert res.is_raw() == (kind not in (ResourceKind.BUFFER, ResourceKind.RW_BUFFER))


def test_resource_delegates_to_buffer():
    buf = _buffer(fmt=DataFormat.INT32, channels=2, size=32)
    res = Resource(kind=ResourceKind.RW_BUFFER, name="r", buffer=buf)
    assert res.size() == 32
    assert res.element_size() == buf.element_size()


def test_resource_without_buffer_raises():
    res = Resource(kind=ResourceKind.BUFFER, name="r")
    with pytest.raises(ValueError):
        res.size()
    with pytest.raises(ValueError):
        res.element_size()


def test_descriptor_count_sums_sets():
    sets = [
        DescriptorSet([Resource(ResourceKind.BUFFER, "a"), Resource(ResourceKind.RW_BUFFER, "b")]),
        DescriptorSet([]),
        DescriptorSet([Resource(ResourceKind.CONSTANT_BUFFER, "c")]),
    ]
    assert Pipeline(sets=sets).descriptor_count() == 3
    assert Pipeline().descriptor_count() == 0


def test_get_buffer_returns_first_match_or_none():
    first = _buffer(name="Out", size=4)
    second = _buffer(name="Out", size=8)
    pipeline = Pipeline(buffers=[_buffer(name="In"), first, second])
    assert pipeline.get_buffer("Out") is first
    assert pipeline.get_buffer("Missing") is None


def test_root_resource_is_a_resource():
    buf = _buffer(size=12)
    root = RootResource(kind=ResourceKind.RW_STRUCTURED_BUFFER, name="r", buffer=buf)
    param = RootParameter(kind=RootParamKind.ROOT_DESCRIPTOR, data=root)
    assert param.data.is_read_write()
    assert param.data.size() == 12
    const = RootParameter(kind=RootParamKind.CONSTANT, data=RootConstant(buf, "c"))
    assert const.data.buffer is buf


def test_enum_values_match_names_in_files():
    assert DataFormat("UInt16") is DataFormat.UINT16
    assert ResourceKind("RWByteAddressBuffer") is ResourceKind.RW_BYTE_ADDRESS_BUFFER
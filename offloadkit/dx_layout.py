"""Root signature and descriptor heap layout for DirectX 12 pipelines."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from offloadkit.dx_formats import DXResourceKind, dx_kind
from offloadkit.pipeline import (
    Buffer,
    Pipeline,
    Resource,
    RootConstant,
    RootParamKind,
    RootResource,
)

_ROOT_CONSTANT_SIZE = 4


@dataclass(frozen=True)
class DescriptorRange:
    """One single-descriptor range of a descriptor table."""

    range_type: DXResourceKind
    base_register: int
    space: int
    offset_in_table: int
    resource: Resource
    num_descriptors: int = 1


@dataclass(frozen=True)
class RootBinding:
    """What is bound to one root parameter when a pipeline is dispatched.

    ``heap_offset`` is the descriptor heap position a table starts at,
    ``num_values`` and ``constant_offset`` describe root constants, and
    ``resource`` with ``view`` describe a root descriptor.
    """

    parameter_index: int
    kind: RootParamKind
    heap_offset: Optional[int] = None
    num_values: Optional[int] = None
    constant_offset: Optional[int] = None
    constant_buffer: Optional[Buffer] = None
    resource: Optional[Resource] = None
    view: Optional[DXResourceKind] = None


def descriptor_tables(pipeline: Pipeline) -> list[list[DescriptorRange]]:
    """Descriptor ranges grouped by descriptor set, one table per set."""
    return [
        [
            DescriptorRange(
                range_type=dx_kind(res.kind),
                base_register=res.dx_binding.register,
                space=res.dx_binding.space,
                offset_in_table=offset,
                resource=res,
            )
            for offset, res in enumerate(dset.resources)
        ]
        for dset in pipeline.sets
    ]


def descriptor_ranges(pipeline: Pipeline) -> list[DescriptorRange]:
    """Every descriptor range of every table, in heap order."""
    return [rng for table in descriptor_tables(pipeline) for rng in table]


def _table_offsets(pipeline: Pipeline) -> list[int]:
    offsets = []
    position = 0
    for dset in pipeline.sets:
        offsets.append(position)
        position += len(dset.resources)
    return offsets


def root_bindings(pipeline: Pipeline) -> list[RootBinding]:
    """Root parameter bindings in parameter order.

    Without explicit root parameters, each descriptor set is bound as a
    descriptor table of its own.
    """
    offsets = _table_offsets(pipeline)
    params = pipeline.settings.dx.root_params
    if not params:
        return [
            RootBinding(index, RootParamKind.DESCRIPTOR_TABLE, heap_offset=offset)
            for index, offset in enumerate(offsets)
        ]

    bindings: list[RootBinding] = []
    constant_offset = 0
    table_index = 0
    for index, param in enumerate(params):
        if param.kind is RootParamKind.CONSTANT:
            constant = param.data
            if not isinstance(constant, RootConstant):
                raise ValueError(f"root parameter {index} is not a root constant")
            num_values = constant.buffer.size() // _ROOT_CONSTANT_SIZE
            bindings.append(
                RootBinding(
                    index,
                    param.kind,
                    num_values=num_values,
                    constant_offset=constant_offset,
                    constant_buffer=constant.buffer,
                )
            )
            constant_offset += num_values
        elif param.kind is RootParamKind.DESCRIPTOR_TABLE:
            if table_index >= len(offsets):
                raise ValueError(
                    f"root parameter {index} names descriptor table {table_index}, "
                    f"but only {len(offsets)} descriptor sets exist"
                )
            bindings.append(
                RootBinding(index, param.kind, heap_offset=offsets[table_index])
            )
            table_index += 1
        else:
            resource = param.data
            if not isinstance(resource, RootResource):
                raise ValueError(f"root parameter {index} is not a root resource")
            bindings.append(
                RootBinding(
                    index,
                    param.kind,
                    resource=resource,
                    view=dx_kind(resource.kind),
                )
            )
    return bindings
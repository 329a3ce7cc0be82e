"""Named groups of typed binary values, the in-memory form of saved data."""

import enum
import logging
import struct
from dataclasses import dataclass, field
from numbers import Real

_log = logging.getLogger(__name__)


class HierarchyError(Exception):
    """Raised when a value cannot be stored in or read from a group."""


class DataType(enum.IntEnum):
    """Type tag stored next to every value."""

    INT8 = 0
    LIST_INT8 = 1
    INT16 = 2
    LIST_INT16 = 3
    INT32 = 4
    LIST_INT32 = 5
    UINT8 = 6
    LIST_UINT8 = 7
    UINT16 = 8
    LIST_UINT16 = 9
    UINT32 = 10
    LIST_UINT32 = 11
    FLOAT = 12
    LIST_FLOAT = 13
    DOUBLE = 14
    LIST_DOUBLE = 15
    BYTE = 16
    LIST_BYTE = 17
    STRING = 18
    UNKNOWN = 19


_SCALAR_FORMATS = {
    DataType.INT8: "b",
    DataType.INT16: "h",
    DataType.INT32: "i",
    DataType.UINT8: "B",
    DataType.UINT16: "H",
    DataType.UINT32: "I",
    DataType.FLOAT: "f",
    DataType.DOUBLE: "d",
    DataType.BYTE: "B",
}

_LIST_FORMATS = {
    DataType.LIST_INT8: "b",
    DataType.LIST_INT16: "h",
    DataType.LIST_INT32: "i",
    DataType.LIST_UINT8: "B",
    DataType.LIST_UINT16: "H",
    DataType.LIST_UINT32: "I",
    DataType.LIST_FLOAT: "f",
    DataType.LIST_DOUBLE: "d",
}


@dataclass
class Data:
    """A typed value held as little-endian bytes."""

    type: DataType
    data: bytes


@dataclass
class Group:
    """A node holding named subgroups and named data."""

    subgroups: dict = field(default_factory=dict)
    data: dict = field(default_factory=dict)

    def __getitem__(self, name):
        """Subgroup ``name``, created empty if it does not exist yet."""
        return self.subgroups.setdefault(name, Group())

    def get(self, name):
        """The data entry called ``name``."""
        try:
            return self.data[name]
        except KeyError:
            raise HierarchyError(f"Data with name '{name}' not found.") from None

    def has_data(self, name):
        return name in self.data

    def has_group(self, name):
        return name in self.subgroups


@dataclass
class Hierarchy:
    """A named tree of groups."""

    name: str = ""
    root: Group = field(default_factory=Group)

    def __getitem__(self, group_name):
        return self.root[group_name]


def _infer_type(value):
    if isinstance(value, str):
        return DataType.STRING
    if isinstance(value, (bytes, bytearray)):
        return DataType.LIST_BYTE
    if isinstance(value, int):
        return DataType.INT32
    if isinstance(value, Real):
        return DataType.DOUBLE
    if isinstance(value, (list, tuple)):
        if all(isinstance(v, int) for v in value):
            return DataType.LIST_INT32
        if all(isinstance(v, Real) for v in value):
            return DataType.LIST_DOUBLE
    raise HierarchyError("Unsupported data for serialization")


def _encode(value, data_type):
    if data_type is DataType.STRING:
        if not isinstance(value, str):
            raise HierarchyError(
                f"Value does not fit data type {data_type.name}: a string is required"
            )
        return value.encode("utf-8")
    try:
        if data_type is DataType.LIST_BYTE:
            return bytes(value)
        if data_type in _SCALAR_FORMATS:
            return struct.pack("<" + _SCALAR_FORMATS[data_type], value)
        if data_type in _LIST_FORMATS:
            items = list(value)
            return struct.pack(f"<{len(items)}{_LIST_FORMATS[data_type]}", *items)
    except (struct.error, OverflowError, TypeError, ValueError) as exc:
        raise HierarchyError(f"Value does not fit data type {data_type.name}: {exc}") from None
    raise HierarchyError("Unsupported data for serialization")


def _decode(data):
    payload = data.data
    if data.type is DataType.STRING:
        return payload.decode("utf-8")
    if data.type is DataType.LIST_BYTE:
        return bytes(payload)
    if data.type in _SCALAR_FORMATS:
        fmt = "<" + _SCALAR_FORMATS[data.type]
        if len(payload) != struct.calcsize(fmt):
            raise HierarchyError(f"Corrupt {data.type.name} value of {len(payload)} bytes")
        return struct.unpack(fmt, payload)[0]
    if data.type in _LIST_FORMATS:
        code = _LIST_FORMATS[data.type]
        count, rest = divmod(len(payload), struct.calcsize("<" + code))
        if rest:
            raise HierarchyError(f"Corrupt {data.type.name} value of {len(payload)} bytes")
        return list(struct.unpack(f"<{count}{code}", payload))
    raise HierarchyError("Unsupported data type for deserialization")


def add_data(group, name, value, data_type=None):
    """Store ``value`` under ``name``; the type is inferred when not given."""
    data_type = _infer_type(value) if data_type is None else DataType(data_type)
    if data_type is DataType.UNKNOWN:
        raise HierarchyError("Unsupported data for serialization")
    payload = _encode(value, data_type)
    if not payload:
        raise HierarchyError("Unsupported data for serialization")
    if name in group.data:
        _log.warning("Data with name '%s' already exists. Overwriting.", name)
    group.data[name] = Data(data_type, payload)


def get_data(group, name, data_type=None):
    """Read the value stored under ``name``, checking its type when one is given."""
    data = group.get(name)
    if data_type is not None:
        expected = DataType(data_type)
        if expected is DataType.UNKNOWN:
            raise HierarchyError("Unsupported data type for deserialization")
        if data.type is not expected:
            raise HierarchyError(
                f"Data type mismatch for '{name}'. Expected type: {int(expected)}, "
                f"but got: {int(data.type)}"
            )
    return _decode(data)
"""Metadata sets and their typed item values."""

from __future__ import annotations

import uuid
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from mxfinfo.models import UMID, MetadataKey, Rational, Timestamp

if TYPE_CHECKING:
    from .header import HeaderMetadata


class ItemType(str, Enum):
    """Value kinds an item can hold."""

    UTF16_STRING = "utf16_string"
    RATIONAL = "rational"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UMID = "umid"
    TIMESTAMP = "timestamp"
    LENGTH = "length"
    POSITION = "position"
    UL = "ul"
    STRONGREF = "strongref"
    WEAKREF = "weakref"
    ARRAY = "array"
    RAW = "raw"


_INT_RANGES: dict[ItemType, tuple[int, int]] = {
    ItemType.UINT8: (0, 2**8 - 1),
    ItemType.UINT16: (0, 2**16 - 1),
    ItemType.UINT32: (0, 2**32 - 1),
    ItemType.INT8: (-(2**7), 2**7 - 1),
    ItemType.INT16: (-(2**15), 2**15 - 1),
    ItemType.INT32: (-(2**31), 2**31 - 1),
    ItemType.INT64: (-(2**63), 2**63 - 1),
    ItemType.LENGTH: (-(2**63), 2**63 - 1),
    ItemType.POSITION: (-(2**63), 2**63 - 1),
}

# Length, position and int64 share one 64-bit representation
_INT64_TYPES = (ItemType.LENGTH, ItemType.POSITION, ItemType.INT64)


@dataclass(frozen=True)
class StrongRef:
    """Owning reference to another set, by instance UID."""

    target: MetadataKey


@dataclass(frozen=True)
class WeakRef:
    """Non-owning reference to another set, by instance UID."""

    target: MetadataKey


ArrayElement = StrongRef | WeakRef | MetadataKey | bytes


@dataclass(frozen=True)
class MetadataItem:
    """A typed item value inside a set."""

    key: MetadataKey
    type: ItemType
    value: Any


def decode_utf16(payload: bytes) -> str:
    """Decode a big-endian UTF-16 item payload, stopping at the first NUL.

    Raises:
        UnicodeDecodeError: If the payload is not valid UTF-16
    """
    text = payload.decode("utf-16-be")
    return text.split("\x00", 1)[0]


def new_instance_uid() -> MetadataKey:
    """Generate a random instance UID."""
    return MetadataKey(octets=uuid.uuid4().bytes)


class MetadataSet:
    """A typed node of the header metadata graph.

    A set has a type key, an instance UID and a mapping from item key to a
    typed value. The ``get_*`` accessors return None when the item is
    absent or holds a different type; the ``set_*`` methods are used by the
    metadata decoder while the graph is being built.
    """

    def __init__(self, key: MetadataKey, instance_uid: MetadataKey | None = None) -> None:
        self.key = key
        self.instance_uid = instance_uid or new_instance_uid()
        self.items: dict[MetadataKey, MetadataItem] = {}
        self.header_metadata: HeaderMetadata | None = None

    # -- graph access ---------------------------------------------------------

    @property
    def header(self) -> HeaderMetadata:
        if self.header_metadata is None:
            raise ValueError("Metadata set is not attached to header metadata")
        return self.header_metadata

    def is_subclass_of(self, ancestor: MetadataKey) -> bool:
        """Check if this set's type equals or derives from ``ancestor``."""
        return self.header.datamodel.is_subclass_of(self.key, ancestor)

    @property
    def name(self) -> str:
        """Registered name of this set's type."""
        if self.header_metadata is None:
            return str(self.key)
        return self.header_metadata.datamodel.set_name(self.key)

    # -- item access ----------------------------------------------------------

    def has_item(self, key: MetadataKey) -> bool:
        return key in self.items

    def get_item(self, key: MetadataKey) -> MetadataItem | None:
        return self.items.get(key)

    def _value(self, key: MetadataKey, *types: ItemType) -> Any:
        item = self.items.get(key)
        if item is None or item.type not in types:
            return None
        return item.value

    def get_string(self, key: MetadataKey) -> str | None:
        """Return a UTF-16 string item, or None if absent or malformed."""
        payload = self._value(key, ItemType.UTF16_STRING)
        if payload is None:
            return None
        try:
            return decode_utf16(payload)
        except UnicodeDecodeError:
            return None

    def get_rational(self, key: MetadataKey) -> Rational | None:
        """Return a rational item; a zero denominator counts as absent."""
        value: Rational | None = self._value(key, ItemType.RATIONAL)
        if value is None or not value.is_valid:
            return None
        return value

    def get_uint8(self, key: MetadataKey) -> int | None:
        return self._value(key, ItemType.UINT8)

    def get_uint16(self, key: MetadataKey) -> int | None:
        return self._value(key, ItemType.UINT16)

    def get_uint32(self, key: MetadataKey) -> int | None:
        return self._value(key, ItemType.UINT32)

    def get_int32(self, key: MetadataKey) -> int | None:
        return self._value(key, ItemType.INT32)

    def get_length(self, key: MetadataKey) -> int | None:
        return self._value(key, *_INT64_TYPES)

    def get_position(self, key: MetadataKey) -> int | None:
        return self._value(key, *_INT64_TYPES)

    def get_umid(self, key: MetadataKey) -> UMID | None:
        return self._value(key, ItemType.UMID)

    def get_timestamp(self, key: MetadataKey) -> Timestamp | None:
        return self._value(key, ItemType.TIMESTAMP)

    def get_ul(self, key: MetadataKey) -> MetadataKey | None:
        return self._value(key, ItemType.UL)

    def get_array_len(self, key: MetadataKey) -> int | None:
        elements = self._value(key, ItemType.ARRAY)
        return None if elements is None else len(elements)

    def get_array_element(self, key: MetadataKey, index: int) -> ArrayElement | None:
        elements = self._value(key, ItemType.ARRAY)
        if elements is None or not 0 <= index < len(elements):
            return None
        return elements[index]

    def iter_array(self, key: MetadataKey) -> Iterator[ArrayElement]:
        """Iterate the elements of an array item (nothing if absent)."""
        yield from self._value(key, ItemType.ARRAY) or ()

    def get_strongref(self, key: MetadataKey) -> MetadataSet | None:
        """Resolve a strong reference item to its target set."""
        ref = self._value(key, ItemType.STRONGREF)
        if ref is None:
            return None
        return self.header.get_strongref(ref)

    def get_weakref(self, key: MetadataKey) -> MetadataSet | None:
        """Resolve a weak reference item; absence is not an error."""
        ref = self._value(key, ItemType.WEAKREF)
        if ref is None:
            return None
        return self.header.get_weakref(ref)

    # -- construction ---------------------------------------------------------

    def set_item(self, key: MetadataKey, item_type: ItemType, value: Any) -> None:
        """Store a typed value, validating integer ranges.

        Raises:
            ValueError: If an integer value does not fit its type
        """
        bounds = _INT_RANGES.get(item_type)
        if bounds is not None and not bounds[0] <= value <= bounds[1]:
            raise ValueError(f"{value} out of range for {item_type.value}")
        self.items[key] = MetadataItem(key=key, type=item_type, value=value)

    def set_string(self, key: MetadataKey, value: str) -> None:
        self.set_item(key, ItemType.UTF16_STRING, value.encode("utf-16-be"))

    def set_utf16_payload(self, key: MetadataKey, payload: bytes) -> None:
        """Store a raw UTF-16BE payload exactly as read from the file."""
        self.set_item(key, ItemType.UTF16_STRING, bytes(payload))

    def set_rational(self, key: MetadataKey, value: Rational | tuple[int, int]) -> None:
        if isinstance(value, tuple):
            value = Rational(numerator=value[0], denominator=value[1])
        self.set_item(key, ItemType.RATIONAL, value)

    def set_uint8(self, key: MetadataKey, value: int) -> None:
        self.set_item(key, ItemType.UINT8, value)

    def set_uint16(self, key: MetadataKey, value: int) -> None:
        self.set_item(key, ItemType.UINT16, value)

    def set_uint32(self, key: MetadataKey, value: int) -> None:
        self.set_item(key, ItemType.UINT32, value)

    def set_int32(self, key: MetadataKey, value: int) -> None:
        self.set_item(key, ItemType.INT32, value)

    def set_length(self, key: MetadataKey, value: int) -> None:
        self.set_item(key, ItemType.LENGTH, value)

    def set_position(self, key: MetadataKey, value: int) -> None:
        self.set_item(key, ItemType.POSITION, value)

    def set_umid(self, key: MetadataKey, value: UMID) -> None:
        self.set_item(key, ItemType.UMID, value)

    def set_timestamp(self, key: MetadataKey, value: Timestamp) -> None:
        self.set_item(key, ItemType.TIMESTAMP, value)

    def set_ul(self, key: MetadataKey, value: MetadataKey) -> None:
        self.set_item(key, ItemType.UL, value)

    def set_strongref(self, key: MetadataKey, target: MetadataSet | MetadataKey) -> None:
        self.set_item(key, ItemType.STRONGREF, StrongRef(_target_uid(target)))

    def set_weakref(self, key: MetadataKey, target: MetadataSet | MetadataKey) -> None:
        self.set_item(key, ItemType.WEAKREF, WeakRef(_target_uid(target)))

    def set_strongref_array(
        self, key: MetadataKey, targets: Iterable[MetadataSet | MetadataKey]
    ) -> None:
        self.set_array(key, [StrongRef(_target_uid(target)) for target in targets])

    def set_array(self, key: MetadataKey, elements: Iterable[ArrayElement]) -> None:
        self.set_item(key, ItemType.ARRAY, tuple(elements))

    def __repr__(self) -> str:
        uid = str(self.instance_uid)
        return f"{self.__class__.__name__}(name={self.name!r}, instance_uid={uid!r})"


def _target_uid(target: MetadataSet | MetadataKey) -> MetadataKey:
    return target.instance_uid if isinstance(target, MetadataSet) else target

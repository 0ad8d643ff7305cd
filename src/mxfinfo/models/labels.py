"""Universal label and UMID models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator, model_serializer

# Octet 7 of a SMPTE universal label carries the registry version
_REGISTRY_VERSION_OCTET = 7


def _parse_hex(value: str) -> bytes:
    """Parse a hex string, ignoring common octet separators."""
    cleaned = value.replace(".", "").replace(" ", "").replace("-", "").replace(":", "")
    return bytes.fromhex(cleaned)


class MetadataKey(BaseModel):
    """16-byte universal label.

    Identifies the type of a metadata set, the role of an item within a set,
    or (as an instance UID) a particular set in the header metadata.
    Equality is byte-exact.
    """

    model_config = ConfigDict(frozen=True)

    octets: bytes

    @field_validator("octets")
    @classmethod
    def validate_length(cls, v: bytes) -> bytes:
        """Labels are exactly 16 bytes."""
        if len(v) != 16:
            raise ValueError(f"MetadataKey requires 16 bytes, got {len(v)}")
        return v

    @classmethod
    def from_hex(cls, value: str) -> MetadataKey:
        """Create a key from hex notation such as ``06.0e.2b.34...``."""
        return cls(octets=_parse_hex(value))

    @classmethod
    def from_bytes(cls, value: bytes) -> MetadataKey:
        return cls(octets=bytes(value))

    def matches(self, other: MetadataKey) -> bool:
        """Compare two labels ignoring the registry version octet."""
        v = _REGISTRY_VERSION_OCTET
        return self.octets[:v] == other.octets[:v] and self.octets[v + 1 :] == other.octets[v + 1 :]

    @model_serializer(when_used="json")
    def serialize_hex(self) -> str:
        return str(self)

    def __str__(self) -> str:
        return ".".join(f"{b:02x}" for b in self.octets)

    def __repr__(self) -> str:
        return f"MetadataKey({str(self)!r})"


class UMID(BaseModel):
    """32-byte unique material identifier of a package."""

    model_config = ConfigDict(frozen=True)

    octets: bytes

    @field_validator("octets")
    @classmethod
    def validate_length(cls, v: bytes) -> bytes:
        """UMIDs are exactly 32 bytes."""
        if len(v) != 32:
            raise ValueError(f"UMID requires 32 bytes, got {len(v)}")
        return v

    @classmethod
    def from_hex(cls, value: str) -> UMID:
        return cls(octets=_parse_hex(value))

    @property
    def is_null(self) -> bool:
        """Check if this is the all-zero "no reference" UMID."""
        return not any(self.octets)

    @model_serializer(when_used="json")
    def serialize_hex(self) -> str:
        return str(self)

    def __str__(self) -> str:
        return self.octets.hex()

    def __repr__(self) -> str:
        return f"UMID({str(self)!r})"


NULL_UMID = UMID(octets=bytes(32))

"""Pydantic models for mxfinfo."""

from .clip import ClipInfo, EssenceType, PhysicalPackageType
from .labels import NULL_UMID, UMID, MetadataKey
from .rational import Rational
from .timestamp import Timestamp

__all__ = [
    # Main model
    "ClipInfo",
    "EssenceType",
    "PhysicalPackageType",
    # Graph values
    "MetadataKey",
    "UMID",
    "NULL_UMID",
    "Rational",
    "Timestamp",
]

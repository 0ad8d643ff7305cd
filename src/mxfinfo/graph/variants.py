"""Classification of raw sets into closed variant families.

The resolvers never compare set keys directly; each set is classified once
here with the data model's subclass predicate, and the resolvers dispatch
on the resulting enum.
"""

from __future__ import annotations

import logging
from enum import Enum

from mxfinfo.models import MetadataKey, PhysicalPackageType

from . import labels
from .header import HeaderMetadata
from .sets import MetadataSet

logger = logging.getLogger(__name__)


class DataKind(str, Enum):
    """Normalised track data definition."""

    PICTURE = "picture"
    SOUND = "sound"
    TIMECODE = "timecode"
    OTHER = "other"


class DescriptorKind(str, Enum):
    """Essence descriptor family."""

    PICTURE = "picture"
    SOUND = "sound"
    UNKNOWN = "unknown"


class ComponentKind(str, Enum):
    """Structural component family."""

    SEQUENCE = "sequence"
    SOURCE_CLIP = "source_clip"
    ESSENCE_GROUP = "essence_group"
    TIMECODE = "timecode"
    UNKNOWN = "unknown"


def _label_kind(label: MetadataKey) -> DataKind:
    if labels.is_picture(label):
        return DataKind.PICTURE
    if labels.is_sound(label):
        return DataKind.SOUND
    if labels.is_timecode(label):
        return DataKind.TIMECODE
    return DataKind.OTHER


def classify_data_def(header: HeaderMetadata, label: MetadataKey) -> DataKind:
    """Classify a track's data definition label.

    Avid files may store a reference to a DataDefinition set instead of the
    label itself; such references are resolved before giving up.
    """
    kind = _label_kind(label)
    if kind is not DataKind.OTHER:
        return kind

    resolved = header.get_data_def(label)
    if resolved is None:
        return DataKind.OTHER
    return _label_kind(resolved)


def classify_descriptor(descriptor: MetadataSet | None) -> DescriptorKind:
    if descriptor is None:
        return DescriptorKind.UNKNOWN
    if descriptor.is_subclass_of(labels.GENERIC_PICTURE_ESSENCE_DESCRIPTOR_SET):
        return DescriptorKind.PICTURE
    if descriptor.is_subclass_of(labels.GENERIC_SOUND_ESSENCE_DESCRIPTOR_SET):
        return DescriptorKind.SOUND
    logger.debug("Unrecognised descriptor type %s", descriptor.name)
    return DescriptorKind.UNKNOWN


def classify_component(component: MetadataSet) -> ComponentKind:
    # SourceClip is tested first; some files use one in place of a Sequence
    if component.is_subclass_of(labels.SOURCE_CLIP_SET):
        return ComponentKind.SOURCE_CLIP
    if component.is_subclass_of(labels.SEQUENCE_SET):
        return ComponentKind.SEQUENCE
    if component.is_subclass_of(labels.ESSENCE_GROUP_SET):
        return ComponentKind.ESSENCE_GROUP
    if component.is_subclass_of(labels.TIMECODE_COMPONENT_SET):
        return ComponentKind.TIMECODE
    return ComponentKind.UNKNOWN


def classify_physical_descriptor(descriptor: MetadataSet) -> PhysicalPackageType | None:
    """Classify a physical descriptor, or None if it is not one."""
    if not descriptor.is_subclass_of(labels.PHYSICAL_DESCRIPTOR_SET):
        return None
    if descriptor.is_subclass_of(labels.TAPE_DESCRIPTOR_SET):
        return PhysicalPackageType.TAPE
    if descriptor.is_subclass_of(labels.IMPORT_DESCRIPTOR_SET):
        return PhysicalPackageType.IMPORT
    if descriptor.is_subclass_of(labels.RECORDING_DESCRIPTOR_SET):
        return PhysicalPackageType.RECORDING
    return PhysicalPackageType.UNKNOWN

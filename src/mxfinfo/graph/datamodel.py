"""Class dictionary for header metadata sets.

The data model records, for every known set type, its name and the set
type it derives from. Vendor extensions subclass standard types, so the
resolvers test set types with :meth:`DataModel.is_subclass_of` rather than
by key equality.
"""

from __future__ import annotations

from dataclasses import dataclass

from mxfinfo.errors import DataModelError
from mxfinfo.models import MetadataKey

from . import labels


@dataclass(frozen=True)
class SetDefinition:
    """A registered set type."""

    name: str
    key: MetadataKey
    parent: MetadataKey | None = None


class DataModel:
    """Set type hierarchy.

    Definitions are registered, then the model is finalised. A finalised
    model is read-only and is shared by every header metadata built on it.
    """

    def __init__(self) -> None:
        self._definitions: dict[MetadataKey, SetDefinition] = {}
        self._finalised = False

    @property
    def is_finalised(self) -> bool:
        return self._finalised

    def register_set(self, name: str, key: MetadataKey, parent: MetadataKey | None = None) -> None:
        """Register a set type.

        Raises:
            DataModelError: If the model is finalised or the key is taken
        """
        if self._finalised:
            raise DataModelError(f"Cannot register {name}: data model is finalised", name=name)
        if key in self._definitions:
            raise DataModelError(
                f"Cannot register {name}: key already used by {self._definitions[key].name}",
                name=name,
            )
        self._definitions[key] = SetDefinition(name=name, key=key, parent=parent)

    def finalise(self) -> None:
        """Check that every parent is registered, then freeze the model.

        Raises:
            DataModelError: If a parent is unknown or the hierarchy has a cycle
        """
        for definition in self._definitions.values():
            seen = {definition.key}
            parent = definition.parent
            while parent is not None:
                parent_def = self._definitions.get(parent)
                if parent_def is None:
                    raise DataModelError(
                        f"Set {definition.name} has unknown parent {parent}",
                        name=definition.name,
                    )
                if parent in seen:
                    raise DataModelError(
                        f"Set {definition.name} has a cyclic hierarchy",
                        name=definition.name,
                    )
                seen.add(parent)
                parent = parent_def.parent
        self._finalised = True

    def is_registered(self, key: MetadataKey) -> bool:
        return key in self._definitions

    def set_name(self, key: MetadataKey) -> str:
        """Return the registered name for a set key, or its hex label."""
        definition = self._definitions.get(key)
        return definition.name if definition else str(key)

    def is_subclass_of(self, candidate: MetadataKey, ancestor: MetadataKey) -> bool:
        """Check if ``candidate`` equals or derives from ``ancestor``.

        Unregistered candidates are never a subclass of anything.
        """
        current = self._definitions.get(candidate)
        while current is not None:
            if current.key == ancestor:
                return True
            if current.parent is None:
                return False
            current = self._definitions.get(current.parent)
        return False

    def __len__(self) -> int:
        return len(self._definitions)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(sets={len(self)}, finalised={self._finalised})"


# (name, key, parent) in registration order; parents come first
BASELINE_SETS: list[tuple[str, MetadataKey, MetadataKey | None]] = [
    ("InterchangeObject", labels.INTERCHANGE_OBJECT_SET, None),
    ("Preface", labels.PREFACE_SET, labels.INTERCHANGE_OBJECT_SET),
    ("Identification", labels.IDENTIFICATION_SET, labels.INTERCHANGE_OBJECT_SET),
    ("ContentStorage", labels.CONTENT_STORAGE_SET, labels.INTERCHANGE_OBJECT_SET),
    ("EssenceContainerData", labels.ESSENCE_CONTAINER_DATA_SET, labels.INTERCHANGE_OBJECT_SET),
    ("GenericPackage", labels.GENERIC_PACKAGE_SET, labels.INTERCHANGE_OBJECT_SET),
    ("MaterialPackage", labels.MATERIAL_PACKAGE_SET, labels.GENERIC_PACKAGE_SET),
    ("SourcePackage", labels.SOURCE_PACKAGE_SET, labels.GENERIC_PACKAGE_SET),
    ("GenericTrack", labels.GENERIC_TRACK_SET, labels.INTERCHANGE_OBJECT_SET),
    ("StaticTrack", labels.STATIC_TRACK_SET, labels.GENERIC_TRACK_SET),
    ("Track", labels.TRACK_SET, labels.GENERIC_TRACK_SET),
    ("EventTrack", labels.EVENT_TRACK_SET, labels.GENERIC_TRACK_SET),
    ("StructuralComponent", labels.STRUCTURAL_COMPONENT_SET, labels.INTERCHANGE_OBJECT_SET),
    ("Sequence", labels.SEQUENCE_SET, labels.STRUCTURAL_COMPONENT_SET),
    ("TimecodeComponent", labels.TIMECODE_COMPONENT_SET, labels.STRUCTURAL_COMPONENT_SET),
    ("SourceClip", labels.SOURCE_CLIP_SET, labels.STRUCTURAL_COMPONENT_SET),
    ("Filler", labels.FILLER_SET, labels.STRUCTURAL_COMPONENT_SET),
    ("GenericDescriptor", labels.GENERIC_DESCRIPTOR_SET, labels.INTERCHANGE_OBJECT_SET),
    ("FileDescriptor", labels.FILE_DESCRIPTOR_SET, labels.GENERIC_DESCRIPTOR_SET),
    (
        "GenericPictureEssenceDescriptor",
        labels.GENERIC_PICTURE_ESSENCE_DESCRIPTOR_SET,
        labels.FILE_DESCRIPTOR_SET,
    ),
    (
        "CDCIEssenceDescriptor",
        labels.CDCI_ESSENCE_DESCRIPTOR_SET,
        labels.GENERIC_PICTURE_ESSENCE_DESCRIPTOR_SET,
    ),
    (
        "RGBAEssenceDescriptor",
        labels.RGBA_ESSENCE_DESCRIPTOR_SET,
        labels.GENERIC_PICTURE_ESSENCE_DESCRIPTOR_SET,
    ),
    (
        "GenericSoundEssenceDescriptor",
        labels.GENERIC_SOUND_ESSENCE_DESCRIPTOR_SET,
        labels.FILE_DESCRIPTOR_SET,
    ),
    (
        "WaveAudioDescriptor",
        labels.WAVE_AUDIO_DESCRIPTOR_SET,
        labels.GENERIC_SOUND_ESSENCE_DESCRIPTOR_SET,
    ),
    (
        "AES3AudioDescriptor",
        labels.AES3_AUDIO_DESCRIPTOR_SET,
        labels.WAVE_AUDIO_DESCRIPTOR_SET,
    ),
    (
        "GenericDataEssenceDescriptor",
        labels.GENERIC_DATA_ESSENCE_DESCRIPTOR_SET,
        labels.FILE_DESCRIPTOR_SET,
    ),
    ("MultipleDescriptor", labels.MULTIPLE_DESCRIPTOR_SET, labels.FILE_DESCRIPTOR_SET),
    ("Locator", labels.LOCATOR_SET, labels.INTERCHANGE_OBJECT_SET),
    ("NetworkLocator", labels.NETWORK_LOCATOR_SET, labels.LOCATOR_SET),
    ("TextLocator", labels.TEXT_LOCATOR_SET, labels.LOCATOR_SET),
]

# Avid extensions (AAF objects carried in Avid MXF header metadata)
AVID_EXTENSION_SETS: list[tuple[str, MetadataKey, MetadataKey | None]] = [
    ("EssenceGroup", labels.ESSENCE_GROUP_SET, labels.STRUCTURAL_COMPONENT_SET),
    ("DefinitionObject", labels.DEFINITION_OBJECT_SET, labels.INTERCHANGE_OBJECT_SET),
    ("DataDefinition", labels.DATA_DEFINITION_SET, labels.DEFINITION_OBJECT_SET),
    ("TaggedValue", labels.TAGGED_VALUE_SET, labels.INTERCHANGE_OBJECT_SET),
    ("PhysicalDescriptor", labels.PHYSICAL_DESCRIPTOR_SET, labels.GENERIC_DESCRIPTOR_SET),
    ("TapeDescriptor", labels.TAPE_DESCRIPTOR_SET, labels.PHYSICAL_DESCRIPTOR_SET),
    ("ImportDescriptor", labels.IMPORT_DESCRIPTOR_SET, labels.PHYSICAL_DESCRIPTOR_SET),
    ("RecordingDescriptor", labels.RECORDING_DESCRIPTOR_SET, labels.PHYSICAL_DESCRIPTOR_SET),
]


def load_data_model(avid_extensions: bool = True) -> DataModel:
    """Build the baseline data model, optionally with the Avid extensions.

    Args:
        avid_extensions: Register the Avid extension sets

    Returns:
        A finalised DataModel
    """
    datamodel = DataModel()
    for name, key, parent in BASELINE_SETS:
        datamodel.register_set(name, key, parent)
    if avid_extensions:
        for name, key, parent in AVID_EXTENSION_SETS:
            datamodel.register_set(name, key, parent)
    datamodel.finalise()
    return datamodel

"""Header metadata: the registry owning every set decoded from one file."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from mxfinfo.errors import AmbiguousSetError, DataModelError, SetNotFoundError, TaggedValueError
from mxfinfo.models import UMID, MetadataKey

from . import labels
from .datamodel import DataModel
from .sets import ItemType, MetadataSet, StrongRef, WeakRef, decode_utf16

logger = logging.getLogger(__name__)

Reference = StrongRef | WeakRef | MetadataKey | bytes


class HeaderMetadata:
    """Arena of metadata sets keyed by instance UID.

    Built once by the metadata decoder and read-only afterwards. References
    between sets are resolved through this registry; a reference to a set
    whose type the data model does not register ("dark" metadata) resolves
    to None, the same as a reference to a missing set.
    """

    def __init__(self, datamodel: DataModel) -> None:
        if not datamodel.is_finalised:
            raise DataModelError("Header metadata requires a finalised data model")
        self.datamodel = datamodel
        self._sets: dict[MetadataKey, MetadataSet] = {}

    def add_set(self, metadata_set: MetadataSet) -> MetadataSet:
        """Attach a set to this header metadata.

        Raises:
            ValueError: If another set already has the same instance UID
        """
        if metadata_set.instance_uid in self._sets:
            raise ValueError(f"Duplicate instance UID {metadata_set.instance_uid}")
        metadata_set.header_metadata = self
        self._sets[metadata_set.instance_uid] = metadata_set
        return metadata_set

    def create_set(self, key: MetadataKey, instance_uid: MetadataKey | None = None) -> MetadataSet:
        """Create an empty set of the given type and attach it."""
        return self.add_set(MetadataSet(key, instance_uid))

    @property
    def sets(self) -> list[MetadataSet]:
        return list(self._sets.values())

    def __iter__(self) -> Iterator[MetadataSet]:
        return iter(self._sets.values())

    def __len__(self) -> int:
        return len(self._sets)

    def is_subclass_of(self, candidate: MetadataKey, ancestor: MetadataKey) -> bool:
        return self.datamodel.is_subclass_of(candidate, ancestor)

    def find_set_by_key(self, key: MetadataKey) -> list[MetadataSet]:
        """Return every set whose type key is exactly ``key``."""
        return [s for s in self._sets.values() if s.key == key]

    def find_sets_of_class(self, key: MetadataKey) -> list[MetadataSet]:
        """Return every set whose type is ``key`` or a subclass of it."""
        return [s for s in self._sets.values() if self.datamodel.is_subclass_of(s.key, key)]

    def find_singular_set_by_key(self, key: MetadataKey) -> MetadataSet:
        """Return the one set of type ``key``.

        Raises:
            SetNotFoundError: If there is no such set
            AmbiguousSetError: If there is more than one
        """
        found = self.find_set_by_key(key)
        name = self.datamodel.set_name(key)
        if not found:
            raise SetNotFoundError(name, key=str(key))
        if len(found) > 1:
            raise AmbiguousSetError(name, len(found), key=str(key))
        return found[0]

    def _resolve(self, ref: Reference) -> MetadataSet | None:
        if isinstance(ref, (StrongRef, WeakRef)):
            uid = ref.target
        elif isinstance(ref, MetadataKey):
            uid = ref
        elif isinstance(ref, (bytes, bytearray)) and len(ref) == 16:
            uid = MetadataKey(octets=bytes(ref))
        else:
            return None

        target = self._sets.get(uid)
        if target is None:
            return None
        if not self.datamodel.is_registered(target.key):
            logger.debug("Skipping dark set %s (type %s)", uid, target.key)
            return None
        return target

    def get_strongref(self, ref: Reference) -> MetadataSet | None:
        """Resolve a strong reference (or raw 16-byte array element)."""
        return self._resolve(ref)

    def get_weakref(self, ref: Reference) -> MetadataSet | None:
        """Resolve a weak reference; a missing target is a normal outcome."""
        return self._resolve(ref)

    # -- package and track utilities ------------------------------------------

    def get_top_file_package(self) -> MetadataSet | None:
        """Return the first source package described by a file descriptor."""
        for package in self.find_sets_of_class(labels.SOURCE_PACKAGE_SET):
            descriptor = package.get_strongref(labels.SOURCE_PACKAGE_DESCRIPTOR)
            if descriptor is not None and descriptor.is_subclass_of(labels.FILE_DESCRIPTOR_SET):
                return package
        return None

    def get_referenced_package(self, package_uid: UMID | None) -> MetadataSet | None:
        """Return the package whose PackageUID is ``package_uid``.

        The null UMID marks the end of a reference chain and never resolves.
        """
        if package_uid is None or package_uid.is_null:
            return None
        for package in self.find_sets_of_class(labels.GENERIC_PACKAGE_SET):
            if package.get_umid(labels.GENERIC_PACKAGE_PACKAGE_UID) == package_uid:
                return package
        return None

    def get_data_def(self, uuid: MetadataKey) -> MetadataKey | None:
        """Resolve an Avid data definition reference to its identification label."""
        definition = self.get_weakref(uuid)
        if definition is None or not definition.is_subclass_of(labels.DATA_DEFINITION_SET):
            return None
        return definition.get_ul(labels.DEFINITION_OBJECT_IDENTIFICATION)

    def iter_package_tracks(self, package: MetadataSet) -> Iterator[MetadataSet]:
        """Iterate the resolvable tracks of a package in array order."""
        for element in package.iter_array(labels.GENERIC_PACKAGE_TRACKS):
            track = self.get_strongref(element)
            if track is None:
                logger.debug("Skipping unresolved track reference in %s", package.name)
                continue
            yield track

    def get_track_datadef(self, track: MetadataSet) -> MetadataKey | None:
        sequence = track.get_strongref(labels.GENERIC_TRACK_SEQUENCE)
        if sequence is None:
            return None
        return sequence.get_ul(labels.STRUCTURAL_COMPONENT_DATA_DEFINITION)

    def get_track_duration(self, track: MetadataSet) -> int | None:
        sequence = track.get_strongref(labels.GENERIC_TRACK_SEQUENCE)
        if sequence is None:
            return None
        return sequence.get_length(labels.STRUCTURAL_COMPONENT_DURATION)

    def get_single_track_component(
        self, track: MetadataSet, class_key: MetadataKey
    ) -> MetadataSet | None:
        """Return the only component of a track if it is a ``class_key``.

        A Sequence must hold exactly one component; any other segment is
        taken as the component itself.
        """
        segment = track.get_strongref(labels.GENERIC_TRACK_SEQUENCE)
        if segment is None:
            return None

        if segment.is_subclass_of(labels.SEQUENCE_SET):
            if segment.get_array_len(labels.SEQUENCE_STRUCTURAL_COMPONENTS) != 1:
                return None
            element = segment.get_array_element(labels.SEQUENCE_STRUCTURAL_COMPONENTS, 0)
            component = self.get_strongref(element) if element is not None else None
        else:
            component = segment

        if component is None or not component.is_subclass_of(class_key):
            return None
        return component

    # -- tagged values --------------------------------------------------------

    def read_string_tagged_values(
        self, metadata_set: MetadataSet, item_key: MetadataKey
    ) -> list[tuple[str, str]] | None:
        """Read the string name/value pairs of a tagged value array.

        Non-string values are skipped.

        Returns:
            List of (name, value) pairs, or None if the item is absent

        Raises:
            TaggedValueError: If a name or string value is not valid UTF-16
        """
        if not metadata_set.has_item(item_key):
            return None

        pairs = []
        for element in metadata_set.iter_array(item_key):
            tagged = self.get_strongref(element)
            if tagged is None or not tagged.is_subclass_of(labels.TAGGED_VALUE_SET):
                continue
            value_item = tagged.get_item(labels.TAGGED_VALUE_VALUE)
            if value_item is None or value_item.type != ItemType.UTF16_STRING:
                continue
            name_item = tagged.get_item(labels.TAGGED_VALUE_NAME)
            if name_item is None or name_item.type != ItemType.UTF16_STRING:
                raise TaggedValueError("Tagged value has no name", set=metadata_set.name)
            try:
                pairs.append((decode_utf16(name_item.value), decode_utf16(value_item.value)))
            except UnicodeDecodeError as e:
                raise TaggedValueError(
                    f"Tagged value is not valid UTF-16: {e}", set=metadata_set.name
                ) from e
        return pairs

    def read_string_mob_attributes(self, package: MetadataSet) -> list[tuple[str, str]] | None:
        """Read the Avid mob attribute list of a package."""
        return self.read_string_tagged_values(package, labels.GENERIC_PACKAGE_MOB_ATTRIBUTE_LIST)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(sets={len(self)})"

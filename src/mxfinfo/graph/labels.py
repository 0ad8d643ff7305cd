"""Set, item and data definition labels used by the resolvers.

Set and item keys follow SMPTE 377M/AAF; the Avid extension items are the
private labels registered by the Avid extension dictionary.
"""

from mxfinfo.models import MetadataKey

_K = MetadataKey.from_hex

_SET_KEY_PREFIX = bytes.fromhex("060e2b34025301010d0101010101")


def _set_key(octet14: int) -> MetadataKey:
    return MetadataKey(octets=_SET_KEY_PREFIX + bytes([octet14, 0x00]))


# -- Set keys -----------------------------------------------------------------

INTERCHANGE_OBJECT_SET = _set_key(0x01)
STRUCTURAL_COMPONENT_SET = _set_key(0x02)
ESSENCE_GROUP_SET = _set_key(0x05)
FILLER_SET = _set_key(0x09)
SEQUENCE_SET = _set_key(0x0F)
SOURCE_CLIP_SET = _set_key(0x11)
TIMECODE_COMPONENT_SET = _set_key(0x14)
CONTENT_STORAGE_SET = _set_key(0x18)
DEFINITION_OBJECT_SET = _set_key(0x1A)
DATA_DEFINITION_SET = _set_key(0x1B)
ESSENCE_CONTAINER_DATA_SET = _set_key(0x23)
GENERIC_DESCRIPTOR_SET = _set_key(0x24)
FILE_DESCRIPTOR_SET = _set_key(0x25)
GENERIC_PICTURE_ESSENCE_DESCRIPTOR_SET = _set_key(0x27)
CDCI_ESSENCE_DESCRIPTOR_SET = _set_key(0x28)
RGBA_ESSENCE_DESCRIPTOR_SET = _set_key(0x29)
TAPE_DESCRIPTOR_SET = _set_key(0x2E)
PREFACE_SET = _set_key(0x2F)
IDENTIFICATION_SET = _set_key(0x30)
LOCATOR_SET = _set_key(0x31)
NETWORK_LOCATOR_SET = _set_key(0x32)
TEXT_LOCATOR_SET = _set_key(0x33)
GENERIC_PACKAGE_SET = _set_key(0x34)
MATERIAL_PACKAGE_SET = _set_key(0x36)
SOURCE_PACKAGE_SET = _set_key(0x37)
GENERIC_TRACK_SET = _set_key(0x38)
EVENT_TRACK_SET = _set_key(0x39)
STATIC_TRACK_SET = _set_key(0x3A)
TRACK_SET = _set_key(0x3B)
TAGGED_VALUE_SET = _set_key(0x3F)
GENERIC_SOUND_ESSENCE_DESCRIPTOR_SET = _set_key(0x42)
GENERIC_DATA_ESSENCE_DESCRIPTOR_SET = _set_key(0x43)
MULTIPLE_DESCRIPTOR_SET = _set_key(0x44)
AES3_AUDIO_DESCRIPTOR_SET = _set_key(0x47)
WAVE_AUDIO_DESCRIPTOR_SET = _set_key(0x48)
PHYSICAL_DESCRIPTOR_SET = _set_key(0x49)
IMPORT_DESCRIPTOR_SET = _set_key(0x4A)
RECORDING_DESCRIPTOR_SET = _set_key(0x4B)

# -- Item keys ----------------------------------------------------------------

# Preface (Avid extension items)
PREFACE_PROJECT_NAME = _K("a5.fb.7b.25.f6.15.94.b9.62.fc.37.17.eb.d3.ad.e3")
PREFACE_PROJECT_EDIT_RATE = _K("8b.4e.be.e3.9c.a8.11.d3.8d.9b.00.60.97.10.bc.93")

# GenericPackage
GENERIC_PACKAGE_PACKAGE_UID = _K("06.0e.2b.34.01.01.01.01.01.01.15.10.00.00.00.00")
GENERIC_PACKAGE_NAME = _K("06.0e.2b.34.01.01.01.01.01.03.03.02.01.00.00.00")
GENERIC_PACKAGE_PACKAGE_CREATION_DATE = _K("06.0e.2b.34.01.01.01.02.07.02.01.10.01.03.00.00")
GENERIC_PACKAGE_TRACKS = _K("06.0e.2b.34.01.01.01.02.06.01.01.04.06.05.00.00")
GENERIC_PACKAGE_USER_COMMENTS = _K("06.0e.2b.34.01.01.01.02.03.02.01.02.0c.00.00.00")
GENERIC_PACKAGE_MOB_ATTRIBUTE_LIST = _K("a0.1c.00.04.ac.96.9f.50.60.95.81.8b.a5.df.62.29")

# SourcePackage
SOURCE_PACKAGE_DESCRIPTOR = _K("06.0e.2b.34.01.01.01.02.06.01.01.04.02.03.00.00")

# GenericTrack / Track
GENERIC_TRACK_TRACK_ID = _K("06.0e.2b.34.01.01.01.02.01.07.01.01.00.00.00.00")
GENERIC_TRACK_TRACK_NUMBER = _K("06.0e.2b.34.01.01.01.02.01.04.01.03.00.00.00.00")
GENERIC_TRACK_SEQUENCE = _K("06.0e.2b.34.01.01.01.02.06.01.01.04.02.04.00.00")
TRACK_EDIT_RATE = _K("06.0e.2b.34.01.01.01.02.05.30.04.05.00.00.00.00")

# StructuralComponent
STRUCTURAL_COMPONENT_DATA_DEFINITION = _K("06.0e.2b.34.01.01.01.02.04.07.01.00.00.00.00.00")
STRUCTURAL_COMPONENT_DURATION = _K("06.0e.2b.34.01.01.01.02.07.02.02.01.01.03.00.00")

# Sequence
SEQUENCE_STRUCTURAL_COMPONENTS = _K("06.0e.2b.34.01.01.01.02.06.01.01.04.06.09.00.00")

# SourceClip
SOURCE_CLIP_START_POSITION = _K("06.0e.2b.34.01.01.01.02.07.02.01.03.01.04.00.00")
SOURCE_CLIP_SOURCE_PACKAGE_ID = _K("06.0e.2b.34.01.01.01.02.06.01.01.03.01.00.00.00")

# EssenceGroup
ESSENCE_GROUP_CHOICES = _K("06.0e.2b.34.01.01.01.02.06.01.01.04.06.0c.00.00")

# TimecodeComponent
TIMECODE_COMPONENT_ROUNDED_TIMECODE_BASE = _K("06.0e.2b.34.01.01.01.02.04.04.01.01.02.06.00.00")
TIMECODE_COMPONENT_START_TIMECODE = _K("06.0e.2b.34.01.01.01.02.07.02.01.03.01.05.00.00")
TIMECODE_COMPONENT_DROP_FRAME = _K("06.0e.2b.34.01.01.01.01.04.04.01.01.05.00.00.00")

# DefinitionObject
DEFINITION_OBJECT_IDENTIFICATION = _K("06.0e.2b.34.01.01.01.02.01.01.15.03.00.00.00.00")

# TaggedValue
TAGGED_VALUE_NAME = _K("06.0e.2b.34.01.01.01.02.03.02.01.02.09.01.00.00")
TAGGED_VALUE_VALUE = _K("06.0e.2b.34.01.01.01.02.03.02.01.02.0a.01.00.00")

# GenericDescriptor / FileDescriptor
GENERIC_DESCRIPTOR_LOCATORS = _K("06.0e.2b.34.01.01.01.02.06.01.01.04.06.03.00.00")

# GenericPictureEssenceDescriptor
PICTURE_DESCRIPTOR_FRAME_LAYOUT = _K("06.0e.2b.34.01.01.01.01.04.01.03.01.04.00.00.00")
PICTURE_DESCRIPTOR_STORED_WIDTH = _K("06.0e.2b.34.01.01.01.01.04.01.05.02.02.00.00.00")
PICTURE_DESCRIPTOR_STORED_HEIGHT = _K("06.0e.2b.34.01.01.01.01.04.01.05.02.01.00.00.00")
PICTURE_DESCRIPTOR_DISPLAY_WIDTH = _K("06.0e.2b.34.01.01.01.01.04.01.05.01.0c.00.00.00")
PICTURE_DESCRIPTOR_DISPLAY_HEIGHT = _K("06.0e.2b.34.01.01.01.01.04.01.05.01.08.00.00.00")
PICTURE_DESCRIPTOR_ASPECT_RATIO = _K("06.0e.2b.34.01.01.01.01.04.01.01.01.01.00.00.00")
PICTURE_DESCRIPTOR_PICTURE_ESSENCE_CODING = _K("06.0e.2b.34.01.01.01.02.04.01.06.01.00.00.00.00")
PICTURE_DESCRIPTOR_RESOLUTION_ID = _K("a0.24.00.60.94.eb.75.cb.ce.2a.ca.4d.51.ab.11.d3")

# GenericSoundEssenceDescriptor
SOUND_DESCRIPTOR_AUDIO_SAMPLING_RATE = _K("06.0e.2b.34.01.01.01.05.04.02.03.01.01.01.00.00")
SOUND_DESCRIPTOR_CHANNEL_COUNT = _K("06.0e.2b.34.01.01.01.05.04.02.01.01.04.00.00.00")
SOUND_DESCRIPTOR_QUANTIZATION_BITS = _K("06.0e.2b.34.01.01.01.04.04.02.03.03.04.00.00.00")

# NetworkLocator
NETWORK_LOCATOR_URL_STRING = _K("06.0e.2b.34.01.01.01.01.01.02.01.01.00.00.00.00")

# -- Data definitions ---------------------------------------------------------

PICTURE_DATA_DEF = _K("06.0e.2b.34.04.01.01.01.01.03.02.02.01.00.00.00")
SOUND_DATA_DEF = _K("06.0e.2b.34.04.01.01.01.01.03.02.02.02.00.00.00")
TIMECODE_DATA_DEF = _K("06.0e.2b.34.04.01.01.01.01.03.02.01.01.00.00.00")

# AAF data definition AUIDs written by older Avid software
LEGACY_PICTURE_DATA_DEF = _K("80.7d.00.60.08.14.3e.6f.6f.3c.8c.e1.6c.ef.11.d2")
LEGACY_SOUND_DATA_DEF = _K("80.7d.00.60.08.14.3e.6f.78.e1.eb.e1.6c.ef.11.d2")
LEGACY_TIMECODE_DATA_DEF = _K("80.7f.00.60.08.14.3e.6f.7f.27.5e.81.77.e5.11.d2")


def is_picture(label: MetadataKey) -> bool:
    """Check if a data definition label denotes picture essence."""
    return label.matches(PICTURE_DATA_DEF) or label == LEGACY_PICTURE_DATA_DEF


def is_sound(label: MetadataKey) -> bool:
    """Check if a data definition label denotes sound essence."""
    return label.matches(SOUND_DATA_DEF) or label == LEGACY_SOUND_DATA_DEF


def is_timecode(label: MetadataKey) -> bool:
    """Check if a data definition label denotes timecode."""
    return label.matches(TIMECODE_DATA_DEF) or label == LEGACY_TIMECODE_DATA_DEF

"""Essence type classification tables.

Maps essence container labels, picture coding labels and Avid resolution
ids onto :class:`EssenceType`. The tables cover the common Avid OP-Atom
formats only; anything else is reported as ``EssenceType.UNKNOWN``.
"""

from __future__ import annotations

from mxfinfo.graph import DescriptorKind
from mxfinfo.models import EssenceType, MetadataKey

_K = MetadataKey.from_hex

# Label octets compared by prefix; octet 7 (registry version) is ignored
D10_CONTAINER_PREFIX = _K("06.0e.2b.34.04.01.01.01.0d.01.03.01.02.01.00.00")
DV_CONTAINER_PREFIX = _K("06.0e.2b.34.04.01.01.01.0d.01.03.01.02.02.00.00")
AVCI_CODING_PREFIX = _K("06.0e.2b.34.04.01.01.0a.04.01.02.02.01.32.00.00")

# D-10 container octet 14 -> bit rate
D10_TYPES: dict[int, EssenceType] = {
    0x01: EssenceType.MPEG_50,
    0x02: EssenceType.MPEG_50,
    0x03: EssenceType.MPEG_40,
    0x04: EssenceType.MPEG_40,
    0x05: EssenceType.MPEG_30,
    0x06: EssenceType.MPEG_30,
}

# DV container octet 14 -> variant
DV_TYPES: dict[int, EssenceType] = {
    0x01: EssenceType.DV25_411,  # IEC 525/60
    0x02: EssenceType.DV25_420,  # IEC 625/50
    0x40: EssenceType.DV25_411,
    0x41: EssenceType.DV25_411,
    0x50: EssenceType.DV50,
    0x51: EssenceType.DV50,
    0x60: EssenceType.DV100,
    0x61: EssenceType.DV100,
    0x62: EssenceType.DV100,
    0x63: EssenceType.DV100,
}

# AVC-Intra coding octet 14 high nibble -> class
AVCI_TYPES: dict[int, EssenceType] = {
    0x2: EssenceType.AVCINTRA_50,
    0x3: EssenceType.AVCINTRA_100,
}

XDCAM_HD_CODING_LABELS: list[MetadataKey] = [
    _K("06.0e.2b.34.04.01.01.03.04.01.02.02.01.04.03.00"),  # MPEG-2 422P@HL long GOP
    _K("06.0e.2b.34.04.01.01.03.04.01.02.02.01.03.03.00"),  # MPEG-2 MP@HL long GOP
]

RESOLUTION_ID_TYPES: dict[int, EssenceType] = {
    0xAA: EssenceType.UNC_1_1,
    0x07E6: EssenceType.UNC_1_1_10B,
    1235: EssenceType.DNXHD_1235,
    1237: EssenceType.DNXHD_1237,
    1238: EssenceType.DNXHD_1238,
    1241: EssenceType.DNXHD_1241,
    1242: EssenceType.DNXHD_1242,
    1243: EssenceType.DNXHD_1243,
    1250: EssenceType.DNXHD_1250,
    1251: EssenceType.DNXHD_1251,
    1252: EssenceType.DNXHD_1252,
    1253: EssenceType.DNXHD_1253,
}


def _has_prefix(label: MetadataKey, prefix: MetadataKey, length: int = 14) -> bool:
    a, b = label.octets, prefix.octets
    return a[:7] == b[:7] and a[8:length] == b[8:length]


def classify_essence_type(
    essence_container_label: MetadataKey | None,
    picture_coding_label: MetadataKey | None,
    avid_resolution_id: int | None,
    descriptor_kind: DescriptorKind,
) -> EssenceType:
    """Classify a clip's essence type.

    Args:
        essence_container_label: First essence container label of the partition
        picture_coding_label: Picture essence coding label of the descriptor
        avid_resolution_id: Avid resolution id of the descriptor
        descriptor_kind: Classified file descriptor

    Returns:
        Matching EssenceType, or EssenceType.UNKNOWN
    """
    if descriptor_kind is DescriptorKind.SOUND:
        return EssenceType.PCM
    if descriptor_kind is not DescriptorKind.PICTURE:
        return EssenceType.UNKNOWN

    if essence_container_label is not None:
        octet14 = essence_container_label.octets[14]
        if _has_prefix(essence_container_label, D10_CONTAINER_PREFIX) and octet14 in D10_TYPES:
            return D10_TYPES[octet14]
        if _has_prefix(essence_container_label, DV_CONTAINER_PREFIX) and octet14 in DV_TYPES:
            return DV_TYPES[octet14]

    if picture_coding_label is not None:
        if _has_prefix(picture_coding_label, AVCI_CODING_PREFIX):
            avci_class = AVCI_TYPES.get(picture_coding_label.octets[14] >> 4)
            if avci_class is not None:
                return avci_class
        if any(picture_coding_label.matches(label) for label in XDCAM_HD_CODING_LABELS):
            return EssenceType.XDCAM_HD

    if avid_resolution_id is not None:
        return RESOLUTION_ID_TYPES.get(avid_resolution_id, EssenceType.UNKNOWN)
    return EssenceType.UNKNOWN

"""Essence descriptor resolver."""

from __future__ import annotations

from mxfinfo.essence import classify_essence_type
from mxfinfo.graph import DescriptorKind, classify_descriptor, labels
from mxfinfo.resolvers.base import BaseResolver, ResolutionContext


class DescriptorResolver(BaseResolver):
    """Read picture or sound format details from the file descriptor."""

    name = "descriptor"
    priority = 20

    def resolve(self, context: ResolutionContext) -> None:
        file_package = context.require("file_source_package")
        descriptor = file_package.get_strongref(labels.SOURCE_PACKAGE_DESCRIPTOR)
        kind = classify_descriptor(descriptor)
        context.descriptor = descriptor
        context.descriptor_kind = kind
        values = context.values

        if descriptor is not None and kind is DescriptorKind.PICTURE:
            values["aspect_ratio"] = descriptor.get_rational(labels.PICTURE_DESCRIPTOR_ASPECT_RATIO)
            values["frame_layout"] = descriptor.get_uint8(labels.PICTURE_DESCRIPTOR_FRAME_LAYOUT)
            values["stored_width"] = descriptor.get_uint32(labels.PICTURE_DESCRIPTOR_STORED_WIDTH)
            values["stored_height"] = descriptor.get_uint32(labels.PICTURE_DESCRIPTOR_STORED_HEIGHT)
            values["display_width"] = descriptor.get_uint32(labels.PICTURE_DESCRIPTOR_DISPLAY_WIDTH)
            values["display_height"] = descriptor.get_uint32(
                labels.PICTURE_DESCRIPTOR_DISPLAY_HEIGHT
            )
            values["avid_resolution_id"] = descriptor.get_int32(
                labels.PICTURE_DESCRIPTOR_RESOLUTION_ID
            )
            values["picture_coding_label"] = descriptor.get_ul(
                labels.PICTURE_DESCRIPTOR_PICTURE_ESSENCE_CODING
            )
        elif descriptor is not None and kind is DescriptorKind.SOUND:
            values["audio_sampling_rate"] = descriptor.get_rational(
                labels.SOUND_DESCRIPTOR_AUDIO_SAMPLING_RATE
            )
            values["quantization_bits"] = descriptor.get_uint32(
                labels.SOUND_DESCRIPTOR_QUANTIZATION_BITS
            )
            values["channel_count"] = descriptor.get_uint32(labels.SOUND_DESCRIPTOR_CHANNEL_COUNT)

        values["essence_type"] = classify_essence_type(
            values.get("essence_container_label"),
            values.get("picture_coding_label"),
            values.get("avid_resolution_id"),
            kind,
        )

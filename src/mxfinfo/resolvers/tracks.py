"""Material package track and segment resolver."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from mxfinfo.errors import MissingItemError
from mxfinfo.graph import (
    ComponentKind,
    DataKind,
    HeaderMetadata,
    MetadataSet,
    classify_component,
    classify_data_def,
    labels,
)
from mxfinfo.models import UMID
from mxfinfo.resolvers.base import BaseResolver, ResolutionContext
from mxfinfo.timing import compare_length, convert_length

logger = logging.getLogger(__name__)


@dataclass
class SegmentMatch:
    """Segment of a material track that references the file source package."""

    duration: int | None
    offset: int


def format_tracks_string(video_numbers: list[int], audio_numbers: list[int]) -> str | None:
    """Format track numbers the way Avid lists them, e.g. ``V1 A1-2``.

    Returns:
        The tracks string, or None if there are no tracks
    """
    parts = []
    for prefix, numbers in (("V", video_numbers), ("A", audio_numbers)):
        if numbers:
            parts.append(prefix + _compress_ranges(sorted(set(numbers))))
    return " ".join(parts) if parts else None


def _compress_ranges(numbers: list[int]) -> str:
    ranges = []
    start = prev = numbers[0]
    for number in numbers[1:]:
        if number != prev + 1:
            ranges.append((start, prev))
            start = number
        prev = number
    ranges.append((start, prev))
    return ",".join(str(a) if a == b else f"{a}-{b}" for a, b in ranges)


def find_segment(
    header: HeaderMetadata, track: MetadataSet, package_uid: UMID
) -> SegmentMatch | None:
    """Find the segment of a track that references ``package_uid``.

    The track's segment is either a single SourceClip or a Sequence of
    components; in a Sequence, EssenceGroup choices are searched too.

    Returns:
        The matching segment's duration and offset, or None
    """
    segment = track.get_strongref(labels.GENERIC_TRACK_SEQUENCE)
    if segment is None:
        return None

    kind = classify_component(segment)
    if kind is ComponentKind.SOURCE_CLIP:
        if segment.get_umid(labels.SOURCE_CLIP_SOURCE_PACKAGE_ID) == package_uid:
            return SegmentMatch(
                duration=segment.get_length(labels.STRUCTURAL_COMPONENT_DURATION), offset=0
            )
        return None
    if kind is not ComponentKind.SEQUENCE:
        return None

    offset = 0
    for element in segment.iter_array(labels.SEQUENCE_STRUCTURAL_COMPONENTS):
        component = header.get_strongref(element)
        if component is None:
            logger.debug("Skipping unresolved component in track sequence")
            continue

        duration = component.get_length(labels.STRUCTURAL_COMPONENT_DURATION)
        component_kind = classify_component(component)
        if component_kind is ComponentKind.ESSENCE_GROUP:
            choice = _find_choice(header, component, package_uid)
            if choice is not None:
                if duration is None:
                    duration = choice.get_length(labels.STRUCTURAL_COMPONENT_DURATION)
                return SegmentMatch(duration=duration, offset=offset)
        elif component_kind is ComponentKind.SOURCE_CLIP:
            if component.get_umid(labels.SOURCE_CLIP_SOURCE_PACKAGE_ID) == package_uid:
                return SegmentMatch(duration=duration, offset=offset)

        offset += duration or 0
    return None


def _find_choice(
    header: HeaderMetadata, essence_group: MetadataSet, package_uid: UMID
) -> MetadataSet | None:
    for element in essence_group.iter_array(labels.ESSENCE_GROUP_CHOICES):
        choice = header.get_strongref(element)
        if choice is None or classify_component(choice) is not ComponentKind.SOURCE_CLIP:
            continue
        if choice.get_umid(labels.SOURCE_CLIP_SOURCE_PACKAGE_ID) == package_uid:
            return choice
    return None


class TrackResolver(BaseResolver):
    """Count tracks, pick the clip's track and compute the clip duration.

    The clip duration is the longest picture or sound track, converted into
    the project edit rate. The clip's own track is the one whose segment
    references the file source package; if several do, the last one wins.
    """

    name = "tracks"
    priority = 40

    def resolve(self, context: ResolutionContext) -> None:
        header = context.header
        values = context.values
        material_package = context.require("material_package")
        file_package_uid = values["file_source_package_uid"]

        max_edit_rate = context.config.resolver.default_edit_rate_value
        max_duration = 0
        video_numbers: list[int] = []
        audio_numbers: list[int] = []

        for track in header.iter_package_tracks(material_package):
            datadef = header.get_track_datadef(track)
            if datadef is None:
                raise MissingItemError(
                    "Track.DataDefinition",
                    track_id=track.get_uint32(labels.GENERIC_TRACK_TRACK_ID),
                )
            kind = classify_data_def(header, datadef)
            if kind not in (DataKind.PICTURE, DataKind.SOUND):
                logger.debug("Skipping %s track %s", kind.value, datadef)
                continue

            is_picture = kind is DataKind.PICTURE
            track_number = track.get_uint32(labels.GENERIC_TRACK_TRACK_NUMBER) or 0
            (video_numbers if is_picture else audio_numbers).append(track_number)

            edit_rate = track.get_rational(labels.TRACK_EDIT_RATE)
            if edit_rate is not None and not edit_rate.is_positive:
                logger.debug("Ignoring edit rate %s of track %d", edit_rate, track_number)
                edit_rate = None
            duration = header.get_track_duration(track)
            if duration is None:
                raise MissingItemError("Track.Duration", track_number=track_number)

            if edit_rate is not None:
                if is_picture and values.get("project_edit_rate") is None:
                    values["project_edit_rate"] = edit_rate
                if compare_length(max_edit_rate, max_duration, edit_rate, duration) <= 0:
                    max_edit_rate = edit_rate
                    max_duration = duration

            match = find_segment(header, track, file_package_uid)
            if match is not None:
                values["is_video"] = is_picture
                values["edit_rate"] = edit_rate
                values["track_duration"] = duration
                values["track_number"] = track_number
                values["segment_duration"] = match.duration
                values["segment_offset"] = match.offset

        values["num_video_tracks"] = len(video_numbers)
        values["num_audio_tracks"] = len(audio_numbers)
        values["tracks_string"] = format_tracks_string(video_numbers, audio_numbers)

        project_edit_rate = values.get("project_edit_rate")
        if project_edit_rate is not None:
            values["clip_duration"] = convert_length(project_edit_rate, max_edit_rate, max_duration)

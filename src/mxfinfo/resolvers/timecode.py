"""Start timecode resolver."""

from __future__ import annotations

import logging

from mxfinfo.errors import EditRateError, MissingItemError
from mxfinfo.graph import DataKind, HeaderMetadata, MetadataSet, classify_data_def, labels
from mxfinfo.models import Rational
from mxfinfo.resolvers.base import BaseResolver, ResolutionContext
from mxfinfo.timing import convert_length, round_rate

logger = logging.getLogger(__name__)


def apply_timecode_offset(
    position: int, start_timecode: int, timecode_base: int, package_edit_rate: Rational
) -> int:
    """Add a timecode component's start to a source clip position.

    The timecode counts at ``timecode_base`` frames per second while the
    position counts at the package edit rate. Field-rate packages (twice
    the timecode base) add the start twice; other mismatches are left
    uncorrected.
    """
    rate = round_rate(package_edit_rate)
    if rate == timecode_base:
        return position + start_timecode
    if rate == 2 * timecode_base:
        return position + 2 * start_timecode
    logger.debug(
        "Timecode base %d does not match edit rate %s, start not applied",
        timecode_base,
        package_edit_rate,
    )
    return position


class TimecodeResolver(BaseResolver):
    """Follow the file source package to its physical source timecode.

    Each picture or sound track of the file source package is followed
    through its single SourceClip to the referenced package. The first
    Timecode track found there gives the clip's start timecode, expressed
    in the clip edit rate.
    """

    name = "timecode"
    priority = 50

    def resolve(self, context: ResolutionContext) -> None:
        header = context.header
        file_package = context.require("file_source_package")

        for track in header.iter_package_tracks(file_package):
            datadef = header.get_track_datadef(track)
            if datadef is None:
                raise MissingItemError("Track.DataDefinition", package="file SourcePackage")
            if classify_data_def(header, datadef) not in (DataKind.PICTURE, DataKind.SOUND):
                continue

            source_clip = header.get_single_track_component(track, labels.SOURCE_CLIP_SET)
            if source_clip is None:
                continue

            position = source_clip.get_position(labels.SOURCE_CLIP_START_POSITION)
            if position is None:
                raise MissingItemError("SourceClip.StartPosition")
            source_uid = source_clip.get_umid(labels.SOURCE_CLIP_SOURCE_PACKAGE_ID)
            if source_uid is None:
                raise MissingItemError("SourceClip.SourcePackageID")

            ref_package = header.get_referenced_package(source_uid)
            if ref_package is None:
                continue

            start_timecode = self._resolve_in_package(
                context, ref_package, track.get_rational(labels.TRACK_EDIT_RATE), position
            )
            if start_timecode is not None:
                context.values["start_timecode"] = start_timecode
                return

    def _resolve_in_package(
        self,
        context: ResolutionContext,
        package: MetadataSet,
        package_edit_rate: Rational | None,
        position: int,
    ) -> int | None:
        header: HeaderMetadata = context.header

        for track in header.iter_package_tracks(package):
            datadef = header.get_track_datadef(track)
            if datadef is None:
                raise MissingItemError("Track.DataDefinition", package="referenced package")
            if classify_data_def(header, datadef) is not DataKind.TIMECODE:
                continue

            component = header.get_single_track_component(track, labels.TIMECODE_COMPONENT_SET)
            if component is None:
                continue

            start_timecode = component.get_position(labels.TIMECODE_COMPONENT_START_TIMECODE)
            if start_timecode is None:
                raise MissingItemError("TimecodeComponent.StartTimecode")
            timecode_base = component.get_uint16(labels.TIMECODE_COMPONENT_ROUNDED_TIMECODE_BASE)
            if timecode_base is None:
                raise MissingItemError("TimecodeComponent.RoundedTimecodeBase")

            clip_edit_rate = context.values.get("edit_rate")
            if clip_edit_rate is None or not clip_edit_rate.is_positive:
                raise EditRateError("clip edit rate")
            if package_edit_rate is None or not package_edit_rate.is_positive:
                raise EditRateError("package edit rate")

            position = apply_timecode_offset(
                position, start_timecode, timecode_base, package_edit_rate
            )
            return convert_length(clip_edit_rate, package_edit_rate, position)

        return None

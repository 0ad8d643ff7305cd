"""Core resolution function."""

from __future__ import annotations

import logging

from mxfinfo.config import MXFInfoConfig, get_config
from mxfinfo.graph import HeaderMetadata, Partition
from mxfinfo.models import ClipInfo
from mxfinfo.resolvers import ResolutionContext, get_resolvers

logger = logging.getLogger(__name__)


def resolve_clip(
    header: HeaderMetadata,
    partition: Partition,
    config: MXFInfoConfig | None = None,
) -> ClipInfo:
    """Resolve the clip described by an Avid OP-Atom header metadata graph.

    This is the main entry point. It:
    1. Reads the Preface, material package and file source package
    2. Reads the essence descriptor and classifies the essence type
    3. Finds the physical source package, if any
    4. Counts tracks and selects the clip's track and duration
    5. Follows the source references to the start timecode
    6. Returns an immutable ClipInfo

    The graph is only read, never modified.

    Args:
        header: Header metadata built by the metadata decoder
        partition: Header partition pack
        config: Configuration (default: the global configuration)

    Returns:
        ClipInfo describing the clip

    Raises:
        MXFInfoError: If a required set or item is missing
    """
    context = ResolutionContext(
        header=header,
        partition=partition,
        config=config or get_config(),
    )

    for resolver in get_resolvers():
        logger.debug("Running %s resolver", resolver.name)
        resolver.resolve(context)

    clip = ClipInfo.model_validate(context.values)
    logger.info(
        "Resolved clip %r: %d video, %d audio tracks, duration %s",
        clip.clip_name,
        clip.num_video_tracks,
        clip.num_audio_tracks,
        clip.clip_duration,
    )
    return clip

"""JSON output formatter.

Labels are written as dotted hex, UMIDs as plain hex and rationals as
``{"numerator": n, "denominator": d}`` objects. The derived clip duration
in seconds and the start timecode string are emitted next to the stored
fields.
"""

import json
from collections.abc import Iterable
from typing import Any

from mxfinfo.models import ClipInfo

DERIVED_FIELDS = ("clip_duration_seconds", "start_timecode_string")


def to_dict(
    clip: ClipInfo,
    fields: Iterable[str] | None = None,
    include_unset: bool = True,
) -> dict[str, Any]:
    """Convert a clip to a JSON-compatible dictionary.

    Args:
        clip: ClipInfo object
        fields: Names of the stored or derived fields to keep (default: all)
        include_unset: Keep fields whose value is None

    Returns:
        Dictionary representation
    """
    wanted = set(fields) if fields is not None else None
    data = clip.model_dump(mode="json", include=wanted, exclude_none=not include_unset)
    for name in DERIVED_FIELDS:
        if wanted is not None and name not in wanted:
            continue
        value = getattr(clip, name)
        if value is not None or include_unset:
            data[name] = value
    return data


def format_json(clip: ClipInfo, indent: int = 2, include_unset: bool = True) -> str:
    """Format a clip as a JSON object."""
    data = to_dict(clip, include_unset=include_unset)
    return json.dumps(data, indent=indent, ensure_ascii=False)


def format_json_list(clips: list[ClipInfo], indent: int = 2, include_unset: bool = True) -> str:
    """Format several clips as a JSON array."""
    data = [to_dict(c, include_unset=include_unset) for c in clips]
    return json.dumps(data, indent=indent, ensure_ascii=False)

"""Quiet output formatter - one-line summary."""

from mxfinfo.models import ClipInfo


def format_quiet(clip: ClipInfo) -> str:
    """Format a clip as one-line summary.

    Format: clip name | project | tracks | duration | format | essence type
    """
    parts = []

    parts.append(clip.clip_name or "N/A")
    parts.append(clip.project_name or "N/A")
    parts.append(clip.tracks_string or "no tracks")

    # Duration in project edit units
    if clip.clip_duration is not None and clip.project_edit_rate:
        parts.append(f"{clip.clip_duration}@{clip.project_edit_rate}")
    else:
        parts.append("N/A")

    # Picture size or sound format
    if clip.stored_width and clip.stored_height:
        parts.append(f"{clip.stored_width}x{clip.stored_height}")
    elif clip.audio_sampling_rate:
        parts.append(f"{clip.audio_sampling_rate.to_float():g}Hz")
    else:
        parts.append("N/A")

    parts.append(clip.essence_type.value)

    return " | ".join(parts)


def format_quiet_list(clips: list[ClipInfo]) -> str:
    """Format multiple clips as one-line summaries.

    Args:
        clips: List of ClipInfo objects

    Returns:
        Multiple lines, one per clip
    """
    return "\n".join(format_quiet(c) for c in clips)

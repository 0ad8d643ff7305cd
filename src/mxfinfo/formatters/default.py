"""Default output formatter - sectioned clip summary."""

from mxfinfo.models import ClipInfo


def _duration_string(clip: ClipInfo) -> str:
    seconds = clip.clip_duration_seconds
    if seconds is None:
        return "N/A"
    minutes, secs = divmod(seconds, 60)
    return f"{clip.clip_duration} ({int(minutes):02d}:{secs:06.3f})"


def format_default(clip: ClipInfo) -> str:
    """Format a clip as the default multi-section report.

    Sections:
    - Clip identity (project, name, creation time, packages)
    - Track layout and timing
    - Essence format (picture or sound)
    - Physical source (if any)
    """
    lines = []

    lines.append("=" * 70)
    lines.append(f"Clip: {clip.clip_name or 'N/A'}")
    lines.append("=" * 70)

    lines.append("")
    lines.append("## CLIP")
    lines.append(f"  Project:      {clip.project_name or 'N/A'}")
    if clip.project_edit_rate:
        lines.append(f"  Project rate: {clip.project_edit_rate}")
    if clip.clip_created:
        lines.append(f"  Created:      {clip.clip_created}")
    if clip.material_package_uid:
        lines.append(f"  Material:     {clip.material_package_uid}")
    if clip.file_source_package_uid:
        lines.append(f"  File source:  {clip.file_source_package_uid}")

    lines.append("")
    lines.append("## TRACKS")
    lines.append(f"  Tracks:       {clip.tracks_string or 'none'}")
    lines.append(f"  Video/Audio:  {clip.num_video_tracks}/{clip.num_audio_tracks}")
    if clip.track_number is not None:
        kind = "V" if clip.is_video else "A"
        lines.append(f"  This track:   {kind}{clip.track_number}")
    if clip.edit_rate:
        lines.append(f"  Edit rate:    {clip.edit_rate}")
    lines.append(f"  Duration:     {_duration_string(clip)}")
    if clip.start_timecode is not None:
        timecode = clip.start_timecode_string or str(clip.start_timecode)
        lines.append(f"  Start TC:     {timecode}")

    lines.append("")
    lines.append("## FORMAT")
    lines.append(f"  Essence:      {clip.essence_type.value}")
    if clip.stored_width and clip.stored_height:
        lines.append(f"  Stored:       {clip.stored_width}x{clip.stored_height}")
    if clip.display_width and clip.display_height:
        lines.append(f"  Display:      {clip.display_width}x{clip.display_height}")
    if clip.aspect_ratio:
        lines.append(f"  Aspect:       {clip.aspect_ratio}")
    if clip.avid_resolution_id is not None:
        lines.append(f"  Resolution:   {clip.avid_resolution_id}")
    if clip.audio_sampling_rate:
        lines.append(f"  Sample rate:  {clip.audio_sampling_rate}")
    if clip.quantization_bits:
        lines.append(f"  Bits:         {clip.quantization_bits}")
    if clip.channel_count:
        lines.append(f"  Channels:     {clip.channel_count}")
    if clip.essence_container_label:
        lines.append(f"  Container:    {clip.essence_container_label}")

    if clip.physical_package_type or clip.physical_package_locator:
        lines.append("")
        lines.append("## SOURCE")
        if clip.physical_package_type:
            lines.append(f"  Type:         {clip.physical_package_type.value}")
        if clip.physical_package_name:
            lines.append(f"  Name:         {clip.physical_package_name}")
        if clip.physical_package_locator:
            lines.append(f"  Locator:      {clip.physical_package_locator}")

    if clip.user_comments:
        lines.append("")
        lines.append("## COMMENTS")
        for name, value in clip.user_comments.items():
            lines.append(f"  {name}: {value}")

    return "\n".join(lines)

"""Resolved clip record and its classifications."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .labels import UMID, MetadataKey
from .rational import Rational
from .timestamp import Timestamp


class EssenceType(str, Enum):
    """Avid essence types, valued by their display names."""

    UNKNOWN = "not recognized"
    MPEG_30 = "MPEG 30"
    MPEG_40 = "MPEG 40"
    MPEG_50 = "MPEG 50"
    DV25_411 = "DV 25 411"
    DV25_420 = "DV 25 420"
    DV50 = "DV 50"
    DV100 = "DV 100"
    MJPEG_20_1 = "20:1"
    MJPEG_2_1S = "2:1s"
    MJPEG_4_1S = "4:1s"
    MJPEG_15_1S = "15:1s"
    MJPEG_10_1 = "10:1"
    MJPEG_10_1M = "10:1m"
    MJPEG_4_1M = "4:1m"
    MJPEG_3_1 = "3:1"
    MJPEG_2_1 = "2:1"
    UNC_1_1 = "1:1"
    UNC_1_1_10B = "1:1 10b"
    MJPEG_35_1P = "35:1p"
    MJPEG_28_1P = "28:1p"
    MJPEG_14_1P = "14:1p"
    MJPEG_3_1P = "3:1p"
    MJPEG_2_1P = "2:1p"
    MJPEG_3_1M = "3:1m"
    MJPEG_8_1M = "8:1m"
    DNXHD_1235 = "DNxHD 1235"
    DNXHD_1237 = "DNxHD 1237"
    DNXHD_1238 = "DNxHD 1238"
    DNXHD_1241 = "DNxHD 1241"
    DNXHD_1242 = "DNxHD 1242"
    DNXHD_1243 = "DNxHD 1243"
    DNXHD_1250 = "DNxHD 1250"
    DNXHD_1251 = "DNxHD 1251"
    DNXHD_1252 = "DNxHD 1252"
    DNXHD_1253 = "DNxHD 1253"
    MPEG4 = "MPEG-4"
    XDCAM_HD = "XDCAM HD"
    AVCINTRA_100 = "AVC-Intra 100"
    AVCINTRA_50 = "AVC-Intra 50"
    PCM = "PCM"


class PhysicalPackageType(str, Enum):
    """Kind of physical source a clip was captured or imported from."""

    UNKNOWN = "Unknown"
    TAPE = "Tape"
    IMPORT = "Import"
    RECORDING = "Recording"


class ClipInfo(BaseModel):
    """Flat description of one Avid MXF clip.

    Produced once per file by :func:`mxfinfo.resolve_clip`. It is a pure
    value snapshot: it holds no references into the header metadata graph
    and cannot be modified after construction.

    Durations, offsets and the start timecode are counted in edit units:
    ``clip_duration`` in ``project_edit_rate`` units, the track and segment
    fields and ``start_timecode`` in ``edit_rate`` units.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Names
    project_name: str | None = None
    clip_name: str | None = None
    tracks_string: str | None = None
    physical_package_name: str | None = None
    physical_package_locator: str | None = None

    # Rates and ratios
    project_edit_rate: Rational | None = None
    edit_rate: Rational | None = None
    aspect_ratio: Rational | None = None
    audio_sampling_rate: Rational | None = None

    # Package identity
    material_package_uid: UMID | None = None
    file_source_package_uid: UMID | None = None
    physical_source_package_uid: UMID | None = None

    # Format labels
    essence_container_label: MetadataKey | None = None
    picture_coding_label: MetadataKey | None = None

    clip_created: Timestamp | None = None
    essence_type: EssenceType = EssenceType.UNKNOWN
    physical_package_type: PhysicalPackageType | None = None

    # Picture info
    frame_layout: int | None = None
    stored_width: int | None = None
    stored_height: int | None = None
    display_width: int | None = None
    display_height: int | None = None
    avid_resolution_id: int | None = None

    # Sound info
    channel_count: int | None = None
    quantization_bits: int | None = None

    # Track info
    clip_duration: int | None = None
    track_duration: int | None = None
    segment_duration: int | None = None
    segment_offset: int | None = None
    track_number: int | None = None
    start_timecode: int | None = None
    is_video: bool = False
    num_video_tracks: int = 0
    num_audio_tracks: int = 0

    # Avid tagged values
    user_comments: dict[str, str] = Field(default_factory=dict)
    material_package_attributes: dict[str, str] = Field(default_factory=dict)

    @property
    def clip_duration_seconds(self) -> float | None:
        """Return the clip duration in seconds."""
        if self.clip_duration is None or self.project_edit_rate is None:
            return None
        if not self.project_edit_rate.numerator:
            return None
        return self.clip_duration / self.project_edit_rate.to_float()

    @property
    def start_timecode_string(self) -> str | None:
        """Return the start timecode as non-drop ``HH:MM:SS:FF``."""
        if self.start_timecode is None or self.edit_rate is None:
            return None
        fps = round(self.edit_rate.to_float()) if self.edit_rate.numerator else 0
        if fps <= 0:
            return None
        frames = self.start_timecode
        hours, rem = divmod(frames, fps * 3600)
        minutes, rem = divmod(rem, fps * 60)
        seconds, frames = divmod(rem, fps)
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}:{frames:02d}"

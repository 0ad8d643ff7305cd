"""Tests for output formatters."""

import json

import pytest
from conftest import FILE_UID, MATERIAL_UID

from mxfinfo import resolve_clip
from mxfinfo.formatters import (
    format_default,
    format_json,
    format_json_list,
    format_quiet,
    format_quiet_list,
    to_dict,
)
from mxfinfo.models import ClipInfo, Rational


@pytest.fixture
def clip(domdom, config) -> ClipInfo:
    return resolve_clip(domdom.header, domdom.partition, config)


class TestDefaultFormatter:
    """Test the sectioned report."""

    def test_sections(self, clip):
        output = format_default(clip)
        assert "Clip: domdom.mov" in output
        assert "## CLIP" in output
        assert "## TRACKS" in output
        assert "## FORMAT" in output
        assert "## SOURCE" in output
        assert "## COMMENTS" not in output

    def test_values(self, clip):
        output = format_default(clip)
        assert "V1 A1-2" in output
        assert "250 (00:05.000)" in output
        assert "10:00:00:00" in output
        assert "1280x720" in output
        assert "DNxHD 1252" in output
        assert "domdom tape" in output

    def test_empty_clip(self):
        """An empty record still formats."""
        output = format_default(ClipInfo())
        assert "Clip: N/A" in output
        assert "Tracks:       none" in output
        assert "Duration:     N/A" in output

    def test_comments(self):
        output = format_default(ClipInfo(user_comments={"Comments": "good take"}))
        assert "## COMMENTS" in output
        assert "Comments: good take" in output


class TestQuietFormatter:
    """Test the one-line summary."""

    def test_video_clip(self, clip):
        parts = format_quiet(clip).split(" | ")
        assert parts == ["domdom.mov", "dom", "V1 A1-2", "250@50/1", "1280x720", "DNxHD 1252"]

    def test_audio_clip(self):
        audio = ClipInfo(audio_sampling_rate=Rational(numerator=48000, denominator=1))
        parts = format_quiet(audio).split(" | ")
        assert parts[2] == "no tracks"
        assert parts[3] == "N/A"
        assert parts[4] == "48000Hz"

    def test_list(self, clip):
        assert len(format_quiet_list([clip, clip]).splitlines()) == 2


class TestJsonFormatter:
    """Test JSON output."""

    def test_valid_json(self, clip):
        data = json.loads(format_json(clip))
        assert data["clip_name"] == "domdom.mov"
        assert data["essence_type"] == "DNxHD 1252"

    def test_to_dict_labels_as_hex(self, clip):
        data = to_dict(clip)
        assert data["material_package_uid"] == str(MATERIAL_UID)
        assert data["file_source_package_uid"] == str(FILE_UID)
        assert data["project_edit_rate"] == {"numerator": 50, "denominator": 1}
        assert data["picture_coding_label"].startswith("06.0e.2b.34")

    def test_list(self, clip):
        data = json.loads(format_json_list([clip]))
        assert isinstance(data, list)
        assert data[0]["tracks_string"] == "V1 A1-2"

    def test_derived_fields(self, clip):
        """Duration in seconds and the timecode string are emitted."""
        data = to_dict(clip)
        assert data["clip_duration_seconds"] == pytest.approx(5.0)
        assert data["start_timecode_string"] == "10:00:00:00"

    def test_field_selection(self, clip):
        data = to_dict(clip, fields=["clip_name", "tracks_string", "start_timecode_string"])
        assert data == {
            "clip_name": "domdom.mov",
            "tracks_string": "V1 A1-2",
            "start_timecode_string": "10:00:00:00",
        }

    def test_unset_fields_dropped(self):
        data = json.loads(format_json(ClipInfo(clip_name="x"), include_unset=False))
        assert data["clip_name"] == "x"
        assert "project_name" not in data
        assert "clip_duration_seconds" not in data
        assert data["num_video_tracks"] == 0

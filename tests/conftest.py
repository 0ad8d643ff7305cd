"""Pytest configuration and fixtures."""

from __future__ import annotations

import os

import pytest

from mxfinfo.config import MXFInfoConfig, reset_config
from mxfinfo.graph import HeaderMetadata, MetadataSet, Partition, labels, load_data_model
from mxfinfo.models import UMID, MetadataKey, Rational, Timestamp

DNXHD_CONTAINER = MetadataKey.from_hex("06.0e.2b.34.04.01.01.01.0d.01.03.01.02.11.01.00")
DNXHD_CODING = MetadataKey.from_hex("06.0e.2b.34.04.01.01.0a.04.01.02.02.71.13.00.00")
PCM_CONTAINER = MetadataKey.from_hex("06.0e.2b.34.04.01.01.01.0d.01.03.01.02.06.01.00")

RateLike = Rational | tuple[int, int]


def make_umid(n: int) -> UMID:
    """Build a distinct, non-null UMID."""
    return UMID(octets=bytes.fromhex("060a2b34") + bytes(27) + bytes([n]))


class GraphBuilder:
    """Builds header metadata graphs through the decoder-facing setters."""

    def __init__(self, essence_containers: list[MetadataKey] | None = None) -> None:
        self.header = HeaderMetadata(load_data_model())
        self.partition = Partition(essence_containers=essence_containers or [])

    def new(self, key: MetadataKey) -> MetadataSet:
        return self.header.create_set(key)

    # -- packages ---------------------------------------------------------------

    def preface(
        self, project_name: str | None = None, project_edit_rate: RateLike | None = None
    ) -> MetadataSet:
        preface = self.new(labels.PREFACE_SET)
        if project_name is not None:
            preface.set_string(labels.PREFACE_PROJECT_NAME, project_name)
        if project_edit_rate is not None:
            preface.set_rational(labels.PREFACE_PROJECT_EDIT_RATE, project_edit_rate)
        return preface

    def material_package(
        self,
        uid: UMID,
        tracks: list[MetadataSet],
        name: str | None = None,
        created: Timestamp | None = None,
    ) -> MetadataSet:
        package = self.new(labels.MATERIAL_PACKAGE_SET)
        self._package_items(package, uid, tracks, name)
        if created is not None:
            package.set_timestamp(labels.GENERIC_PACKAGE_PACKAGE_CREATION_DATE, created)
        return package

    def source_package(
        self,
        uid: UMID,
        tracks: list[MetadataSet],
        descriptor: MetadataSet | None = None,
        name: str | None = None,
    ) -> MetadataSet:
        package = self.new(labels.SOURCE_PACKAGE_SET)
        self._package_items(package, uid, tracks, name)
        if descriptor is not None:
            package.set_strongref(labels.SOURCE_PACKAGE_DESCRIPTOR, descriptor)
        return package

    def _package_items(
        self, package: MetadataSet, uid: UMID, tracks: list[MetadataSet], name: str | None
    ) -> None:
        package.set_umid(labels.GENERIC_PACKAGE_PACKAGE_UID, uid)
        package.set_strongref_array(labels.GENERIC_PACKAGE_TRACKS, tracks)
        if name is not None:
            package.set_string(labels.GENERIC_PACKAGE_NAME, name)

    def tagged_values(
        self, owner: MetadataSet, item_key: MetadataKey, pairs: list[tuple[str, str]]
    ) -> list[MetadataSet]:
        tagged = []
        for name, value in pairs:
            tv = self.new(labels.TAGGED_VALUE_SET)
            tv.set_string(labels.TAGGED_VALUE_NAME, name)
            tv.set_string(labels.TAGGED_VALUE_VALUE, value)
            tagged.append(tv)
        owner.set_strongref_array(item_key, tagged)
        return tagged

    # -- descriptors ------------------------------------------------------------

    def picture_descriptor(
        self,
        width: int,
        height: int,
        resolution_id: int | None = None,
        coding: MetadataKey | None = None,
        aspect_ratio: RateLike = (16, 9),
    ) -> MetadataSet:
        descriptor = self.new(labels.CDCI_ESSENCE_DESCRIPTOR_SET)
        descriptor.set_uint8(labels.PICTURE_DESCRIPTOR_FRAME_LAYOUT, 0)
        descriptor.set_uint32(labels.PICTURE_DESCRIPTOR_STORED_WIDTH, width)
        descriptor.set_uint32(labels.PICTURE_DESCRIPTOR_STORED_HEIGHT, height)
        descriptor.set_uint32(labels.PICTURE_DESCRIPTOR_DISPLAY_WIDTH, width)
        descriptor.set_uint32(labels.PICTURE_DESCRIPTOR_DISPLAY_HEIGHT, height)
        descriptor.set_rational(labels.PICTURE_DESCRIPTOR_ASPECT_RATIO, aspect_ratio)
        if resolution_id is not None:
            descriptor.set_int32(labels.PICTURE_DESCRIPTOR_RESOLUTION_ID, resolution_id)
        if coding is not None:
            descriptor.set_ul(labels.PICTURE_DESCRIPTOR_PICTURE_ESSENCE_CODING, coding)
        return descriptor

    def sound_descriptor(
        self, sampling_rate: RateLike = (48000, 1), bits: int = 24, channels: int = 1
    ) -> MetadataSet:
        descriptor = self.new(labels.WAVE_AUDIO_DESCRIPTOR_SET)
        descriptor.set_rational(labels.SOUND_DESCRIPTOR_AUDIO_SAMPLING_RATE, sampling_rate)
        descriptor.set_uint32(labels.SOUND_DESCRIPTOR_QUANTIZATION_BITS, bits)
        descriptor.set_uint32(labels.SOUND_DESCRIPTOR_CHANNEL_COUNT, channels)
        return descriptor

    def physical_descriptor(
        self, key: MetadataKey = labels.TAPE_DESCRIPTOR_SET, urls: tuple[str, ...] = ()
    ) -> MetadataSet:
        descriptor = self.new(key)
        if urls:
            self.add_locators(descriptor, urls)
        return descriptor

    def add_locators(self, descriptor: MetadataSet, urls: tuple[str, ...]) -> None:
        locators = []
        for url in urls:
            locator = self.new(labels.NETWORK_LOCATOR_SET)
            locator.set_string(labels.NETWORK_LOCATOR_URL_STRING, url)
            locators.append(locator)
        descriptor.set_strongref_array(labels.GENERIC_DESCRIPTOR_LOCATORS, locators)

    # -- tracks and components --------------------------------------------------

    def track(
        self,
        segment: MetadataSet,
        edit_rate: RateLike | None = (50, 1),
        number: int | None = 1,
        track_id: int = 1,
    ) -> MetadataSet:
        track = self.new(labels.TRACK_SET)
        track.set_uint32(labels.GENERIC_TRACK_TRACK_ID, track_id)
        if number is not None:
            track.set_uint32(labels.GENERIC_TRACK_TRACK_NUMBER, number)
        if edit_rate is not None:
            track.set_rational(labels.TRACK_EDIT_RATE, edit_rate)
        track.set_strongref(labels.GENERIC_TRACK_SEQUENCE, segment)
        return track

    def _component(self, key: MetadataKey, data_def: MetadataKey, duration: int) -> MetadataSet:
        component = self.new(key)
        component.set_ul(labels.STRUCTURAL_COMPONENT_DATA_DEFINITION, data_def)
        component.set_length(labels.STRUCTURAL_COMPONENT_DURATION, duration)
        return component

    def source_clip(
        self, data_def: MetadataKey, duration: int, source_uid: UMID, start: int = 0
    ) -> MetadataSet:
        clip = self._component(labels.SOURCE_CLIP_SET, data_def, duration)
        clip.set_position(labels.SOURCE_CLIP_START_POSITION, start)
        clip.set_umid(labels.SOURCE_CLIP_SOURCE_PACKAGE_ID, source_uid)
        return clip

    def sequence(
        self, data_def: MetadataKey, components: list[MetadataSet], duration: int | None = None
    ) -> MetadataSet:
        if duration is None:
            duration = sum(
                c.get_length(labels.STRUCTURAL_COMPONENT_DURATION) or 0 for c in components
            )
        sequence = self._component(labels.SEQUENCE_SET, data_def, duration)
        sequence.set_strongref_array(labels.SEQUENCE_STRUCTURAL_COMPONENTS, components)
        return sequence

    def essence_group(
        self, data_def: MetadataKey, duration: int, choices: list[MetadataSet]
    ) -> MetadataSet:
        group = self._component(labels.ESSENCE_GROUP_SET, data_def, duration)
        group.set_strongref_array(labels.ESSENCE_GROUP_CHOICES, choices)
        return group

    def timecode_component(self, start: int, base: int, duration: int = 0) -> MetadataSet:
        component = self._component(
            labels.TIMECODE_COMPONENT_SET, labels.TIMECODE_DATA_DEF, duration
        )
        component.set_position(labels.TIMECODE_COMPONENT_START_TIMECODE, start)
        component.set_uint16(labels.TIMECODE_COMPONENT_ROUNDED_TIMECODE_BASE, base)
        component.set_uint8(labels.TIMECODE_COMPONENT_DROP_FRAME, 0)
        return component

    def clip_track(
        self,
        data_def: MetadataKey,
        duration: int,
        source_uid: UMID,
        edit_rate: RateLike | None = (50, 1),
        number: int | None = 1,
        start: int = 0,
    ) -> MetadataSet:
        """A track whose Sequence holds one SourceClip."""
        clip = self.source_clip(data_def, duration, source_uid, start=start)
        return self.track(self.sequence(data_def, [clip]), edit_rate=edit_rate, number=number)

    def timecode_track(self, start: int, base: int, edit_rate: RateLike = (50, 1)) -> MetadataSet:
        component = self.timecode_component(start, base)
        sequence = self.sequence(labels.TIMECODE_DATA_DEF, [component], duration=0)
        return self.track(sequence, edit_rate=edit_rate, number=0, track_id=2)


MATERIAL_UID = make_umid(1)
FILE_UID = make_umid(2)
TAPE_UID = make_umid(3)
AUDIO_FILE_UIDS = (make_umid(4), make_umid(5))

DOMDOM_DURATION = 250
# 10:00:00:00 at 50 fps
DOMDOM_START_TIMECODE = 10 * 3600 * 50


def build_domdom(builder: GraphBuilder) -> GraphBuilder:
    """The video file of a clip "domdom.mov" in project "dom".

    50/1, 1280x720 DNxHD, one video and two audio tracks, captured from a
    tape starting at 10:00:00:00.
    """
    b = builder
    b.preface(project_name="dom", project_edit_rate=(50, 1))

    tracks = [b.clip_track(labels.PICTURE_DATA_DEF, DOMDOM_DURATION, FILE_UID, number=1)]
    for number, uid in enumerate(AUDIO_FILE_UIDS, start=1):
        tracks.append(b.clip_track(labels.SOUND_DATA_DEF, DOMDOM_DURATION, uid, number=number))
    b.material_package(
        MATERIAL_UID,
        tracks,
        name="domdom.mov",
        created=Timestamp(year=2011, month=3, day=4, hour=12, min=30, sec=5, qmsec=125),
    )

    descriptor = b.picture_descriptor(1280, 720, resolution_id=1252, coding=DNXHD_CODING)
    file_track = b.clip_track(labels.PICTURE_DATA_DEF, DOMDOM_DURATION, TAPE_UID)
    b.source_package(FILE_UID, [file_track], descriptor=descriptor)

    tape_tracks = [
        b.clip_track(labels.PICTURE_DATA_DEF, 10 * DOMDOM_DURATION, make_umid(0)),
        b.timecode_track(DOMDOM_START_TIMECODE, 50),
    ]
    b.source_package(
        TAPE_UID,
        tape_tracks,
        descriptor=b.physical_descriptor(labels.TAPE_DESCRIPTOR_SET),
        name="domdom tape",
    )
    return b


@pytest.fixture(autouse=True)
def _clean_config(monkeypatch):
    """Isolate tests from user config files and MXFINFO_* variables."""
    for name in list(os.environ):
        if name.startswith("MXFINFO_"):
            monkeypatch.delenv(name)
    monkeypatch.setattr("mxfinfo.config.CONFIG_LOCATIONS", [])
    reset_config()
    yield
    reset_config()


@pytest.fixture
def config() -> MXFInfoConfig:
    """Default configuration."""
    return MXFInfoConfig()


@pytest.fixture
def builder() -> GraphBuilder:
    """Empty graph builder with a DNxHD essence container in the partition."""
    return GraphBuilder(essence_containers=[DNXHD_CONTAINER])


@pytest.fixture
def domdom(builder) -> GraphBuilder:
    """Graph of the domdom.mov video file."""
    return build_domdom(builder)

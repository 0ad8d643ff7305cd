"""Tests for the package, descriptor and physical source resolvers."""

import pytest
from conftest import FILE_UID, MATERIAL_UID, TAPE_UID, make_umid

from mxfinfo.errors import MissingItemError, SetNotFoundError
from mxfinfo.graph import DescriptorKind, labels
from mxfinfo.models import EssenceType, PhysicalPackageType, Rational
from mxfinfo.resolvers import (
    DescriptorResolver,
    PackageResolver,
    PhysicalResolver,
    ResolutionContext,
    get_resolvers,
)


def make_context(builder, config):
    return ResolutionContext(header=builder.header, partition=builder.partition, config=config)


def test_resolver_order():
    """Resolvers run package, descriptor, physical, tracks, timecode."""
    names = [r.name for r in get_resolvers()]
    assert names == ["package", "descriptor", "physical", "tracks", "timecode"]


class TestPackageResolver:
    """Tests for Preface and package identity."""

    def test_domdom(self, domdom, config):
        """Project, clip and package identity are read."""
        context = make_context(domdom, config)
        PackageResolver().resolve(context)
        values = context.values

        assert values["project_name"] == "dom"
        assert values["project_edit_rate"] == Rational(numerator=50, denominator=1)
        assert values["clip_name"] == "domdom.mov"
        assert values["material_package_uid"] == MATERIAL_UID
        assert values["file_source_package_uid"] == FILE_UID
        assert values["essence_container_label"] == domdom.partition.essence_containers[0]
        assert values["clip_created"].year == 2011
        assert context.material_package is not None
        assert context.file_source_package is not None

    def test_missing_preface(self, builder, config):
        """A missing Preface is a hard failure naming the Preface."""
        builder.material_package(MATERIAL_UID, [])
        with pytest.raises(SetNotFoundError) as exc_info:
            PackageResolver().resolve(make_context(builder, config))
        assert exc_info.value.lookup.lower() == "preface"

    def test_missing_material_package(self, builder, config):
        """A missing material package is a hard failure."""
        builder.preface()
        with pytest.raises(SetNotFoundError) as exc_info:
            PackageResolver().resolve(make_context(builder, config))
        assert exc_info.value.lookup == "MaterialPackage"

    def test_missing_material_package_uid(self, builder, config):
        """The material package UID is required."""
        builder.preface()
        builder.new(labels.MATERIAL_PACKAGE_SET)
        with pytest.raises(MissingItemError) as exc_info:
            PackageResolver().resolve(make_context(builder, config))
        assert exc_info.value.lookup == "MaterialPackage.PackageUID"

    def test_missing_file_package(self, builder, config):
        """A clip without a file source package cannot be resolved."""
        builder.preface()
        builder.material_package(MATERIAL_UID, [])
        with pytest.raises(SetNotFoundError):
            PackageResolver().resolve(make_context(builder, config))

    def test_empty_essence_containers(self, domdom, config):
        """No essence container labels leaves the label absent."""
        domdom.partition.essence_containers.clear()
        context = make_context(domdom, config)
        PackageResolver().resolve(context)
        assert context.values["essence_container_label"] is None

    def test_project_name_from_mob_attributes(self, builder, config):
        """Without a Preface project name, the _PJ mob attribute is used."""
        builder.preface()
        package = builder.material_package(MATERIAL_UID, [])
        builder.tagged_values(
            package,
            labels.GENERIC_PACKAGE_MOB_ATTRIBUTE_LIST,
            [("_USER_POS", "3"), ("_PJ", "dom")],
        )
        builder.source_package(FILE_UID, [], descriptor=builder.sound_descriptor())

        context = make_context(builder, config)
        PackageResolver().resolve(context)
        assert context.values["project_name"] == "dom"
        assert context.values["material_package_attributes"] == {"_USER_POS": "3", "_PJ": "dom"}

    def test_no_matching_mob_attribute(self, builder, config):
        """No matching attribute leaves the project name absent."""
        builder.preface()
        package = builder.material_package(MATERIAL_UID, [])
        builder.tagged_values(package, labels.GENERIC_PACKAGE_MOB_ATTRIBUTE_LIST, [("_X", "1")])
        builder.source_package(FILE_UID, [], descriptor=builder.sound_descriptor())

        context = make_context(builder, config)
        PackageResolver().resolve(context)
        assert context.values["project_name"] is None

    def test_preface_name_wins_over_attributes(self, builder, config):
        """The Preface project name takes precedence."""
        builder.preface(project_name="from preface")
        package = builder.material_package(MATERIAL_UID, [])
        builder.tagged_values(package, labels.GENERIC_PACKAGE_MOB_ATTRIBUTE_LIST, [("_PJ", "x")])
        builder.source_package(FILE_UID, [], descriptor=builder.sound_descriptor())

        context = make_context(builder, config)
        PackageResolver().resolve(context)
        assert context.values["project_name"] == "from preface"

    def test_user_comments(self, domdom, config):
        """User comments are collected as a dict."""
        package = domdom.header.find_singular_set_by_key(labels.MATERIAL_PACKAGE_SET)
        domdom.tagged_values(
            package, labels.GENERIC_PACKAGE_USER_COMMENTS, [("Comments", "good take")]
        )
        context = make_context(domdom, config)
        PackageResolver().resolve(context)
        assert context.values["user_comments"] == {"Comments": "good take"}


class TestDescriptorResolver:
    """Tests for descriptor details."""

    def _resolve(self, builder, config):
        context = make_context(builder, config)
        PackageResolver().resolve(context)
        DescriptorResolver().resolve(context)
        return context

    def test_picture(self, domdom, config):
        """Picture descriptors give size, aspect ratio and resolution."""
        context = self._resolve(domdom, config)
        values = context.values
        assert context.descriptor_kind is DescriptorKind.PICTURE
        assert values["stored_width"] == 1280
        assert values["stored_height"] == 720
        assert values["display_width"] == 1280
        assert values["display_height"] == 720
        assert values["aspect_ratio"] == Rational(numerator=16, denominator=9)
        assert values["frame_layout"] == 0
        assert values["avid_resolution_id"] == 1252
        assert values["essence_type"] is EssenceType.DNXHD_1252
        assert "channel_count" not in values

    def test_sound(self, builder, config):
        """Sound descriptors give sampling rate, bits and channels."""
        builder.preface()
        builder.material_package(MATERIAL_UID, [])
        builder.source_package(FILE_UID, [], descriptor=builder.sound_descriptor(bits=16))
        context = self._resolve(builder, config)
        values = context.values
        assert context.descriptor_kind is DescriptorKind.SOUND
        assert values["audio_sampling_rate"] == Rational(numerator=48000, denominator=1)
        assert values["quantization_bits"] == 16
        assert values["channel_count"] == 1
        assert values["essence_type"] is EssenceType.PCM
        assert "stored_width" not in values

    def test_unrecognised_descriptor(self, builder, config):
        """Other file descriptors leave the format fields absent."""
        builder.preface()
        builder.material_package(MATERIAL_UID, [])
        descriptor = builder.new(labels.GENERIC_DATA_ESSENCE_DESCRIPTOR_SET)
        builder.source_package(FILE_UID, [], descriptor=descriptor)
        context = self._resolve(builder, config)
        assert context.descriptor_kind is DescriptorKind.UNKNOWN
        assert context.values["essence_type"] is EssenceType.UNKNOWN
        assert "stored_width" not in context.values


class TestPhysicalResolver:
    """Tests for physical source package resolution."""

    def test_tape(self, domdom, config):
        """The tape package is found with its UID and name."""
        context = make_context(domdom, config)
        PhysicalResolver().resolve(context)
        values = context.values
        assert values["physical_package_type"] is PhysicalPackageType.TAPE
        assert values["physical_source_package_uid"] == TAPE_UID
        assert values["physical_package_name"] == "domdom tape"

    def test_no_physical_package(self, builder, config):
        """Without a physical descriptor nothing is recorded."""
        builder.source_package(FILE_UID, [], descriptor=builder.sound_descriptor())
        context = make_context(builder, config)
        PhysicalResolver().resolve(context)
        assert "physical_package_type" not in context.values

    def test_first_physical_package_wins(self, builder, config):
        """Scanning stops at the first physical package."""
        builder.source_package(
            make_umid(10),
            [],
            descriptor=builder.physical_descriptor(labels.IMPORT_DESCRIPTOR_SET),
            name="import",
        )
        builder.source_package(
            make_umid(11),
            [],
            descriptor=builder.physical_descriptor(labels.TAPE_DESCRIPTOR_SET),
            name="tape",
        )
        context = make_context(builder, config)
        PhysicalResolver().resolve(context)
        assert context.values["physical_package_type"] is PhysicalPackageType.IMPORT
        assert context.values["physical_package_name"] == "import"

    def test_locator_last_wins(self, builder, config):
        """The last network locator URL found is kept."""
        file_descriptor = builder.sound_descriptor()
        builder.add_locators(file_descriptor, ("file:///media/a.mxf", "file:///media/b.mxf"))
        builder.source_package(FILE_UID, [], descriptor=file_descriptor)
        builder.source_package(
            make_umid(10),
            [],
            descriptor=builder.physical_descriptor(
                labels.IMPORT_DESCRIPTOR_SET, urls=("file:///import/source.mov",)
            ),
        )
        context = make_context(builder, config)
        PhysicalResolver().resolve(context)
        assert context.values["physical_package_locator"] == "file:///import/source.mov"

    def test_locators_after_physical_package_ignored(self, builder, config):
        """Packages after the physical one are not scanned."""
        builder.source_package(make_umid(10), [], descriptor=builder.physical_descriptor())
        later = builder.sound_descriptor()
        builder.add_locators(later, ("file:///later.mxf",))
        builder.source_package(FILE_UID, [], descriptor=later)
        context = make_context(builder, config)
        PhysicalResolver().resolve(context)
        assert "physical_package_locator" not in context.values

    def test_unknown_physical_type(self, builder, config):
        """A bare physical descriptor is an unknown physical type."""
        descriptor = builder.physical_descriptor(labels.PHYSICAL_DESCRIPTOR_SET)
        builder.source_package(make_umid(10), [], descriptor=descriptor)
        context = make_context(builder, config)
        PhysicalResolver().resolve(context)
        assert context.values["physical_package_type"] is PhysicalPackageType.UNKNOWN

"""Preface, material package and file source package resolver."""

from __future__ import annotations

import logging

from mxfinfo.errors import MissingItemError, SetNotFoundError
from mxfinfo.graph import labels
from mxfinfo.resolvers.base import BaseResolver, ResolutionContext

logger = logging.getLogger(__name__)


class PackageResolver(BaseResolver):
    """Resolve project and clip identity.

    Reads the Preface, the material package and the top-level file source
    package. The project name falls back to the material package's mob
    attributes when the Preface has none.
    """

    name = "package"
    priority = 10

    def resolve(self, context: ResolutionContext) -> None:
        header = context.header
        values = context.values

        preface = header.find_singular_set_by_key(labels.PREFACE_SET)
        values["project_name"] = preface.get_string(labels.PREFACE_PROJECT_NAME)
        project_edit_rate = preface.get_rational(labels.PREFACE_PROJECT_EDIT_RATE)
        if project_edit_rate is not None and not project_edit_rate.is_positive:
            logger.debug("Ignoring project edit rate %s", project_edit_rate)
            project_edit_rate = None
        values["project_edit_rate"] = project_edit_rate

        values["essence_container_label"] = context.partition.first_essence_container

        material_package = header.find_singular_set_by_key(labels.MATERIAL_PACKAGE_SET)
        uid = material_package.get_umid(labels.GENERIC_PACKAGE_PACKAGE_UID)
        if uid is None:
            raise MissingItemError("MaterialPackage.PackageUID")
        values["material_package_uid"] = uid
        values["clip_name"] = material_package.get_string(labels.GENERIC_PACKAGE_NAME)
        values["clip_created"] = material_package.get_timestamp(
            labels.GENERIC_PACKAGE_PACKAGE_CREATION_DATE
        )
        context.material_package = material_package

        attributes = header.read_string_mob_attributes(material_package) or []
        values["material_package_attributes"] = dict(attributes)
        if values["project_name"] is None:
            wanted = context.config.resolver.project_name_attribute
            values["project_name"] = next(
                (value for name, value in attributes if name == wanted), None
            )
            if values["project_name"] is not None:
                logger.debug("Project name taken from mob attribute %s", wanted)

        comments = header.read_string_tagged_values(
            material_package, labels.GENERIC_PACKAGE_USER_COMMENTS
        )
        values["user_comments"] = dict(comments or [])

        file_package = header.get_top_file_package()
        if file_package is None:
            raise SetNotFoundError("top-level file SourcePackage")
        uid = file_package.get_umid(labels.GENERIC_PACKAGE_PACKAGE_UID)
        if uid is None:
            raise MissingItemError("SourcePackage.PackageUID")
        values["file_source_package_uid"] = uid
        context.file_source_package = file_package

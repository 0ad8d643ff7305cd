"""Physical source package resolver."""

from __future__ import annotations

import logging

from mxfinfo.graph import classify_physical_descriptor, labels
from mxfinfo.resolvers.base import BaseResolver, ResolutionContext

logger = logging.getLogger(__name__)


class PhysicalResolver(BaseResolver):
    """Find the tape, import or recording package the clip came from.

    Every source package is scanned in order. Network locator URLs are
    collected from each descriptor on the way, the last one found winning.
    The scan stops at the first package with a physical descriptor.
    """

    name = "physical"
    priority = 30

    def resolve(self, context: ResolutionContext) -> None:
        header = context.header
        values = context.values

        for package in header.find_sets_of_class(labels.SOURCE_PACKAGE_SET):
            descriptor = package.get_strongref(labels.SOURCE_PACKAGE_DESCRIPTOR)
            if descriptor is None:
                continue

            for element in descriptor.iter_array(labels.GENERIC_DESCRIPTOR_LOCATORS):
                locator = header.get_strongref(element)
                if locator is None or not locator.is_subclass_of(labels.NETWORK_LOCATOR_SET):
                    continue
                url = locator.get_string(labels.NETWORK_LOCATOR_URL_STRING)
                if url is not None:
                    values["physical_package_locator"] = url

            package_type = classify_physical_descriptor(descriptor)
            if package_type is None:
                continue

            values["physical_package_type"] = package_type
            values["physical_source_package_uid"] = package.get_umid(
                labels.GENERIC_PACKAGE_PACKAGE_UID
            )
            values["physical_package_name"] = package.get_string(labels.GENERIC_PACKAGE_NAME)
            logger.debug(
                "Physical source package %r (%s)",
                values["physical_package_name"],
                package_type.value,
            )
            break

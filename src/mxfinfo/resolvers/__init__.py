"""Clip resolvers for mxfinfo."""

from mxfinfo.resolvers.base import BaseResolver, ResolutionContext
from mxfinfo.resolvers.descriptor import DescriptorResolver
from mxfinfo.resolvers.package import PackageResolver
from mxfinfo.resolvers.physical import PhysicalResolver
from mxfinfo.resolvers.timecode import TimecodeResolver
from mxfinfo.resolvers.tracks import TrackResolver

# All resolver classes (order doesn't matter, priority is used)
_RESOLVERS: list[type[BaseResolver]] = [
    PackageResolver,
    DescriptorResolver,
    PhysicalResolver,
    TrackResolver,
    TimecodeResolver,
]


def get_resolvers() -> list[BaseResolver]:
    """Get resolver instances, sorted by priority.

    Returns:
        List of resolver instances, lowest priority number first.
    """
    resolvers = [resolver_cls() for resolver_cls in _RESOLVERS]
    resolvers.sort(key=lambda x: x.priority)
    return resolvers


__all__ = [
    # Base classes
    "BaseResolver",
    "ResolutionContext",
    # Resolvers
    "PackageResolver",
    "DescriptorResolver",
    "PhysicalResolver",
    "TrackResolver",
    "TimecodeResolver",
    # Functions
    "get_resolvers",
]

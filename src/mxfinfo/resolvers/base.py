"""Base resolver class and the shared resolution context."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, ClassVar

from mxfinfo.config import MXFInfoConfig
from mxfinfo.graph import DescriptorKind, HeaderMetadata, MetadataSet, Partition


@dataclass
class ResolutionContext:
    """State shared by the resolvers during one resolution pass.

    ``values`` collects the fields of the final ClipInfo. The set handles
    are filled in by the package resolver and read by the later ones.
    """

    header: HeaderMetadata
    partition: Partition
    config: MXFInfoConfig
    values: dict[str, Any] = field(default_factory=dict)
    material_package: MetadataSet | None = None
    file_source_package: MetadataSet | None = None
    descriptor: MetadataSet | None = None
    descriptor_kind: DescriptorKind = DescriptorKind.UNKNOWN

    def require(self, name: str) -> MetadataSet:
        """Return a set handle that an earlier resolver must have filled in.

        Raises:
            RuntimeError: If the handle is not set
        """
        handle = getattr(self, name)
        if handle is None:
            raise RuntimeError(f"{name} has not been resolved yet")
        return handle


class BaseResolver(ABC):
    """Abstract base class for clip resolvers.

    Each resolver reads one part of the header metadata graph and records
    what it finds in the context. Resolvers run in priority order and may
    rely on the handles left by lower-priority ones.

    Attributes:
        name: Human-readable name of the resolver
        priority: Lower numbers run first (default: 100)
    """

    name: ClassVar[str] = "base"
    priority: ClassVar[int] = 100

    @abstractmethod
    def resolve(self, context: ResolutionContext) -> None:
        """Resolve metadata and populate the context.

        Args:
            context: Resolution context (modified in place)

        Raises:
            MXFInfoError: If a required set or item is missing
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, priority={self.priority})"

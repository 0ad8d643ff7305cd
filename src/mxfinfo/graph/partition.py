"""Header partition pack model."""

from pydantic import BaseModel, Field

from mxfinfo.models import MetadataKey


class Partition(BaseModel):
    """The parts of the header partition pack the resolvers read.

    The metadata decoder validates the operational pattern before handing
    the partition over; ``essence_containers`` keeps the order in which the
    labels appear in the pack.
    """

    major_version: int = 1
    minor_version: int = 3
    kag_size: int = 1
    header_byte_count: int = 0
    operational_pattern: MetadataKey | None = None
    essence_containers: list[MetadataKey] = Field(default_factory=list)

    @property
    def first_essence_container(self) -> MetadataKey | None:
        return self.essence_containers[0] if self.essence_containers else None

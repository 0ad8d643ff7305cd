"""In-memory header metadata graph.

The metadata decoder builds a :class:`HeaderMetadata` on a finalised
:class:`DataModel` using the ``set_*`` methods of :class:`MetadataSet`;
the resolvers only read it.
"""

from . import labels
from .datamodel import DataModel, SetDefinition, load_data_model
from .header import HeaderMetadata
from .partition import Partition
from .sets import ItemType, MetadataItem, MetadataSet, StrongRef, WeakRef, decode_utf16
from .variants import (
    ComponentKind,
    DataKind,
    DescriptorKind,
    classify_component,
    classify_data_def,
    classify_descriptor,
    classify_physical_descriptor,
)

__all__ = [
    "labels",
    "DataModel",
    "SetDefinition",
    "load_data_model",
    "HeaderMetadata",
    "Partition",
    "ItemType",
    "MetadataItem",
    "MetadataSet",
    "StrongRef",
    "WeakRef",
    "decode_utf16",
    "ComponentKind",
    "DataKind",
    "DescriptorKind",
    "classify_component",
    "classify_data_def",
    "classify_descriptor",
    "classify_physical_descriptor",
]

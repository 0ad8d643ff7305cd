"""mxfinfo - Avid MXF clip metadata resolution.

Resolve project, clip, track, timecode and physical source details from the
header metadata graph of an Avid OP-Atom MXF file.

Usage:
    from mxfinfo import HeaderMetadata, Partition, load_data_model, resolve_clip

    # The metadata decoder builds the graph
    header = HeaderMetadata(load_data_model())
    ...

    # Resolve the clip
    clip = resolve_clip(header, partition)
    print(f"{clip.clip_name}: {clip.clip_duration} @ {clip.project_edit_rate}")

    # Export as JSON
    print(clip.model_dump_json())
"""

from mxfinfo._version import __version__
from mxfinfo.analyze import resolve_clip
from mxfinfo.config import MXFInfoConfig, get_config, load_config, reset_config
from mxfinfo.errors import (
    AmbiguousSetError,
    DataModelError,
    EditRateError,
    MissingItemError,
    MXFInfoError,
    SetNotFoundError,
    TaggedValueError,
)
from mxfinfo.formatters import format_default, format_json, format_quiet, to_dict
from mxfinfo.graph import DataModel, HeaderMetadata, MetadataSet, Partition, load_data_model
from mxfinfo.log import setup_logging
from mxfinfo.models import (
    NULL_UMID,
    UMID,
    ClipInfo,
    EssenceType,
    MetadataKey,
    PhysicalPackageType,
    Rational,
    Timestamp,
)
from mxfinfo.resolvers import get_resolvers

__all__ = [
    # Version
    "__version__",
    # Main functions
    "resolve_clip",
    "get_resolvers",
    # Models
    "ClipInfo",
    "EssenceType",
    "PhysicalPackageType",
    "MetadataKey",
    "UMID",
    "NULL_UMID",
    "Rational",
    "Timestamp",
    # Graph
    "DataModel",
    "HeaderMetadata",
    "MetadataSet",
    "Partition",
    "load_data_model",
    # Errors
    "MXFInfoError",
    "DataModelError",
    "SetNotFoundError",
    "AmbiguousSetError",
    "MissingItemError",
    "EditRateError",
    "TaggedValueError",
    # Formatters
    "format_default",
    "format_json",
    "format_quiet",
    "to_dict",
    # Config and logging
    "MXFInfoConfig",
    "get_config",
    "load_config",
    "reset_config",
    "setup_logging",
]

from .versions import (
    Version,
    VersionParseError,
    compare,
    is_at_least,
    parse_version,
    version_to_string,
)
from .catalog import (
    DEFAULT_CATALOG,
    Catalog,
    Feature,
    FlavorCapabilities,
    build_catalog,
    derive_features,
    lookup_feature,
    select_subset,
)
from .detect import (
    DEFAULT_SIGNATURES,
    UNKNOWN_FLAVOR,
    FlavorSignature,
    detect_flavor,
)
from .query import has_capability, supported_features
from .config import DBFlavorConfig


__version__ = "0.1.0"

__all__ = [
    "Version",
    "VersionParseError",
    "compare",
    "is_at_least",
    "parse_version",
    "version_to_string",
    "DEFAULT_CATALOG",
    "Catalog",
    "Feature",
    "FlavorCapabilities",
    "build_catalog",
    "derive_features",
    "lookup_feature",
    "select_subset",
    "DEFAULT_SIGNATURES",
    "UNKNOWN_FLAVOR",
    "FlavorSignature",
    "detect_flavor",
    "has_capability",
    "supported_features",
    "DBFlavorConfig",
]

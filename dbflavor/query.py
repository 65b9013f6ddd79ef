from __future__ import annotations

import logging

from .catalog import DEFAULT_CATALOG, Catalog, Feature
from .versions import Version, is_at_least, parse_version

logger = logging.getLogger(__name__)


def _within(feature: Feature, version: Version) -> bool:
    over_minimum = is_at_least(version, feature.since)
    within_maximum = feature.until is None or is_at_least(feature.until, version)
    return over_minimum and within_maximum


def has_capability(
    flavor: str,
    feature: str,
    version: str,
    *,
    catalog: Catalog = DEFAULT_CATALOG,
) -> bool:
    """
    True when ``flavor`` at ``version`` supports ``feature``.

    Both bounds of a feature are inclusive. An unknown flavor or a feature the
    flavor does not define yields False; only a malformed version raises
    (VersionParseError).
    """
    v = parse_version(version)
    caps = catalog.get(flavor)
    if caps is None:
        logger.debug("unknown flavor %r", flavor)
        return False
    definition = caps.features.get(feature)
    if definition is None:
        logger.debug("flavor %r does not define feature %r", flavor, feature)
        return False
    return _within(definition, v)


def supported_features(flavor: str, version: str, *, catalog: Catalog = DEFAULT_CATALOG) -> list[str]:
    v = parse_version(version)
    caps = catalog.get(flavor)
    if caps is None:
        return []
    return sorted(name for name, f in caps.features.items() if _within(f, v))

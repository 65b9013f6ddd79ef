from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional

from .versions import Version

# Flavors
MYSQL = "mysql"
PERCONA = "percona"
MARIADB = "mariadb"
NDB = "ndb"
PXC = "pxc"
TIDB = "tidb"

# Features
INSTALL_DB = "installdb"
DYN_VARIABLES = "dynVars"
SEMI_SYNC = "semiSync"
CRASH_SAFE = "crashSafe"
GTID = "GTID"
ENHANCED_GTID = "enhancedGTID"
INITIALIZE = "initialize"
CREATE_USER = "createUser"
SUPER_READ_ONLY = "superReadOnly"
MYSQLX = "mysqlx"
MYSQLX_DEFAULT = "mysqlxDefault"
MULTI_SOURCE = "multiSource"
GROUP_REPLICATION = "groupReplication"
SET_PERSIST = "setPersist"
ROLES = "roles"
NATIVE_AUTH = "nativeAuth"
DATA_DICT = "datadict"
XTRADB_CLUSTER = "xtradbCluster"
ROOT_AUTH = "rootAuth"


FeatureSet = Mapping[str, "Feature"]


@dataclass(frozen=True)
class Feature:
    name: str
    description: str
    since: Version
    # Inclusive; None means no upper bound.
    until: Optional[Version] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "description": self.description,
            "since": list(self.since),
            "until": list(self.until) if self.until is not None else None,
        }


@dataclass(frozen=True)
class FlavorCapabilities:
    flavor: str
    description: str
    features: FeatureSet

    def to_dict(self) -> dict[str, Any]:
        return {
            "flavor": self.flavor,
            "description": self.description,
            "features": {name: self.features[name].to_dict() for name in sorted(self.features)},
        }


def _frozen(features: Mapping[str, Feature]) -> FeatureSet:
    return MappingProxyType(dict(features))


def derive_features(base: FeatureSet, overrides: FeatureSet) -> FeatureSet:
    """Every entry of ``base``, then every entry of ``overrides`` added or replaced by name."""
    out = dict(base)
    out.update(overrides)
    return _frozen(out)


@dataclass(frozen=True)
class Catalog:
    """Read-only registry of flavor -> FlavorCapabilities."""

    capabilities: Mapping[str, FlavorCapabilities]

    def get(self, flavor: str) -> Optional[FlavorCapabilities]:
        return self.capabilities.get(flavor)

    def flavors(self) -> list[str]:
        return sorted(self.capabilities)

    def lookup_feature(self, flavor: str, feature: str) -> Optional[Feature]:
        caps = self.capabilities.get(flavor)
        if caps is None:
            return None
        return caps.features.get(feature)

    def select_subset(self, flavor: str, names: Iterable[str]) -> FeatureSet:
        # Unknown flavors and names are left out, never an error.
        caps = self.capabilities.get(flavor)
        if caps is None:
            return _frozen({})
        return _frozen({n: caps.features[n] for n in set(names) if n in caps.features})

    def to_dict(self) -> dict[str, Any]:
        return {name: self.capabilities[name].to_dict() for name in self.flavors()}


def _features(*items: Feature) -> FeatureSet:
    return _frozen({f.name: f for f in items})


def build_catalog() -> Catalog:
    """
    Build the flavor registry.

    Percona shares the MySQL feature set, PXC adds cluster creation on top of
    Percona, and MariaDB borrows a couple of MySQL entries. Only the features
    that change how a deployment is driven are listed.
    """
    mysql = _features(
        Feature(INSTALL_DB, "uses mysql_install_db", (3, 3, 23), (5, 6, 999)),
        Feature(DYN_VARIABLES, "dynamic variables", (5, 1, 0)),
        Feature(SEMI_SYNC, "semi-synchronous replication", (5, 5, 1)),
        Feature(CRASH_SAFE, "crash-safe replication", (5, 6, 2)),
        Feature(GTID, "Global transaction identifiers", (5, 6, 9)),
        Feature(ENHANCED_GTID, "Enhanced Global transaction identifiers", (5, 7, 0)),
        Feature(INITIALIZE, "mysqld --initialize as default", (5, 7, 0)),
        Feature(CREATE_USER, "Create user mandatory", (5, 7, 6)),
        Feature(SUPER_READ_ONLY, "super-read-only support", (5, 7, 8)),
        Feature(MYSQLX, "MySQLX supported", (5, 7, 12)),
        Feature(MYSQLX_DEFAULT, "MySQLX enabled by default", (8, 0, 11)),
        Feature(MULTI_SOURCE, "multi-source replication", (5, 7, 9)),
        Feature(GROUP_REPLICATION, "group replication", (5, 7, 17)),
        Feature(SET_PERSIST, "Set persist supported", (8, 0, 11)),
        Feature(ROLES, "Roles supported", (8, 0, 0)),
        Feature(NATIVE_AUTH, "Native Authentication plugin", (8, 0, 4)),
        Feature(DATA_DICT, "data dictionary", (8, 0, 0)),
    )

    percona = mysql

    pxc = derive_features(
        percona,
        _features(Feature(XTRADB_CLUSTER, "Xtradb Cluster creation", (5, 7, 14))),
    )

    mariadb = derive_features(
        {name: mysql[name] for name in (DYN_VARIABLES, SEMI_SYNC)},
        _features(
            Feature(INSTALL_DB, "uses mysql_install_db", (3, 3, 23)),
            Feature(ROOT_AUTH, "Root Authentication during install", (10, 4, 3)),
        ),
    )

    caps = [
        FlavorCapabilities(MYSQL, "MySQL server", mysql),
        FlavorCapabilities(PERCONA, "Percona Server", percona),
        FlavorCapabilities(MARIADB, "MariaDB server", mariadb),
        FlavorCapabilities(TIDB, "TiDB isolated server", _features()),
        FlavorCapabilities(NDB, "MySQL NDB Cluster", _features()),
        FlavorCapabilities(PXC, "Percona XtraDB Cluster", pxc),
    ]
    return Catalog(capabilities=MappingProxyType({c.flavor: c for c in caps}))


DEFAULT_CATALOG = build_catalog()


def lookup_feature(flavor: str, feature: str, *, catalog: Catalog = DEFAULT_CATALOG) -> Optional[Feature]:
    return catalog.lookup_feature(flavor, feature)


def select_subset(flavor: str, names: Iterable[str], *, catalog: Catalog = DEFAULT_CATALOG) -> FeatureSet:
    return catalog.select_subset(flavor, names)

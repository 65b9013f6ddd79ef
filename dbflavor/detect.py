from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Sequence, Tuple, Union

from .catalog import MARIADB, MYSQL, PERCONA, PXC, TIDB

logger = logging.getLogger(__name__)

UNKNOWN_FLAVOR = "unknown"

ElementPath = Tuple[str, str]


@dataclass(frozen=True)
class FlavorSignature:
    elements: Tuple[ElementPath, ...]
    flavor: str
    # True: every element must exist. False: any one is enough.
    all_needed: bool = False


def _pxc(ext: str) -> FlavorSignature:
    return FlavorSignature(
        elements=(
            ("bin", "garbd"),
            ("lib", f"libgalera_smm.{ext}"),
            ("lib", f"libperconaserverclient.{ext}"),
        ),
        flavor=PXC,
        all_needed=True,
    )


# Most specific first: the first matching signature wins, so anything that
# needs several co-occurring files must come before the single-file ones
# that would also match a subset of them.
# No NDB entry: its binaries also ship with plain MySQL.
DEFAULT_SIGNATURES: Tuple[FlavorSignature, ...] = (
    _pxc("so"),
    _pxc("a"),
    _pxc("dylib"),
    FlavorSignature(
        elements=(
            ("bin", "aria_chk"),
            ("lib", "libmariadbclient.a"),
            ("lib", "libmariadbclient.dylib"),
            ("lib", "libmariadb.a"),
            ("lib", "libmariadb.dylib"),
        ),
        flavor=MARIADB,
    ),
    FlavorSignature(
        elements=(
            ("lib", "libperconaserverclient.a"),
            ("lib", "libperconaserverclient.so"),
            ("lib", "libperconaserverclient.dylib"),
        ),
        flavor=PERCONA,
    ),
    FlavorSignature(elements=(("bin", "tidb-server"),), flavor=TIDB),
    FlavorSignature(
        elements=(
            ("bin", "mysqld"),
            ("bin", "mysqld-debug"),
            ("lib", "libmysqlclient.a"),
        ),
        flavor=MYSQL,
    ),
)


def element_exists(root: Union[str, os.PathLike], element: ElementPath) -> bool:
    """Existence probe that reports any OS error as "not there"."""
    path = os.path.join(root, *element)
    try:
        os.stat(path)
    except FileNotFoundError:
        return False
    except OSError as exc:
        logger.debug("treating %s as absent: %s", path, exc)
        return False
    return True


def signature_matches(root: Union[str, os.PathLike], signature: FlavorSignature) -> bool:
    if not signature.elements:
        return False
    if signature.all_needed:
        return all(element_exists(root, e) for e in signature.elements)
    return any(element_exists(root, e) for e in signature.elements)


def detect_flavor(
    root: Union[str, os.PathLike],
    signatures: Sequence[FlavorSignature] = DEFAULT_SIGNATURES,
    *,
    unknown: str = UNKNOWN_FLAVOR,
) -> str:
    """
    Infer the flavor of the distribution installed under ``root``.

    Signatures are tried in order and the first match wins. When nothing
    matches ``unknown`` is returned; that is an expected outcome, not an error.
    """
    for sig in signatures:
        if signature_matches(root, sig):
            logger.debug("%s matched %s via %s", root, sig.flavor, sig.elements)
            return sig.flavor
    logger.debug("no flavor signature matched %s", root)
    return unknown

from __future__ import annotations

import argparse
import json
import logging
import sys

from .catalog import DEFAULT_CATALOG
from .config import DBFlavorConfig
from .detect import detect_flavor
from .query import has_capability, supported_features
from .versions import VersionParseError


def _basedir(args: argparse.Namespace, cfg: DBFlavorConfig) -> str:
    path = args.path or cfg.basedir
    if path is None:
        raise SystemExit("Missing installation path (argument or DBFLAVOR_BASEDIR)")
    return path


def cmd_detect(args: argparse.Namespace, cfg: DBFlavorConfig) -> int:
    flavor = detect_flavor(_basedir(args, cfg), unknown=cfg.unknown_flavor)
    print(flavor)
    return 1 if flavor == cfg.unknown_flavor else 0


def cmd_has(args: argparse.Namespace, cfg: DBFlavorConfig) -> int:
    try:
        ok = has_capability(args.flavor, args.feature, args.version)
    except VersionParseError as exc:
        print(exc, file=sys.stderr)
        return 2
    print("yes" if ok else "no")
    return 0 if ok else 1


def cmd_features(args: argparse.Namespace, cfg: DBFlavorConfig) -> int:
    try:
        names = supported_features(args.flavor, args.version)
    except VersionParseError as exc:
        print(exc, file=sys.stderr)
        return 2
    for name in names:
        print(name)
    return 0


def cmd_capabilities(args: argparse.Namespace, cfg: DBFlavorConfig) -> int:
    if args.flavor:
        caps = DEFAULT_CATALOG.get(args.flavor)
        if caps is None:
            print(f"Unknown flavor: {args.flavor}", file=sys.stderr)
            return 1
        data = caps.to_dict()
    else:
        data = DEFAULT_CATALOG.to_dict()
    print(json.dumps(data, indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="dbflavor")
    p.add_argument("--log-level", help="DBFLAVOR_LOG_LEVEL")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_det = sub.add_parser("detect")
    p_det.add_argument("path", nargs="?", help="installation root (DBFLAVOR_BASEDIR)")
    p_det.set_defaults(func=cmd_detect)

    p_has = sub.add_parser("has")
    p_has.add_argument("flavor")
    p_has.add_argument("feature")
    p_has.add_argument("version")
    p_has.set_defaults(func=cmd_has)

    p_feat = sub.add_parser("features")
    p_feat.add_argument("flavor")
    p_feat.add_argument("version")
    p_feat.set_defaults(func=cmd_features)

    p_caps = sub.add_parser("capabilities")
    p_caps.add_argument("flavor", nargs="?")
    p_caps.set_defaults(func=cmd_capabilities)

    return p


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    cfg = DBFlavorConfig.from_env()
    level = (args.log_level or cfg.log_level).upper()
    logging.basicConfig(level=getattr(logging, level, logging.WARNING))
    rc = args.func(args, cfg)
    raise SystemExit(rc)

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, List

from .catalog import FeatureCatalog, FeatureNode
from .config import effective_roots, load_config
from .errors import FinspectError
from .listing_schema import FeatureList
from .version import tool_version

logger = logging.getLogger("finspect")

EXIT_OK = 0
EXIT_NO_MATCH = 1
EXIT_USER_ERROR = 2


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="finspect",
        description="Inspect feature descriptors (Subsystem manifests)",
        add_help=True,
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {tool_version()}")
    sub = p.add_subparsers(dest="cmd", required=True)

    # Options shared by all commands
    def add_common(sp: argparse.ArgumentParser) -> None:
        sp.add_argument(
            "--root",
            action="append",
            type=Path,
            metavar="DIR",
            help="directory with *.mf descriptors (repeatable; overrides the config)",
        )
        sp.add_argument(
            "--config",
            type=Path,
            metavar="FILE",
            help="configuration file (default: ./finspect.yaml if present)",
        )
        sp.add_argument(
            "-v", "--verbose",
            action="count",
            default=0,
            help="more logging on stderr (-v info, -vv debug)",
        )

    sp_list = sub.add_parser("list", help="features matching the patterns (all without patterns)")
    add_common(sp_list)
    sp_list.add_argument("patterns", nargs="*", metavar="PATTERN", help="glob (default) or regex:EXPR")
    sp_list.add_argument("--json", action="store_true", help="JSON output instead of display names")

    sp_show = sub.add_parser("show", help="JSON details of matching features")
    add_common(sp_show)
    sp_show.add_argument("pattern", metavar="PATTERN")

    sp_tree = sub.add_parser("tree", help="contained-feature tree of matching features")
    add_common(sp_tree)
    sp_tree.add_argument("pattern", metavar="PATTERN")

    return p


def _setup_logging(verbosity: int) -> None:
    if os.environ.get("FINSPECT_DEBUG"):
        level = logging.DEBUG
    elif verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logger.setLevel(level)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stderr)
        h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        logger.addHandler(h)


def _load_catalog(ns: argparse.Namespace) -> FeatureCatalog:
    cwd = Path.cwd()
    cfg = load_config(cwd, ns.config)
    roots = effective_roots(cfg, cwd, ns.root or ())
    return FeatureCatalog.discover(roots, exclude=cfg.exclude)


def _jdumps(obj: Any) -> str:
    return json.dumps(obj, ensure_ascii=False, indent=2) + "\n"


def render_tree(node: FeatureNode) -> List[str]:
    lines = []
    for depth, n in node.walk():
        suffix = " (cycle)" if n.cyclic else ""
        lines.append("  " * depth + n.feature.display_name() + suffix)
    return lines


def main(argv: list[str] | None = None) -> int:
    ns = _build_parser().parse_args(argv)
    _setup_logging(ns.verbose)

    try:
        catalog = _load_catalog(ns)

        if ns.cmd == "list":
            features = catalog.find(ns.patterns)
            if ns.json:
                sys.stdout.write(_jdumps(FeatureList.of(features).model_dump(by_alias=True)))
            else:
                for f in features:
                    sys.stdout.write(f.display_name() + "\n")
            return EXIT_OK if features or not ns.patterns else EXIT_NO_MATCH

        features = catalog.find([ns.pattern])
        if ns.cmd == "show":
            sys.stdout.write(_jdumps(FeatureList.of(features).model_dump(by_alias=True)))
        else:
            for f in features:
                sys.stdout.write("\n".join(render_tree(catalog.tree(f))) + "\n")
        return EXIT_OK if features else EXIT_NO_MATCH

    except FinspectError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return EXIT_USER_ERROR


if __name__ == "__main__":
    raise SystemExit(main())

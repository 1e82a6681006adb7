"""
Feature catalog: every descriptor found beneath a set of root directories.

A descriptor that cannot be read or parsed is reported and skipped;
the rest of the catalog still loads.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

import pathspec

from .descriptor import DESCRIPTOR_SUFFIX
from .errors import ConfigError, FinspectError
from .feature import Feature, NamePattern

logger = logging.getLogger(__name__)


def build_exclude_spec(patterns: Sequence[str]) -> Optional[pathspec.PathSpec]:
    """PathSpec from gitwildmatch lines; None when there is nothing to exclude."""
    lines = [ln.strip() for ln in patterns if ln.strip() and not ln.strip().startswith("#")]
    if not lines:
        return None
    return pathspec.PathSpec.from_lines("gitwildmatch", lines)


def iter_descriptors(root: Path, spec: Optional[pathspec.PathSpec] = None) -> Iterator[Path]:
    """
    Recursive *.mf iterator with early pruning of excluded directories.
    Yields paths in a stable (sorted) order.
    """
    root = root.resolve()
    for dirpath, dirnames, filenames in os.walk(root):
        if spec:
            keep: List[str] = []
            for d in sorted(dirnames):
                rel_dir = Path(dirpath, d).relative_to(root).as_posix()
                if not spec.match_file(rel_dir + "/"):
                    keep.append(d)
            dirnames[:] = keep
        else:
            dirnames.sort()

        for fn in sorted(filenames):
            if not fn.lower().endswith(DESCRIPTOR_SUFFIX):
                continue
            p = Path(dirpath, fn)
            if spec and spec.match_file(p.relative_to(root).as_posix()):
                continue
            yield p


@dataclass(frozen=True)
class LoadFailure:
    path: Path
    error: FinspectError

    def __str__(self) -> str:
        return f"{self.path}: {self.error}"


@dataclass(frozen=True)
class FeatureNode:
    """A feature in a contained-feature tree; cyclic nodes are not expanded."""
    feature: Feature
    children: Tuple[FeatureNode, ...] = ()
    cyclic: bool = False

    def walk(self, depth: int = 0) -> Iterator[Tuple[int, FeatureNode]]:
        yield depth, self
        for child in self.children:
            yield from child.walk(depth + 1)


@dataclass
class FeatureCatalog:
    features: Dict[str, Feature] = field(default_factory=dict)
    failures: List[LoadFailure] = field(default_factory=list)

    @classmethod
    def discover(cls, roots: Iterable[Path], exclude: Sequence[str] = ()) -> FeatureCatalog:
        """
        Loads every descriptor beneath the roots.

        Raises:
            ConfigError: A root is not a directory
        """
        catalog = cls()
        spec = build_exclude_spec(exclude)
        for root in roots:
            if not root.is_dir():
                raise ConfigError(f"Feature directory not found: {root}")
            logger.info("Scanning %s", root)
            for path in iter_descriptors(root, spec):
                catalog._load(path)
        logger.info("Loaded %d feature(s), %d failure(s)", len(catalog.features), len(catalog.failures))
        return catalog

    @classmethod
    def of(cls, features: Iterable[Feature]) -> FeatureCatalog:
        catalog = cls()
        for f in features:
            catalog.add(f)
        return catalog

    def _load(self, path: Path) -> None:
        try:
            feature = Feature.from_path(path)
        except FinspectError as e:
            logger.warning("Skipping %s: %s", path, e)
            self.failures.append(LoadFailure(path=path, error=e))
            return
        self.add(feature)

    def add(self, feature: Feature) -> bool:
        """Adds a feature; a duplicate full name keeps the first one."""
        existing = self.features.get(feature.full_name)
        if existing is not None:
            logger.warning(
                "Duplicate feature %s in %s (already loaded from %s)",
                feature.full_name, feature.source, existing.source,
            )
            return False
        self.features[feature.full_name] = feature
        return True

    # ---- Queries ----

    def get(self, full_name: str) -> Optional[Feature]:
        return self.features.get(full_name)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Feature):
            return item.full_name in self.features
        return item in self.features

    def __len__(self) -> int:
        return len(self.features)

    def __iter__(self) -> Iterator[Feature]:
        return iter(sorted(self.features.values()))

    def find(self, patterns: Sequence[str] = ()) -> List[Feature]:
        """
        Features matching any of the patterns (all of them without patterns), sorted.

        Raises:
            InvalidPatternError: A pattern cannot be compiled
        """
        if not patterns:
            return list(self)
        compiled = [NamePattern.compile(p) for p in patterns]
        return [f for f in self if any(f.matches(p) for p in compiled)]

    def contained(self, feature: Feature) -> List[Feature]:
        """Contained features known to the catalog, in descriptor order."""
        out: List[Feature] = []
        for full_name in feature.contained_features:
            child = self.features.get(full_name)
            if child is None:
                logger.debug("%s: contained feature %s is not in the catalog", feature, full_name)
                continue
            out.append(child)
        return out

    def tree(self, feature: Feature) -> FeatureNode:
        return self._tree(feature, ())

    def _tree(self, feature: Feature, path: Tuple[str, ...]) -> FeatureNode:
        if feature.full_name in path:
            return FeatureNode(feature=feature, cyclic=True)
        path = (*path, feature.full_name)
        children = tuple(self._tree(child, path) for child in self.contained(feature))
        return FeatureNode(feature=feature, children=children)


__all__ = [
    "FeatureCatalog",
    "FeatureNode",
    "LoadFailure",
    "build_exclude_spec",
    "iter_descriptors",
]

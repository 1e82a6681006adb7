"""
Inspector configuration (finspect.yaml).

    roots: ["wlp/lib/features"]   # descriptor directories, relative to this file
    exclude: ["**/test/**"]       # gitwildmatch patterns, relative to each root
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILE = "finspect.yaml"
DEFAULT_ROOT = Path("lib") / "features"

_yaml = YAML(typ="safe")


class FinspectConfig(BaseModel):
    # strict: unknown keys are errors
    model_config = ConfigDict(extra="forbid", frozen=True)

    roots: List[Path] = Field(default_factory=list)
    exclude: List[str] = Field(default_factory=list)


def _read_yaml_map(path: Path) -> dict:
    """Reads a YAML file that must contain a mapping (an empty file is an empty mapping)."""
    try:
        raw = _yaml.load(path.read_text(encoding="utf-8")) or {}
    except OSError as e:
        raise ConfigError(f"Cannot read config {path}: {e.strerror or e}") from e
    except YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"YAML must be a mapping: {path}")
    return raw


def _validation_message(path: Path, e: ValidationError) -> str:
    """One "field.index: reason" entry per problem."""
    problems = []
    for err in e.errors():
        loc = ".".join(str(part) for part in err["loc"])
        problems.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return f"Invalid config {path}: " + "; ".join(problems)


def load_config(cwd: Path, explicit: Optional[Path] = None) -> FinspectConfig:
    """
    Loads the configuration.

    An explicit path must exist; otherwise finspect.yaml in cwd is used when
    present, and the defaults when not. Relative roots are resolved against
    the directory of the config file.

    Raises:
        ConfigError: Missing explicit file, unreadable or invalid YAML, unknown keys or wrong types
    """
    if explicit is not None:
        path = explicit if explicit.is_absolute() else cwd / explicit
        if not path.is_file():
            raise ConfigError(f"Config file not found: {path}")
    else:
        path = cwd / CONFIG_FILE
        if not path.is_file():
            logger.debug("No %s in %s, using defaults", CONFIG_FILE, cwd)
            return FinspectConfig()

    logger.info("Loading config %s", path)
    try:
        cfg = FinspectConfig.model_validate(_read_yaml_map(path))
    except ValidationError as e:
        raise ConfigError(_validation_message(path, e)) from e
    base = path.parent
    return cfg.model_copy(update={"roots": [r if r.is_absolute() else base / r for r in cfg.roots]})


def effective_roots(cfg: FinspectConfig, cwd: Path, overrides: Sequence[Path] = ()) -> List[Path]:
    """Command line roots win over configured ones; lib/features is the fallback."""
    if overrides:
        return [r if r.is_absolute() else cwd / r for r in overrides]
    if cfg.roots:
        return list(cfg.roots)
    return [cwd / DEFAULT_ROOT]


__all__ = ["FinspectConfig", "load_config", "effective_roots", "CONFIG_FILE", "DEFAULT_ROOT"]

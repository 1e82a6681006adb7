from __future__ import annotations

from importlib import metadata


def tool_version() -> str:
    """
    Version of the installed distribution.
    Depends on no other module of the package (avoids import cycles).
    """
    try:
        return metadata.version("feature-inspector")
    except metadata.PackageNotFoundError:
        return "0.0.0"


__all__ = ["tool_version"]

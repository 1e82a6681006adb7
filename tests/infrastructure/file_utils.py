"""
Helpers for creating descriptor files in tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence


def write(p: Path, text: str) -> Path:
    """Writes text, creating parent directories as needed."""
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")
    return p


def descriptor_text(
    symbolic_name: str,
    *,
    visibility: Optional[str] = None,
    short_name: Optional[str] = None,
    features: Sequence[str] = (),
    bundles: Sequence[str] = (),
    auto: bool = False,
) -> str:
    """
    Builds the text of a feature descriptor.

    Args:
        symbolic_name: Subsystem-SymbolicName id
        visibility: visibility directive, omitted when None
        short_name: IBM-ShortName, omitted when None
        features: contained features (type=osgi.subsystem.feature)
        bundles: contained bundles (type=osgi.bundle)
        auto: adds an IBM-Provision-Capability header
    """
    lines = ["Manifest-Version: 1.0", "Subsystem-ManifestVersion: 1"]
    sn = symbolic_name
    if visibility is not None:
        sn += f"; visibility:={visibility}"
    lines.append(f"Subsystem-SymbolicName: {sn}")
    if short_name is not None:
        lines.append(f"IBM-ShortName: {short_name}")
    content = [f"{f}; type=\"osgi.subsystem.feature\"" for f in features]
    content += [f"{b}; version=\"[1,2)\"; type=\"osgi.bundle\"" for b in bundles]
    if content:
        lines.append("Subsystem-Content: " + ", ".join(content))
    if auto:
        lines.append(
            'IBM-Provision-Capability: osgi.identity; filter:="(&(type=osgi.subsystem.feature)'
            '(osgi.identity=com.example.base))"'
        )
    return "\n".join(lines) + "\n"


def write_descriptor(directory: Path, file_name: str, symbolic_name: str, **kwargs) -> Path:
    """Writes directory/file_name with descriptor_text(symbolic_name, **kwargs)."""
    return write(directory / file_name, descriptor_text(symbolic_name, **kwargs))

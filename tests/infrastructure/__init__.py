"""
Shared test infrastructure.

Modules:
- file_utils: writing descriptor files and feature directories
- cli_utils: running the command line in a subprocess
"""

from .file_utils import write, write_descriptor, descriptor_text
from .cli_utils import run_cli, jload

__all__ = ["write", "write_descriptor", "descriptor_text", "run_cli", "jload"]

"""
Centralized file I/O utilities.

- Single place for encoding handling
- Use Path.read_text() / Path.write_text() consistently (no raw open/read)
"""

from pathlib import Path
from typing import Union

from .config import DEFAULT_FILE_ENCODING


def read_source_file(path: Union[Path, str]) -> str:
    """Read source file with standard encoding."""
    p = Path(path) if not isinstance(path, Path) else path
    return p.read_text(encoding=DEFAULT_FILE_ENCODING)


def write_source_file(path: Union[Path, str], source: str) -> None:
    """Write source file with standard encoding (used by --fix)."""
    p = Path(path) if not isinstance(path, Path) else path
    p.write_text(source, encoding=DEFAULT_FILE_ENCODING)

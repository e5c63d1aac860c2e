"""
JSON output for scraped units.

The record is written as `<code> - <title>.json` into an existing
directory. Serialization is deterministic so repeated scrapes of the same
page produce byte-identical files.
"""

from __future__ import annotations

import json
from pathlib import Path

from .errors import FilesystemError
from .types import UnitOfCompetency


def output_filename(code: str, title: str) -> str:
    return f"{code} - {title}.json"


def serialize_unit(unit: UnitOfCompetency, indent: int = 2) -> str:
    return json.dumps(unit.to_dict(), indent=indent, ensure_ascii=False)


def write_unit(
    unit: UnitOfCompetency,
    code: str,
    output_dir: Path,
    indent: int = 2,
) -> Path:
    """Write a unit record, replacing any existing file of the same name.

    Args:
        unit: The scraped record
        code: Unit code as given on the command line
        output_dir: Directory to write into; it is not created

    Returns:
        Path of the written file

    Raises:
        FilesystemError: If the directory is missing or the write fails
    """
    if not output_dir.is_dir():
        raise FilesystemError(f"Output directory does not exist: {output_dir}", output_dir)

    path = output_dir / output_filename(code, unit.title)
    try:
        path.write_text(serialize_unit(unit, indent=indent), encoding="utf-8")
    except OSError as exc:
        raise FilesystemError(f"Failed to write {path}: {exc}", path) from exc
    return path


def read_unit(path: Path) -> UnitOfCompetency:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise FilesystemError(f"Failed to read {path}: {exc}", path) from exc
    return UnitOfCompetency.from_dict(json.loads(raw))

"""Loading of per-language text catalogs stored as two-column CSV files."""

from __future__ import annotations

import csv
import os
from collections.abc import Iterator
from pathlib import Path


class CatalogError(ValueError):
    """Raised when a language file is malformed."""


def _records(path: Path) -> Iterator[list[str]]:
    with path.open(encoding="utf-8", newline="") as handle:
        lines = (line for line in handle if not line.startswith("#"))
        for record in csv.reader(lines, skipinitialspace=True):
            if record:
                yield record


def load_language_file(path: str | os.PathLike[str]) -> dict[str, str]:
    """Read a ``key,text`` CSV file into a dict.

    Lines starting with ``#`` and blank lines are ignored, leading spaces of
    fields are dropped, and a literal ``\\n`` in a text becomes a newline.
    Raises CatalogError if a record does not have exactly two fields.
    """
    texts: dict[str, str] = {}
    for number, record in enumerate(_records(Path(path))):
        if len(record) != 2:
            raise CatalogError(
                f"line {number} length should 2 but {len(record)}, data: {record}"
            )
        key, text = record
        texts[key] = text.replace("\\n", "\n")
    return texts


def load_languages(directory: str | os.PathLike[str]) -> dict[str, dict[str, str]]:
    """Load every ``*.csv`` file in directory, keyed by file name without extension.

    Raises FileNotFoundError if the directory does not exist and CatalogError
    if any file is malformed.
    """
    root = Path(directory)
    if not root.is_dir():
        raise FileNotFoundError(f"cannot open language directory: {root}")
    languages: dict[str, dict[str, str]] = {}
    for path in sorted(root.glob("*.csv")):
        try:
            languages[path.stem] = load_language_file(path)
        except CatalogError as exc:
            raise CatalogError(f"cannot load templates for {path.name}: {exc}") from exc
    return languages
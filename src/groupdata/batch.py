"""Read lists of sources from text, CSV or JSON files."""

from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import List

SOURCE_COLUMNS = ("source", "url")


def _entry_source(item: object) -> str:
    if isinstance(item, dict):
        for key in SOURCE_COLUMNS:
            if item.get(key):
                return str(item[key])
        raise ValueError("JSON entries must contain a 'source' or 'url' key")
    return str(item)


def read_sources(path: Path) -> List[str]:
    if not path.exists():
        raise FileNotFoundError(path)
    suffix = path.suffix.lower()
    if suffix in {".txt", ""}:
        lines = [line.strip() for line in path.read_text(encoding="utf-8").splitlines()]
        return [line for line in lines if line and not line.startswith("#")]
    if suffix == ".csv":
        with path.open(newline="", encoding="utf-8") as handle:
            reader = csv.DictReader(handle)
            column = next((name for name in SOURCE_COLUMNS if name in (reader.fieldnames or [])), None)
            if column is None:
                raise ValueError("CSV must contain a 'source' or 'url' column")
            return [row[column] for row in reader if row.get(column)]
    if suffix == ".json":
        data = json.loads(path.read_text(encoding="utf-8"))
        if isinstance(data, list):
            return [_entry_source(item) for item in data]
        raise ValueError("JSON sources file must be a list")
    raise ValueError(f"Unsupported sources file format: {path.suffix}")

"""Logic for loading extractor dumps (``jsdoc -X`` output) from disk."""

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from src.parse_record import parse_record
from src.symbol_record import SymbolRecord

logger = logging.getLogger(__name__)


def load_raw_records(path: Path) -> list[dict[str, Any]]:
    """Load the raw doclet list from a JSON or YAML file, chosen by suffix."""
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        try:
            doc = json.loads(text) if text.strip() else None
        except json.JSONDecodeError as e:
            msg = f"Invalid JSON in {path}: {e}"
            raise SystemExit(msg) from e
    else:
        doc = yaml.safe_load(text)
    if doc is None:
        return []
    if isinstance(doc, dict):
        doc = doc.get("doclets") or doc.get("items") or []
    if not isinstance(doc, list):
        msg = f"Expected a list of records in: {path}"
        raise SystemExit(msg)
    return [it for it in doc if isinstance(it, dict)]


def load_records(paths: list[Path]) -> list[SymbolRecord]:
    """Load and parse records from every given file, in order."""
    records: list[SymbolRecord] = []
    for p in paths:
        raw = load_raw_records(p)
        logger.debug("Loaded %d raw records from %s", len(raw), p)
        records.extend(parse_record(it) for it in raw)
    return records

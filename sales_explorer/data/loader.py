"""
JSON source reading and one-shot dataset construction.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import pandas as pd

from sales_explorer.config import DATA_FILE
from sales_explorer.data.errors import MalformedSourceError, SourceUnavailableError
from sales_explorer.data.normalize import normalize_records, records_to_frame

logger = logging.getLogger(__name__)


def read_source(path: Path = DATA_FILE) -> Any:
    """Read and parse the JSON source file."""
    path = Path(path)
    if not path.is_file():
        raise SourceUnavailableError(
            f"Sales data not found at {path}. Place sales.json there or set SALES_EXPLORER_DATA_FILE."
        )
    try:
        raw = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedSourceError(f"Sales data at {path} is not UTF-8: {exc}") from exc
    except OSError as exc:
        raise SourceUnavailableError(f"Cannot read sales data at {path}: {exc}") from exc
    try:
        return json.loads(raw)
    except ValueError as exc:
        raise MalformedSourceError(f"Failed to parse sales data at {path}: {exc}") from exc


def load_dataset(path: Path = DATA_FILE) -> pd.DataFrame:
    """Read, normalize, and frame the source. Raises DatasetError subclasses."""
    payload = read_source(path)
    records = normalize_records(payload)
    df = records_to_frame(records)

    unparsed = int(df["_timestamp"].isna().sum())
    if unparsed:
        logger.warning("%d of %d records have an unparsable date", unparsed, len(df))
    logger.info("Loaded %d sales records from %s", len(df), path)
    return df

"""
DatasetCache — process-scoped, lazily loaded sales dataset.

Loaded once on first query, shared read-only by every request afterwards.
The load is single-flight: concurrent first callers wait on the in-flight
load instead of starting their own. A failed load leaves the cache empty so
the next caller retries.
"""
from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Callable, Optional

import pandas as pd

from sales_explorer.analytics.options import derive_options
from sales_explorer.config import DATA_FILE
from sales_explorer.data.loader import load_dataset
from sales_explorer.data.schemas import FilterOptions

logger = logging.getLogger(__name__)

Loader = Callable[[Path], pd.DataFrame]


class DatasetCache:
    """In-memory sales dataset plus memoized filter options."""

    def __init__(self, source: Path = DATA_FILE, loader: Loader = load_dataset) -> None:
        self.source = Path(source)
        self._loader = loader
        self._lock = threading.Lock()
        self._df: Optional[pd.DataFrame] = None
        self._options: Optional[FilterOptions] = None

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def get_dataset(self) -> pd.DataFrame:
        """Return the loaded frame, loading it on first call.

        Every call after a successful load returns the same object.
        Loader errors propagate and nothing is cached.
        """
        df = self._df
        if df is not None:
            return df
        with self._lock:
            if self._df is None:
                logger.info("Loading sales dataset from %s", self.source)
                try:
                    self._df = self._loader(self.source)
                except Exception:
                    logger.exception("Sales dataset load failed; will retry on next request")
                    raise
            return self._df

    def filter_options(self) -> FilterOptions:
        """Distinct filter values, derived once per loaded dataset."""
        options = self._options
        if options is not None:
            return options
        df = self.get_dataset()
        with self._lock:
            if self._options is None:
                options = derive_options(df)
                if self._df is df:
                    self._options = options
                return options
            return self._options

    def reset(self) -> None:
        """Drop the cached dataset and options; the next query reloads."""
        with self._lock:
            self._df = None
            self._options = None

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def is_loaded(self) -> bool:
        return self._df is not None

    def row_count(self) -> int:
        df = self._df
        return 0 if df is None else len(df)

"""Data loading, normalization, and the process-scoped dataset cache."""
from .errors import DatasetError, MalformedSourceError, SourceUnavailableError
from .schemas import FilterOptions, FilterSet, SortKey, TransactionRecord, build_filter_set, parse_sort_key
from .normalize import normalize_record, normalize_records, records_to_frame
from .loader import load_dataset, read_source

"""
Sales Explorer — Configuration: paths, request defaults, logging.
"""
import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths: override with SALES_EXPLORER_DATA_FILE for deployment
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
DATA_FILE = Path(os.environ.get("SALES_EXPLORER_DATA_FILE", str(PROJECT_ROOT / "data" / "sales.json")))

# ---------------------------------------------------------------------------
# List-query defaults (applied when a parameter is absent or unparsable)
# ---------------------------------------------------------------------------
DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
DEFAULT_SORT = "date_desc"

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
LOG_LEVEL = os.environ.get("SALES_EXPLORER_LOG_LEVEL", "INFO")

# ---------------------------------------------------------------------------
# CORS: comma-separated origins, "*" allows any
# ---------------------------------------------------------------------------
CORS_ORIGINS = [
    o.strip() for o in os.environ.get("SALES_EXPLORER_CORS_ORIGINS", "*").split(",") if o.strip()
]

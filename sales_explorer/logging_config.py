"""Logging setup shared by the API server and the CLI."""
import logging
import sys
from typing import TextIO


def configure_logging(level: str = "INFO", stream: TextIO = sys.stdout) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        stream=stream,
    )

    # Uvicorn's per-request access lines drown out data-layer messages
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("multipart").setLevel(logging.WARNING)

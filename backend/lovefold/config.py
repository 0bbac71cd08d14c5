"""
Runtime configuration for LoveFold.

All settings come from environment variables so the same code runs locally,
in tests and behind the API server without config files.
"""

import logging
import os
import tempfile
from typing import Optional

# ESMFold (ESM Metagenomic Atlas) folding endpoint
ESMFOLD_API_URL = os.environ.get(
    "ESMFOLD_API_URL", "https://api.esmatlas.com/foldSequence/v1/pdb/"
)
ESMFOLD_TIMEOUT = float(os.environ.get("ESMFOLD_TIMEOUT", "30"))
ESMFOLD_RETRIES = int(os.environ.get("ESMFOLD_RETRIES", "2"))

# Folded structures never change for a given sequence
CACHE_DIR = os.environ.get(
    "LOVEFOLD_CACHE_DIR",
    os.path.join(tempfile.gettempdir(), "lovefold_esmfold_cache"),
)
CACHE_EXPIRY_HOURS = float(os.environ.get("LOVEFOLD_CACHE_HOURS", "1"))

LOG_LEVEL = os.environ.get("LOVEFOLD_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(name)s | %(levelname)s | %(message)s"

CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get(
        "LOVEFOLD_CORS_ORIGINS", "http://localhost:3000,http://localhost:5173"
    ).split(",")
    if origin.strip()
]


def configure_logging(level: Optional[str] = None) -> None:
    """Set up root logging once for CLI and API entry points."""
    logging.basicConfig(
        level=getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO),
        format=LOG_FORMAT,
    )

# esmfold_adapter.py
"""
ESMFold API Adapter

Folds amino acid sequences with the public ESM Metagenomic Atlas endpoint
(https://esmatlas.com). The API takes the raw sequence as the POST body and
answers with PDB text whose B-factor column holds per-residue pLDDT.

Predictions are cached on disk by sequence hash: the same sequence always
folds to the same structure, and the public endpoint is rate limited.
"""

import hashlib
import logging
import os
import tempfile
from datetime import datetime, timedelta
from pathlib import Path
from typing import Optional

import requests

from . import config
from .fold_types import FoldResult
from .validation import validate_pdb, validate_sequence

logger = logging.getLogger(__name__)

# Transient statuses worth another attempt
RETRYABLE_STATUS_CODES = {429, 500, 502, 503, 504}


class ESMFoldAdapter:
    """
    Adapter for the ESMFold structure prediction API.

    Example:
        >>> adapter = ESMFoldAdapter()
        >>> result = adapter.fold_sequence("ALICEWPHWPNQN")
        >>> if result.ok:
        ...     print(result.pdb_content[:80])
    """

    def __init__(
        self,
        api_url: str = config.ESMFOLD_API_URL,
        timeout: float = config.ESMFOLD_TIMEOUT,
        retries: int = config.ESMFOLD_RETRIES,
        cache_dir: Optional[str] = config.CACHE_DIR,
        cache_hours: float = config.CACHE_EXPIRY_HOURS,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the ESMFold adapter.

        Args:
            api_url: Folding endpoint
            timeout: Request timeout in seconds
            retries: Extra attempts after a transient failure
            cache_dir: Directory for cached PDB files; None disables caching
            cache_hours: Age after which a cached prediction is refetched
            session: Optional requests session (shared connection pool)
        """
        self.api_url = api_url
        self.timeout = timeout
        self.retries = max(0, retries)
        self.cache_dir = cache_dir
        self.cache_hours = cache_hours
        self.session = session or requests.Session()

    def fold_sequence(self, sequence: str, use_cache: bool = True) -> FoldResult:
        """
        Predict the structure of a sequence.

        Args:
            sequence: Single-letter amino acid sequence (max 400 residues)
            use_cache: Whether to read and write the local cache

        Returns:
            FoldResult; status "failed" with an error message on any problem
        """
        sequence = (sequence or "").strip().upper()

        invalid = validate_sequence(sequence)
        if invalid is not None:
            return FoldResult.failed(sequence, invalid.message)

        if use_cache:
            cached = self._read_cache(sequence)
            if cached is not None:
                logger.info(f"ESMFold cache hit for {len(sequence)}-residue sequence")
                return FoldResult.completed(sequence, cached, source="cache")

        pdb_content, error = self._request_fold(sequence)
        if error:
            return FoldResult.failed(sequence, error)

        validation = validate_pdb(pdb_content)
        if not validation.is_valid:
            logger.warning(f"ESMFold returned unusable PDB: {validation.error}")
            return FoldResult.failed(sequence, validation.error)

        if use_cache:
            self._write_cache(sequence, pdb_content)

        return FoldResult.completed(sequence, pdb_content, source="esmfold")

    # =========================================================================
    # INTERNAL METHODS
    # =========================================================================

    def _request_fold(self, sequence: str):
        """POST the sequence. Returns (pdb_content, error_message)."""
        error = None
        for attempt in range(self.retries + 1):
            try:
                response = self.session.post(
                    self.api_url,
                    data=sequence,
                    headers={"Content-Type": "text/plain"},
                    timeout=self.timeout,
                )
            except requests.exceptions.Timeout:
                error = f"ESMFold request timed out after {self.timeout:g}s"
            except requests.RequestException as e:
                error = f"ESMFold request failed: {e}"
            else:
                if response.ok:
                    return response.text, None
                error = f"ESMFold API error: {response.status_code}"
                if response.status_code not in RETRYABLE_STATUS_CODES:
                    logger.warning(error)
                    return None, error

            logger.warning(f"{error} (attempt {attempt + 1}/{self.retries + 1})")

        return None, error

    def _cache_path(self, sequence: str) -> Path:
        digest = hashlib.sha256(sequence.encode("utf-8")).hexdigest()
        return Path(self.cache_dir) / f"{digest}.pdb"

    def _read_cache(self, sequence: str) -> Optional[str]:
        if not self.cache_dir:
            return None

        cache_path = self._cache_path(sequence)
        if not cache_path.exists():
            return None

        try:
            mtime = datetime.fromtimestamp(cache_path.stat().st_mtime)
            if mtime < datetime.now() - timedelta(hours=self.cache_hours):
                return None
            pdb_content = cache_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read ESMFold cache {cache_path.name}: {e}")
            return None

        validation = validate_pdb(pdb_content)
        if not validation.is_valid:
            logger.warning(f"Ignoring ESMFold cache {cache_path.name}: {validation.error}")
            return None

        return pdb_content

    def _write_cache(self, sequence: str, pdb_content: str) -> None:
        """Write through a temp file so readers never see a partial entry."""
        if not self.cache_dir:
            return

        tmp_path = None
        try:
            os.makedirs(self.cache_dir, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=self.cache_dir, suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(pdb_content)
            os.replace(tmp_path, self._cache_path(sequence))
        except OSError as e:
            logger.warning(f"Could not write ESMFold cache: {e}")
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)

# taqti/storage/analysis_store.py

import json
import math
import logging
import threading
from pathlib import Path
from typing import Dict, Any, List, Union

from taqti.models.record import AnalysisRecord

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 100


class StorageError(Exception):
    """Raised when the analysis store cannot be read or written"""
    pass


class AnalysisStore:
    """
    Append-only store of analysis records in a JSON-lines file.

    Each record is one line; appends are serialized with a lock so
    concurrent callers never interleave partial lines.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._lock = threading.Lock()

    def append(self, record: AnalysisRecord) -> Dict[str, Any]:
        """
        Append a record to the store.

        Args:
            record: Analysis record to persist

        Returns:
            The serialized record as written

        Raises:
            StorageError: If the file cannot be written
        """
        data = record.to_dict()
        line = json.dumps(data, ensure_ascii=False)

        with self._lock:
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                with open(self.path, 'a', encoding='utf-8') as f:
                    f.write(line + "\n")
            except OSError as e:
                raise StorageError(f"Failed to write analysis to {self.path}: {e}") from e

        logger.debug(f"Stored analysis ({data['analyzerUsed']}) in {self.path}")
        return data

    def load_all(self) -> List[Dict[str, Any]]:
        """
        Read every stored record, oldest first.

        Raises:
            StorageError: If the file cannot be read or holds invalid JSON
        """
        if not self.path.exists():
            return []

        records = []
        with self._lock:
            try:
                with open(self.path, 'r', encoding='utf-8') as f:
                    for line_number, line in enumerate(f, 1):
                        line = line.strip()
                        if not line:
                            continue
                        try:
                            records.append(json.loads(line))
                        except json.JSONDecodeError as e:
                            raise StorageError(f"Invalid record on line {line_number} of {self.path}: {e}") from e
            except OSError as e:
                raise StorageError(f"Failed to read analyses from {self.path}: {e}") from e
        return records

    def count(self) -> int:
        return len(self.load_all())

    def list_analyses(self, limit: int = DEFAULT_LIMIT, page: int = 1) -> Dict[str, Any]:
        """
        List stored analyses, newest first.

        Args:
            limit: Records per page
            page: 1-based page number

        Returns:
            Dictionary with status, count, total, page, totalPages and data

        Raises:
            ValueError: If limit or page is not positive
            StorageError: If the store cannot be read
        """
        if limit < 1 or page < 1:
            raise ValueError(f"limit and page must be positive, got limit={limit}, page={page}")

        records = list(reversed(self.load_all()))
        total = len(records)
        start = (page - 1) * limit
        data = records[start:start + limit]

        return {
            "status": "success",
            "count": len(data),
            "total": total,
            "page": page,
            "totalPages": math.ceil(total / limit),
            "data": data
        }

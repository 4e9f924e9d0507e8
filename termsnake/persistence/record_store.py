"""
High-score record stores.
"""
import json
import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Union

from ..core.record_interface import RecordStoreInterface

logger = logging.getLogger(__name__)


class FileRecordStore(RecordStoreInterface):
    """
    Record kept in a small JSON file.

    A missing or unreadable file counts as no record; the next update
    rewrites it.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path).expanduser()

    def load_record_score(self) -> int:
        if not self.path.exists():
            return 0
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            record = int(data.get("record", 0))
        except (OSError, ValueError, TypeError, AttributeError) as e:
            logger.warning("Ignoring unreadable record file %s: %s", self.path, e)
            return 0
        return max(0, record)

    def update_record_if_higher(self, score: int) -> bool:
        if score <= self.load_record_score():
            return False
        self._save(score)
        return True

    def _save(self, record: int):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        data = {
            "record": record,
            "timestamp": datetime.now().strftime("%Y%m%d_%H%M%S"),
        }
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp_path, 'w', encoding='utf-8') as f:
            json.dump(data, f)
        os.replace(tmp_path, self.path)
        logger.info("Saved record %d to %s", record, self.path)


class MemoryRecordStore(RecordStoreInterface):
    """Record that lives only as long as the process."""

    def __init__(self, record: int = 0):
        self.record = record
        self.update_calls = 0

    def load_record_score(self) -> int:
        return self.record

    def update_record_if_higher(self, score: int) -> bool:
        self.update_calls += 1
        if score > self.record:
            self.record = score
            return True
        return False

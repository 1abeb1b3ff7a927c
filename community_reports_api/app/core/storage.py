"""
Flat‑file JSON collection store.

Every entity kind is persisted as one pretty‑printed JSON array in the
data directory (``reports.json``, ``volunteers.json`` ...).  A
``JsonCollection`` loads the whole array, lets the caller mutate it in
memory and writes the whole array back.  There is no database; to
switch to one you would replace this module and keep the service
signatures.

Two guarantees are added on top of the plain read‑modify‑write cycle:

* every collection owns a re‑entrant lock.  Services hold
  ``collection.lock`` around a full load‑mutate‑persist cycle so two
  requests in the same process cannot overwrite each other's records;
* files are written to a temporary sibling and moved into place with
  ``os.replace``, so a crash mid‑write leaves the previous contents.

Processes sharing one data directory are not coordinated.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
import time
from pathlib import Path
from typing import Any, Dict, List

from .config import settings
from .exceptions import DataFileCorruptedError


logger = logging.getLogger(__name__)

Record = Dict[str, Any]


def get_data_dir() -> Path:
    """Compute the directory holding the collection files.

    If ``settings.data_dir`` is absolute it is used directly; otherwise
    it is resolved relative to the project root.
    """
    data_dir = Path(settings.data_dir)
    if data_dir.is_absolute():
        return data_dir
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return (base_dir / data_dir).resolve()


def now_millis() -> int:
    """Return the current time in milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


class JsonCollection:
    """One named collection of records backed by ``<name>.json``."""

    _locks: Dict[str, threading.RLock] = {}
    _locks_guard = threading.Lock()

    def __init__(self, name: str) -> None:
        self.name = name
        with self._locks_guard:
            self.lock = self._locks.setdefault(name, threading.RLock())

    @property
    def path(self) -> Path:
        # Resolved on every access so tests can repoint ``settings.data_dir``.
        return get_data_dir() / f"{self.name}.json"

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> List[Record]:
        """Return all records in storage order.

        A missing or empty file is an empty collection.  Raises
        ``DataFileCorruptedError`` when the file is not a JSON array of
        objects.
        """
        path = self.path
        if not path.is_file():
            return []
        raw = path.read_text(encoding="utf-8")
        if not raw.strip():
            return []
        try:
            records = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise DataFileCorruptedError(path.name, str(exc)) from exc
        if not isinstance(records, list):
            raise DataFileCorruptedError(path.name, "expected a JSON array")
        if not all(isinstance(record, dict) for record in records):
            raise DataFileCorruptedError(path.name, "expected an array of objects")
        return records

    def append(self, record: Record) -> Record:
        """Add ``record`` to the end of the collection and persist it.

        A record whose ``id`` is missing or ``None`` is given the next
        id (see ``next_id``).  The stored record is returned.
        """
        with self.lock:
            records = self.load()
            if record.get("id") is None:
                record["id"] = self.next_id(records)
            records.append(record)
            self.rewrite(records)
        return record

    def rewrite(self, records: List[Record]) -> None:
        """Replace the collection file with ``records``."""
        path = self.path
        path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps(records, indent=2, ensure_ascii=False)
        with self.lock:
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self.name}.", suffix=".tmp", dir=path.parent)
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    fh.write(payload)
                os.replace(tmp_name, path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        logger.debug("Wrote %d records to %s", len(records), path)

    @staticmethod
    def next_id(records: List[Record]) -> int:
        """Return a millisecond timestamp id unique within ``records``.

        Uses the current time unless an existing id is equal or larger,
        in which case the largest id plus one is returned.
        """
        candidate = now_millis()
        existing = [r.get("id") for r in records if isinstance(r.get("id"), int)]
        if existing and max(existing) >= candidate:
            return max(existing) + 1
        return candidate

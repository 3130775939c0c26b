"""Bucketed key/value store backing the reference services.

Values are opaque strings (the services store JSON). Without a path the
store lives in memory; with a path the whole store is one JSON document,
loaded on first access and rewritten atomically after every mutation.

INVARIANT: Every operation holds the store lock for its full duration.
"""

from __future__ import annotations

import json
import os
import tempfile
import threading
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path


class StoreUnavailableError(OSError):
    """The backing store could not be read or written."""


class KVStore:
    """Thread-safe bucketed string store."""

    def __init__(self, path: Path | None = None) -> None:
        self._path = path
        self._lock = threading.RLock()
        self._buckets: dict[str, dict[str, str]] | None = None

    @contextmanager
    def transaction(self) -> Generator[KVStore]:
        """Hold the store lock across several operations.

        Usage::

            with store.transaction():
                if store.get(bucket, key) is None:
                    store.put(bucket, key, value)
        """
        with self._lock:
            yield self

    @property
    def path(self) -> Path | None:
        return self._path

    def get(self, bucket: str, key: str) -> str | None:
        with self._lock:
            return self._load().get(bucket, {}).get(key)

    def put(self, bucket: str, key: str, value: str) -> None:
        with self._lock:
            buckets = self._load()
            buckets.setdefault(bucket, {})[key] = value
            self._flush()

    def delete(self, bucket: str, key: str) -> bool:
        """Remove *key*. Returns False when it was not present."""
        with self._lock:
            entries = self._load().get(bucket, {})
            if key not in entries:
                return False
            del entries[key]
            self._flush()
            return True

    def items(self, bucket: str) -> list[tuple[str, str]]:
        """All ``(key, value)`` pairs of *bucket*, ordered by key."""
        with self._lock:
            return sorted(self._load().get(bucket, {}).items())

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def _load(self) -> dict[str, dict[str, str]]:
        if self._buckets is not None:
            return self._buckets
        if self._path is None or not self._path.exists():
            self._buckets = {}
            return self._buckets
        try:
            raw = self._path.read_text(encoding="utf-8")
            data = json.loads(raw) if raw.strip() else {}
        except (OSError, ValueError) as exc:
            msg = f"cannot read store {self._path}: {exc}"
            raise StoreUnavailableError(msg) from exc
        if not isinstance(data, dict):
            msg = f"cannot read store {self._path}: expected a JSON object"
            raise StoreUnavailableError(msg)
        self._buckets = {str(name): dict(entries) for name, entries in data.items()}
        return self._buckets

    def _flush(self) -> None:
        if self._path is None:
            return
        payload = json.dumps(self._buckets, indent=2, sort_keys=True)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(dir=self._path.parent, prefix=".store-", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
            os.replace(tmp, self._path)
        except OSError as exc:
            msg = f"cannot write store {self._path}: {exc}"
            raise StoreUnavailableError(msg) from exc

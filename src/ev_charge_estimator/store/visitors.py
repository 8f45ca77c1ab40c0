"""Visitor counter, injected into the API instead of living as global state."""

from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path

from ev_charge_estimator.errors import VisitorStoreError

logger = logging.getLogger(__name__)

DEFAULT_START_COUNT = 1248


class VisitorCounter:
    """Monotonic counter starting at ``start``."""

    def __init__(self, start: int = DEFAULT_START_COUNT) -> None:
        self._lock = threading.Lock()
        self._start = start
        self._count: int | None = None

    def _load(self) -> int:
        return self._start

    def _flush(self, count: int) -> None:
        pass

    def current(self) -> int:
        with self._lock:
            if self._count is None:
                self._count = self._load()
            return self._count

    def increment(self) -> int:
        """Count one more visit and return the new total."""
        with self._lock:
            if self._count is None:
                self._count = self._load()
            count = self._count + 1
            self._flush(count)
            self._count = count
        logger.debug("visitor count now %d", count)
        return count


class JsonFileVisitorCounter(VisitorCounter):
    """Counter persisted as ``{"count": N}`` in ``path``."""

    def __init__(self, path: str | os.PathLike[str], start: int = DEFAULT_START_COUNT) -> None:
        super().__init__(start)
        self.path = Path(path)

    def _load(self) -> int:
        if not self.path.exists():
            return self._start
        try:
            return int(json.loads(self.path.read_text())["count"])
        except (OSError, ValueError, KeyError, TypeError) as exc:
            raise VisitorStoreError(f"unreadable visitor file {self.path}: {exc}") from exc

    def _flush(self, count: int) -> None:
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps({"count": count}))
            os.replace(tmp, self.path)
        except OSError as exc:
            raise VisitorStoreError(f"could not write {self.path}: {exc}") from exc

"""Saved charge sessions, kept in an explicit store handed to the outer layers.

The engine never touches a store.  Callers estimate first, then build a
``ChargeSession`` record with ``record_session`` and hand it to the store.
"""

from __future__ import annotations

import logging
import os
import threading
import uuid
from datetime import datetime
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from ev_charge_estimator.config.session import ChargeSessionConfig
from ev_charge_estimator.config.vehicle import VehicleSpec
from ev_charge_estimator.errors import NothingToSaveError, SessionNotFoundError, SessionStoreError
from ev_charge_estimator.models.results import CalculationResult, ChargeSession

logger = logging.getLogger(__name__)

_SESSION_LIST = TypeAdapter(list[ChargeSession])


def record_session(
    spec: VehicleSpec,
    config: ChargeSessionConfig,
    result: CalculationResult,
    created_at: datetime,
    session_id: str | None = None,
) -> ChargeSession:
    """Snapshot one estimate as a history record.

    Raises ``NothingToSaveError`` for a zero-duration result.
    """
    if not result.is_charging:
        raise NothingToSaveError("there is no charging session to save")

    return ChargeSession(
        id=session_id or uuid.uuid4().hex,
        vehicle_id=spec.id,
        vehicle_name=spec.name,
        charge_mode=config.charge_mode,
        start_percent=config.current_percent,
        end_percent=config.target_percent,
        energy_added_kwh=result.energy_needed_kwh,
        duration_minutes=result.duration_minutes,
        cost=result.cost,
        created_at=created_at,
    )


class SessionStore:
    """In-memory history, newest first.

    Subclasses persist by overriding ``_load`` and ``_flush``.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._sessions: list[ChargeSession] | None = None

    # --- persistence hooks ---

    def _load(self) -> list[ChargeSession]:
        return []

    def _flush(self, sessions: list[ChargeSession]) -> None:
        pass

    def _items(self) -> list[ChargeSession]:
        if self._sessions is None:
            self._sessions = self._load()
        return self._sessions

    # --- public API ---

    def add(self, session: ChargeSession) -> ChargeSession:
        with self._lock:
            sessions = [session] + [s for s in self._items() if s.id != session.id]
            self._flush(sessions)
            self._sessions = sessions
        logger.info("saved session %s (%s, %d min)", session.id, session.vehicle_id, session.duration_minutes)
        return session

    def list(self) -> list[ChargeSession]:
        with self._lock:
            return list(self._items())

    def get(self, session_id: str) -> ChargeSession:
        with self._lock:
            for s in self._items():
                if s.id == session_id:
                    return s
        raise SessionNotFoundError(session_id)

    def delete(self, session_id: str) -> bool:
        """Remove one session.  Returns False when the id is unknown."""
        with self._lock:
            current = self._items()
            remaining = [s for s in current if s.id != session_id]
            if len(remaining) == len(current):
                return False
            self._flush(remaining)
            self._sessions = remaining
        logger.info("deleted session %s", session_id)
        return True

    def clear(self) -> int:
        """Remove everything.  Returns how many sessions were dropped."""
        with self._lock:
            dropped = len(self._items())
            self._flush([])
            self._sessions = []
        logger.info("cleared %d sessions", dropped)
        return dropped

    def __len__(self) -> int:
        with self._lock:
            return len(self._items())


class InMemorySessionStore(SessionStore):
    """Process-local history, lost on restart."""


class JsonFileSessionStore(SessionStore):
    """History kept as a JSON list in ``path``, loaded lazily on first access."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        super().__init__()
        self.path = Path(path)

    def _load(self) -> list[ChargeSession]:
        if not self.path.exists():
            return []
        try:
            return _SESSION_LIST.validate_json(self.path.read_bytes())
        except (OSError, ValidationError) as exc:
            raise SessionStoreError(f"unreadable session file {self.path}: {exc}") from exc

    def _flush(self, sessions: list[ChargeSession]) -> None:
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_bytes(_SESSION_LIST.dump_json(sessions, indent=2))
            os.replace(tmp, self.path)
        except OSError as exc:
            raise SessionStoreError(f"could not write {self.path}: {exc}") from exc

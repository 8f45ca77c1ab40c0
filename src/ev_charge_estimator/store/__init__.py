"""Stores — session history and visitor counter, injected into the outer layers."""

from ev_charge_estimator.store.sessions import (
    InMemorySessionStore,
    JsonFileSessionStore,
    SessionStore,
    record_session,
)
from ev_charge_estimator.store.visitors import JsonFileVisitorCounter, VisitorCounter

__all__ = [
    "SessionStore",
    "InMemorySessionStore",
    "JsonFileSessionStore",
    "record_session",
    "VisitorCounter",
    "JsonFileVisitorCounter",
]

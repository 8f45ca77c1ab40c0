"""Exceptions raised by the stores around the engine.

The estimator itself raises none of these.
"""


class EstimatorError(Exception):
    """Base class for package errors."""


class StoreError(EstimatorError):
    """A persistent store could not be read or written."""


class SessionStoreError(StoreError):
    """The session history file could not be read or written."""


class VisitorStoreError(StoreError):
    """The visitor counter file could not be read or written."""


class NothingToSaveError(EstimatorError):
    """A result with zero duration was offered for saving."""


class SessionNotFoundError(EstimatorError, KeyError):
    """No saved session has the requested id."""

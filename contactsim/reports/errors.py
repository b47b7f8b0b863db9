"""Exceptions raised by the contact bookkeeping in :mod:`contactsim.reports`."""

from typing import Optional


class ContactMetricsError(Exception):
    """Base class for contact bookkeeping errors."""


class InvalidPairError(ContactMetricsError, ValueError):
    """A contact was requested between a host and itself."""

    def __init__(self, host, now: Optional[float] = None):
        at = "" if now is None else f" (t={now:.1f})"
        super().__init__(f"Cannot build a contact between {host} and itself{at}")
        self.host = host
        self.now = now


class DuplicateActiveConnectionError(ContactMetricsError):
    """A second connect event arrived for a pair that is already connected."""

    def __init__(self, h1, h2, now: float):
        super().__init__(
            f"Already contained a connection of {h1} and {h2} (t={now:.1f})"
        )
        self.h1 = h1
        self.h2 = h2
        self.now = now


class AlreadyClosedError(ContactMetricsError):
    """``close()`` was called on a connection that had already ended."""

    def __init__(self, h1, h2, now: float):
        super().__init__(
            f"The connection between {h1} and {h2} is already closed (t={now:.1f})"
        )
        self.h1 = h1
        self.h2 = h2
        self.now = now


class StillActiveError(ContactMetricsError):
    """The duration of a connection was requested while it is still open."""

    def __init__(self, h1, h2):
        super().__init__(f"The connection between {h1} and {h2} is still active")
        self.h1 = h1
        self.h2 = h2


class NegativeDurationError(ContactMetricsError):
    """A connection was closed at a time earlier than its start."""

    def __init__(self, h1, h2, start_time: float, now: float):
        super().__init__(
            f"The connection between {h1} and {h2} started at t={start_time:.1f} "
            f"cannot end at t={now:.1f}"
        )
        self.h1 = h1
        self.h2 = h2
        self.start_time = start_time
        self.now = now

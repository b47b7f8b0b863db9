# contactsim/reports/contacts.py
"""
Contact keys and connection records.

A contact is an unordered pair of hosts; a connection is one timed interval
during which that pair stayed in range.
"""

from dataclasses import dataclass
from typing import Optional, Union

from ..agents.host import Host
from .errors import AlreadyClosedError, InvalidPairError, NegativeDurationError, StillActiveError


@dataclass(frozen=True)
class ContactKey:
    """Unordered host pair. Always stored with ``h1 < h2``."""
    h1: Host
    h2: Host

    def __post_init__(self):
        if self.h1 == self.h2:
            raise InvalidPairError(self.h1)
        if self.h2 < self.h1:
            # frozen dataclass: swap through object.__setattr__
            h1, h2 = self.h2, self.h1
            object.__setattr__(self, "h1", h1)
            object.__setattr__(self, "h2", h2)

    def contains(self, host: Host) -> bool:
        return host == self.h1 or host == self.h2

    def other(self, host: Host) -> Host:
        """Return the partner of ``host`` in this contact."""
        if host == self.h1:
            return self.h2
        if host == self.h2:
            return self.h1
        raise ValueError(f"{host} is not part of contact {self}")

    def __str__(self) -> str:
        return f"{self.h1}-{self.h2}"


def make_key(h1: Host, h2: Host, now: Optional[float] = None) -> ContactKey:
    """
    Build the direction-independent key of the pair ``(h1, h2)``.

    ``now`` only labels the InvalidPairError raised for a self-pair.
    """
    if h1 == h2:
        raise InvalidPairError(h1, now)
    return ContactKey(h1, h2)


@dataclass(frozen=True)
class Closed:
    duration: float


@dataclass(frozen=True)
class StillOpen:
    pass


ConnectionStatus = Union[Closed, StillOpen]


@dataclass(eq=False)
class Connection:
    """
    One lifetime of contact for a :class:`ContactKey`.

    ``end_time`` is ``None`` while the connection is active. Records are
    compared by identity: two connections of the same pair at different
    times are different records.
    """
    contact: ContactKey
    start_time: float
    end_time: Optional[float] = None

    @property
    def is_active(self) -> bool:
        return self.end_time is None

    def contains(self, host: Host) -> bool:
        return self.contact.contains(host)

    def close(self, now: float) -> None:
        """Record the end of the connection at simulation time ``now``."""
        if self.end_time is not None:
            raise AlreadyClosedError(self.contact.h1, self.contact.h2, now)
        if now < self.start_time:
            raise NegativeDurationError(self.contact.h1, self.contact.h2, self.start_time, now)
        self.end_time = float(now)

    def duration(self) -> float:
        """
        Seconds between the start and the end of the connection.

        Raises:
            StillActiveError: if :meth:`close` has not been called yet.
        """
        if self.end_time is None:
            raise StillActiveError(self.contact.h1, self.contact.h2)
        return self.end_time - self.start_time

    def status(self) -> ConnectionStatus:
        if self.end_time is None:
            return StillOpen()
        return Closed(self.end_time - self.start_time)

    def __str__(self) -> str:
        end = "open" if self.end_time is None else f"{self.end_time:.1f}"
        return f"Connection({self.contact}, {self.start_time:.1f}->{end})"

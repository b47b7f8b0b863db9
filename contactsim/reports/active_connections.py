# contactsim/reports/active_connections.py

import logging
from typing import Dict, Iterator, Optional

from ..agents.host import Host
from .contacts import Connection, ContactKey, make_key
from .errors import DuplicateActiveConnectionError

logger = logging.getLogger(__name__)


class ActiveConnectionTable:
    """
    Currently open connections, at most one per unordered host pair.
    """

    def __init__(self):
        self._active: Dict[ContactKey, Connection] = {}

    def open(self, h1: Host, h2: Host, now: float) -> Connection:
        """Start a connection between ``h1`` and ``h2`` at ``now``."""
        key = make_key(h1, h2, now)
        if key in self._active:
            # two connects without a disconnect in between: the event source is broken
            logger.error("Duplicate connect for %s at t=%.1f", key, now)
            raise DuplicateActiveConnectionError(h1, h2, now)

        connection = Connection(key, float(now))
        self._active[key] = connection
        return connection

    def close(self, h1: Host, h2: Host, now: float) -> Optional[Connection]:
        """
        Remove and close the open connection of the pair.

        Returns None when the pair has no open connection, e.g. when it
        connected during the warmup period.
        """
        connection = self._active.pop(make_key(h1, h2, now), None)
        if connection is None:
            return None
        connection.close(now)
        return connection

    def get(self, h1: Host, h2: Host) -> Optional[Connection]:
        return self._active.get(make_key(h1, h2))

    def __contains__(self, key: ContactKey) -> bool:
        return key in self._active

    def __len__(self) -> int:
        return len(self._active)

    def __iter__(self) -> Iterator[Connection]:
        return iter(list(self._active.values()))

# contactsim/reports/sample_window.py
"""
Sample window buffer: splits the connection stream into fixed-length cycles.

Each cycle bucket holds the connections that *started* during that cycle,
whether or not they have ended since.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from .contacts import Connection
from ..simulation.context import SimulationContext


@dataclass
class CycleBucket:
    index: int
    start_time: float
    end_time: Optional[float] = None
    connections: List[Connection] = field(default_factory=list)

    @property
    def is_current(self) -> bool:
        return self.end_time is None

    def __len__(self) -> int:
        return len(self.connections)

    def __iter__(self) -> Iterator[Connection]:
        return iter(self.connections)


@dataclass
class SampleWindow:
    """Consecutive cycles rolled up into one reporting window."""
    first_cycle: int
    last_cycle: int
    end_time: Optional[float]
    connections: List[Connection]


class SampleWindowBuffer:

    def __init__(self, context: SimulationContext):
        self.context = context
        self.current_cycle = 0
        self._buckets: List[CycleBucket] = [CycleBucket(0, context.now())]

    @property
    def current(self) -> CycleBucket:
        return self._buckets[self.current_cycle]

    def record_start(self, connection: Connection) -> None:
        """Add a just-opened connection to the current cycle."""
        self.current.connections.append(connection)

    def advance_cycle(self, now: Optional[float] = None) -> bool:
        """
        Close the current cycle at ``now`` (default: the context clock) and
        open the next one.

        Must be called once per sampling tick; every call starts a new cycle.
        Does nothing during warmup. Returns True if a new cycle was opened.
        """
        if self.context.is_warmup():
            return False

        now = self.context.now() if now is None else float(now)
        self.current.end_time = now
        self.current_cycle += 1
        self._buckets.append(CycleBucket(self.current_cycle, now))
        return True

    def cycles(self) -> Iterator[CycleBucket]:
        """Iterate all buckets in cycle order; call again to restart."""
        for bucket in self._buckets:
            yield bucket

    def windows(self, cycles_per_window: int = 1) -> Iterator[SampleWindow]:
        """Roll up consecutive cycles into windows of ``cycles_per_window`` cycles."""
        if cycles_per_window < 1:
            raise ValueError("cycles_per_window must be >= 1")

        for first in range(0, len(self._buckets), cycles_per_window):
            group = self._buckets[first:first + cycles_per_window]
            connections: List[Connection] = []
            for bucket in group:
                connections.extend(bucket.connections)
            yield SampleWindow(
                first_cycle=group[0].index,
                last_cycle=group[-1].index,
                end_time=group[-1].end_time,
                connections=connections,
            )

    def __len__(self) -> int:
        return len(self._buckets)

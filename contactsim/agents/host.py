# contactsim/agents/host.py

from dataclasses import dataclass, field
from functools import total_ordering
from typing import Optional

from ..utils.position import Position


@total_ordering
@dataclass(eq=False)
class Host:
    """
    Mobile simulation node.

    Identity is the integer address: equality, hashing and ordering ignore
    position and movement state, so a host stays the same dict key while it moves.
    """
    address: int
    position: Position
    speed: float = 1.0
    name_prefix: str = "n"
    waypoint: Optional[Position] = field(default=None, repr=False)

    @property
    def name(self) -> str:
        return f"{self.name_prefix}{self.address}"

    def is_in_range(self, other: 'Host', comm_range: float) -> bool:
        return self.position.is_within_range(other.position, comm_range)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Host):
            return NotImplemented
        return self.address == other.address

    def __lt__(self, other: 'Host') -> bool:
        if not isinstance(other, Host):
            return NotImplemented
        return self.address < other.address

    def __hash__(self) -> int:
        return hash(self.address)

    def __str__(self) -> str:
        return self.name

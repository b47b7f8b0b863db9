import numpy as np

from ..agents.host import Host
from ..utils.position import Position
from ..config.simulation_config import SimulationConfig


class RandomWaypointMovement:
    """
    Random waypoint mobility.
    Each host walks straight to a uniformly random point of the area at its own
    speed, then picks the next one.
    """

    def __init__(self, config: SimulationConfig, rng: np.random.RandomState):
        self.config = config
        self.rng = rng

    def random_position(self) -> Position:
        return Position(
            self.rng.uniform(0, self.config.area_size[0]),
            self.rng.uniform(0, self.config.area_size[1])
        )

    def step(self, host: Host, dt: float) -> None:
        """Advance ``host`` by ``dt`` seconds of movement."""
        if host.waypoint is None:
            host.waypoint = self.random_position()

        host.position = host.position.move_towards(host.waypoint, host.speed * dt)

        if host.position.distance_to(host.waypoint) == 0:
            host.waypoint = self.random_position()

    def get_strategy_name(self) -> str:
        return "Random Waypoint"

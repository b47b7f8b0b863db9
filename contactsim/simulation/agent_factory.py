from typing import List

import numpy as np

from ..agents.host import Host
from ..utils.position import Position
from ..config.simulation_config import SimulationConfig


class AgentFactory:
    """
    Factory class for creating hosts.

    Uses a NumPy RNG seeded from the config, so the same seed always yields the
    same initial positions and speeds.
    """

    def __init__(self, config: SimulationConfig, rng: np.random.RandomState = None):
        self.config = config
        self.rng = rng if rng is not None else np.random.RandomState(config.seed)

    def create_hosts(self) -> List[Host]:
        hosts = []
        low, high = self.config.host_speed_range
        for address in range(self.config.num_hosts):
            position = Position(
                self.rng.uniform(0, self.config.area_size[0]),
                self.rng.uniform(0, self.config.area_size[1])
            )
            hosts.append(Host(address=address, position=position,
                              speed=float(self.rng.uniform(low, high))))
        return hosts

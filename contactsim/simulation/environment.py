# Simulation environment setup

import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

import numpy as np
import simpy

from .agent_factory import AgentFactory
from .context import SimulationContext
from .processes import ContactDetector, mobility_process, sampling_process
from ..agents.host import Host
from ..config.simulation_config import SimulationConfig
from ..movement.random_waypoint import RandomWaypointMovement
from ..reports.connections_report import ConnectionsReport

logger = logging.getLogger(__name__)


class ContactSimulation:
    """Main simulation environment"""

    def __init__(self, config: SimulationConfig, output_path: Optional[Union[str, Path]] = None):
        self.config = config
        self.env = simpy.Environment()
        self.context = SimulationContext(self.env, config.warmup_time)
        self.rng = np.random.RandomState(config.seed)

        self.hosts: List[Host] = AgentFactory(config, self.rng).create_hosts()
        self.movement = RandomWaypointMovement(config, self.rng)
        self.report = ConnectionsReport(self.context, config, output_path)
        self.detector = ContactDetector(self.report, config.comm_range)
        self.samples = []

    def start_processes(self):
        """Start mobility and sampling processes"""
        self.env.process(mobility_process(self.env, self.hosts, self.movement, self.detector, self.config))
        self.env.process(sampling_process(self.env, self.hosts, self.report, self.config))

    def run(self):
        """Run the simulation and finalize the report"""
        logger.info("Running simulation: %d hosts, %.0fs (warmup %.0fs)",
                    len(self.hosts), self.config.sim_time, self.config.warmup_time)
        self.start_processes()
        self.env.run(until=self.config.sim_time)
        self.samples = self.report.done()
        logger.info("Simulation ended with %d host samples.", len(self.samples))
        return self.samples

    def get_results(self) -> Dict:
        return {
            "hosts": self.hosts,
            "samples": self.samples,
            "cycles": len(self.report.sample_window),
            "active_connections": len(self.report.active_connections),
        }

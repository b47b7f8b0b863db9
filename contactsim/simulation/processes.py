# contactsim/simulation/processes.py

import logging
from typing import List, Set, Tuple

import numpy as np
import simpy

from ..agents.host import Host
from ..config.simulation_config import SimulationConfig
from ..movement.random_waypoint import RandomWaypointMovement
from ..reports.connections_report import ConnectionsReport

logger = logging.getLogger(__name__)


class ContactDetector:
    """
    Turns host positions into connect/disconnect events.

    Two hosts are connected while their distance is within ``comm_range``.
    Events of one update are delivered in host address order.
    """

    def __init__(self, report: ConnectionsReport, comm_range: float):
        self.report = report
        self.comm_range = comm_range
        self.connected: Set[Tuple[int, int]] = set()

    def pairs_in_range(self, hosts: List[Host]) -> Set[Tuple[int, int]]:
        positions = np.array([host.position.as_tuple() for host in hosts], dtype=float)
        deltas = positions[:, None, :] - positions[None, :, :]
        distances = np.sqrt((deltas ** 2).sum(axis=-1))
        rows, cols = np.nonzero(np.triu(distances <= self.comm_range, k=1))
        return {(int(i), int(j)) for i, j in zip(rows, cols)}

    def update(self, hosts: List[Host]) -> None:
        in_range = self.pairs_in_range(hosts)

        for i, j in sorted(self.connected - in_range):
            self.report.on_disconnect(hosts[i], hosts[j])
        for i, j in sorted(in_range - self.connected):
            self.report.on_connect(hosts[i], hosts[j])

        self.connected = in_range


def mobility_process(
    env: simpy.Environment,
    hosts: List[Host],
    movement: RandomWaypointMovement,
    detector: ContactDetector,
    config: SimulationConfig
):
    """SimPy process: detect contacts, then move every host by one update step."""
    while True:
        detector.update(hosts)
        yield env.timeout(config.update_interval)

        for host in hosts:
            movement.step(host, config.update_interval)


def sampling_process(
    env: simpy.Environment,
    hosts: List[Host],
    report: ConnectionsReport,
    config: SimulationConfig
):
    """SimPy process that fires the report's sample tick every sample interval."""
    while True:
        yield env.timeout(config.sample_interval)
        report.on_sample_tick(hosts, env.now)

# contactsim/reports/connections_report.py
"""
Sampling report of the contacts between hosts.

Connections are tracked from the connect/disconnect events of the simulation
and grouped by the sampling cycle in which they started. When the simulation
ends, one row is produced per sampling window and per host that had a
connection in that window:

    timestamp, host, contact-time avg, contact-time deviation,
    inter-contact-time avg, nrof contacts, nrof single contacts,
    nrof multiple contacts
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from analysis.host_statistics import HostSample, hosts_in
from ..agents.host import Host
from ..config.simulation_config import SimulationConfig
from ..simulation.context import SimulationContext
from .active_connections import ActiveConnectionTable
from .contacts import Connection
from .sample_window import SampleWindowBuffer

logger = logging.getLogger(__name__)


class ConnectionsReport:

    def __init__(self, context: SimulationContext, config: SimulationConfig,
                 output_path: Optional[Union[str, Path]] = None):
        self.context = context
        self.sample_interval_cycles = config.nrof_sample_interval_cycles
        self.cent_decay_gamma = config.cent_decay_gamma  # reserved, no centrality yet
        self.conventional_std_dev = config.conventional_std_dev
        self.output_path = Path(output_path) if output_path is not None else None

        self.active_connections = ActiveConnectionTable()
        self.sample_window = SampleWindowBuffer(context)

    # -----------------------------------------------------
    # Connection events
    # -----------------------------------------------------
    def on_connect(self, host1: Host, host2: Host, now: Optional[float] = None) -> Optional[Connection]:
        if self.context.is_warmup():
            return None

        now = self.context.now() if now is None else now
        connection = self.active_connections.open(host1, host2, now)
        self.sample_window.record_start(connection)
        logger.debug("t=%.1f connect %s", now, connection.contact)
        return connection

    def on_disconnect(self, host1: Host, host2: Host, now: Optional[float] = None) -> Optional[Connection]:
        if self.context.is_warmup():
            return None

        now = self.context.now() if now is None else now
        connection = self.active_connections.close(host1, host2, now)
        if connection is None:
            # the connection was started during the warm up period
            logger.debug("t=%.1f disconnect %s-%s without active connection", now, host1, host2)
            return None

        logger.debug("t=%.1f disconnect %s after %.1fs", now, connection.contact,
                     connection.end_time - connection.start_time)
        return connection

    # -----------------------------------------------------
    # Sampling
    # -----------------------------------------------------
    def on_sample_tick(self, hosts: Iterable[Host], now: Optional[float] = None) -> None:
        """
        Called once per sample interval. Outside warmup the current cycle is
        closed and an empty one starts collecting the new connections.
        """
        now = self.context.now() if now is None else now
        if self.sample_window.advance_cycle(now):
            logger.info("Sample cycle %d started at t=%.1f (%d active connections)",
                        self.sample_window.current_cycle, now,
                        len(self.active_connections))

    # -----------------------------------------------------
    # Finalization
    # -----------------------------------------------------
    def samples(self) -> List[HostSample]:
        """Host samples of every window, in window order then first-appearance order."""
        final_time = self.context.now()
        samples = []
        for window in self.sample_window.windows(self.sample_interval_cycles):
            timestamp = window.end_time if window.end_time is not None else final_time
            for host in hosts_in(window.connections):
                samples.append(HostSample.from_records(
                    timestamp, host, window.connections, self.conventional_std_dev))
        return samples

    def done(self) -> List[HostSample]:
        """Compute the report rows and write them to the output file, if any."""
        samples = self.samples()

        if self.output_path is not None:
            self.output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.output_path, 'w') as f:
                for sample in samples:
                    f.write(sample.as_row() + "\n")
            logger.info("Wrote %d rows to %s", len(samples), self.output_path)

        still_open = len(self.active_connections)
        if still_open:
            logger.info("%d connections still active at t=%.1f", still_open, self.context.now())
        return samples

# analysis/host_statistics.py
"""
Per-host contact statistics over one sampling window.

Statistics:
- connection time: how long a connection lasts (closed connections only)
- inter-contact time: elapsed time between the starts of consecutive connections
- contact counts: connections per host, and partners met once / more than once

Every function is pure: a HostSample is recomputed from its records, never updated.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, List, Sequence

import numpy as np
import pandas as pd

from contactsim.agents.host import Host
from contactsim.reports.contacts import Closed, Connection


@dataclass(frozen=True)
class ContactCounts:
    total: int
    single_pair: int
    multi_pair: int


def filter_by_host(records: Iterable[Connection], host: Host) -> List[Connection]:
    """Connections of ``records`` in which ``host`` took part, in order."""
    return [conn for conn in records if conn.contains(host)]


def _closed_durations(records: Iterable[Connection]) -> np.ndarray:
    # connections still open at aggregation time are skipped
    durations = [status.duration for status in (conn.status() for conn in records)
                 if isinstance(status, Closed)]
    return np.asarray(durations, dtype=float)


def connection_time_average(records: Sequence[Connection]) -> float:
    """Mean duration of the closed connections; NaN if none has closed."""
    durations = _closed_durations(records)
    if durations.size == 0:
        return float("nan")
    return float(durations.mean())


def connection_time_std_dev(records: Sequence[Connection], conventional: bool = False) -> float:
    """
    Deviation of the closed connection durations.

    By default this is ``sqrt(sum((avg - d_i)^2)) / n``, the formula the contact
    reports have always used. ``conventional=True`` gives the population
    standard deviation ``sqrt(sum((avg - d_i)^2) / n)`` instead.
    NaN if no connection has closed.
    """
    durations = _closed_durations(records)
    n = durations.size
    if n == 0:
        return float("nan")

    squares = np.sum((durations.mean() - durations) ** 2)
    if conventional:
        return float(np.sqrt(squares / n))
    return float(np.sqrt(squares) / n)


def inter_contact_time_average(records: Sequence[Connection]) -> float:
    """
    Mean gap between consecutive connection start times.

    0 with no connections. With a single connection the value is its start
    time, which is not a gap; kept so reports stay comparable with older runs.
    """
    n = len(records)
    if n == 0:
        return 0.0
    if n == 1:
        return float(records[0].start_time)

    starts = np.sort(np.asarray([conn.start_time for conn in records], dtype=float))
    return float(np.diff(starts).mean())


def contact_counts(records: Sequence[Connection], host: Host) -> ContactCounts:
    """Count connections of ``host`` and split its partners by how often they were met."""
    partners = Counter(conn.contact.other(host) for conn in records)
    single = sum(1 for seen in partners.values() if seen == 1)
    multi = sum(1 for seen in partners.values() if seen > 1)
    return ContactCounts(total=len(records), single_pair=single, multi_pair=multi)


def hosts_in(records: Iterable[Connection]) -> List[Host]:
    """Hosts taking part in ``records``, in order of first appearance."""
    seen = {}
    for conn in records:
        seen.setdefault(conn.contact.h1, None)
        seen.setdefault(conn.contact.h2, None)
    return list(seen)


@dataclass(frozen=True)
class HostSample:
    """Snapshot of one host's connections along one sampling window."""
    timestamp: float
    host: Host
    connections: tuple
    connection_time_avg: float
    connection_time_std_dev: float
    inter_contact_time_avg: float
    counts: ContactCounts

    @classmethod
    def from_records(cls, timestamp: float, host: Host, records: Iterable[Connection],
                     conventional_std_dev: bool = False) -> 'HostSample':
        host_connections = filter_by_host(records, host)
        return cls(
            timestamp=float(timestamp),
            host=host,
            connections=tuple(host_connections),
            connection_time_avg=connection_time_average(host_connections),
            connection_time_std_dev=connection_time_std_dev(host_connections, conventional_std_dev),
            inter_contact_time_avg=inter_contact_time_average(host_connections),
            counts=contact_counts(host_connections, host),
        )

    def as_row(self) -> str:
        """
        timestamp, host name, contact-time avg, contact-time deviation,
        inter-contact-time avg, nrof contacts, nrof single contacts,
        nrof multiple contacts
        """
        return "%.1f, %s, %.1f, %.1f, %.1f, %d, %d, %d" % (
            self.timestamp, self.host, self.connection_time_avg,
            self.connection_time_std_dev, self.inter_contact_time_avg,
            self.counts.total, self.counts.single_pair, self.counts.multi_pair)

    def __str__(self) -> str:
        return self.as_row()


REPORT_COLUMNS = [
    "timestamp",
    "host",
    "connection_time_avg",
    "connection_time_std_dev",
    "inter_contact_time_avg",
    "nrof_contacts",
    "nrof_single_contacts",
    "nrof_multiple_contacts",
]


def samples_to_dataframe(samples: Iterable[HostSample]) -> pd.DataFrame:
    """Tabulate host samples, one row per (window, host)."""
    rows = [
        {
            "timestamp": s.timestamp,
            "host": s.host.name,
            "connection_time_avg": s.connection_time_avg,
            "connection_time_std_dev": s.connection_time_std_dev,
            "inter_contact_time_avg": s.inter_contact_time_avg,
            "nrof_contacts": s.counts.total,
            "nrof_single_contacts": s.counts.single_pair,
            "nrof_multiple_contacts": s.counts.multi_pair,
        }
        for s in samples
    ]
    return pd.DataFrame(rows, columns=REPORT_COLUMNS)


def load_report(path: str) -> pd.DataFrame:
    """Read a written connections report back into a DataFrame."""
    return pd.read_csv(path, names=REPORT_COLUMNS, skipinitialspace=True, comment="#")

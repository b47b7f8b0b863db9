"""
Analysis Package
================
Per-host contact statistics for the connections report.
"""

from .host_statistics import (
    HostSample,
    ContactCounts,
    filter_by_host,
    connection_time_average,
    connection_time_std_dev,
    inter_contact_time_average,
    contact_counts,
    samples_to_dataframe,
)

__all__ = [
    'HostSample',
    'ContactCounts',
    'filter_by_host',
    'connection_time_average',
    'connection_time_std_dev',
    'inter_contact_time_average',
    'contact_counts',
    'samples_to_dataframe',
]

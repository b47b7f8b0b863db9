"""Visualization tools for the contact simulation reports"""

from .contact_plots import plot_contact_metrics, summarize_windows

__all__ = [
    'plot_contact_metrics',
    'summarize_windows',
]

# -*- coding: utf-8 -*-
"""
Plots of the connections report: per-window contact metrics averaged over hosts.
"""

from pathlib import Path
from typing import Union

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pandas as pd

# ===============================
# Matplotlib configuration
# ===============================
plt.rcParams.update({
    "font.family": "serif",
    "font.size": 9,
    "axes.labelsize": 9,
    "axes.titlesize": 9,
    "legend.fontsize": 8,
    "xtick.labelsize": 8,
    "ytick.labelsize": 8,
    "axes.linewidth": 0.8,
    "xtick.direction": "in",
    "ytick.direction": "in",
    "savefig.bbox": "tight",
    "savefig.pad_inches": 0.02,
})

CONTACT_COLOR = "dodgerblue"
INTER_CONTACT_COLOR = "red"
COUNT_COLOR = "purple"


def summarize_windows(df: pd.DataFrame) -> pd.DataFrame:
    """Average every metric over the hosts of each window (NaN rows are skipped)."""
    return (
        df.groupby("timestamp")
        .agg(
            connection_time_avg=("connection_time_avg", "mean"),
            connection_time_std_dev=("connection_time_std_dev", "mean"),
            inter_contact_time_avg=("inter_contact_time_avg", "mean"),
            nrof_contacts=("nrof_contacts", "sum"),
            hosts=("host", "nunique"),
        )
        .reset_index()
    )


def plot_contact_metrics(df: pd.DataFrame, output: Union[str, Path]) -> Path:
    """Plot contact time, inter-contact time and contact counts per window to ``output``."""
    summary = summarize_windows(df)
    output = Path(output)
    output.parent.mkdir(parents=True, exist_ok=True)

    fig, (ax_time, ax_count) = plt.subplots(2, 1, figsize=(3.4, 4.2), sharex=True)

    ax_time.errorbar(
        summary["timestamp"], summary["connection_time_avg"],
        yerr=summary["connection_time_std_dev"],
        color=CONTACT_COLOR, marker="o", markersize=3, capsize=2,
        label="Contact time"
    )
    ax_time.plot(
        summary["timestamp"], summary["inter_contact_time_avg"],
        color=INTER_CONTACT_COLOR, marker="s", markersize=3,
        label="Inter-contact time"
    )
    ax_time.set_ylabel("Time (s)")
    ax_time.legend(loc="best")

    ax_count.bar(summary["timestamp"], summary["nrof_contacts"],
                 width=summary["timestamp"].diff().median() * 0.6 if len(summary) > 1 else 1.0,
                 color=COUNT_COLOR)
    ax_count.set_xlabel("Simulation time (s)")
    ax_count.set_ylabel("Host contacts")

    fig.savefig(output)
    plt.close(fig)
    return output

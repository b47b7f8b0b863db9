"""
Simulation Configuration
========================
Configuration parameters for the contact simulation and the connections report.
"""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Tuple, Union

import yaml

# Setting names used by the original report configuration files
SETTING_ALIASES = {
    "nrofSampleIntervalCycles": "nrof_sample_interval_cycles",
    "centDecayGamma": "cent_decay_gamma",
    "interval": "sample_interval",
    "warmup": "warmup_time",
}


@dataclass
class SimulationConfig:

    # ============================================================================
    # SIMULATION PARAMETERS
    # ============================================================================

    sim_time: float = 43200.0  # 12 hours
    warmup_time: float = 1000.0
    seed: int = 42

    # Hosts and mobility
    num_hosts: int = 30
    area_size: Tuple[float, float] = (1000.0, 1000.0)
    comm_range: float = 50.0
    host_speed_range: Tuple[float, float] = (0.5, 1.5)
    update_interval: float = 1.0  # mobility + contact detection step

    # ============================================================================
    # CONNECTIONS REPORT PARAMETERS
    # ============================================================================

    sample_interval: float = 3600.0  # length of one sampling cycle
    nrof_sample_interval_cycles: int = 1  # cycles rolled up into each report row
    cent_decay_gamma: float = 0.9  # reserved for the centrality score
    conventional_std_dev: bool = False

    report_dir: str = "results/reports"
    report_name: str = "ConnectionsReport"

    def __post_init__(self):
        self.area_size = tuple(self.area_size)
        self.host_speed_range = tuple(self.host_speed_range)

        if self.sim_time <= 0:
            raise ValueError("sim_time must be positive")
        if self.warmup_time < 0:
            raise ValueError("warmup_time must be >= 0")
        if self.sample_interval <= 0:
            raise ValueError("sample_interval must be positive")
        if self.update_interval <= 0:
            raise ValueError("update_interval must be positive")
        if int(self.nrof_sample_interval_cycles) < 1:
            raise ValueError("nrof_sample_interval_cycles must be >= 1")
        if not 0.0 < self.cent_decay_gamma < 1.0:
            raise ValueError("cent_decay_gamma must be in (0, 1)")
        if self.num_hosts < 2:
            raise ValueError("num_hosts must be >= 2")
        if self.host_speed_range[0] > self.host_speed_range[1]:
            raise ValueError("host_speed_range must be (min, max)")

        self.nrof_sample_interval_cycles = int(self.nrof_sample_interval_cycles)

    @property
    def report_path(self) -> Path:
        return Path(self.report_dir) / f"{self.report_name}.txt"

    @classmethod
    def from_dict(cls, settings: Dict[str, Any]) -> 'SimulationConfig':
        """Build a config from a mapping of setting names (snake_case or original names)."""
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in settings.items():
            name = SETTING_ALIASES.get(key, key)
            if name not in known:
                raise ValueError(f"Unknown setting '{key}'")
            kwargs[name] = value
        return cls(**kwargs)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> 'SimulationConfig':
        return cls.from_dict(load_settings(path))


def load_settings(path: Union[str, Path]) -> Dict[str, Any]:
    """Read the raw settings mapping of a YAML file, names normalized to snake_case."""
    with open(path, 'r') as f:
        settings = yaml.safe_load(f) or {}
    if not isinstance(settings, dict):
        raise ValueError(f"{path} must contain a mapping of settings")
    return {SETTING_ALIASES.get(key, key): value for key, value in settings.items()}


DEFAULT_CONFIG = SimulationConfig()

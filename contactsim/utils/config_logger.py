"""Utility to log configuration parameters for experiment tracking"""

import json
from dataclasses import asdict
from datetime import datetime
from pathlib import Path

from contactsim.config.simulation_config import SimulationConfig


def extract_report_config(config: SimulationConfig) -> dict:
    """Split the configuration into simulation and report parameters"""

    simulation_params = {
        'sim_time': config.sim_time,
        'warmup_time': config.warmup_time,
        'seed': config.seed,
        'num_hosts': config.num_hosts,
        'area_size': list(config.area_size),
        'comm_range': config.comm_range,
        'host_speed_range': list(config.host_speed_range),
        'update_interval': config.update_interval,
    }

    report_params = {
        'sample_interval': config.sample_interval,
        'nrof_sample_interval_cycles': config.nrof_sample_interval_cycles,
        'cent_decay_gamma': config.cent_decay_gamma,
        'conventional_std_dev': config.conventional_std_dev,
    }

    return {
        'simulation_parameters': simulation_params,
        'report_parameters': report_params,
    }


def save_run_config(config: SimulationConfig, run_name: str,
                    save_dir: str = "results/configs") -> Path:
    """Save a configuration snapshot of a run next to its results."""

    config_data = {
        'run_name': run_name,
        'run_started': datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
        'configuration': extract_report_config(config),
        'raw': asdict(config),
    }

    config_path = Path(save_dir) / f"{run_name}.json"
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, 'w') as f:
        json.dump(config_data, f, indent=2)

    print(f"📝 Run configuration saved: {config_path}")
    return config_path


def print_config_summary(config: SimulationConfig):
    """Print human-readable configuration summary"""

    summary = extract_report_config(config)

    print("\n" + "="*60)
    print("⚙️  CONFIGURATION SUMMARY")
    print("="*60)

    print("\n🌍 SIMULATION PARAMETERS:")
    for key, value in summary['simulation_parameters'].items():
        if isinstance(value, list):
            print(f"   {key}: {value}")
        else:
            print(f"   {key}: {value:,}" if isinstance(value, int) else f"   {key}: {value}")

    print("\n📊 REPORT PARAMETERS:")
    for key, value in summary['report_parameters'].items():
        print(f"   {key}: {value}")

    print("="*60 + "\n")

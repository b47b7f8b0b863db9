# contactsim/simulation/runner.py

import argparse
import logging
from datetime import datetime
from pathlib import Path

from analysis.host_statistics import samples_to_dataframe
from ..config.simulation_config import SimulationConfig, load_settings
from ..utils.config_logger import print_config_summary, save_run_config
from ..utils.log_setup import configure_run_logging
from .environment import ContactSimulation

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run a contact simulation and write the connections report")
    parser.add_argument("--config", type=str, default=None, help="YAML file with simulation settings")
    parser.add_argument("--sim-time", type=float, default=None, help="Simulation duration in seconds")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--outdir", type=str, default="results", help="Output directory")
    parser.add_argument("--plot", action="store_true", help="Plot the per-window contact metrics")
    parser.add_argument("--debug", action="store_true", help="Log every connection event to the console")
    return parser


def load_config(args: argparse.Namespace) -> SimulationConfig:
    settings = {}
    if args.config:
        settings = load_settings(args.config)
    if args.sim_time is not None:
        settings["sim_time"] = args.sim_time
    if args.seed is not None:
        settings["seed"] = args.seed
    # a report_dir given in the config file wins over --outdir
    settings.setdefault("report_dir", str(Path(args.outdir) / "reports"))
    return SimulationConfig.from_dict(settings)


def main(argv=None):
    args = build_parser().parse_args(argv)
    config = load_config(args)

    run_name = f"contacts_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
    logfile = configure_run_logging(
        run_name, log_dir=str(Path(args.outdir) / "logs"),
        console_level=logging.DEBUG if args.debug else logging.INFO)

    print_config_summary(config)
    save_run_config(config, run_name, save_dir=str(Path(args.outdir) / "configs"))

    simulation = ContactSimulation(config, output_path=config.report_path)
    samples = simulation.run()

    print("\n=== SIMULATION RESULTS ===")
    results = simulation.get_results()
    print(f"Sample cycles: {results['cycles']}")
    print(f"Host samples: {len(samples)}")
    print(f"Connections still active at end: {results['active_connections']}")
    print(f"Report: {config.report_path}")
    print(f"Log: {logfile}")

    df = samples_to_dataframe(samples)
    if not df.empty:
        print("\n" + df.drop(columns=["timestamp"]).describe().to_string())

    if args.plot and not df.empty:
        from visualization.contact_plots import plot_contact_metrics
        figure = plot_contact_metrics(df, Path(args.outdir) / "plots" / f"{run_name}.pdf")
        print(f"Plot: {figure}")

    return samples


if __name__ == "__main__":
    main()

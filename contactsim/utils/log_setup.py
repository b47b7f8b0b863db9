"""Logging setup helpers for the simulation runner and tests.

Call these before importing modules that configure logging themselves (matplotlib).
"""
import datetime
import logging
import os
import sys

DEFAULT_FORMAT = "%(asctime)s [%(levelname)-7s] %(filename)s:%(lineno)d %(message)s"
DEFAULT_DATEFMT = "%H:%M:%S"


def ensure_logging(level: int = logging.INFO, *, force: bool = False) -> None:
    """Ensure the root logger has a stdout handler; otherwise only set its level.

    Safe to call multiple times.
    """
    root = logging.getLogger()
    if force or not root.handlers:
        logging.basicConfig(level=level, format=DEFAULT_FORMAT, datefmt=DEFAULT_DATEFMT,
                            stream=sys.stdout, force=force)
    else:
        root.setLevel(level)


def configure_debug(debug: bool) -> None:
    ensure_logging(logging.DEBUG if debug else logging.INFO)


def configure_run_logging(run_name: str, *, log_dir: str = "results/logs",
                          console_level: int = logging.INFO, file_level: int = logging.DEBUG) -> str:
    """Configure logging for one simulation run.

    Keeps a console handler at ``console_level`` and adds a per-run log file that
    captures everything down to ``file_level``. Returns the absolute path of the log file.
    """
    ensure_logging(level=console_level)
    logging.getLogger("matplotlib").setLevel(logging.WARNING)

    os.makedirs(log_dir, exist_ok=True)
    timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
    safe_tag = "".join(c if c.isalnum() or c in '._-' else '_' for c in (run_name or "run").lower())
    logfile = os.path.join(log_dir, f"{safe_tag}_{timestamp}.log")

    root = logging.getLogger()
    for handler in root.handlers:
        if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
            handler.setLevel(console_level)

    fh = logging.FileHandler(logfile, mode='a', encoding='utf-8')
    fh.setLevel(file_level)
    fh.setFormatter(logging.Formatter(DEFAULT_FORMAT, datefmt=DEFAULT_DATEFMT))
    root.addHandler(fh)

    # root level at the lower of the two so the file gets the debug lines
    root.setLevel(min(console_level, file_level))

    return os.path.abspath(logfile)

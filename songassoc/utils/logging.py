"""Logging setup for CLI runs."""

import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE = "songassoc.log"


def setup_logging(log_dir: Path, verbose: bool = False) -> Path:
    """Send package logs to ``log_dir/songassoc.log``.

    The terminal belongs to the game, so nothing is logged to the console;
    the CLI prints user-facing errors itself. Returns the log file path.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE

    logger = logging.getLogger("songassoc")
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    # Calling twice in one process must not duplicate output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(file_handler)
    logger.propagate = False

    return log_file

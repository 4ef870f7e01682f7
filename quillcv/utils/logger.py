"""
Shared loguru setup.

Each context wraps setup_logger() in its own contexts/{context}/logger.py and
adds a message prefix there; modules never configure loguru themselves.
"""

import sys
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

from quillcv import __version__

load_dotenv()

LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: dict = None,
    console_level: str = "INFO",
) -> Path:
    """
    Send loguru output to {log_dir}/{context_name}.log and to stdout.

    The file always gets DEBUG; the console gets console_level and up.
    A run header (quillcv version, command line, Python) opens the file.

    Args:
        context_name: Log file stem, e.g. "template"
        log_dir: Directory for this run, created if missing
        extra_provenance: Extra header lines, e.g. {"Template": "basic_sa"}
        console_level: Minimum level echoed to stdout

    Returns:
        Path to the log file
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    for level_name, color in LEVEL_COLORS.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    log_run_header(extra_provenance)

    return log_file


def log_run_header(extra: dict = None) -> None:
    """Write a delimited block describing this run."""
    logger.info("-" * 60)
    logger.info(f"quillcv {__version__} | Python {sys.version.split()[0]}")
    logger.info(f"Invoked as: {' '.join(sys.argv)}")
    for key, value in (extra or {}).items():
        logger.info(f"{key}: {value}")
    logger.info("-" * 60)

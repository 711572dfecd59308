"""
Session logging for layout and export runs.

One session is one directory holding a log file per context (layout.log,
render.log). Context-specific wrappers with a [prefix] live in
contexts/{context}/logger.py; this module only wires loguru sinks and writes the
provenance header that opens every session.
"""

import sys
from pathlib import Path
from typing import Optional, Union

import reportlab
from loguru import logger

from vitae import __version__
from vitae.utils.timestamp import now

LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"
)


def session_log_dir(logs_root: Union[str, Path], command: str) -> Path:
    """Directory for one run, e.g. outs/logs/export_20251114_123456."""
    return Path(logs_root) / f"{command}_{now()}"


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[dict] = None,
    console: bool = True,
) -> Path:
    """
    Route loguru output into a session directory.

    Replaces any existing sinks with a DEBUG file sink ({context_name}.log) and,
    when console is True, an INFO colorized stdout sink. Then logs provenance.

    Args:
        context_name: Context identifier ("layout" or "render")
        log_dir: Session directory (created if missing)
        extra_provenance: Additional key-value pairs for the provenance header
        console: Also echo INFO and above to stdout

    Returns:
        Path to log file

    Example:
        log_file = setup_logger(
            context_name="render",
            log_dir=session_log_dir("outs/logs", "export"),
            extra_provenance={"Font family": "Helvetica"},
        )
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    for level_name, color in LEVEL_COLORS.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    if console:
        logger.add(sys.stdout, format=CONSOLE_FORMAT, level="INFO", colorize=True)

    log_provenance(extra_provenance)
    return log_file


def log_provenance(extra_context: Optional[dict] = None) -> None:
    """
    Log what produced this session: command line, working directory, and the
    vitae, reportlab and Python versions that determine layout output.
    """
    logger.info("=" * 80)
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"vitae: {__version__}")
    logger.info(f"reportlab: {reportlab.Version}")
    logger.info(f"Python: {sys.version.split()[0]}")

    for key, value in (extra_context or {}).items():
        logger.info(f"{key}: {value}")

    logger.info("=" * 80)

"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from loguru directly.
"""

from pathlib import Path

from loguru import logger

from vitae.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path, font_family: str = "") -> Path:
    """
    Setup logger for rendering context.

    Configures loguru with provenance tracking and rendering-specific context.

    Args:
        log_dir: Directory for this export session
        font_family: Font family recorded in the provenance header

    Returns:
        Path to log file

    Example:
        from vitae.contexts.rendering.logger import setup_rendering_logger, _log_info

        log_file = setup_rendering_logger(log_dir)
        _log_info("Starting export...")
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance={"Font family": font_family} if font_family else None,
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_export_start(resume_name: str, output_path: Path) -> None:
    """Log start of export with context."""
    _log_info(f"Starting export: {resume_name}")
    _log_debug(f"  Target: {output_path}")


def log_export_result(resume_name: str, result, elapsed_time: float) -> None:
    """
    Log export result.

    Args:
        resume_name: Résumé identifier
        result: ExportResult from export_resume()
        elapsed_time: Time taken to lay out, serialize and save
    """
    if result.success:
        _log_success(f"{resume_name}: {result.page_count} page(s) exported ({elapsed_time:.2f}s)")
        _log_debug(f"  PDF: {result.pdf_path}")
    else:
        _log_error(f"Export failed: {resume_name} ({elapsed_time:.2f}s)")
        for i, err in enumerate(result.errors, 1):
            _log_error(f"  Error {i}: {err}")
        if result.retryable:
            _log_info("The résumé is unchanged; the export can be retried.")

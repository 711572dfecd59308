"""
Layout context logger.

Provides logging interface for layout context with automatic [layout] prefix.
All layout modules should import from this module, not from loguru directly.
"""

from pathlib import Path

from loguru import logger

from vitae.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[layout]"


def setup_layout_logger(log_dir: Path, font_family: str = "") -> Path:
    """
    Setup logger for layout context.

    Args:
        log_dir: Directory for this layout session
        font_family: Font family recorded in the provenance header

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="layout",
        log_dir=log_dir,
        extra_provenance={"Font family": font_family} if font_family else None,
    )


# Wrapper functions with automatic [layout] prefix


def _log_info(message: str) -> None:
    """Log info message with [layout] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [layout] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [layout] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [layout] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level layout-specific logging helpers


def log_layout_start(resume_name: str, font_family: str, page_size: tuple) -> None:
    """Log start of a layout pass."""
    _log_info(f"Laying out: {resume_name}")
    _log_debug(f"  Font family: {font_family}")
    _log_debug(f"  Page size: {page_size[0]} x {page_size[1]} pt")


def log_page_break(from_page: int, y: float, requested: float, limit: float) -> None:
    """Log a page break with the request that triggered it."""
    _log_debug(
        f"Page break after page {from_page + 1}: y={y:.2f} + {requested:.2f} > {limit:.2f}"
    )


def log_section_skipped(section_name: str) -> None:
    _log_debug(f"Skipping empty section: {section_name}")


def log_oversized_block(page: int, requested: float, available: float) -> None:
    """Log a block taller than a full page; it starts on a fresh page and flows on."""
    _log_warning(
        f"Block of {requested:.2f}pt exceeds page capacity {available:.2f}pt "
        f"(page {page + 1}); continuing onto following pages"
    )


def log_layout_result(resume_name: str, layout, elapsed_time: float) -> None:
    """
    Log layout result.

    Args:
        resume_name: Résumé identifier
        layout: DocumentLayout from compose()
        elapsed_time: Time taken
    """
    op_count = sum(len(page) for page in layout.pages)
    _log_success(
        f"{resume_name}: {layout.page_count} page(s), {op_count} draw ops ({elapsed_time:.3f}s)"
    )
    for index, page in enumerate(layout.pages, start=1):
        _log_debug(f"  Page {index}: {len(page)} ops")

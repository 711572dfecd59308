"""
Résumé export.

Runs the full pipeline for one résumé: compose the layout, serialize it to PDF
bytes, and save the bytes under the output directory. The save is atomic, so a
failed export never leaves a partial PDF behind and can simply be retried.
"""

import os
import tempfile
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from vitae.contexts.content.resume_document import ResumeDocument
from vitae.contexts.layout.composer import PDF_SUFFIX, build_measurer, compose, resume_filename
from vitae.contexts.layout.config import LayoutConfig, load_layout_config
from vitae.contexts.rendering.logger import (
    _log_debug,
    _log_error,
    _log_warning,
    log_export_result,
    log_export_start,
    setup_rendering_logger,
)
from vitae.contexts.rendering.serializer import serialize_layout
from vitae.utils.pdf_processing import page_count

SAVE_FAILED_MESSAGE = "Failed to save resume PDF. Please try again."


@dataclass
class ExportResult:
    """
    Result of a résumé export.

    Attributes:
        success: Whether the PDF was written
        pdf_path: Path to the saved PDF (None if failed)
        page_count: Number of pages in the layout (None if failed)
        errors: User-facing error messages
        retryable: True when the failure was transient I/O and the export can be retried
    """

    success: bool
    pdf_path: Optional[Path] = None
    page_count: Optional[int] = None
    errors: List[str] = field(default_factory=list)
    retryable: bool = False


def save_pdf(data: bytes, path: Union[str, Path]) -> Path:
    """
    Write PDF bytes to path atomically.

    The bytes go to a temporary file in the target directory which then replaces
    path in one step. On any failure the temporary file is removed and the error
    is re-raised.

    Raises:
        OSError: If the directory cannot be created or the file cannot be written
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.stem}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
        os.replace(tmp_name, path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise

    return path


def export_resume(
    resume: ResumeDocument,
    output_dir: Union[str, Path],
    filename: Optional[str] = None,
    config: Optional[LayoutConfig] = None,
    log_dir: Optional[Path] = None,
) -> ExportResult:
    """
    Lay out, serialize and save a résumé as a PDF.

    Args:
        resume: Résumé to export (never modified)
        output_dir: Directory for the PDF (created if missing)
        filename: File name (default: resume_filename(resume)); ".pdf" is appended if absent
        config: Layout configuration (default: load_layout_config())
        log_dir: If given, configure file and console logging into this directory

    Returns:
        ExportResult. A failed save gives success=False with retryable=True.

    Raises:
        MeasurementBackendError: If the configured font family cannot be measured
    """
    if config is None:
        config = load_layout_config()

    if log_dir is not None:
        setup_rendering_logger(Path(log_dir), font_family=config.font_family)

    if filename is None:
        filename = resume_filename(resume)
    elif not filename.lower().endswith(PDF_SUFFIX):
        filename = f"{filename}{PDF_SUFFIX}"

    pdf_path = Path(output_dir) / filename
    resume_name = Path(filename).stem
    log_export_start(resume_name, pdf_path)
    start_time = time.time()

    measurer = build_measurer(config)
    layout = compose(resume, config=config, measurer=measurer)
    data = serialize_layout(layout, config, measurer)
    _log_debug(f"Serialized {layout.page_count} page(s), {len(data)} bytes")

    try:
        save_pdf(data, pdf_path)
    except OSError as e:
        _log_error(f"Save failed for {pdf_path}: {e}")
        result = ExportResult(success=False, errors=[SAVE_FAILED_MESSAGE], retryable=True)
        log_export_result(resume_name, result, time.time() - start_time)
        return result

    saved_pages = page_count(pdf_path)
    if saved_pages != layout.page_count:
        _log_warning(
            f"Saved PDF has {saved_pages} page(s), layout produced {layout.page_count}"
        )

    result = ExportResult(success=True, pdf_path=pdf_path, page_count=layout.page_count)
    log_export_result(resume_name, result, time.time() - start_time)
    return result

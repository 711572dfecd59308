"""Custom exceptions for the layout context."""

from typing import Optional


class MeasurementBackendError(RuntimeError):
    """
    Exception raised when text cannot be measured at all.

    Fatal by design: no wrapping, alignment or page-break decision can be made
    without widths, so layout stops instead of guessing.

    Attributes:
        message: Error description
        font_family: Font family that failed to resolve
        original_error: The backend error, when there was one
    """

    def __init__(
        self,
        message: str,
        font_family: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.font_family = font_family
        self.original_error = original_error

        parts = [message]
        if font_family:
            parts.append(f"Font family: {font_family}")
        if original_error:
            parts.append(f"Original error: {original_error}")

        super().__init__("\n".join(parts))

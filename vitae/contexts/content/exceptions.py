"""Custom exceptions for the content context."""


class InvalidResumeError(ValueError):
    """
    Exception raised when résumé input is missing required fields or is not a mapping.

    Attributes:
        message: Error description
        missing: Names of the required keys that were absent
    """

    def __init__(self, message: str, missing: tuple = ()):
        self.message = message
        self.missing = tuple(missing)

        parts = [message]
        if self.missing:
            parts.append(f"Missing keys: {', '.join(self.missing)}")

        super().__init__("\n".join(parts))

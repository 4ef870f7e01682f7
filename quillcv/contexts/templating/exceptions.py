"""Custom exceptions for templating context."""

from pathlib import Path
from typing import Optional


class TemplateLoadError(RuntimeError):
    """
    Exception raised when the default template shell cannot be loaded.

    There is no further fallback once the default template fails, so this
    always points at a configuration or deployment problem rather than at the
    resume data being compiled.

    Attributes:
        message: Error description
        template_id: Template id whose shell could not be read
        template_path: Path that was tried
        original_error: The underlying loader/IO error
    """

    def __init__(
        self,
        message: str,
        template_id: Optional[str] = None,
        template_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.template_id = template_id
        self.template_path = template_path
        self.original_error = original_error

        parts = [message]

        if template_id and template_path:
            parts.append(f"\nTemplate: {template_id}")
            parts.append(f"Expected shell at: {template_path}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        parts.append("\nCheck QUILLCV_TEMPLATES_PATH and QUILLCV_DEFAULT_TEMPLATE.")

        super().__init__("\n".join(parts))


class InvalidResumeRecordError(ValueError):
    """
    Exception raised when a resume record is not a mapping at all.

    Missing or empty fields are never an error; only a record of the wrong
    shape (a list, a string, ...) is rejected.
    """

    pass

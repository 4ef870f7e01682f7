"""
Templating context logger.

Provides logging interface for templating context with automatic [template] prefix.
All templating modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from quillcv.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[template]"


def setup_templating_logger(log_dir: Path, template_id: str, verbose: bool = False) -> Path:
    """
    Setup logger for templating context.

    Args:
        log_dir: Directory for this templating session
        template_id: Requested template, recorded in the provenance header
        verbose: Echo DEBUG messages to the console as well

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="template",
        log_dir=log_dir,
        extra_provenance={"Template": template_id},
        console_level="DEBUG" if verbose else "INFO",
    )


# Wrapper functions with automatic [template] prefix


def _log_info(message: str) -> None:
    """Log info message with [template] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [template] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [template] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [template] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level templating-specific logging helpers


def log_compile_start(resume_name: str, input_path: Path, template_id: str) -> None:
    """Log start of a record-to-LaTeX compilation."""
    _log_info(f"Compiling {resume_name} with template {template_id}")
    _log_debug(f"Source: {input_path}")


def log_compile_result(resume_name: str, result, elapsed_time: float) -> None:
    """
    Log compilation result.

    Args:
        resume_name: Resume identifier (usually the record file stem)
        result: CompileResult from generate_resume()
        elapsed_time: Time taken
    """
    if result.success:
        _log_success(f"{resume_name}: compile succeeded ({elapsed_time:.2f}s)")
        if result.output_path:
            _log_info(f"  Output: {result.output_path}")
    else:
        _log_error(f"Failed to compile {resume_name} ({elapsed_time:.2f}s)")
        if result.error:
            _log_error(f"  Error: {result.error}")

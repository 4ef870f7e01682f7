"""
Resume Record -> LaTeX Converter

Orchestration entry points around DocumentAssembler:
- compile_resume: record (mapping or ResumeRecord) -> LaTeX string
- load_resume_record: YAML/JSON record file -> ResumeRecord
- generate_resume: record file -> .tex file, with logging and timing
"""

import time
from dataclasses import dataclass
from datetime import date
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from omegaconf import OmegaConf

from quillcv.contexts.templating.assembler import DocumentAssembler
from quillcv.contexts.templating.defaults import DEFAULT_TEMPLATE_ID
from quillcv.contexts.templating.exceptions import InvalidResumeRecordError, TemplateLoadError
from quillcv.contexts.templating.logger import (
    _log_debug,
    log_compile_result,
    log_compile_start,
)
from quillcv.contexts.templating.resume_record import ResumeRecord
from quillcv.contexts.templating.template_loader import TemplateLoader


@dataclass
class CompileResult:
    """Result from generate_resume() orchestration function."""

    success: bool
    input_path: Optional[Path] = None
    output_path: Optional[Path] = None
    error: Optional[str] = None
    time_s: float = 0.0
    template_id: Optional[str] = None


@lru_cache(maxsize=None)
def _default_assembler() -> DocumentAssembler:
    """Process-wide assembler so shells and definitions are read once."""
    return DocumentAssembler()


def compile_resume(
    template_id: str,
    record: Union[ResumeRecord, Mapping[str, Any]],
    loader: TemplateLoader = None,
    today: date = None,
) -> str:
    """
    Compile one resume record into LaTeX source.

    Args:
        template_id: Requested template id
        record: ResumeRecord or a raw store mapping
        loader: TemplateLoader to resolve shells with (the shared default if None)
        today: Reference date for graduation tense

    Returns:
        LaTeX source

    Example:
        >>> tex = compile_resume("template01", {"personalInfo": {"firstName": "Ada"}})
        >>> r"\\introduction[fullname={Ada}]" in tex
        True
    """
    assembler = DocumentAssembler(loader=loader) if loader is not None else _default_assembler()
    return assembler.compile(template_id, record, today=today)


def load_resume_record(path: Path) -> ResumeRecord:
    """
    Read a resume record from a YAML or JSON file.

    Raises:
        FileNotFoundError: If the file does not exist
        InvalidResumeRecordError: If the file cannot be parsed or is not a mapping
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Resume record not found: {path}")

    try:
        data = OmegaConf.to_container(OmegaConf.load(path), resolve=False)
    except Exception as e:
        raise InvalidResumeRecordError(f"Could not parse resume record {path}: {e}") from e

    return ResumeRecord.from_dict(data)


def generate_resume(
    input_path: Path,
    output_path: Optional[Path] = None,
    template_id: str = DEFAULT_TEMPLATE_ID,
    loader: TemplateLoader = None,
    today: date = None,
) -> CompileResult:
    """
    Compile a record file to a .tex file with logging and timing.

    Logger setup is left to the caller (see scripts/compile_resume.py).

    Args:
        input_path: YAML or JSON resume record
        output_path: Destination .tex file. If None, written next to the input
        template_id: Requested template id
        loader: TemplateLoader to resolve shells with
        today: Reference date for graduation tense

    Returns:
        CompileResult with success status, paths, and timing
    """
    input_path = Path(input_path)
    output_path = Path(output_path) if output_path else input_path.with_suffix(".tex")
    resume_name = input_path.stem

    start_time = time.time()
    log_compile_start(resume_name, input_path, template_id)

    try:
        record = load_resume_record(input_path)
        tex = compile_resume(template_id, record, loader=loader, today=today)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(tex, encoding="utf-8")
        _log_debug(f"Wrote {len(tex)} chars to {output_path}")

        result = CompileResult(
            success=True,
            input_path=input_path,
            output_path=output_path,
            template_id=template_id,
        )
    except (TemplateLoadError, InvalidResumeRecordError, OSError) as e:
        result = CompileResult(
            success=False,
            input_path=input_path,
            error=str(e),
            template_id=template_id,
        )

    result.time_s = time.time() - start_time
    log_compile_result(resume_name, result, result.time_s)
    return result

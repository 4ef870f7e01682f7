"""
Templating Context

Responsibilities:
- Represents the resume record consumed by the compiler
- Escapes user text for LaTeX and builds keyed macro arguments
- Renders resume sections and assembles them into a template shell
- Loads, caches and lists template shells

Owns: Resume record model, record -> LaTeX conversion, template shell lookup
Never: Runs LaTeX or produces PDFs
"""

from quillcv.contexts.templating.assembler import DocumentAssembler
from quillcv.contexts.templating.converter import (
    CompileResult,
    compile_resume,
    generate_resume,
    load_resume_record,
)
from quillcv.contexts.templating.exceptions import InvalidResumeRecordError, TemplateLoadError
from quillcv.contexts.templating.latex_escaping import escape_latex
from quillcv.contexts.templating.resume_record import ResumeRecord
from quillcv.contexts.templating.template_loader import TemplateInfo, TemplateLoader, TemplateShell

__all__ = [
    # Orchestrators
    "compile_resume",
    "generate_resume",
    "load_resume_record",
    "CompileResult",
    # Assembly and templates
    "DocumentAssembler",
    "TemplateLoader",
    "TemplateShell",
    "TemplateInfo",
    # Data structures
    "ResumeRecord",
    # Helpers
    "escape_latex",
    # Errors
    "TemplateLoadError",
    "InvalidResumeRecordError",
]

"""
Document Assembler

Runs the section renderers in document order and substitutes their output into
the template shell's content placeholder.
"""

import re
from datetime import date
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from jinja2 import TemplateNotFound

from quillcv.contexts.templating import section_renderers as sections
from quillcv.contexts.templating.defaults import (
    COMMAND_DEFINITIONS_NAME,
    CONTENT_PLACEHOLDER,
    REGIONAL_TEMPLATE_ID,
    get_empty_document_block,
)
from quillcv.contexts.templating.logger import _log_debug, _log_warning
from quillcv.contexts.templating.regional_layout import render_regional_cv
from quillcv.contexts.templating.resume_record import ResumeRecord
from quillcv.contexts.templating.section_renderers import RenderedBlock
from quillcv.contexts.templating.template_loader import TemplateLoader, TemplateShell
from quillcv.utils.text_processing import set_max_consecutive_blank_lines
from quillcv.utils.timestamp import today as current_date

_DOCUMENTCLASS_LINE = re.compile(r"(\\documentclass.*)")


class LayoutStrategy:
    """Produces the ordered section blocks for one family of templates."""

    name = "base"

    def render(self, record: ResumeRecord, today: date) -> List[RenderedBlock]:
        raise NotImplementedError


class StandardLayout(LayoutStrategy):
    """
    Keyed-macro layout shared by the standardized templates.

    Section order is fixed and mirrors a conventional resume.
    """

    name = "standard"

    SECTIONS: List[Callable[[ResumeRecord, date], RenderedBlock]] = [
        lambda record, today: sections.render_contact(record.personal_info),
        lambda record, today: sections.render_summary(record.professional_summary),
        lambda record, today: sections.render_education(record.education, today),
        lambda record, today: sections.render_skills(record.skills),
        lambda record, today: sections.render_experience(record.work_experience),
        lambda record, today: sections.render_projects(record.projects),
        lambda record, today: sections.render_certifications(record.certifications),
        lambda record, today: sections.render_publications(record.publications),
        lambda record, today: sections.render_languages(record.languages),
        lambda record, today: sections.render_volunteer(record.volunteer_experience),
        lambda record, today: sections.render_awards(record.awards),
        lambda record, today: sections.render_hobbies(record.hobbies),
        lambda record, today: sections.render_references(record.references),
        lambda record, today: sections.render_additional_sections(record.additional_sections),
        lambda record, today: sections.render_tracking_footer(record.tracking_url),
    ]

    def render(self, record: ResumeRecord, today: date) -> List[RenderedBlock]:
        blocks = [render(record, today) for render in self.SECTIONS]
        if not any(blocks):
            return [get_empty_document_block()]
        return blocks


class RegionalLayout(LayoutStrategy):
    """South African CV layout for the ``basic_sa`` shell."""

    name = "regional"

    def render(self, record: ResumeRecord, today: date) -> List[RenderedBlock]:
        return render_regional_cv(record)


# Template id -> layout; anything not listed uses the standard layout
LAYOUTS: Dict[str, LayoutStrategy] = {
    REGIONAL_TEMPLATE_ID: RegionalLayout(),
}


class DocumentAssembler:
    """
    Compiles resume records into LaTeX documents.

    Holds a TemplateLoader (and with it the shell cache), so one assembler per
    process is enough; tests build isolated ones over temporary directories.
    """

    def __init__(
        self,
        loader: TemplateLoader = None,
        layouts: Dict[str, LayoutStrategy] = None,
        default_layout: LayoutStrategy = None,
    ):
        self.loader = loader or TemplateLoader()
        self.layouts = dict(LAYOUTS if layouts is None else layouts)
        self.default_layout = default_layout or StandardLayout()
        self._command_definitions: Optional[str] = None

    def layout_for(self, template_id: str) -> LayoutStrategy:
        return self.layouts.get(template_id, self.default_layout)

    def render_body(self, template_id: str, record: ResumeRecord, today: date) -> str:
        """Concatenate the section blocks for ``template_id`` into the body text."""
        layout = self.layout_for(template_id)
        _log_debug(f"Rendering with {layout.name} layout")

        lines: List[str] = []
        for block in layout.render(record, today):
            lines.extend(block)
        return set_max_consecutive_blank_lines("\n".join(lines), max_consecutive=1)

    def command_definitions(self) -> str:
        """Shared keyed-macro definitions, read once from the templates directory."""
        if self._command_definitions is None:
            try:
                self._command_definitions = self.loader.read_source(COMMAND_DEFINITIONS_NAME)
            except (TemplateNotFound, OSError) as e:
                _log_warning(f"Command definitions unavailable, shells used as-is: {e}")
                self._command_definitions = ""
        return self._command_definitions

    def prepare_shell(self, shell: TemplateShell) -> str:
        r"""
        Make the keyed macros available in shells other than the default one.

        The definitions are guarded by ``\ifx\introduction\undefined`` so shells
        that already define them are unaffected. They go right after the
        ``\documentclass`` line, or at the top when there is none.
        """
        source = shell.source
        # Decided on the shell actually loaded, so a fallback to the default shell
        # is left as-is even when another id was requested.
        if shell.template_id == self.loader.default_template_id:
            return source

        definitions = self.command_definitions()
        if not definitions:
            return source

        if _DOCUMENTCLASS_LINE.search(source):
            return _DOCUMENTCLASS_LINE.sub(
                lambda match: f"{match.group(1)}\n{definitions}", source, count=1
            )
        return f"{definitions}\n{source}"

    def compile(
        self,
        template_id: str,
        record: Union[ResumeRecord, Mapping[str, Any]],
        today: date = None,
    ) -> str:
        """
        Compile a resume record into a complete LaTeX document.

        Args:
            template_id: Requested template; unknown ids fall back to the default
            record: ResumeRecord or a raw store mapping
            today: Reference date for graduation tense (defaults to the current date)

        Returns:
            LaTeX source

        Raises:
            TemplateLoadError: If the default template cannot be loaded
            InvalidResumeRecordError: If ``record`` is not a mapping
        """
        if not isinstance(record, ResumeRecord):
            record = ResumeRecord.from_dict(record)

        shell = self.loader.load(template_id)
        body = self.render_body(template_id, record, today or current_date())

        if not shell.has_placeholder:
            _log_warning(f"Shell {shell.path} has no content placeholder; body not inserted")

        return self.prepare_shell(shell).replace(CONTENT_PLACEHOLDER, body, 1)

"""
Regional CV layout (template id ``basic_sa``).

A South African style CV: tabular header with ID number, a personal
information block, references and a closing declaration. It uses the
positional ``\\resumeSubheading`` family of macros from its own shell instead
of the keyed macros, so it renders every value through escape_latex() and
substitutes fixed wording for missing contact details.
"""

from typing import List

from quillcv.contexts.templating.dates import build_date_range, format_date_value
from quillcv.contexts.templating.defaults import REGIONAL_DEFAULT_LOCATION, UNAVAILABLE
from quillcv.contexts.templating.latex_escaping import escape_latex
from quillcv.contexts.templating.resume_record import ResumeRecord
from quillcv.contexts.templating.section_renderers import RenderedBlock, group_skills
from quillcv.utils.text_processing import non_empty, single_line, trim_join

LIST_START = r"  \resumeSubHeadingListStart"
LIST_END = r"  \resumeSubHeadingListEnd"
ITEM_LIST_START = r"      \resumeItemListStart"
ITEM_LIST_END = r"      \resumeItemListEnd"


def _subheading(top_left: str, top_right: str, bottom_left: str, bottom_right: str) -> List[str]:
    """Four-cell subheading; all cells must already be escaped."""
    return [
        r"    \resumeSubheading",
        f"      {{{top_left}}}{{{top_right}}}",
        f"      {{{bottom_left}}}{{{bottom_right}}}",
    ]


def _sub_item(label: str, value: str) -> str:
    return rf"    \resumeSubItem{{{escape_latex(label)}}}{{{escape_latex(value)}}}"


def _section(title: str, body: List[str]) -> RenderedBlock:
    if not body:
        return []
    return [rf"\section{{{title}}}", LIST_START, *body, LIST_END, ""]


def _full_name(record: ResumeRecord) -> str:
    info = record.personal_info
    return trim_join([info.first_name, info.last_name], " ")


def render_regional_header(record: ResumeRecord) -> RenderedBlock:
    """Name/email row, then address lines beside mobile number and ID number."""
    info = record.personal_info
    address = info.residential_address if non_empty(info.residential_address) else info.location
    address_lines = [line.strip() for line in (address or "").splitlines() if line.strip()]
    line1 = address_lines[0] if address_lines else ""
    line2 = ", ".join(address_lines[1:])

    email = info.email if non_empty(info.email) else UNAVAILABLE
    phone = info.phone if non_empty(info.phone) else UNAVAILABLE
    id_number = info.identity_number if non_empty(info.identity_number) else UNAVAILABLE

    return [
        r"\begin{tabular*}{\textwidth}{l@{\extracolsep{\fill}}r}",
        rf"  \textbf{{{{\LARGE {escape_latex(_full_name(record))}}}}} & Email: {escape_latex(email)}\\",
        rf"  {escape_latex(line1)} & Mobile: {escape_latex(phone)} \\",
        rf"  {escape_latex(line2)} & ID: {escape_latex(id_number)} \\",
        r"\end{tabular*}",
        "",
    ]


def render_regional_education(record: ResumeRecord) -> RenderedBlock:
    body: List[str] = []
    for entry in record.education:
        location = entry.location if non_empty(entry.location) else REGIONAL_DEFAULT_LOCATION
        graduation = entry.graduation_date if format_date_value(entry.graduation_date) else entry.end_date
        body.extend(
            _subheading(
                escape_latex(entry.institution),
                escape_latex(location),
                escape_latex(entry.degree),
                escape_latex(build_date_range(entry.start_date, graduation)),
            )
        )

        details = []
        if non_empty(entry.field_of_study):
            details.append(rf"\textbf{{Field:}} {escape_latex(entry.field_of_study)}")
        subjects = ", ".join(single_line(course) for course in entry.coursework if non_empty(course))
        if subjects:
            details.append(rf"\textbf{{Subjects:}} {escape_latex(subjects)}")
        if details:
            body.append(ITEM_LIST_START)
            body.append(rf"        \resumeItemWithoutTitle{{{', '.join(details)}}}")
            body.append(ITEM_LIST_END)

    return _section("Education", body)


def render_regional_skills(record: ResumeRecord) -> RenderedBlock:
    """Skills by category, plus home and other languages from the personal block."""
    body = [_sub_item(category, ", ".join(names)) for category, names in group_skills(record.skills).items()]

    info = record.personal_info
    languages = trim_join([info.home_language, info.other_languages], ", ")
    if body and languages:
        body.append(_sub_item("Languages", languages))

    return _section("Skills Summary", body)


def render_regional_experience(record: ResumeRecord) -> RenderedBlock:
    body: List[str] = []
    for entry in record.work_experience:
        location = entry.location if non_empty(entry.location) else REGIONAL_DEFAULT_LOCATION
        body.extend(
            _subheading(
                escape_latex(entry.company),
                escape_latex(location),
                escape_latex(entry.job_title),
                escape_latex(build_date_range(entry.start_date, entry.end_date, entry.is_current_job)),
            )
        )

        # A responsibility entered as one block may hold several lines
        lines = [
            escape_latex(line)
            for responsibility in entry.responsibilities
            for line in str(responsibility).splitlines()
        ]
        lines = [line for line in lines if line]
        if lines:
            body.append(ITEM_LIST_START)
            body.extend(rf"        \resumeItemWithoutTitle{{{line}}}" for line in lines)
            body.append(ITEM_LIST_END)

    return _section("Professional Experience", body)


def render_regional_personal_information(record: ResumeRecord) -> RenderedBlock:
    info = record.personal_info
    fields = [
        ("Nationality", info.nationality),
        ("Gender", info.gender),
        ("Marital Status", info.marital_status),
        ("Date of Birth", format_date_value(info.date_of_birth)),
    ]
    body = [_sub_item(label, value) for label, value in fields if non_empty(value)]
    return _section("Personal Information", body)


def render_regional_references(record: ResumeRecord) -> RenderedBlock:
    body: List[str] = []
    for ref in record.references:
        if not non_empty(ref.name):
            continue
        title = ref.title if non_empty(ref.title) else "Reference"
        contact = next((value for value in (ref.phone, ref.email) if non_empty(value)), UNAVAILABLE)
        body.extend(
            _subheading(
                f"{escape_latex(ref.name)} - {escape_latex(title)}",
                escape_latex(ref.company),
                f"Contact: {escape_latex(contact)}",
                UNAVAILABLE,
            )
        )
    return _section("References", body)


def render_regional_declaration(record: ResumeRecord) -> RenderedBlock:
    full_name = escape_latex(_full_name(record))
    if not full_name:
        return []
    return [
        r"\section{Declaration}",
        rf"\small{{I, {full_name}, hereby declare that the above information is true and correct to the best of my knowledge.}}",
    ]


def render_regional_cv(record: ResumeRecord) -> List[RenderedBlock]:
    """All regional blocks in document order."""
    return [
        render_regional_header(record),
        render_regional_education(record),
        render_regional_skills(record),
        render_regional_experience(record),
        render_regional_personal_information(record),
        render_regional_references(record),
        render_regional_declaration(record),
    ]

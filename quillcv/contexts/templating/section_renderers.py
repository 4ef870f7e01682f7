"""
Section Renderers

One function per resume section. Each takes the relevant slice of a
ResumeRecord and returns a RenderedBlock: the ordered LaTeX lines for that
section, or an empty list when the section has nothing to show. An empty block
means the section is omitted entirely, wrapper environment included.

Keyed macro arguments are only ever built through KeyValueArgs, which drops
empty values; an entry whose arguments all drop out is skipped on its own.
"""

from datetime import date
from typing import Any, Dict, Iterable, List, Optional
from urllib.parse import quote

from quillcv.contexts.templating.content_normalizer import normalize_program
from quillcv.contexts.templating.dates import (
    build_date_range,
    education_date_display,
    format_date_value,
)
from quillcv.contexts.templating.key_value import KeyValueArgs
from quillcv.contexts.templating.latex_escaping import escape_latex
from quillcv.contexts.templating.latex_patterns import (
    BannerComments,
    EnvironmentPatterns,
    MacroPatterns,
    SectionTitles,
    begin_environment,
    end_environment,
)
from quillcv.contexts.templating.resume_record import (
    AdditionalSection,
    AwardEntry,
    CertificationEntry,
    EducationEntry,
    HobbyEntry,
    LanguageEntry,
    PersonalInfo,
    ProjectEntry,
    PublicationEntry,
    ReferenceEntry,
    SkillEntry,
    VolunteerEntry,
    WorkExperienceEntry,
)
from quillcv.utils.text_processing import (
    capitalize_first,
    non_empty,
    single_line,
    strip_scheme,
    trim_join,
)

RenderedBlock = List[str]

ENTRY_INDENT = "    "
BULLET_INDENT = "        "

DEFAULT_SKILL_CATEGORY = "General"
DEFAULT_LANGUAGE_GROUP = "Languages"
HOBBY_CATEGORY = "Hobbies"

# Characters hyperref accepts verbatim in an \href target
_URL_SAFE = ":/?&=#%~+-._,;@!$'()*"


# ----------------------------------------------------------------------------
# Shared building blocks
# ----------------------------------------------------------------------------


def bullet_block(lines: Iterable[Any], vspace: Optional[str] = None) -> RenderedBlock:
    r"""
    Escape bullet lines and wrap them in a single itemize environment.

    Lines that are empty after escaping are dropped; if none remain the block
    is empty so the entry renders its header only.

    Example:
        >>> bullet_block(["Cut costs 20%", "  "])
        ['    \\begin{itemize}', '        \\itemsep -6pt {}', '        \\item Cut costs 20\\%', '    \\end{itemize}']
    """
    items = [escape_latex(line) for line in lines]
    items = [item for item in items if item]
    if not items:
        return []

    block = [f"{ENTRY_INDENT}{EnvironmentPatterns.BEGIN_ITEMIZE}"]
    if vspace:
        block.append(f"{BULLET_INDENT}{vspace}")
    block.append(f"{BULLET_INDENT}{EnvironmentPatterns.ITEMSEP}")
    block.extend(f"{BULLET_INDENT}{EnvironmentPatterns.ITEM} {item}" for item in items)
    block.append(f"{ENTRY_INDENT}{EnvironmentPatterns.END_ITEMIZE}")
    return block


def wrap_section(banner: str, environment: str, title: str, body: RenderedBlock) -> RenderedBlock:
    """Surround rendered entries with a section environment; nothing in, nothing out."""
    if not body:
        return []
    return [
        banner,
        begin_environment(environment, escape_latex(title)),
        *body,
        end_environment(environment),
        "",
    ]


def titled_with_url(title: Optional[str], url: Optional[str]) -> str:
    """Append a scheme-less URL to a title: ``"Site (example.com)"``."""
    text = single_line(title)
    link = strip_scheme(url)
    if link:
        text = f"{text} ({link})".strip()
    return text


def _entry_item(args: KeyValueArgs, macro: str, bullets: RenderedBlock) -> RenderedBlock:
    """Header macro followed by its bullets, or nothing when args are all empty."""
    call = args.to_macro(macro)
    if call is None:
        return []
    return [f"{ENTRY_INDENT}{call}", *bullets, ""]


def _grouped_items(groups: Dict[str, List[str]]) -> RenderedBlock:
    r"""
    One ``\skillItem`` per group, separated by LaTeX line breaks.

    The break goes after every item except the last one actually emitted.
    Groups with no usable names are skipped, never emitted as a bare category.
    """
    calls = []
    for label, names in groups.items():
        joined = ", ".join(name for name in names if non_empty(name))
        if not joined:
            continue
        call = KeyValueArgs([("category", label), ("skills", joined)]).to_macro(
            MacroPatterns.SKILL_ITEM
        )
        if call:
            calls.append(call)

    return [
        f"{ENTRY_INDENT}{call}{'' if idx == len(calls) - 1 else EnvironmentPatterns.LINE_BREAK}"
        for idx, call in enumerate(calls)
    ]


def _first_date(*values: Any) -> Any:
    """First value that formats to a non-empty date string."""
    for value in values:
        if format_date_value(value):
            return value
    return None


# ----------------------------------------------------------------------------
# Sections, in document order
# ----------------------------------------------------------------------------


def render_contact(info: PersonalInfo) -> RenderedBlock:
    r"""
    ``\introduction[...]`` header.

    The professional title rides along with the name, and a portfolio or
    website link shares the github slot (``github.com/x | x.dev``).
    """
    full_name = trim_join(
        [trim_join([info.first_name, info.last_name], " "), info.professional_title], ", "
    )

    github_display = strip_scheme(info.github_url)
    site = strip_scheme(info.portfolio_url if non_empty(info.portfolio_url) else info.website_url)
    if site:
        github_display = f"{github_display} | {site}" if github_display else site

    args = KeyValueArgs(
        [
            ("fullname", full_name),
            ("email", info.email),
            ("phone", info.phone),
            ("linkedin", strip_scheme(info.linkedin_url)),
            ("github", github_display),
        ]
    )
    call = args.to_macro(MacroPatterns.INTRODUCTION)
    if call is None:
        return []
    return [BannerComments.CONTACT, call, ""]


def render_summary(summary: Optional[str]) -> RenderedBlock:
    text = escape_latex(summary)
    if not text:
        return []
    return [BannerComments.SUMMARY, f"{MacroPatterns.SUMMARY}{{{text}}}", ""]


def render_education(entries: List[EducationEntry], today: date) -> RenderedBlock:
    """
    Education entries with deduplicated program names and tense-aware dates.

    Args:
        entries: Education entries
        today: Reference date deciding "Graduating" vs "Graduated"
    """
    items: List[str] = []
    for entry in entries:
        program = normalize_program([entry.degree, entry.field_of_study])
        grade = f"{single_line(entry.gpa)} GPA" if non_empty(entry.gpa) else None
        coursework = ", ".join(single_line(course) for course in entry.coursework if non_empty(course))
        graduation = education_date_display(
            entry.start_date, _first_date(entry.graduation_date, entry.end_date), today
        )

        call = KeyValueArgs(
            [
                ("university", entry.institution),
                ("college", entry.location),
                ("program", program),
                ("graduation", graduation),
                ("grade", grade),
                ("coursework", coursework),
            ]
        ).to_macro(MacroPatterns.EDUCATION_ITEM)
        if call:
            items.append(f"{ENTRY_INDENT}{call}")

    # Blank lines between entries rather than \\ after them
    body: List[str] = []
    for idx, item in enumerate(items):
        if idx:
            body.append("")
        body.append(item)

    return wrap_section(
        BannerComments.EDUCATION, EnvironmentPatterns.EDUCATION_SECTION, SectionTitles.EDUCATION, body
    )


def group_skills(skills: List[SkillEntry]) -> Dict[str, List[str]]:
    """
    Group skill names under capitalized category labels.

    Category order is first-seen; names keep their input order within a group.
    Skills without a name are dropped.
    """
    groups: Dict[str, List[str]] = {}
    for skill in skills:
        if not non_empty(skill.name):
            continue
        category = (
            capitalize_first(skill.category.strip())
            if non_empty(skill.category)
            else DEFAULT_SKILL_CATEGORY
        )
        groups.setdefault(category, []).append(skill.name.strip())
    return groups


def render_skills(skills: List[SkillEntry]) -> RenderedBlock:
    return wrap_section(
        BannerComments.SKILLS,
        EnvironmentPatterns.SKILLS_SECTION,
        SectionTitles.SKILLS,
        _grouped_items(group_skills(skills)),
    )


def render_experience(entries: List[WorkExperienceEntry]) -> RenderedBlock:
    """Jobs; responsibilities then achievements form one bullet list."""
    body: List[str] = []
    for entry in entries:
        args = KeyValueArgs(
            [
                ("company", entry.company),
                ("location", entry.location),
                ("position", entry.job_title),
                ("duration", build_date_range(entry.start_date, entry.end_date, entry.is_current_job)),
            ]
        )
        bullets = bullet_block([*entry.responsibilities, *entry.achievements])
        body.extend(_entry_item(args, MacroPatterns.EXPERIENCE_ITEM, bullets))

    return wrap_section(
        BannerComments.EXPERIENCE,
        EnvironmentPatterns.EXPERIENCE_SECTION,
        SectionTitles.EXPERIENCE,
        body,
    )


def render_projects(entries: List[ProjectEntry]) -> RenderedBlock:
    """
    Projects; the first description line is the headline, the rest are bullets.

    A "Technologies used: ..." bullet closes the list when technologies exist.
    """
    body: List[str] = []
    for entry in entries:
        lines = [single_line(line) for line in entry.description]
        lines = [line for line in lines if line]
        headline = lines[0] if lines else None

        details = lines[1:]
        technologies = [tech.strip() for tech in entry.technologies if non_empty(tech)]
        if technologies:
            details.append(f"Technologies used: {', '.join(technologies)}")

        args = KeyValueArgs(
            [
                ("title", titled_with_url(entry.name, entry.url)),
                ("duration", build_date_range(entry.start_date, entry.end_date)),
                ("keyHighlight", headline),
            ]
        )
        bullets = bullet_block(details, vspace=EnvironmentPatterns.PROJECT_VSPACE)
        body.extend(_entry_item(args, MacroPatterns.PROJECT_ITEM, bullets))

    return wrap_section(
        BannerComments.PROJECTS, EnvironmentPatterns.EXPERIENCE_SECTION, SectionTitles.PROJECTS, body
    )


def render_certifications(entries: List[CertificationEntry]) -> RenderedBlock:
    body: List[str] = []
    for entry in entries:
        args = KeyValueArgs(
            [
                ("title", titled_with_url(entry.name, entry.url)),
                ("duration", build_date_range(entry.date)),
                ("keyHighlight", f"Issued by {entry.issuer.strip()}" if non_empty(entry.issuer) else None),
            ]
        )
        bullets = bullet_block([entry.description], vspace=EnvironmentPatterns.PROJECT_VSPACE)
        body.extend(_entry_item(args, MacroPatterns.PROJECT_ITEM, bullets))

    return wrap_section(
        BannerComments.CERTIFICATIONS,
        EnvironmentPatterns.EXPERIENCE_SECTION,
        SectionTitles.CERTIFICATIONS,
        body,
    )


def render_publications(entries: List[PublicationEntry]) -> RenderedBlock:
    body: List[str] = []
    for entry in entries:
        args = KeyValueArgs(
            [
                ("title", titled_with_url(entry.title, entry.url)),
                ("duration", build_date_range(entry.publication_date)),
                (
                    "keyHighlight",
                    f"Published by {entry.publisher.strip()}" if non_empty(entry.publisher) else None,
                ),
            ]
        )
        bullets = bullet_block([entry.description], vspace=EnvironmentPatterns.PROJECT_VSPACE)
        body.extend(_entry_item(args, MacroPatterns.PROJECT_ITEM, bullets))

    return wrap_section(
        BannerComments.PUBLICATIONS,
        EnvironmentPatterns.EXPERIENCE_SECTION,
        SectionTitles.PUBLICATIONS,
        body,
    )


def render_languages(entries: List[LanguageEntry]) -> RenderedBlock:
    """Languages grouped by proficiency ("Native: English, Zulu")."""
    groups: Dict[str, List[str]] = {}
    for entry in entries:
        if not non_empty(entry.name):
            continue
        label = (
            capitalize_first(entry.proficiency.strip())
            if non_empty(entry.proficiency)
            else DEFAULT_LANGUAGE_GROUP
        )
        groups.setdefault(label, []).append(entry.name.strip())

    return wrap_section(
        BannerComments.LANGUAGES,
        EnvironmentPatterns.SKILLS_SECTION,
        SectionTitles.LANGUAGES,
        _grouped_items(groups),
    )


def render_volunteer(entries: List[VolunteerEntry]) -> RenderedBlock:
    """
    Volunteer roles, shown as "Other work experience".

    Rendered only when at least one entry names both organization and role;
    entries naming neither are skipped.
    """
    if not any(non_empty(entry.organization) and non_empty(entry.role) for entry in entries):
        return []

    body: List[str] = []
    for entry in entries:
        if not non_empty(entry.organization) and not non_empty(entry.role):
            continue
        args = KeyValueArgs(
            [
                ("company", entry.organization),
                ("location", entry.location),
                ("position", entry.role),
                ("duration", build_date_range(entry.start_date, entry.end_date, entry.is_current_role)),
            ]
        )
        bullets = bullet_block(
            [entry.description, *entry.achievements], vspace=EnvironmentPatterns.VOLUNTEER_VSPACE
        )
        body.extend(_entry_item(args, MacroPatterns.EXPERIENCE_ITEM, bullets))

    return wrap_section(
        BannerComments.VOLUNTEER,
        EnvironmentPatterns.EXPERIENCE_SECTION,
        SectionTitles.VOLUNTEER,
        body,
    )


def render_awards(entries: List[AwardEntry]) -> RenderedBlock:
    """Awards, shown as "Activities"; a description repeating the title is dropped."""
    body: List[str] = []
    for entry in entries:
        args = KeyValueArgs(
            [
                ("title", entry.title),
                ("keyHighlight", f"Issued by {entry.issuer.strip()}" if non_empty(entry.issuer) else None),
                ("duration", build_date_range(entry.date)),
            ]
        )
        description = entry.description
        if single_line(description) == single_line(entry.title):
            description = None
        bullets = bullet_block([description], vspace=EnvironmentPatterns.PROJECT_VSPACE)
        body.extend(_entry_item(args, MacroPatterns.PROJECT_ITEM, bullets))

    return wrap_section(
        BannerComments.AWARDS, EnvironmentPatterns.EXPERIENCE_SECTION, SectionTitles.AWARDS, body
    )


def render_hobbies(entries: List[HobbyEntry]) -> RenderedBlock:
    names = [entry.name.strip() for entry in entries if non_empty(entry.name)]
    if not names:
        return []
    return wrap_section(
        BannerComments.HOBBIES,
        EnvironmentPatterns.SKILLS_SECTION,
        SectionTitles.HOBBIES,
        _grouped_items({HOBBY_CATEGORY: names}),
    )


def render_references(entries: List[ReferenceEntry]) -> RenderedBlock:
    body: List[str] = []
    for entry in entries:
        args = KeyValueArgs(
            [
                ("title", entry.name),
                ("keyHighlight", trim_join([entry.title, entry.company], ", ")),
            ]
        )
        contact_lines = [
            f"{label}: {value}"
            for label, value in (
                ("Email", entry.email),
                ("Phone", entry.phone),
                ("Relationship", entry.relationship),
            )
            if non_empty(value)
        ]
        bullets = bullet_block(contact_lines, vspace=EnvironmentPatterns.PROJECT_VSPACE)
        body.extend(_entry_item(args, MacroPatterns.PROJECT_ITEM, bullets))

    return wrap_section(
        BannerComments.REFERENCES,
        EnvironmentPatterns.EXPERIENCE_SECTION,
        SectionTitles.REFERENCES,
        body,
    )


def render_additional_sections(sections: List[AdditionalSection]) -> RenderedBlock:
    """
    Free-form sections, each in its own environment.

    Sections with no content are skipped; a missing title falls back to
    "Additional Information".
    """
    body: List[str] = []
    for section in sections:
        content = escape_latex(section.content)
        if not content:
            continue
        title = escape_latex(section.title) or SectionTitles.ADDITIONAL_FALLBACK
        body.extend(
            [
                f"{ENTRY_INDENT}{begin_environment(EnvironmentPatterns.EXPERIENCE_SECTION, title)}",
                f"{ENTRY_INDENT}{content}",
                f"{ENTRY_INDENT}{end_environment(EnvironmentPatterns.EXPERIENCE_SECTION)}",
                "",
            ]
        )

    if not body:
        return []
    return [BannerComments.ADDITIONAL, *body, ""]


def render_tracking_footer(tracking_url: Optional[str]) -> RenderedBlock:
    url = single_line(tracking_url).replace(" ", "")
    if not url:
        return []
    href = quote(url, safe=_URL_SAFE)
    return [
        "",
        BannerComments.TRACKING,
        r"\vfill",
        r"\begin{center}",
        rf"\footnotesize \color{{gray}} View the latest version of this resume at \href{{{href}}}{{{escape_latex(url)}}}",
        r"\end{center}",
    ]

"""
LaTeX Pattern Constants

Macro, environment and section-title strings emitted by the section renderers.
Organized into frozen dataclasses by category for immutability and clear grouping.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class MacroPatterns:
    """
    Keyed macros defined by the standard template shells (keycommand package).

    Every one of these takes a ``[key={value}, ...]`` argument list.
    """
    INTRODUCTION: str = 'introduction'
    EDUCATION_ITEM: str = 'educationItem'
    SKILL_ITEM: str = 'skillItem'
    EXPERIENCE_ITEM: str = 'experienceItem'
    PROJECT_ITEM: str = 'projectItem'

    # Positional macro, not keyed
    SUMMARY: str = r'\summary'


@dataclass(frozen=True)
class EnvironmentPatterns:
    """
    Section environments and bullet-list constructs.
    """
    EDUCATION_SECTION: str = 'educationSection'
    SKILLS_SECTION: str = 'skillsSection'
    EXPERIENCE_SECTION: str = 'experienceSection'

    BEGIN_ITEMIZE: str = r'\begin{itemize}'
    END_ITEMIZE: str = r'\end{itemize}'
    ITEM: str = r'\item'
    ITEMSEP: str = r'\itemsep -6pt {}'

    # Pulls the first bullet up under its header; value depends on section
    PROJECT_VSPACE: str = r'\vspace{-0.5em}'
    VOLUNTEER_VSPACE: str = r'\vspace{-0.2em}'

    LINE_BREAK: str = r' \\'


@dataclass(frozen=True)
class SectionTitles:
    """
    Human-readable section headings, in emission order.
    """
    EDUCATION: str = 'Education'
    SKILLS: str = 'Technical Skills'
    EXPERIENCE: str = 'Professional Experience'
    PROJECTS: str = 'Projects'
    CERTIFICATIONS: str = 'Certifications'
    PUBLICATIONS: str = 'Publications'
    LANGUAGES: str = 'Languages'
    VOLUNTEER: str = 'Other work experience'
    AWARDS: str = 'Activities'
    HOBBIES: str = 'Interests'
    REFERENCES: str = 'References'
    ADDITIONAL_FALLBACK: str = 'Additional Information'


@dataclass(frozen=True)
class BannerComments:
    """
    LaTeX comment lines that open each rendered block.

    Purely cosmetic, they make the generated source easy to navigate.
    """
    CONTACT: str = '% --------- Contact Information -----------'
    SUMMARY: str = '% --------- Summary -----------'
    EDUCATION: str = '% --------- Education -----------'
    SKILLS: str = '% --------- Skills -----------'
    EXPERIENCE: str = '% --------- Experience -----------'
    PROJECTS: str = '% --------- Projects -----------'
    CERTIFICATIONS: str = '% --------- Certifications -----------'
    PUBLICATIONS: str = '% --------- Publications -----------'
    LANGUAGES: str = '% --------- Languages -----------'
    VOLUNTEER: str = '% --------- Other work experience -----------'
    AWARDS: str = '% --------- Activities -----------'
    HOBBIES: str = '% --------- Hobbies -----------'
    REFERENCES: str = '% --------- References -----------'
    ADDITIONAL: str = '% --------- Additional Sections -----------'
    TRACKING: str = '% --------- Tracking Footer -----------'


@dataclass(frozen=True)
class DateSentinels:
    """
    Fixed words substituted for dates under specific tense conditions.
    """
    PRESENT: str = 'Present'
    IN_PROGRESS: str = 'In Progress'
    GRADUATING: str = 'Graduating'
    GRADUATED: str = 'Graduated'
    RANGE_SEPARATOR: str = ' -- '


def begin_environment(name: str, title: str) -> str:
    r"""Return ``\begin{name}{title}``; ``title`` must already be escaped."""
    return rf'\begin{{{name}}}{{{title}}}'


def end_environment(name: str) -> str:
    r"""Return ``\end{name}``."""
    return rf'\end{{{name}}}'

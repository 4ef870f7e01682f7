"""Unit tests for the section renderers."""

from datetime import date

import pytest

from quillcv.contexts.templating.resume_record import (
    AdditionalSection,
    AwardEntry,
    CertificationEntry,
    EducationEntry,
    HobbyEntry,
    LanguageEntry,
    PersonalInfo,
    ProjectEntry,
    ReferenceEntry,
    SkillEntry,
    VolunteerEntry,
    WorkExperienceEntry,
)
from quillcv.contexts.templating.section_renderers import (
    _grouped_items,
    bullet_block,
    group_skills,
    render_additional_sections,
    render_awards,
    render_certifications,
    render_contact,
    render_education,
    render_experience,
    render_hobbies,
    render_languages,
    render_projects,
    render_references,
    render_skills,
    render_summary,
    render_tracking_footer,
    render_volunteer,
)

TODAY = date(2025, 1, 15)


class TestContact:
    """Tests for render_contact()."""

    @pytest.mark.unit
    def test_full_contact(self):
        info = PersonalInfo(
            first_name="Ada",
            last_name="Lovelace",
            professional_title="Engineer",
            email="ada@example.com",
            linkedin_url="https://linkedin.com/in/ada",
            github_url="https://github.com/ada",
            portfolio_url="http://ada.dev",
        )
        block = render_contact(info)
        assert block[1] == (
            r"\introduction[fullname={Ada Lovelace, Engineer}, email={ada@example.com}, "
            r"linkedin={linkedin.com/in/ada}, github={github.com/ada | ada.dev}]"
        )

    @pytest.mark.unit
    def test_name_only(self):
        block = render_contact(PersonalInfo(first_name="Ada"))
        assert block[1] == r"\introduction[fullname={Ada}]"

    @pytest.mark.unit
    def test_website_fills_github_slot(self):
        block = render_contact(PersonalInfo(first_name="Ada", website_url="https://ada.dev"))
        assert "github={ada.dev}" in block[1]

    @pytest.mark.unit
    def test_empty_contact_omitted(self):
        assert render_contact(PersonalInfo(first_name="  ", email="")) == []


@pytest.mark.unit
def test_summary():
    assert render_summary("Built 5 things & more")[1] == r"\summary{Built 5 things \& more}"
    assert render_summary("  \n ") == []
    assert render_summary(None) == []


class TestEducation:
    """Tests for render_education()."""

    @pytest.mark.unit
    def test_entry_with_dedup_and_tense(self):
        entry = EducationEntry(
            institution="MIT",
            degree="B.S.",
            field_of_study="B.S. Computer Science",
            graduation_date="05/2019",
            gpa="3.9",
            coursework=["Algorithms", " ", "Compilers"],
        )
        block = render_education([entry], TODAY)
        assert block[1] == r"\begin{educationSection}{Education}"
        assert (
            r"    \educationItem[university={MIT}, program={B.S. Computer Science}, "
            r"graduation={Graduated 05/2019}, grade={3.9 GPA}, coursework={Algorithms, Compilers}]"
        ) in block
        assert block[-2] == r"\end{educationSection}"

    @pytest.mark.unit
    def test_end_date_used_when_no_graduation(self):
        entry = EducationEntry(institution="MIT", start_date="09/2022", end_date="05/2026")
        block = render_education([entry], TODAY)
        assert r"    \educationItem[university={MIT}, graduation={Graduating 05/2026}]" in block

    @pytest.mark.unit
    def test_entries_separated_by_blank_line(self):
        entries = [EducationEntry(institution="MIT"), EducationEntry(institution="CMU")]
        block = render_education(entries, TODAY)
        first = block.index(r"    \educationItem[university={MIT}]")
        assert block[first + 1] == ""
        assert block[first + 2] == r"    \educationItem[university={CMU}]"

    @pytest.mark.unit
    def test_empty_entries_omit_section(self):
        assert render_education([EducationEntry(), EducationEntry(gpa=" ")], TODAY) == []


class TestSkills:
    """Tests for group_skills() and render_skills()."""

    @pytest.mark.unit
    def test_grouping(self):
        skills = [
            SkillEntry(name="Python", category="technical"),
            SkillEntry(name="Docker"),
            SkillEntry(name="SQL", category="technical"),
            SkillEntry(name=" ", category="technical"),
        ]
        assert group_skills(skills) == {"Technical": ["Python", "SQL"], "General": ["Docker"]}

    @pytest.mark.unit
    def test_line_break_between_items_only(self):
        skills = [SkillEntry(name="Python", category="technical"), SkillEntry(name="Docker")]
        block = render_skills(skills)
        assert r"    \skillItem[category={Technical}, skills={Python}] \\" in block
        assert r"    \skillItem[category={General}, skills={Docker}]" in block

    @pytest.mark.unit
    def test_no_skills(self):
        assert render_skills([SkillEntry(category="technical")]) == []


class TestExperience:
    """Tests for render_experience()."""

    @pytest.mark.unit
    def test_current_job_with_bullets(self):
        entry = WorkExperienceEntry(
            job_title="Engineer",
            company="Acme & Sons",
            start_date="01/2022",
            is_current_job=True,
            responsibilities=["Led a team", "  "],
            achievements=["Cut costs 30%"],
        )
        block = render_experience([entry])
        assert (
            r"    \experienceItem[company={Acme \& Sons}, position={Engineer}, duration={01/2022 -- Present}]"
            in block
        )
        assert r"        \item Led a team" in block
        assert r"        \item Cut costs 30\%" in block
        assert block.count(r"    \begin{itemize}") == 1

    @pytest.mark.unit
    def test_no_bullets_no_itemize(self):
        block = render_experience([WorkExperienceEntry(company="Initech")])
        assert r"    \experienceItem[company={Initech}]" in block
        assert r"    \begin{itemize}" not in block

    @pytest.mark.unit
    def test_empty_entry_skipped(self):
        assert render_experience([WorkExperienceEntry(responsibilities=["orphan bullet"])]) == []


@pytest.mark.unit
def test_bullet_block_vspace():
    block = bullet_block(["one"], vspace=r"\vspace{-0.5em}")
    assert block == [
        r"    \begin{itemize}",
        r"        \vspace{-0.5em}",
        r"        \itemsep -6pt {}",
        r"        \item one",
        r"    \end{itemize}",
    ]
    assert bullet_block([None, " "]) == []


@pytest.mark.unit
def test_projects_headline_and_technologies():
    entry = ProjectEntry(
        name="Ledger",
        url="https://github.com/x/ledger",
        description=["Bookkeeping library", "Handles 10k tx/s"],
        technologies=["Python", "PostgreSQL"],
    )
    block = render_projects([entry])
    assert (
        r"    \projectItem[title={Ledger (github.com/x/ledger)}, keyHighlight={Bookkeeping library}]"
        in block
    )
    assert r"        \item Handles 10k tx/s" in block
    assert r"        \item Technologies used: Python, PostgreSQL" in block
    assert block[1] == r"\begin{experienceSection}{Projects}"


@pytest.mark.unit
def test_certifications():
    entry = CertificationEntry(name="CKA", issuer="CNCF", date="03/2023")
    block = render_certifications([entry])
    assert r"    \projectItem[title={CKA}, duration={03/2023}, keyHighlight={Issued by CNCF}]" in block


@pytest.mark.unit
def test_languages_grouped_by_proficiency():
    entries = [
        LanguageEntry(name="English", proficiency="native"),
        LanguageEntry(name="Zulu", proficiency="native"),
        LanguageEntry(name="French"),
    ]
    block = render_languages(entries)
    assert r"    \skillItem[category={Native}, skills={English, Zulu}] \\" in block
    assert r"    \skillItem[category={Languages}, skills={French}]" in block


class TestVolunteer:
    """Tests for render_volunteer()."""

    @pytest.mark.unit
    def test_requires_one_complete_entry(self):
        assert render_volunteer([VolunteerEntry(organization="Red Cross")]) == []

    @pytest.mark.unit
    def test_skips_entries_naming_neither(self):
        entries = [
            VolunteerEntry(organization="Red Cross", role="Medic", description="Weekend shifts"),
            VolunteerEntry(description="orphan"),
        ]
        block = render_volunteer(entries)
        assert block[1] == r"\begin{experienceSection}{Other work experience}"
        assert r"    \experienceItem[company={Red Cross}, position={Medic}]" in block
        assert r"        \vspace{-0.2em}" in block
        assert "orphan" not in "\n".join(block)


@pytest.mark.unit
def test_awards_drop_description_repeating_title():
    block = render_awards([AwardEntry(title="Dean's List", description=" Dean's List ")])
    assert r"    \projectItem[title={Dean's List}]" in block
    assert r"    \begin{itemize}" not in block


@pytest.mark.unit
def test_hobbies():
    block = render_hobbies([HobbyEntry(name="Chess"), HobbyEntry(name="Hiking"), HobbyEntry()])
    assert r"    \skillItem[category={Hobbies}, skills={Chess, Hiking}]" in block
    assert render_hobbies([]) == []


@pytest.mark.unit
def test_hobbies_without_names_omit_section():
    assert render_hobbies([HobbyEntry(description="Weekend reading"), HobbyEntry(name="  ")]) == []


@pytest.mark.unit
def test_grouped_items_skip_groups_without_names():
    block = _grouped_items({"Technical": ["Python"], "Empty": [], "Blank": ["", " "]})
    assert block == [r"    \skillItem[category={Technical}, skills={Python}]"]
    assert _grouped_items({"Hobbies": []}) == []


class TestReferences:
    """Tests for render_references()."""

    @pytest.mark.unit
    def test_full_reference(self):
        entry = ReferenceEntry(name="Jane", title="CTO", company="Acme", email="jane@example.com")
        block = render_references([entry])
        assert r"    \projectItem[title={Jane}, keyHighlight={CTO, Acme}]" in block
        assert r"        \item Email: jane@example.com" in block

    @pytest.mark.unit
    def test_name_only_has_no_highlight(self):
        block = render_references([ReferenceEntry(name="Jane")])
        assert r"    \projectItem[title={Jane}]" in block


@pytest.mark.unit
def test_additional_sections():
    sections = [
        AdditionalSection(title="Security Clearance", content="Secret & active"),
        AdditionalSection(title="Empty", content="  "),
        AdditionalSection(content="Untitled content"),
    ]
    block = render_additional_sections(sections)
    text = "\n".join(block)
    assert r"\begin{experienceSection}{Security Clearance}" in text
    assert r"Secret \& active" in text
    assert r"\begin{experienceSection}{Additional Information}" in text
    assert "{Empty}" not in text
    assert render_additional_sections([AdditionalSection(title="Only a title")]) == []


@pytest.mark.unit
def test_tracking_footer():
    block = render_tracking_footer(" https://quillcv.example/r/jane_doe ")
    assert r"\href{https://quillcv.example/r/jane_doe}{https://quillcv.example/r/jane\_doe}" in block[-2]
    assert render_tracking_footer("") == []
    assert render_tracking_footer(None) == []

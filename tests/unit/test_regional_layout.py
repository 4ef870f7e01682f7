"""Unit tests for the regional (basic_sa) CV layout."""

import pytest

from quillcv.contexts.templating.regional_layout import (
    render_regional_cv,
    render_regional_declaration,
    render_regional_education,
    render_regional_experience,
    render_regional_header,
    render_regional_personal_information,
    render_regional_references,
    render_regional_skills,
)
from quillcv.contexts.templating.resume_record import ResumeRecord


def make_record(**sections) -> ResumeRecord:
    return ResumeRecord.from_dict(sections)


@pytest.mark.unit
def test_header_with_fallbacks():
    record = make_record(personalInfo={"firstName": "Thabo", "lastName": "Nkosi", "location": "Durban"})
    header = render_regional_header(record)

    assert header[1] == r"  \textbf{{\LARGE Thabo Nkosi}} & Email: Available upon request\\"
    assert header[2] == r"  Durban & Mobile: Available upon request \\"
    assert header[3] == r"   & ID: Available upon request \\"


@pytest.mark.unit
def test_header_splits_residential_address():
    record = make_record(
        personalInfo={
            "firstName": "Thabo",
            "identityNumber": "9001015009087",
            "residentialAddress": "12 Long Street\nGardens\nCape Town",
        }
    )
    header = render_regional_header(record)
    assert header[2].startswith("  12 Long Street &")
    assert header[3] == r"  Gardens, Cape Town & ID: 9001015009087 \\"


@pytest.mark.unit
def test_education_defaults_location():
    record = make_record(
        education=[{"institution": "Wits", "degree": "BCom", "startDate": "02/2016", "endDate": "11/2019", "fieldOfStudy": "Accounting"}]
    )
    block = render_regional_education(record)
    assert block[0] == r"\section{Education}"
    assert "      {Wits}{South Africa}" in block
    assert "      {BCom}{02/2016 -- 11/2019}" in block
    assert r"        \resumeItemWithoutTitle{\textbf{Field:} Accounting}" in block


@pytest.mark.unit
def test_skills_include_languages_only_with_skills():
    record = make_record(
        skills=[{"name": "Excel", "category": "office"}],
        personalInfo={"homeLanguage": "Zulu", "otherLanguages": "English"},
    )
    block = render_regional_skills(record)
    assert r"    \resumeSubItem{Office}{Excel}" in block
    assert r"    \resumeSubItem{Languages}{Zulu, English}" in block

    assert render_regional_skills(make_record(personalInfo={"homeLanguage": "Zulu"})) == []


@pytest.mark.unit
def test_experience_splits_multiline_responsibilities():
    record = make_record(
        workExperience=[
            {"company": "Shoprite", "jobTitle": "Clerk", "startDate": "01/2020", "isCurrentJob": True,
             "responsibilities": ["Stock control\nCash up", "Training & onboarding"]}
        ]
    )
    block = render_regional_experience(record)
    assert "      {Clerk}{01/2020 -- Present}" in block
    assert r"        \resumeItemWithoutTitle{Stock control}" in block
    assert r"        \resumeItemWithoutTitle{Cash up}" in block
    assert r"        \resumeItemWithoutTitle{Training \& onboarding}" in block


@pytest.mark.unit
def test_personal_information_omitted_when_empty():
    assert render_regional_personal_information(make_record()) == []

    block = render_regional_personal_information(
        make_record(personalInfo={"nationality": "South African", "dateOfBirth": "01/01/1990"})
    )
    assert r"    \resumeSubItem{Nationality}{South African}" in block
    assert r"    \resumeSubItem{Date of Birth}{01/01/1990}" in block
    assert "Gender" not in "\n".join(block)


@pytest.mark.unit
def test_references():
    record = make_record(references=[{"name": "Sipho", "company": "Eskom", "phone": "082 555 0101"}, {"title": "No name"}])
    block = render_regional_references(record)
    assert "      {Sipho - Reference}{Eskom}" in block
    assert "      {Contact: 082 555 0101}{Available upon request}" in block
    assert "No name" not in "\n".join(block)


@pytest.mark.unit
def test_declaration_requires_name():
    assert render_regional_declaration(make_record()) == []
    block = render_regional_declaration(make_record(personalInfo={"firstName": "Thabo"}))
    assert "I, Thabo, hereby declare" in block[1]


@pytest.mark.unit
def test_full_cv_order():
    record = make_record(
        personalInfo={"firstName": "Thabo", "nationality": "South African"},
        education=[{"institution": "Wits"}],
        workExperience=[{"company": "Shoprite"}],
    )
    text = "\n".join(line for block in render_regional_cv(record) for line in block)
    positions = [
        text.index(r"\section{Education}"),
        text.index(r"\section{Professional Experience}"),
        text.index(r"\section{Personal Information}"),
        text.index(r"\section{Declaration}"),
    ]
    assert positions == sorted(positions)
    assert r"\section{Skills Summary}" not in text

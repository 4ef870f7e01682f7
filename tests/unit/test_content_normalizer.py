"""Unit tests for degree/field deduplication."""

import pytest

from quillcv.contexts.templating.content_normalizer import dedupe_fragments, normalize_program


@pytest.mark.unit
def test_generic_fragment_absorbed_by_specific_one():
    assert dedupe_fragments(["B.S.", "B.S. Computer Science"]) == ["B.S. Computer Science"]


@pytest.mark.unit
def test_specific_fragment_keeps_its_position():
    assert dedupe_fragments(["B.S. Computer Science", "computer science"]) == ["B.S. Computer Science"]


@pytest.mark.unit
def test_unrelated_fragments_kept_in_order():
    assert dedupe_fragments(["MBA", "Finance"]) == ["MBA", "Finance"]


@pytest.mark.unit
def test_case_insensitive_exact_duplicate():
    assert dedupe_fragments(["Physics", "PHYSICS"]) == ["Physics"]


@pytest.mark.unit
def test_empty_fragments_ignored():
    assert dedupe_fragments([None, "", "  ", " Chemistry "]) == ["Chemistry"]


@pytest.mark.unit
def test_normalize_program():
    assert normalize_program(["B.S.", "Computer Science"]) == "B.S., Computer Science"
    assert normalize_program(["B.S.", "B.S. Computer Science"]) == "B.S. Computer Science"
    assert normalize_program([None, ""]) == ""

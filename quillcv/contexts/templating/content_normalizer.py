"""
Content deduplication for overlapping descriptive fragments.

Degree and field-of-study inputs are often redundant ("B.S." alongside
"B.S. Computer Science"); joining them naively prints the same words twice.
"""

from typing import Any, Iterable, List

PROGRAM_SEPARATOR = ", "


def dedupe_fragments(fragments: Iterable[Any]) -> List[str]:
    """
    Drop fragments already covered by a more specific one.

    Fragments are compared case-insensitively, in order. A fragment contained in
    an accepted one is discarded; an accepted fragment contained in the new one
    is replaced by it (keeping its position); anything else is appended.
    Empty fragments are ignored.

    Args:
        fragments: Candidate phrasings of the same entity

    Returns:
        Deduplicated fragments, trimmed

    Example:
        >>> dedupe_fragments(["B.S.", "B.S. Computer Science"])
        ['B.S. Computer Science']
        >>> dedupe_fragments(["B.S. Computer Science", "computer science"])
        ['B.S. Computer Science']
        >>> dedupe_fragments(["MBA", "Finance"])
        ['MBA', 'Finance']
    """
    accepted: List[str] = []

    for fragment in fragments:
        if fragment is None:
            continue
        candidate = str(fragment).strip()
        if not candidate:
            continue

        lowered = candidate.lower()
        covered = False
        for idx, existing in enumerate(accepted):
            existing_lower = existing.lower()
            if lowered in existing_lower:
                covered = True
                break
            if existing_lower in lowered:
                accepted[idx] = candidate
                covered = True
                break

        if not covered:
            accepted.append(candidate)

    return accepted


def normalize_program(fragments: Iterable[Any], separator: str = PROGRAM_SEPARATOR) -> str:
    """Deduplicate fragments and join them into one display string."""
    return separator.join(dedupe_fragments(fragments))

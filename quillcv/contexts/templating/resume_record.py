"""
Resume Record Data Structures

Dataclasses for the resume record consumed by the compiler. Every field below the
top-level identity block is optional, and records arrive in the document-store
shape (camelCase keys, loosely typed values), so each class can be built from a
raw mapping with from_dict().

The compiler never mutates a record.
"""

import re
from dataclasses import dataclass, field, fields
from datetime import date, datetime
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Tuple, Type, TypeVar, Union

from quillcv.contexts.templating.exceptions import InvalidResumeRecordError
from quillcv.contexts.templating.logger import _log_warning

DateValue = Union[str, date, datetime]

T = TypeVar("T", bound="RecordEntry")

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def _snake_case(key: str) -> str:
    """``isCurrentJob`` -> ``is_current_job``; snake_case keys pass through."""
    return _CAMEL_BOUNDARY.sub("_", key).lower()


def _coerce_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return str(value)


def _coerce_date(value: Any) -> Optional[DateValue]:
    if value is None or isinstance(value, (date, datetime)):
        return value
    return str(value)


def _coerce_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "yes", "1")
    return bool(value)


def _coerce_text_list(value: Any) -> List[str]:
    """Lists keep their order; a lone string is split into its non-empty lines."""
    if value is None:
        return []
    if isinstance(value, str):
        return [line for line in value.splitlines() if line.strip()]
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value if item is not None]
    return [str(value)]


class RecordEntry:
    """
    Mixin providing from_dict() for the record dataclasses.

    Field kinds are derived from names: ``is_*`` fields are booleans, ``date`` and
    ``*_date`` fields keep date values, names in ``_list_fields`` are lists of
    strings, and everything else is optional text.
    """

    _list_fields: ClassVar[Tuple[str, ...]] = ()

    @classmethod
    def from_dict(cls: Type[T], data: Optional[Mapping[str, Any]]) -> T:
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise InvalidResumeRecordError(
                f"{cls.__name__} expects a mapping, got {type(data).__name__}"
            )

        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for raw_key, value in data.items():
            name = _snake_case(str(raw_key))
            if name in known:
                kwargs[name] = cls._coerce_field(name, value)
        return cls(**kwargs)

    @classmethod
    def _coerce_field(cls, name: str, value: Any) -> Any:
        if name in cls._list_fields:
            return _coerce_text_list(value)
        if name.startswith("is_"):
            return _coerce_bool(value)
        if name == "date" or name.endswith("_date") or name == "date_of_birth":
            return _coerce_date(value)
        return _coerce_text(value)


def _entries_from_list(entry_cls: Type[T], value: Any) -> List[T]:
    """
    Build a list of entries, tolerating sparse store data.

    A bare string becomes ``entry_cls(name=...)`` when the entry has a name
    field; any other non-mapping item is dropped. Non-list input yields an
    empty list.
    """
    if not isinstance(value, (list, tuple)):
        return []

    has_name = any(f.name == "name" for f in fields(entry_cls))
    entries: List[T] = []
    for item in value:
        if item is None:
            continue
        if isinstance(item, str):
            if has_name and item.strip():
                entries.append(entry_cls(name=item))
            continue
        if isinstance(item, Mapping):
            entries.append(entry_cls.from_dict(item))
    return entries


@dataclass
class PersonalInfo(RecordEntry):
    """
    Identity and contact block.

    The regional fields (identity number through residential address) are only
    used by the regional CV layout.
    """

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    linkedin_url: Optional[str] = None
    portfolio_url: Optional[str] = None
    github_url: Optional[str] = None
    website_url: Optional[str] = None
    professional_title: Optional[str] = None
    identity_number: Optional[str] = None
    date_of_birth: Optional[DateValue] = None
    gender: Optional[str] = None
    nationality: Optional[str] = None
    marital_status: Optional[str] = None
    home_language: Optional[str] = None
    other_languages: Optional[str] = None
    residential_address: Optional[str] = None


@dataclass
class WorkExperienceEntry(RecordEntry):
    """A job. When ``is_current_job`` is set the end date is shown as "Present"."""

    _list_fields: ClassVar[Tuple[str, ...]] = ("responsibilities", "achievements")

    job_title: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    start_date: Optional[DateValue] = None
    end_date: Optional[DateValue] = None
    is_current_job: bool = False
    responsibilities: List[str] = field(default_factory=list)
    achievements: List[str] = field(default_factory=list)


@dataclass
class EducationEntry(RecordEntry):
    _list_fields: ClassVar[Tuple[str, ...]] = ("coursework",)

    institution: Optional[str] = None
    degree: Optional[str] = None
    field_of_study: Optional[str] = None
    graduation_date: Optional[DateValue] = None
    start_date: Optional[DateValue] = None
    end_date: Optional[DateValue] = None
    location: Optional[str] = None
    gpa: Optional[str] = None
    coursework: List[str] = field(default_factory=list)


@dataclass
class SkillEntry(RecordEntry):
    name: Optional[str] = None
    category: Optional[str] = None
    proficiency_level: Optional[str] = None


@dataclass
class ProjectEntry(RecordEntry):
    """A project; the first non-empty description line becomes its headline."""

    _list_fields: ClassVar[Tuple[str, ...]] = ("description", "technologies")

    name: Optional[str] = None
    description: List[str] = field(default_factory=list)
    technologies: List[str] = field(default_factory=list)
    url: Optional[str] = None
    start_date: Optional[DateValue] = None
    end_date: Optional[DateValue] = None


@dataclass
class CertificationEntry(RecordEntry):
    name: Optional[str] = None
    issuer: Optional[str] = None
    date: Optional[DateValue] = None
    expiration_date: Optional[DateValue] = None
    credential_id: Optional[str] = None
    url: Optional[str] = None
    description: Optional[str] = None


@dataclass
class LanguageEntry(RecordEntry):
    name: Optional[str] = None
    proficiency: Optional[str] = None


@dataclass
class VolunteerEntry(RecordEntry):
    _list_fields: ClassVar[Tuple[str, ...]] = ("achievements",)

    organization: Optional[str] = None
    role: Optional[str] = None
    location: Optional[str] = None
    start_date: Optional[DateValue] = None
    end_date: Optional[DateValue] = None
    is_current_role: bool = False
    description: Optional[str] = None
    achievements: List[str] = field(default_factory=list)


@dataclass
class AwardEntry(RecordEntry):
    title: Optional[str] = None
    issuer: Optional[str] = None
    date: Optional[DateValue] = None
    description: Optional[str] = None


@dataclass
class PublicationEntry(RecordEntry):
    title: Optional[str] = None
    publisher: Optional[str] = None
    publication_date: Optional[DateValue] = None
    url: Optional[str] = None
    description: Optional[str] = None


@dataclass
class ReferenceEntry(RecordEntry):
    name: Optional[str] = None
    title: Optional[str] = None
    company: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    relationship: Optional[str] = None


@dataclass
class HobbyEntry(RecordEntry):
    name: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None


@dataclass
class AdditionalSection(RecordEntry):
    title: Optional[str] = None
    content: Optional[str] = None


# Record attribute -> entry class for every repeated sub-record
ENTRY_TYPES: Dict[str, Type[RecordEntry]] = {
    "work_experience": WorkExperienceEntry,
    "education": EducationEntry,
    "skills": SkillEntry,
    "projects": ProjectEntry,
    "certifications": CertificationEntry,
    "languages": LanguageEntry,
    "volunteer_experience": VolunteerEntry,
    "awards": AwardEntry,
    "publications": PublicationEntry,
    "references": ReferenceEntry,
    "hobbies": HobbyEntry,
    "additional_sections": AdditionalSection,
}


@dataclass
class ResumeRecord:
    """
    Complete input to the compiler.

    Attributes:
        personal_info: Identity and contact block
        professional_summary: Free-text summary (often AI generated upstream)
        tracking_url: Optional link printed in a small footer
        (remaining attributes): repeated sub-records, each possibly empty
    """

    personal_info: PersonalInfo = field(default_factory=PersonalInfo)
    professional_summary: Optional[str] = None
    work_experience: List[WorkExperienceEntry] = field(default_factory=list)
    education: List[EducationEntry] = field(default_factory=list)
    skills: List[SkillEntry] = field(default_factory=list)
    projects: List[ProjectEntry] = field(default_factory=list)
    certifications: List[CertificationEntry] = field(default_factory=list)
    languages: List[LanguageEntry] = field(default_factory=list)
    volunteer_experience: List[VolunteerEntry] = field(default_factory=list)
    awards: List[AwardEntry] = field(default_factory=list)
    publications: List[PublicationEntry] = field(default_factory=list)
    references: List[ReferenceEntry] = field(default_factory=list)
    hobbies: List[HobbyEntry] = field(default_factory=list)
    additional_sections: List[AdditionalSection] = field(default_factory=list)
    tracking_url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ResumeRecord":
        """
        Build a record from the document-store shape.

        Accepts camelCase or snake_case keys and ignores keys it does not know
        (``_id``, ``userId``, timestamps, ...).

        Raises:
            InvalidResumeRecordError: If ``data`` is not a mapping. A non-mapping
                ``personalInfo`` is logged and treated as empty
        """
        if not isinstance(data, Mapping):
            raise InvalidResumeRecordError(
                f"Resume record must be a mapping, got {type(data).__name__}"
            )

        normalized = {_snake_case(str(key)): value for key, value in data.items()}
        personal_info = normalized.get("personal_info")
        if personal_info is not None and not isinstance(personal_info, Mapping):
            _log_warning(
                f"Ignoring personalInfo of type {type(personal_info).__name__}; expected a mapping"
            )
            personal_info = None

        kwargs: Dict[str, Any] = {
            "personal_info": PersonalInfo.from_dict(personal_info),
            "professional_summary": _coerce_text(normalized.get("professional_summary")),
            "tracking_url": _coerce_text(normalized.get("tracking_url")),
        }
        for name, entry_cls in ENTRY_TYPES.items():
            kwargs[name] = _entries_from_list(entry_cls, normalized.get(name))

        return cls(**kwargs)

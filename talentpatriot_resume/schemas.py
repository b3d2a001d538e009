from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


ExperienceLevel = Literal["entry", "mid", "senior", "executive"]
EXPERIENCE_LEVELS: tuple[str, ...] = ("entry", "mid", "senior", "executive")


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class PersonalInfo(_CamelModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    linked_in: Optional[str] = None
    portfolio: Optional[str] = None


class Skills(_CamelModel):
    technical: list[str] = Field(default_factory=list)
    soft: list[str] = Field(default_factory=list)
    certifications: list[str] = Field(default_factory=list)


class ExperienceItem(_CamelModel):
    title: str = ""
    company: str = ""
    duration: str = ""
    location: Optional[str] = None
    description: str = ""
    achievements: list[str] = Field(default_factory=list)


class EducationItem(_CamelModel):
    degree: str = ""
    institution: str = ""
    graduation_year: Optional[str] = None
    gpa: Optional[str] = None
    major: Optional[str] = None


class ProjectItem(_CamelModel):
    name: str = ""
    description: str = ""
    technologies: list[str] = Field(default_factory=list)


class ParsedResumeData(_CamelModel):
    """Canonical structured resume.

    Frozen: assigning a field raises. List fields are plain lists shared with
    the instance, so copy one before changing it.
    """

    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    summary: Optional[str] = None
    skills: Skills = Field(default_factory=Skills)
    experience: list[ExperienceItem] = Field(default_factory=list)
    education: list[EducationItem] = Field(default_factory=list)
    projects: list[ProjectItem] = Field(default_factory=list)
    languages: list[str] = Field(default_factory=list)
    experience_level: ExperienceLevel = "entry"
    total_years_experience: float = Field(default=0, ge=0)


class ExtractionResult(BaseModel):
    text: str
    page_count: Optional[int] = None
    word_count: int = 0


class ParseResumeTextRequest(_CamelModel):
    resume_text: str = Field(min_length=1)


class ParseResumeStorageRequest(_CamelModel):
    storage_path: str = Field(min_length=1)

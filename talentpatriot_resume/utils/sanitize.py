"""Coerce untrusted LLM JSON into the canonical ``ParsedResumeData`` shape.

The model decides field presence and types, so nothing here trusts them:
every field goes through a type guard and falls back to a safe default.
``sanitize_parsed_data`` never raises.
"""
import math
from typing import Any, Optional

from talentpatriot_resume.schemas import (
    EXPERIENCE_LEVELS,
    EducationItem,
    ExperienceItem,
    ParsedResumeData,
    PersonalInfo,
    ProjectItem,
    Skills,
)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _as_dict(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def _num_str(value: Any) -> Optional[str]:
    try:
        return str(value)
    except ValueError:
        # int too large for str() under the interpreter digit limit
        return None


def _opt_str(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return value or None
    if _is_number(value):
        return _num_str(value)
    return None


def _str(value: Any) -> str:
    return _opt_str(value) or ""


def _str_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    out: list[str] = []
    for item in value:
        if isinstance(item, str):
            out.append(item)
        elif _is_number(item):
            s = _num_str(item)
            if s is not None:
                out.append(s)
    return out


def _dict_list(value: Any) -> list[dict]:
    if not isinstance(value, list):
        return []
    return [_as_dict(item) for item in value]


def _years(value: Any) -> float:
    if not _is_number(value):
        return 0
    try:
        years = float(value)
    except OverflowError:
        return 0
    if not math.isfinite(years):
        return 0
    return max(0.0, years)


def _experience_level(value: Any) -> str:
    return value if isinstance(value, str) and value in EXPERIENCE_LEVELS else "entry"


def empty_resume_data() -> ParsedResumeData:
    return ParsedResumeData()


def sanitize_parsed_data(data: Any) -> ParsedResumeData:
    d = _as_dict(data)
    info = _as_dict(d.get("personalInfo"))
    skills = _as_dict(d.get("skills"))

    return ParsedResumeData(
        personal_info=PersonalInfo(
            name=_opt_str(info.get("name")),
            email=_opt_str(info.get("email")),
            phone=_opt_str(info.get("phone")),
            location=_opt_str(info.get("location")),
            linked_in=_opt_str(info.get("linkedIn")),
            portfolio=_opt_str(info.get("portfolio")),
        ),
        summary=_opt_str(d.get("summary")),
        skills=Skills(
            technical=_str_list(skills.get("technical")),
            soft=_str_list(skills.get("soft")),
            certifications=_str_list(skills.get("certifications")),
        ),
        experience=[
            ExperienceItem(
                title=_str(exp.get("title")),
                company=_str(exp.get("company")),
                duration=_str(exp.get("duration")),
                location=_opt_str(exp.get("location")),
                description=_str(exp.get("description")),
                achievements=_str_list(exp.get("achievements")),
            )
            for exp in _dict_list(d.get("experience"))
        ],
        education=[
            EducationItem(
                degree=_str(edu.get("degree")),
                institution=_str(edu.get("institution")),
                graduation_year=_opt_str(edu.get("graduationYear")),
                gpa=_opt_str(edu.get("gpa")),
                major=_opt_str(edu.get("major")),
            )
            for edu in _dict_list(d.get("education"))
        ],
        projects=[
            ProjectItem(
                name=_str(proj.get("name")),
                description=_str(proj.get("description")),
                technologies=_str_list(proj.get("technologies")),
            )
            for proj in _dict_list(d.get("projects"))
        ],
        languages=_str_list(d.get("languages")),
        experience_level=_experience_level(d.get("experienceLevel")),
        total_years_experience=_years(d.get("totalYearsExperience")),
    )

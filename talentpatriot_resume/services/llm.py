import json
import logging
from dataclasses import dataclass
from typing import Any, Union

from openai import OpenAI

from talentpatriot_resume.errors import StructuringError
from talentpatriot_resume.schemas import ParsedResumeData
from talentpatriot_resume.settings import Settings
from talentpatriot_resume.utils.sanitize import empty_resume_data, sanitize_parsed_data


logger = logging.getLogger(__name__)

# Pinned snapshot so the response shape does not drift when aliases move.
RESUME_PARSER_MODEL = "gpt-4o-2024-08-06"
RESUME_PARSER_TEMPERATURE = 0.1

SYSTEM_PROMPT = (
    "You are an expert resume parser. Extract structured information from resumes "
    "and return valid JSON data only."
)

_SCHEMA_DESCRIPTION = (
    "{\n"
    '  "personalInfo": {\n'
    '    "name": "string (optional)",\n'
    '    "email": "string (optional)",\n'
    '    "phone": "string (optional)",\n'
    '    "location": "string (optional)",\n'
    '    "linkedIn": "string (optional)",\n'
    '    "portfolio": "string (optional)"\n'
    "  },\n"
    '  "summary": "string (optional - brief professional summary)",\n'
    '  "skills": {\n'
    '    "technical": ["array of technical skills"],\n'
    '    "soft": ["array of soft skills like leadership, communication"],\n'
    '    "certifications": ["array of certifications"]\n'
    "  },\n"
    '  "experience": [\n'
    "    {\n"
    '      "title": "Job title",\n'
    '      "company": "Company name",\n'
    '      "duration": "Duration (e.g., Jan 2020 - Present)",\n'
    '      "location": "Location (optional)",\n'
    '      "description": "Job description",\n'
    '      "achievements": ["array of key achievements (optional)"]\n'
    "    }\n"
    "  ],\n"
    '  "education": [\n'
    "    {\n"
    '      "degree": "Degree name",\n'
    '      "institution": "School/University name",\n'
    '      "graduationYear": "Year (optional)",\n'
    '      "gpa": "GPA if mentioned (optional)",\n'
    '      "major": "Major/Field of study (optional)"\n'
    "    }\n"
    "  ],\n"
    '  "projects": [\n'
    "    {\n"
    '      "name": "Project name",\n'
    '      "description": "Project description",\n'
    '      "technologies": ["array of technologies used"]\n'
    "    }\n"
    "  ],\n"
    '  "languages": ["array of languages spoken"],\n'
    '  "experienceLevel": "entry|mid|senior|executive (based on experience)",\n'
    '  "totalYearsExperience": "number (estimated total years of professional experience)"\n'
    "}"
)


@dataclass(frozen=True)
class Available:
    client: Any


@dataclass(frozen=True)
class Unavailable:
    reason: str = "OPENAI_API_KEY is not set"


StructuringCapability = Union[Available, Unavailable]


def resolve_structuring(settings: Settings) -> StructuringCapability:
    api_key = (settings.openai_api_key or "").strip()
    if not api_key:
        logger.warning("OPENAI_API_KEY not found - resume parsing will be disabled")
        return Unavailable()
    return Available(client=OpenAI(api_key=api_key))


def build_user_prompt(resume_text: str) -> str:
    return (
        "Analyze the following resume and extract structured information. "
        "Return the data in valid JSON format matching this exact schema:\n\n"
        f"{_SCHEMA_DESCRIPTION}\n\n"
        "Important instructions:\n"
        "- Return ONLY valid JSON, no additional text\n"
        "- Use null for missing optional fields\n"
        "- Estimate experience level based on job titles and years of experience\n"
        "- Extract all skills mentioned, including programming languages, tools, frameworks\n"
        "- Be thorough but accurate - don't invent information not in the resume\n\n"
        "Resume text:\n"
        f"{resume_text}"
    )


def _chat_completion_json(client: Any, *, messages: list[dict]) -> str:
    try:
        resp = client.chat.completions.create(
            model=RESUME_PARSER_MODEL,
            messages=messages,
            response_format={"type": "json_object"},
            temperature=RESUME_PARSER_TEMPERATURE,
        )
    except Exception as e:
        logger.exception("OpenAI resume structuring request failed")
        raise StructuringError(f"Failed to parse resume: {e}") from e

    choices = getattr(resp, "choices", None) or []
    content = choices[0].message.content if choices else None
    if not content:
        raise StructuringError("Failed to parse resume: No content returned from OpenAI")
    return content


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name}")


def _loads_json(content: str) -> Any:
    try:
        return json.loads(content, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        raise StructuringError(f"Failed to parse resume: model returned invalid JSON ({e})") from e


def structure_resume_text(text: str, capability: StructuringCapability) -> ParsedResumeData:
    if not isinstance(capability, Available):
        logger.info("Resume parsing disabled - no OpenAI API key configured")
        return empty_resume_data()

    content = _chat_completion_json(
        capability.client,
        messages=[
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": build_user_prompt(text)},
        ],
    )
    return sanitize_parsed_data(_loads_json(content))

import io
import json
from types import SimpleNamespace
from unittest.mock import MagicMock

import fitz  # PyMuPDF
import pytest
from docx import Document


RESUME_LINES = [
    "Jane Smith",
    "Senior Software Engineer in San Francisco",
    "Experience building scalable backend services with Python",
    "Led migration of billing platform to microservices",
    "Education: Bachelor of Science in Computer Science, MIT",
]


def make_pdf(pages: list[str]) -> bytes:
    doc = fitz.open()
    for text in pages:
        page = doc.new_page()
        page.insert_text((72, 72), text, fontsize=11)
    data = doc.tobytes()
    doc.close()
    return data


def make_docx(paragraphs: list[str]) -> bytes:
    doc = Document()
    for p in paragraphs:
        doc.add_paragraph(p)
    buf = io.BytesIO()
    doc.save(buf)
    return buf.getvalue()


def full_resume_json() -> dict:
    """A model response that is already in canonical shape."""
    return {
        "personalInfo": {
            "name": "Jane Smith",
            "email": "jane@example.com",
            "phone": "555-0100",
            "location": "San Francisco, CA",
            "linkedIn": "https://linkedin.com/in/janesmith",
            "portfolio": "https://janesmith.dev",
        },
        "summary": "Backend engineer focused on distributed systems.",
        "skills": {
            "technical": ["Python", "PostgreSQL", "Python"],
            "soft": ["Leadership"],
            "certifications": ["AWS Solutions Architect"],
        },
        "experience": [
            {
                "title": "Senior Software Engineer",
                "company": "TechCorp",
                "duration": "Mar 2020 - Present",
                "location": "San Francisco, CA",
                "description": "Owns the billing platform.",
                "achievements": ["Reduced deploy time by 40%"],
            }
        ],
        "education": [
            {
                "degree": "B.S. Computer Science",
                "institution": "MIT",
                "graduationYear": "2017",
                "gpa": "3.8",
                "major": "Computer Science",
            }
        ],
        "projects": [
            {
                "name": "Ledger",
                "description": "Double-entry accounting service",
                "technologies": ["Python", "Kafka"],
            }
        ],
        "languages": ["English", "Spanish"],
        "experienceLevel": "senior",
        "totalYearsExperience": 8,
    }


def completion(content):
    message = SimpleNamespace(content=content)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


@pytest.fixture
def openai_stub():
    client = MagicMock()
    client.chat.completions.create.return_value = completion(json.dumps(full_resume_json()))
    return client


@pytest.fixture
def resume_pdf() -> bytes:
    return make_pdf(["\n".join(RESUME_LINES)] * 3)


@pytest.fixture
def resume_docx() -> bytes:
    return make_docx(RESUME_LINES)

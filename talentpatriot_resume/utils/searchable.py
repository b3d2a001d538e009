from talentpatriot_resume.schemas import ParsedResumeData


def extract_searchable_content(parsed: ParsedResumeData) -> str:
    """Flatten a parsed resume into one lowercased blob for candidate search."""
    elements: list[str] = [parsed.summary or ""]
    elements += parsed.skills.technical
    elements += parsed.skills.soft
    elements += parsed.skills.certifications
    elements += [f"{e.title} {e.company} {e.description}" for e in parsed.experience]
    elements += [f"{e.degree} {e.institution} {e.major or ''}" for e in parsed.education]
    elements += [f"{p.name} {p.description} {' '.join(p.technologies)}" for p in parsed.projects]
    elements += parsed.languages
    return " ".join(elements).lower()

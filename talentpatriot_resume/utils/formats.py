from talentpatriot_resume.errors import UnsupportedFormatError


PDF_MIME = "application/pdf"
DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
DOC_MIME = "application/msword"

_EXTENSION_MIME: dict[str, str] = {
    "pdf": PDF_MIME,
    "docx": DOCX_MIME,
    "doc": DOC_MIME,
}


def file_extension(path: str) -> str:
    name = (path or "").strip().rsplit("/", 1)[-1]
    if "." not in name:
        return ""
    return name.rsplit(".", 1)[-1].lower()


def detect_mime_type(path: str) -> str:
    ext = file_extension(path)
    mime = _EXTENSION_MIME.get(ext)
    if not mime:
        raise UnsupportedFormatError(
            f"Unsupported file extension: {ext or '(none)'}. Only PDF, DOC, and DOCX are supported.",
            extension=ext,
        )
    return mime

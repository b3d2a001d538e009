import logging

from talentpatriot_resume.errors import ExtractionError, UnsupportedFormatError
from talentpatriot_resume.schemas import ExtractionResult
from talentpatriot_resume.utils.docx_extract import extract_docx_text
from talentpatriot_resume.utils.formats import DOC_MIME, DOCX_MIME, PDF_MIME, detect_mime_type
from talentpatriot_resume.utils.pdf_extract import extract_pdf_pages


logger = logging.getLogger(__name__)


def count_words(text: str) -> int:
    return len((text or "").split())


def extract_from_pdf(buffer: bytes) -> ExtractionResult:
    try:
        pages = extract_pdf_pages(buffer)
    except Exception as e:
        logger.exception("PDF text extraction failed")
        raise ExtractionError(f"Failed to extract text from PDF: {e}") from e

    text = "\n".join(pages)
    return ExtractionResult(text=text, page_count=len(pages), word_count=count_words(text))


def extract_from_docx(buffer: bytes) -> ExtractionResult:
    try:
        text = extract_docx_text(buffer)
    except Exception as e:
        logger.exception("DOCX text extraction failed")
        raise ExtractionError(f"Failed to extract text from DOCX: {e}") from e

    return ExtractionResult(text=text, word_count=count_words(text))


def extract_from_doc(buffer: bytes) -> ExtractionResult:
    # Legacy binary .doc goes through the OOXML reader; only .docx renamed to
    # .doc actually extracts. Genuine Word 97-2003 files raise ExtractionError.
    return extract_from_docx(buffer)


def extract_text(buffer: bytes, mime_type: str) -> ExtractionResult:
    mt = (mime_type or "").strip().lower()
    if mt == PDF_MIME:
        return extract_from_pdf(buffer)
    if mt == DOCX_MIME:
        return extract_from_docx(buffer)
    if mt == DOC_MIME:
        return extract_from_doc(buffer)
    raise UnsupportedFormatError(
        f"Unsupported file type: {mime_type}. Only PDF, DOC, and DOCX are supported."
    )


def extract_from_storage_path(store, storage_path: str) -> ExtractionResult:
    buffer = store.download(storage_path)
    mime_type = detect_mime_type(storage_path)
    return extract_text(buffer, mime_type)

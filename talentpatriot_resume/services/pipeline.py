import logging

from talentpatriot_resume.errors import TextValidationError
from talentpatriot_resume.schemas import ExtractionResult, ParsedResumeData
from talentpatriot_resume.services.llm import Available, StructuringCapability, structure_resume_text
from talentpatriot_resume.services.storage import ResumeStore
from talentpatriot_resume.utils.formats import detect_mime_type
from talentpatriot_resume.utils.sanitize import empty_resume_data
from talentpatriot_resume.utils.text_extract import extract_from_storage_path, extract_text
from talentpatriot_resume.utils.text_validate import validate_extracted_text


logger = logging.getLogger(__name__)


class ResumeParsingPipeline:
    """Storage path or text in, canonical ``ParsedResumeData`` out.

    Every step runs in the calling thread and is awaited before the next one.
    Nothing here retries or sets timeouts; configure those on the injected
    Supabase and OpenAI clients.
    """

    def __init__(self, store: ResumeStore, structuring: StructuringCapability) -> None:
        self.store = store
        self.structuring = structuring

    @property
    def structuring_available(self) -> bool:
        return isinstance(self.structuring, Available)

    def parse_resume_text(self, text: str) -> ParsedResumeData:
        if not self.structuring_available:
            logger.info("Resume parsing disabled - no OpenAI API key configured")
            return empty_resume_data()
        self._ensure_valid(text)
        return structure_resume_text(text, self.structuring)

    def parse_resume_from_storage(self, storage_path: str) -> ParsedResumeData:
        if not self.structuring_available:
            logger.info("Resume parsing disabled - no OpenAI API key configured")
            return empty_resume_data()

        logger.info("Extracting text from storage path: %s", storage_path)
        extraction = extract_from_storage_path(self.store, storage_path)
        parsed = self._structure_extraction(extraction)
        logger.info("Successfully parsed resume from %s", storage_path)
        return parsed

    def parse_resume_bytes(self, buffer: bytes, filename: str) -> ParsedResumeData:
        mime_type = detect_mime_type(filename)
        if not self.structuring_available:
            logger.info("Resume parsing disabled - no OpenAI API key configured")
            return empty_resume_data()

        extraction = extract_text(buffer, mime_type)
        return self._structure_extraction(extraction)

    def _structure_extraction(self, extraction: ExtractionResult) -> ParsedResumeData:
        logger.info(
            "Extracted %d words from resume (pages=%s)",
            extraction.word_count,
            extraction.page_count,
        )
        self._ensure_valid(extraction.text)
        parsed = structure_resume_text(extraction.text, self.structuring)
        _log_summary(parsed)
        return parsed

    @staticmethod
    def _ensure_valid(text: str) -> None:
        if not validate_extracted_text(text):
            raise TextValidationError(
                "Resume text extraction produced insufficient content. File may be corrupted or empty."
            )


def _log_summary(parsed: ParsedResumeData) -> None:
    logger.info(
        "Parsed data summary: has_name=%s has_summary=%s skills=%d experience=%d education=%d level=%s years=%s",
        bool(parsed.personal_info.name),
        bool(parsed.summary),
        len(parsed.skills.technical),
        len(parsed.experience),
        len(parsed.education),
        parsed.experience_level,
        parsed.total_years_experience,
    )

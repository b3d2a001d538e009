import logging
from functools import lru_cache

from fastapi import Body, Depends, FastAPI, File, HTTPException, Request, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from talentpatriot_resume.errors import (
    ExtractionError,
    ResumePipelineError,
    StorageError,
    StructuringError,
    TextValidationError,
    UnsupportedFormatError,
)
from talentpatriot_resume.logging_setup import setup_logging
from talentpatriot_resume.schemas import ParsedResumeData, ParseResumeStorageRequest, ParseResumeTextRequest
from talentpatriot_resume.services.llm import resolve_structuring
from talentpatriot_resume.services.pipeline import ResumeParsingPipeline
from talentpatriot_resume.services.storage import SupabaseResumeStore
from talentpatriot_resume.settings import settings
from talentpatriot_resume.utils.searchable import extract_searchable_content


logger = logging.getLogger(__name__)

_ERROR_STATUS: dict[type, int] = {
    UnsupportedFormatError: 415,
    TextValidationError: 422,
    ExtractionError: 422,
    StorageError: 502,
    StructuringError: 502,
}


@lru_cache
def get_pipeline() -> ResumeParsingPipeline:
    return ResumeParsingPipeline(
        store=SupabaseResumeStore(settings),
        structuring=resolve_structuring(settings),
    )


def _ai_parsing(pipeline: ResumeParsingPipeline) -> str:
    return "enabled" if pipeline.structuring_available else "disabled"


def _result(pipeline: ResumeParsingPipeline, parsed: ParsedResumeData) -> dict:
    return {
        "aiParsing": _ai_parsing(pipeline),
        "parsed": parsed.model_dump(mode="json", by_alias=True),
        "searchableContent": extract_searchable_content(parsed),
    }


setup_logging(settings.log_level)

app = FastAPI(title="TalentPatriot Resume Parsing")

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_origin],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ResumePipelineError)
async def pipeline_error_handler(request: Request, exc: ResumePipelineError):
    status = _ERROR_STATUS.get(type(exc), 500)
    logger.warning("%s %s failed with %s: %s", request.method, request.url.path, exc.kind, exc)
    return JSONResponse(status_code=status, content={"error": exc.kind, "detail": str(exc)})


@app.get("/health")
def health(pipeline: ResumeParsingPipeline = Depends(get_pipeline)):
    return {"ok": True, "aiParsing": _ai_parsing(pipeline)}


@app.post("/parse-resume")
def parse_resume(
    payload: ParseResumeTextRequest = Body(...),
    pipeline: ResumeParsingPipeline = Depends(get_pipeline),
):
    parsed = pipeline.parse_resume_text(payload.resume_text)
    return _result(pipeline, parsed)


@app.post("/parse-resume/storage")
def parse_resume_from_storage(
    payload: ParseResumeStorageRequest = Body(...),
    pipeline: ResumeParsingPipeline = Depends(get_pipeline),
):
    parsed = pipeline.parse_resume_from_storage(payload.storage_path)
    return _result(pipeline, parsed)


@app.post("/parse-resume/upload")
def parse_resume_upload(
    file: UploadFile = File(...),
    pipeline: ResumeParsingPipeline = Depends(get_pipeline),
):
    filename = (file.filename or "").strip()
    if not filename:
        raise HTTPException(status_code=400, detail="Please upload a .pdf, .docx or .doc file")

    content = file.file.read()
    if not content:
        raise HTTPException(status_code=400, detail="Uploaded file was empty. Please upload a valid resume.")

    parsed = pipeline.parse_resume_bytes(content, filename)
    return _result(pipeline, parsed)

class ResumePipelineError(RuntimeError):
    kind = "ResumePipelineError"


class StorageError(ResumePipelineError):
    kind = "StorageError"


class UnsupportedFormatError(ResumePipelineError):
    kind = "UnsupportedFormatError"

    def __init__(self, message: str, extension: str = "") -> None:
        super().__init__(message)
        self.extension = extension


class ExtractionError(ResumePipelineError):
    kind = "ExtractionError"


class TextValidationError(ResumePipelineError):
    """Extracted text is too short or too symbol-heavy to be a resume."""

    kind = "ValidationError"


class StructuringError(ResumePipelineError):
    kind = "StructuringError"

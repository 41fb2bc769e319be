class PipelineError(Exception):
    """Base class for pipeline exceptions."""
    kind = "pipeline_error"

class InvalidFileType(PipelineError):
    """Raised when the uploaded file is not a PDF."""
    kind = "invalid_file_type"

    def __init__(self, media_type: str | None):
        super().__init__(f"Unsupported media type: {media_type!r}")
        self.media_type = media_type

class ExtractionError(PipelineError):
    """Raised when the PDF bytes cannot be turned into text."""
    kind = "extraction_error"

class EmptyInputError(PipelineError):
    """Raised when there is no text to build a prompt from."""
    kind = "empty_input"

class GenerationError(PipelineError):
    """Raised when the text-generation service fails or replies with non-JSON."""
    kind = "generation_error"

class SchemaError(PipelineError):
    """Raised when the generated payload is not a list of question/answer records."""
    kind = "schema_error"

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.details = details or {}

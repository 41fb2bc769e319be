"""User-visible error messages, keyed by error kind and UI language."""
from typing import Dict

from backend.app.services.exceptions import (
    PipelineError,
    InvalidFileType,
    ExtractionError,
    EmptyInputError,
    GenerationError,
    SchemaError,
)
from shared.config import settings

DEFAULT_LANGUAGE = "ar"

ERROR_KINDS = (
    InvalidFileType.kind,
    ExtractionError.kind,
    EmptyInputError.kind,
    GenerationError.kind,
    SchemaError.kind,
    PipelineError.kind,
)

MESSAGES: Dict[str, Dict[str, str]] = {
    "ar": {
        InvalidFileType.kind: "يرجى تحميل ملف PDF صالح.",
        ExtractionError.kind: "خطأ في قراءة الملف. يرجى المحاولة مرة أخرى.",
        EmptyInputError.kind: "لا يوجد نص لتحويله إلى أسئلة.",
        GenerationError.kind: "حدث خطأ أثناء إنشاء الأسئلة. يرجى المحاولة مرة أخرى.",
        SchemaError.kind: "تعذر فهم الأسئلة المُنشأة. يرجى المحاولة مرة أخرى.",
        PipelineError.kind: "حدث خطأ غير متوقع. يرجى المحاولة مرة أخرى.",
    },
    "en": {
        InvalidFileType.kind: "Please upload a valid PDF file.",
        ExtractionError.kind: "Could not read the file. Please try again.",
        EmptyInputError.kind: "There is no text to turn into questions.",
        GenerationError.kind: "Something went wrong while generating questions. Please try again.",
        SchemaError.kind: "The generated questions could not be understood. Please try again.",
        PipelineError.kind: "An unexpected error occurred. Please try again.",
    },
}


def message_for(error: PipelineError, language: str | None = None) -> str:
    table = MESSAGES.get(language or settings.ui_language) or MESSAGES[DEFAULT_LANGUAGE]
    return table.get(error.kind) or table[PipelineError.kind]

from typing import Optional

from agents.system_prompts import QUESTION_TASK_TEMPLATE
from backend.app.services.exceptions import EmptyInputError
from shared.config import settings


class PromptBuilder:
    def __init__(self, language: Optional[str] = None, template: str = QUESTION_TASK_TEMPLATE):
        self.language = language or settings.question_language
        self.template = template

    def build(self, text: str) -> str:
        """Embed the full extracted text, verbatim, in the question-generation task."""
        if not text or not text.strip():
            raise EmptyInputError("No extracted text to build a prompt from")
        return self.template.format(language=self.language, text=text)

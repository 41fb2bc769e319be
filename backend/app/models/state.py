"""
Pipeline state machine record.

A single immutable `PipelineState` describes where the document-to-questions
pipeline is. Each phase has a named constructor, and `__post_init__` rejects
combinations that cannot happen (questions outside `READY`, an error message
outside `FAILED`), so the controller can only ever publish legal states.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from backend.app.models.schemas import QuestionAnswer


class Phase(str, Enum):
    IDLE = "idle"
    EXTRACTING = "extracting"
    EXTRACTED_READY = "extracted_ready"
    GENERATING = "generating"
    READY = "ready"
    FAILED = "failed"


LOADING_PHASES = (Phase.EXTRACTING, Phase.GENERATING)


@dataclass(frozen=True)
class PipelineState:
    phase: Phase = Phase.IDLE
    extracted_text: str = ""
    questions: Tuple[QuestionAnswer, ...] = ()
    error_message: str = ""

    def __post_init__(self):
        if self.questions and self.phase != Phase.READY:
            raise ValueError(f"questions are only held in READY, not {self.phase.value}")
        if self.phase == Phase.FAILED and not self.error_message:
            raise ValueError("FAILED state requires an error message")
        if self.error_message and self.phase != Phase.FAILED:
            raise ValueError(f"error message is only held in FAILED, not {self.phase.value}")
        if self.phase == Phase.EXTRACTING and self.extracted_text:
            raise ValueError("EXTRACTING state cannot carry text from a previous document")
        # A zero-page PDF legitimately extracts to "", so EXTRACTED_READY may be empty
        if self.phase in (Phase.GENERATING, Phase.READY) and not self.extracted_text:
            raise ValueError(f"{self.phase.value} requires extracted text")

    # Named constructors, one per phase

    @classmethod
    def idle(cls) -> "PipelineState":
        return cls()

    @classmethod
    def extracting(cls) -> "PipelineState":
        return cls(phase=Phase.EXTRACTING)

    @classmethod
    def extracted(cls, text: str) -> "PipelineState":
        return cls(phase=Phase.EXTRACTED_READY, extracted_text=text)

    @classmethod
    def generating(cls, text: str) -> "PipelineState":
        return cls(phase=Phase.GENERATING, extracted_text=text)

    @classmethod
    def ready(cls, text: str, questions) -> "PipelineState":
        return cls(phase=Phase.READY, extracted_text=text, questions=tuple(questions))

    @classmethod
    def failed(cls, message: str, text: str = "") -> "PipelineState":
        return cls(phase=Phase.FAILED, extracted_text=text, error_message=message)

    @property
    def loading(self) -> bool:
        return self.phase in LOADING_PHASES

    @property
    def can_generate(self) -> bool:
        return bool(self.extracted_text) and not self.loading

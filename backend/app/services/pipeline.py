"""
Document-to-questions pipeline controller.

Owns the single mutable `PipelineState` for one signed-in session and drives
it through:

    IDLE -> EXTRACTING -> EXTRACTED_READY -> GENERATING -> READY
                 \\                               \\
                  -> FAILED                        -> FAILED

Every pipeline error is caught here, logged, and mapped to a localized
message on the FAILED state; nothing propagates to the caller. A new file
selection or a sign-out moves the operation epoch forward, and any in-flight
extraction or generation that completes under an older epoch is discarded.
"""
from __future__ import annotations
import asyncio
import logging
from typing import Callable, List, Optional

from agents.workflows import QuestionGenerationWorkflow
from backend.app.models.schemas import UploadedFile
from backend.app.models.state import PipelineState
from backend.app.services.exceptions import PipelineError, InvalidFileType
from backend.app.services.identity import SIGNED_OUT, Session, Subscription
from backend.app.services.messages import message_for
from backend.app.services.prompt_builder import PromptBuilder
from backend.app.services.text_extractor import TextExtractor

logger = logging.getLogger(__name__)

StateListener = Callable[[PipelineState], None]


class PipelineController:
    def __init__(
        self,
        extractor: Optional[TextExtractor] = None,
        prompt_builder: Optional[PromptBuilder] = None,
        generator: Optional[QuestionGenerationWorkflow] = None,
        language: Optional[str] = None,
    ):
        self.extractor = extractor or TextExtractor()
        self.prompt_builder = prompt_builder or PromptBuilder()
        self.generator = generator or QuestionGenerationWorkflow()
        self.language = language
        self._state = PipelineState.idle()
        self._epoch = 0
        self._listeners: List[StateListener] = []
        self._auth_subscription: Optional[Subscription] = None
        self._session_token: Optional[str] = None

    # ---- state access -------------------------------------------------

    @property
    def state(self) -> PipelineState:
        return self._state

    def snapshot(self) -> PipelineState:
        return self._state

    def subscribe(self, listener: StateListener) -> Subscription:
        self._listeners.append(listener)

        def _release():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return Subscription(_release)

    def _publish(self, state: PipelineState) -> None:
        self._state = state
        logger.debug(f"Pipeline phase -> {state.phase.value}")
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("State listener failed")

    def _is_stale(self, epoch: int, operation: str) -> bool:
        if epoch != self._epoch:
            logger.info(f"Discarding stale {operation} result (epoch {epoch}, current {self._epoch})")
            return True
        return False

    def _fail(self, error: Exception, text: str = "") -> None:
        if not isinstance(error, PipelineError):
            logger.exception(f"Unexpected pipeline failure: {error}")
            error = PipelineError(str(error))
        self._publish(PipelineState.failed(message_for(error, self.language), text=text))

    # ---- user events --------------------------------------------------

    async def select_file(self, file: UploadedFile) -> PipelineState:
        self._epoch += 1
        epoch = self._epoch

        if not file.is_pdf:
            err = InvalidFileType(file.media_type)
            logger.warning(f"Rejected upload {file.filename!r}: {err}")
            # Questions are cleared; the previous document's text stays
            self._fail(err, text=self._state.extracted_text)
            return self._state

        # Clear stale results before extraction starts
        self._publish(PipelineState.extracting())
        try:
            text = await asyncio.to_thread(self.extractor.extract, file)
        except Exception as e:
            if self._is_stale(epoch, "extraction"):
                return self._state
            logger.error(f"Extraction failed for {file.filename!r}: {e}")
            self._fail(e)
            return self._state

        if self._is_stale(epoch, "extraction"):
            return self._state
        self._publish(PipelineState.extracted(text))
        return self._state

    async def generate(self) -> PipelineState:
        current = self._state
        if not current.can_generate:
            logger.info(f"Ignoring generate request in phase {current.phase.value}")
            return current

        epoch = self._epoch
        text = current.extracted_text
        self._publish(PipelineState.generating(text))
        try:
            prompt = self.prompt_builder.build(text)
            questions = await self.generator.run(prompt)
        except Exception as e:
            if self._is_stale(epoch, "generation"):
                return self._state
            logger.error(f"Question generation failed: {e}")
            self._fail(e, text=text)
            return self._state

        if self._is_stale(epoch, "generation"):
            return self._state
        self._publish(PipelineState.ready(text, questions))
        return self._state

    def sign_out(self) -> PipelineState:
        self._epoch += 1
        self._publish(PipelineState.idle())
        return self._state

    # ---- identity binding ---------------------------------------------

    def bind_session(self, identity, token: str) -> None:
        """Reset this pipeline when the given session signs out."""
        if self._auth_subscription is not None:
            self._auth_subscription.unsubscribe()
        self._session_token = token
        self._auth_subscription = identity.on_auth_state_change(self._on_auth_change)

    def _on_auth_change(self, event: str, session: Session) -> None:
        if event == SIGNED_OUT and session.token == self._session_token:
            self.sign_out()

    def close(self) -> None:
        if self._auth_subscription is not None:
            self._auth_subscription.unsubscribe()
            self._auth_subscription = None
        self._listeners.clear()

    def __enter__(self) -> "PipelineController":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

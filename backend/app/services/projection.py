from backend.app.models.schemas import PipelineView
from backend.app.models.state import PipelineState


def project_state(state: PipelineState) -> PipelineView:
    return PipelineView(
        phase=state.phase.value,
        loading=state.loading,
        error_message=state.error_message,
        has_extracted_text=bool(state.extracted_text),
        show_generate_button=state.can_generate,
        questions=list(state.questions),
    )

from fastapi import APIRouter, Depends
from backend.app.models.schemas import PipelineView
from backend.app.routes.deps import current_pipeline
from backend.app.services.pipeline import PipelineController
from backend.app.services.projection import project_state

router = APIRouter()

@router.post("/questions/generate", response_model=PipelineView)
async def generate_questions(pipeline: PipelineController = Depends(current_pipeline)):
    state = await pipeline.generate()
    return project_state(state)

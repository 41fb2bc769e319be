from fastapi import APIRouter, Depends, HTTPException, UploadFile
from backend.app.models.schemas import PipelineView, UploadedFile
from backend.app.routes.deps import current_pipeline
from backend.app.services.pipeline import PipelineController
from backend.app.services.projection import project_state
from shared.config import settings

router = APIRouter()

@router.post("/documents", response_model=PipelineView)
async def upload_document(file: UploadFile, pipeline: PipelineController = Depends(current_pipeline)):
    content = await file.read()
    if len(content) > settings.max_upload_mb * 1024 * 1024:
        raise HTTPException(413, f"File exceeds {settings.max_upload_mb} MB")
    uploaded = UploadedFile(data=content, media_type=file.content_type, filename=file.filename)
    state = await pipeline.select_file(uploaded)
    return project_state(state)

@router.get("/state", response_model=PipelineView)
async def get_state(pipeline: PipelineController = Depends(current_pipeline)):
    return project_state(pipeline.snapshot())

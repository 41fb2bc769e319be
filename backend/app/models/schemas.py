from dataclasses import dataclass
from pydantic import BaseModel, ConfigDict, Field, StrictStr
from typing import List, Optional

PDF_MEDIA_TYPE = "application/pdf"

@dataclass(frozen=True)
class UploadedFile:
    data: bytes
    media_type: Optional[str]
    filename: Optional[str] = None

    @property
    def is_pdf(self) -> bool:
        return self.media_type == PDF_MEDIA_TYPE

class QuestionAnswer(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    question: StrictStr
    answer: StrictStr

class GenerationRequest(BaseModel):
    prompt: str
    response_type: str = "json"

class PipelineView(BaseModel):
    model_config = ConfigDict(frozen=True)

    phase: str
    loading: bool
    error_message: str = ""
    has_extracted_text: bool = False
    show_generate_button: bool = False
    questions: List[QuestionAnswer] = Field(default_factory=list)

class SignInRequest(BaseModel):
    email: str

class SignInResponse(BaseModel):
    access_token: str
    user: str

class SessionInfo(BaseModel):
    authenticated: bool
    user: Optional[str] = None

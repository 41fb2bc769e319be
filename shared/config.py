import os
from pydantic import BaseModel, Field
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseModel):
    app_env: str = Field(default=os.getenv("APP_ENV", "dev"))
    log_level: str = Field(default=os.getenv("LOG_LEVEL", "INFO"))

    # Azure OpenAI
    az_endpoint: str = Field(default=os.getenv("AZURE_OPENAI_ENDPOINT", ""))
    az_api_key: str = Field(default=os.getenv("AZURE_OPENAI_API_KEY", ""))
    az_api_version: str = Field(default=os.getenv("AZURE_OPENAI_API_VERSION", "2024-06-01"))
    az_deployment: str = Field(default=os.getenv("AZURE_OPENAI_DEPLOYMENT", "gpt-4o"))
    az_model: str = Field(default=os.getenv("AZURE_OPENAI_MODEL", "gpt-4o"))

    # Question generation
    question_language: str = Field(default=os.getenv("QUESTION_LANGUAGE", "Arabic"))
    ui_language: str = Field(default=os.getenv("UI_LANGUAGE", "ar"))
    max_upload_mb: int = Field(default=int(os.getenv("MAX_UPLOAD_MB", "20")))

    # LangSmith
    langsmith_api_key: str = Field(default=os.getenv("LANGSMITH_API_KEY", ""))
    langsmith_project: str = Field(default=os.getenv("LANGSMITH_PROJECT", "pdf-question-generator"))
    langsmith_tracing: bool = Field(default=os.getenv("LANGSMITH_TRACING", "0") == "1")

settings = Settings()

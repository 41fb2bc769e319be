import logging
from fastapi import FastAPI
from backend.app.routes import auth, documents, questions
from backend.app.routes.deps import session_registry
from backend.app.services.agent_registry import agent_registry
from shared.config import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="PDF Question Generator")

@app.on_event("startup")
async def _startup():
    # Init agents
    await agent_registry.init()
    session_registry.start()

@app.on_event("shutdown")
async def _shutdown():
    session_registry.close()
    await agent_registry.close()

app.include_router(auth.router)
app.include_router(documents.router)
app.include_router(questions.router)

from typing import Optional
from fastapi import Header, HTTPException
from backend.app.services.identity import InMemoryIdentityProvider
from backend.app.services.pipeline import PipelineController
from backend.app.services.sessions import SessionRegistry

identity_provider = InMemoryIdentityProvider()
session_registry = SessionRegistry(identity_provider)

def bearer_token(authorization: Optional[str] = Header(default=None)) -> Optional[str]:
    if not authorization or not authorization.lower().startswith("bearer "):
        return None
    return authorization[7:].strip() or None

def require_token(authorization: Optional[str] = Header(default=None)) -> str:
    token = bearer_token(authorization)
    if not identity_provider.is_authenticated(token):
        raise HTTPException(401, "Not signed in")
    return token

def current_pipeline(authorization: Optional[str] = Header(default=None)) -> PipelineController:
    return session_registry.controller_for(require_token(authorization))

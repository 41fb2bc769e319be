from typing import Optional
from fastapi import APIRouter, Depends, Header, HTTPException
from backend.app.models.schemas import SessionInfo, SignInRequest, SignInResponse
from backend.app.routes.deps import bearer_token, identity_provider, require_token

router = APIRouter(prefix="/auth")

@router.post("/sign-in", response_model=SignInResponse)
async def sign_in(payload: SignInRequest):
    try:
        session = identity_provider.sign_in(payload.email)
    except ValueError as e:
        raise HTTPException(400, str(e))
    return SignInResponse(access_token=session.token, user=session.user)

@router.get("/session", response_model=SessionInfo)
async def session(authorization: Optional[str] = Header(default=None)):
    user = identity_provider.get_user(bearer_token(authorization))
    return SessionInfo(authenticated=user is not None, user=user)

@router.post("/sign-out")
async def sign_out(token: str = Depends(require_token)):
    # SIGNED_OUT resets and drops the session's pipeline
    identity_provider.sign_out(token)
    return {"ok": True}

"""
Identity collaborator.

The pipeline only needs two things from identity: whether a session is signed
in, and a notification when it signs out. `InMemoryIdentityProvider` issues
opaque bearer tokens for development; a hosted provider would implement the
same methods.
"""
from __future__ import annotations
import logging
import secrets
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

logger = logging.getLogger(__name__)

SIGNED_IN = "SIGNED_IN"
SIGNED_OUT = "SIGNED_OUT"

# listener(event, session)
AuthListener = Callable[[str, "Session"], None]


@dataclass(frozen=True)
class Session:
    token: str
    user: str


class Subscription:
    """Handle returned by a subscribe call; unsubscribes once, also on context exit."""

    def __init__(self, release: Callable[[], None]):
        self._release = release
        self.active = True

    def unsubscribe(self) -> None:
        if not self.active:
            return
        self.active = False
        self._release()

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.unsubscribe()


class InMemoryIdentityProvider:
    def __init__(self):
        self._sessions: Dict[str, Session] = {}
        self._listeners: List[AuthListener] = []

    def sign_in(self, email: str) -> Session:
        email = (email or "").strip()
        if not email:
            raise ValueError("email is required")
        session = Session(token=secrets.token_urlsafe(24), user=email)
        self._sessions[session.token] = session
        logger.info(f"Signed in user={email}")
        self._emit(SIGNED_IN, session)
        return session

    def get_user(self, token: Optional[str]) -> Optional[str]:
        session = self._sessions.get(token or "")
        return session.user if session else None

    def is_authenticated(self, token: Optional[str]) -> bool:
        return self.get_user(token) is not None

    def sign_out(self, token: str) -> bool:
        session = self._sessions.pop(token, None)
        if session is None:
            return False
        logger.info(f"Signed out user={session.user}")
        self._emit(SIGNED_OUT, session)
        return True

    def on_auth_state_change(self, listener: AuthListener) -> Subscription:
        self._listeners.append(listener)

        def _release():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return Subscription(_release)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def _emit(self, event: str, session: Session) -> None:
        for listener in list(self._listeners):
            try:
                listener(event, session)
            except Exception:
                logger.exception(f"Auth listener failed on {event}")

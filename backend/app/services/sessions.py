import logging
from typing import Callable, Dict, Optional

from backend.app.services.identity import SIGNED_OUT, InMemoryIdentityProvider, Session, Subscription
from backend.app.services.pipeline import PipelineController

logger = logging.getLogger(__name__)


class SessionRegistry:
    """One pipeline controller per signed-in session, dropped on sign-out."""

    def __init__(self, identity: InMemoryIdentityProvider,
                 controller_factory: Callable[[], PipelineController] = PipelineController):
        self.identity = identity
        self.controller_factory = controller_factory
        self._controllers: Dict[str, PipelineController] = {}
        self._subscription: Optional[Subscription] = None

    def start(self) -> None:
        if self._subscription is None:
            self._subscription = self.identity.on_auth_state_change(self._on_auth_change)

    def controller_for(self, token: str) -> PipelineController:
        controller = self._controllers.get(token)
        if controller is None:
            controller = self.controller_factory()
            controller.bind_session(self.identity, token)
            self._controllers[token] = controller
            logger.info(f"Created pipeline for session user={self.identity.get_user(token)}")
        return controller

    def __len__(self) -> int:
        return len(self._controllers)

    def _on_auth_change(self, event: str, session: Session) -> None:
        if event != SIGNED_OUT:
            return
        controller = self._controllers.pop(session.token, None)
        if controller is not None:
            controller.sign_out()
            controller.close()

    def close(self) -> None:
        for controller in self._controllers.values():
            controller.close()
        self._controllers.clear()
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None

"""
Session context: who is logged in, derived from identity gateway notifications.

The gateway announces every session change (login, registration, logout) to
its subscribers, and the current session once on subscribe. The context keeps
the latest announcement; its notification handler is the only writer.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from utils.data_access import AuthError, DataAccess
from utils.models import Identity

logger = logging.getLogger(__name__)

SessionListener = Callable[[Optional[Identity]], None]


class IdentityGateway:
    """Authentication operations that notify subscribers of session changes."""

    def __init__(self, data_access: DataAccess):
        self.data_access = data_access
        self._listeners: list[SessionListener] = []

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Register a listener, deliver the current session to it, return an unsubscribe."""
        self._listeners.append(listener)
        listener(self._resolve())

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def register(self, email: str, password: str,
                 display_name: Optional[str] = None) -> Identity:
        identity = self.data_access.register(email, password, display_name)
        self._notify(identity)
        return identity

    def login(self, email: str, password: str) -> Identity:
        identity = self.data_access.login(email, password)
        self._notify(identity)
        return identity

    def logout(self) -> None:
        self.data_access.logout()
        self._notify(None)

    def _resolve(self) -> Optional[Identity]:
        try:
            return self.data_access.current_identity()
        except AuthError as e:
            logger.error(f"Could not resolve current session: {e}")
            return None

    def _notify(self, identity: Optional[Identity]) -> None:
        for listener in list(self._listeners):
            listener(identity)


class SessionStatus(str, Enum):
    LOADING = "loading"
    AUTHENTICATED = "authenticated"
    ANONYMOUS = "anonymous"


@dataclass(frozen=True)
class SessionState:
    status: SessionStatus
    identity: Optional[Identity] = None


class SessionContext:
    """Current identity plus a loading flag, passed explicitly to the views."""

    def __init__(self):
        self._state = SessionState(SessionStatus.LOADING)
        self._version = 0
        self._unsubscribe: Optional[Callable[[], None]] = None

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def version(self) -> int:
        """Bumped on every session change, so a later sign-in as the same user still counts."""
        return self._version

    @property
    def identity(self) -> Optional[Identity]:
        return self._state.identity

    @property
    def loading(self) -> bool:
        return self._state.status is SessionStatus.LOADING

    def start(self, gateway: IdentityGateway) -> None:
        """Subscribe to the gateway. Only the first call subscribes."""
        if self._unsubscribe is not None:
            return
        self._unsubscribe = gateway.subscribe(self._on_session_change)

    def close(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _on_session_change(self, identity: Optional[Identity]) -> None:
        if identity is None:
            self._state = SessionState(SessionStatus.ANONYMOUS)
        else:
            self._state = SessionState(SessionStatus.AUTHENTICATED, identity)
        self._version += 1

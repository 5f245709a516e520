"""
Tests for frontend/utils/session.py and frontend/utils/guard.py.
"""
import pytest

from fakes import InMemoryDataAccess
from utils.data_access import AuthError
from utils.guard import (
    ACCOUNT_PATH,
    DASHBOARD_PATH,
    LOGIN_PATH,
    REGISTER_PATH,
    RouteAction,
    RouteDecision,
    guard,
)
from utils.models import Identity
from utils.session import IdentityGateway, SessionContext, SessionState, SessionStatus

LOADING = SessionState(SessionStatus.LOADING)
ANONYMOUS = SessionState(SessionStatus.ANONYMOUS)
AUTHENTICATED = SessionState(
    SessionStatus.AUTHENTICATED, Identity(id="user-1", email="test@example.com")
)


class TestIdentityGateway:
    """Tests for session-change notifications."""

    def test_subscribe_delivers_current_session(self, gateway, identity):
        received = []

        gateway.subscribe(received.append)

        assert received == [identity]

    def test_login_logout_and_register_notify(self):
        gateway = IdentityGateway(InMemoryDataAccess())
        received = []
        gateway.subscribe(received.append)

        gateway.login("a@example.com", "Password123!")
        gateway.logout()
        gateway.register("b@example.com", "Password123!", "Bee")

        assert received[0] is None
        assert received[1].email == "a@example.com"
        assert received[2] is None
        assert received[3].display_name == "Bee"

    def test_failed_login_does_not_notify(self):
        store = InMemoryDataAccess()
        store.fail.add("login")
        gateway = IdentityGateway(store)
        received = []
        gateway.subscribe(received.append)

        with pytest.raises(AuthError):
            gateway.login("a@example.com", "wrong")

        assert received == [None]

    def test_unsubscribe_stops_notifications(self, gateway):
        received = []
        unsubscribe = gateway.subscribe(received.append)

        unsubscribe()
        gateway.logout()

        assert len(received) == 1

    def test_unresolvable_session_is_anonymous(self):
        store = InMemoryDataAccess()
        store.fail.add("current_identity")
        received = []

        IdentityGateway(store).subscribe(received.append)

        assert received == [None]


class TestSessionContext:
    """Tests for the session state machine."""

    def test_initial_state_is_loading(self):
        context = SessionContext()

        assert context.loading is True
        assert context.identity is None
        assert context.state.status is SessionStatus.LOADING

    def test_start_resolves_to_authenticated(self, session, identity):
        assert session.loading is False
        assert session.state == SessionState(SessionStatus.AUTHENTICATED, identity)

    def test_start_without_session_resolves_to_anonymous(self):
        context = SessionContext()

        context.start(IdentityGateway(InMemoryDataAccess()))

        assert context.state.status is SessionStatus.ANONYMOUS
        assert context.loading is False

    def test_follows_logout_and_login(self, session, gateway):
        gateway.logout()
        assert session.state.status is SessionStatus.ANONYMOUS

        gateway.login("new@example.com", "Password123!")
        assert session.state.status is SessionStatus.AUTHENTICATED
        assert session.identity.email == "new@example.com"

    def test_version_counts_every_change(self, session, gateway):
        before = session.version

        gateway.logout()
        gateway.login("test@example.com", "Password123!")

        assert session.identity.id == "user-1"
        assert session.version == before + 2

    def test_start_subscribes_once(self, gateway):
        context = SessionContext()
        context.start(gateway)
        context.start(gateway)

        assert len(gateway._listeners) == 1
        context.close()
        assert gateway._listeners == []

    def test_closed_context_ignores_changes(self, gateway, identity):
        context = SessionContext()
        context.start(gateway)
        context.close()

        gateway.logout()

        assert context.identity == identity


class TestRouteGuard:
    """Tests for the pure route guard."""

    @pytest.mark.parametrize("path", [DASHBOARD_PATH, ACCOUNT_PATH])
    def test_protected_path_while_loading_shows_interstitial(self, path):
        assert guard(LOADING, path).action is RouteAction.INTERSTITIAL

    @pytest.mark.parametrize("path", [DASHBOARD_PATH, ACCOUNT_PATH])
    def test_protected_path_when_anonymous_redirects_to_login(self, path):
        assert guard(ANONYMOUS, path) == RouteDecision(RouteAction.REDIRECT, LOGIN_PATH)

    @pytest.mark.parametrize("path", [DASHBOARD_PATH, ACCOUNT_PATH])
    def test_protected_path_when_authenticated_renders(self, path):
        assert guard(AUTHENTICATED, path) == RouteDecision(RouteAction.RENDER, path)

    @pytest.mark.parametrize("state", [LOADING, ANONYMOUS])
    @pytest.mark.parametrize("path", [LOGIN_PATH, REGISTER_PATH])
    def test_public_paths_render_without_session(self, state, path):
        assert guard(state, path) == RouteDecision(RouteAction.RENDER, path)

    @pytest.mark.parametrize("path", [LOGIN_PATH, REGISTER_PATH])
    def test_public_paths_send_signed_in_users_home(self, path):
        assert guard(AUTHENTICATED, path) == RouteDecision(RouteAction.REDIRECT, DASHBOARD_PATH)

    def test_unknown_path_goes_home_then_to_login(self):
        first = guard(ANONYMOUS, "/nowhere")
        assert first == RouteDecision(RouteAction.REDIRECT, DASHBOARD_PATH)

        assert guard(ANONYMOUS, first.path) == RouteDecision(RouteAction.REDIRECT, LOGIN_PATH)

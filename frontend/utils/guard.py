"""
Route guard: decides what a path shows for a given session state.
"""
from dataclasses import dataclass
from enum import Enum

from utils.session import SessionState, SessionStatus

LOGIN_PATH = "/login"
REGISTER_PATH = "/register"
DASHBOARD_PATH = "/"
ACCOUNT_PATH = "/account"

PUBLIC_PATHS = frozenset({LOGIN_PATH, REGISTER_PATH})
PROTECTED_PATHS = frozenset({DASHBOARD_PATH, ACCOUNT_PATH})


class RouteAction(str, Enum):
    INTERSTITIAL = "interstitial"
    REDIRECT = "redirect"
    RENDER = "render"


@dataclass(frozen=True)
class RouteDecision:
    action: RouteAction
    path: str


def guard(state: SessionState, path: str) -> RouteDecision:
    """Pure function of session state and requested path. No side effects."""
    if path not in PUBLIC_PATHS and path not in PROTECTED_PATHS:
        return RouteDecision(RouteAction.REDIRECT, DASHBOARD_PATH)

    if path in PUBLIC_PATHS:
        if state.status is SessionStatus.AUTHENTICATED:
            return RouteDecision(RouteAction.REDIRECT, DASHBOARD_PATH)
        return RouteDecision(RouteAction.RENDER, path)

    if state.status is SessionStatus.LOADING:
        return RouteDecision(RouteAction.INTERSTITIAL, path)
    if state.status is SessionStatus.ANONYMOUS:
        return RouteDecision(RouteAction.REDIRECT, LOGIN_PATH)
    return RouteDecision(RouteAction.RENDER, path)

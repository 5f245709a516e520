"""
Error taxonomy shared by services and routers.
"""


class AuthError(Exception):
    """Bad credentials, duplicate registration or identity provider failure."""


class DuplicateEmailError(AuthError):
    """Registration attempted with an email that already exists."""


class StoreError(Exception):
    """Query or write failure against the document store."""

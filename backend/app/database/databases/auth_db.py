"""
Auth database configuration.
Stores the identities that own accounts and holdings.
"""

DB_NAME = "auth_db"


class Collections:
    """Collection names in auth_db."""
    USERS = "users"  # email, password hash, optional display name
    METADATA = "_metadata"


# Manifest for registry
DB_MANIFEST = {
    "db_name": DB_NAME,
    "purpose": "Identity gateway users and credentials",
    "collections": [Collections.USERS, Collections.METADATA],
    "access_level": "restricted",
}

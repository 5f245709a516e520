"""
System database configuration.
Registry of the databases the holdings tracker owns.
"""

DB_NAME = "system_db"


class Collections:
    """Collection names in system_db."""
    DB_REGISTRY = "db_registry"
    METADATA = "_metadata"


# Manifest for registry
DB_MANIFEST = {
    "db_name": DB_NAME,
    "purpose": "Registry of holdings tracker databases",
    "collections": [Collections.DB_REGISTRY, Collections.METADATA],
    "access_level": "system",
}

"""
Holdings database configuration.
Stores brokerage accounts and the stock holdings recorded under them.
"""

DB_NAME = "holdings_db"


class Collections:
    """Collection names in holdings_db."""
    ACCOUNTS = "accounts"
    HOLDINGS = "holdings"
    METADATA = "_metadata"


# Manifest for registry
DB_MANIFEST = {
    "db_name": DB_NAME,
    "purpose": "User brokerage accounts and stock holdings",
    "collections": [Collections.ACCOUNTS, Collections.HOLDINGS, Collections.METADATA],
    "access_level": "standard",
}

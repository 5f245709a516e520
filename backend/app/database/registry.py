"""
Database registry management.
Ensures all databases and collections are registered on startup.
"""
from datetime import datetime, timezone
from motor.motor_asyncio import AsyncIOMotorClient

from app.database.databases import auth_db, holdings_db, system_db

# All database manifests
ALL_DB_MANIFESTS = [
    auth_db.DB_MANIFEST,
    holdings_db.DB_MANIFEST,
    system_db.DB_MANIFEST,
]


async def sync_registry(client: AsyncIOMotorClient) -> None:
    """
    Synchronize the database registry on application startup.
    Upserts one system_db.db_registry entry per database manifest.
    """
    registry_collection = client[system_db.DB_NAME][system_db.Collections.DB_REGISTRY]
    now = datetime.now(timezone.utc)

    for manifest in ALL_DB_MANIFESTS:
        await registry_collection.update_one(
            {"_id": manifest["db_name"]},
            {
                "$set": {
                    "purpose": manifest["purpose"],
                    "collections": manifest["collections"],
                    "access_level": manifest["access_level"],
                    "updated_at": now,
                },
                "$setOnInsert": {"created_at": now},
            },
            upsert=True,
        )


async def create_indexes(client: AsyncIOMotorClient) -> None:
    """Create necessary indexes for all databases."""
    
    # Auth DB indexes
    auth_users = client[auth_db.DB_NAME][auth_db.Collections.USERS]
    await auth_users.create_index("email", unique=True)
    
    # Holdings DB indexes
    holdings = client[holdings_db.DB_NAME]
    await holdings[holdings_db.Collections.ACCOUNTS].create_index("user_id")
    await holdings[holdings_db.Collections.HOLDINGS].create_index("account_id")
    await holdings[holdings_db.Collections.HOLDINGS].create_index("user_id")
    # Serves the cross-account mark toggle
    await holdings[holdings_db.Collections.HOLDINGS].create_index(
        [("user_id", 1), ("symbol", 1)]
    )

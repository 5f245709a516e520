"""
Database module - MongoDB and Redis connections and database definitions.
"""
from app.database.connections import (
    get_mongo_client,
    get_redis_client,
    close_connections,
)
from app.database.databases import auth_db, holdings_db, system_db

__all__ = [
    "get_mongo_client",
    "get_redis_client",
    "close_connections",
    "auth_db",
    "holdings_db",
    "system_db",
]

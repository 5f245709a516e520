"""
Holdings Tracker Backend - FastAPI Application

Identity gateway and document store for the holdings tracker: users register
and log in, create brokerage accounts and record stock holdings under them.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings
from app.database.connections import get_mongo_client, close_connections
from app.database.registry import sync_registry, create_indexes
from app.routers import accounts, auth, health, holdings

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s | %(levelname)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("holdings_tracker")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    
    Startup:
    - Initialize database connections
    - Sync database registry
    - Create indexes
    
    Shutdown:
    - Close all database connections
    """
    logger.info("Starting up Holdings Tracker Backend...")
    
    try:
        client = await get_mongo_client()
        await sync_registry(client)
        await create_indexes(client)
        logger.info("Database registry synced and indexes created")
    except Exception as e:
        logger.warning(f"Database initialization warning: {e}")
    
    yield
    
    logger.info("Shutting down Holdings Tracker Backend...")
    await close_connections()


# Create FastAPI application
app = FastAPI(
    title="Holdings Tracker API",
    description="""
## Personal Securities Account Tracker API

### Features
- **Authentication**: email/password registration, JWT sessions, logout
- **Accounts**: create and list named brokerage accounts
- **Holdings**: record stock holdings per account, list them per account or
  across all accounts, and mark/unmark a symbol everywhere at once

### Authentication
All protected endpoints require a JWT token passed as a query parameter:
```
GET /accounts?token=your_jwt_token
```

Obtain a token via `POST /auth/login`.
    """,
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router)
app.include_router(auth.router)
app.include_router(accounts.router)
app.include_router(holdings.router)


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "name": "Holdings Tracker API",
        "version": "0.1.0",
        "docs": "/docs",
        "health": "/health",
    }

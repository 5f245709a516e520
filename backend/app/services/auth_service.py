"""
Authentication service: registration, login, logout and identity lookup.
"""
import logging
from typing import Optional

from bson import ObjectId
from bson.errors import InvalidId
from jose import JWTError
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError, PyMongoError
from redis.asyncio import Redis
from redis.exceptions import RedisError

from app.config import get_settings
from app.core.exceptions import AuthError, DuplicateEmailError
from app.core.revocation import revoke_token
from app.core.security import (
    create_access_token,
    decode_token,
    hash_password,
    seconds_until_expiry,
    verify_password,
)
from app.database.databases import auth_db
from app.models.user import User
from app.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
)

logger = logging.getLogger(__name__)


class AuthService:
    """Service for authentication operations."""
    
    def __init__(self, db: AsyncIOMotorDatabase, redis: Optional[Redis] = None):
        """Initialize with auth database and the revocation store."""
        self.db = db
        self.users_collection = db[auth_db.Collections.USERS]
        self.redis = redis
        self.settings = get_settings()
    
    async def register_user(self, request: RegisterRequest) -> RegisterResponse:
        """
        Register a new user.
        
        Args:
            request: Registration request with email, password and optional display name
            
        Returns:
            RegisterResponse with created user ID
            
        Raises:
            DuplicateEmailError: If the email is already registered
            AuthError: If the user store cannot be reached
        """
        user = User(
            email=request.email,
            display_name=request.display_name or None,
            hashed_password=hash_password(request.password),
        )
        user_doc = user.model_dump(exclude={"id"})
        
        try:
            existing = await self.users_collection.find_one({"email": request.email})
            if existing:
                raise DuplicateEmailError("Email already registered")
            result = await self.users_collection.insert_one(user_doc)
        except DuplicateKeyError as e:
            # Lost a race against a concurrent registration with the same email
            raise DuplicateEmailError("Email already registered") from e
        except PyMongoError as e:
            logger.error(f"Registration failed for {request.email}: {e}")
            raise AuthError("Registration is unavailable") from e
        
        logger.info(f"Registered user {result.inserted_id}")
        return RegisterResponse(
            user_id=str(result.inserted_id),
            email=request.email,
            display_name=user.display_name,
            message="Registration successful"
        )
    
    async def login(self, request: LoginRequest) -> LoginResponse:
        """
        Authenticate user and return JWT token.
        
        Args:
            request: Login request with email and password
            
        Returns:
            LoginResponse with JWT token
            
        Raises:
            AuthError: If credentials are invalid or the user store fails
        """
        try:
            user_doc = await self.users_collection.find_one({"email": request.email})
        except PyMongoError as e:
            logger.error(f"Login lookup failed: {e}")
            raise AuthError("Login is unavailable") from e
        
        if not user_doc or not verify_password(request.password, user_doc["hashed_password"]):
            raise AuthError("Invalid email or password")
        
        user_id = str(user_doc["_id"])
        access_token = create_access_token(user_id=user_id)
        logger.info(f"User {user_id} logged in")
        
        return LoginResponse(
            access_token=access_token,
            token_type="bearer",
            expires_in=self.settings.jwt_access_token_expire_minutes * 60,
            user_id=user_id,
        )
    
    async def logout(self, token: str) -> None:
        """
        End a session by revoking its token.
        
        Raises:
            AuthError: If the token is invalid or the revocation store fails
        """
        try:
            payload = decode_token(token)
        except JWTError as e:
            raise AuthError("Invalid session") from e
        
        jti = payload.get("jti")
        if jti is None:
            raise AuthError("Invalid session")
        
        if self.redis is None:
            raise AuthError("Logout is unavailable")
        
        try:
            await revoke_token(self.redis, jti, seconds_until_expiry(payload))
        except RedisError as e:
            logger.error(f"Token revocation failed: {e}")
            raise AuthError("Logout is unavailable") from e
        
        logger.info(f"User {payload.get('sub')} logged out")
    
    async def get_user_by_id(self, user_id: str) -> Optional[User]:
        """
        Get user by ID.
        
        Args:
            user_id: User ObjectId as string
            
        Returns:
            User model or None if not found
        """
        try:
            user_doc = await self.users_collection.find_one({"_id": ObjectId(user_id)})
        except InvalidId:
            return None
        
        if not user_doc:
            return None
        
        user_doc["_id"] = str(user_doc["_id"])
        return User(**user_doc)

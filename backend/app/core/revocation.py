"""
Session revocation backed by Redis.

JWTs are stateless, so logging out stores the token's ``jti`` under
``revoked:{jti}`` until the token would have expired anyway.
"""
from redis.asyncio import Redis


def _key(jti: str) -> str:
    return f"revoked:{jti}"


async def revoke_token(redis: Redis, jti: str, ttl_seconds: int) -> None:
    """
    Mark a token as revoked.
    
    Args:
        redis: Redis client
        jti: Token identifier claim
        ttl_seconds: Remaining lifetime of the token; expired tokens are not stored
    """
    if ttl_seconds <= 0:
        return
    await redis.setex(_key(jti), ttl_seconds, "1")


async def is_token_revoked(redis: Redis, jti: str) -> bool:
    """Return True if the token was revoked by a logout."""
    return bool(await redis.exists(_key(jti)))

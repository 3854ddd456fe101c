"""
Distributed Lock using Kvrocks (Redis)

SET NX EX to acquire, ownership-checked Lua script to release.
Each acquisition gets its own token so a single instance can guard many keys.
"""

from typing import Optional
from uuid import uuid4

from redis.asyncio import Redis
from redis.exceptions import RedisError

from src.platform.logging.loguru_io import Logger


_RELEASE_SCRIPT = """
if redis.call("get", KEYS[1]) == ARGV[1] then
    return redis.call("del", KEYS[1])
else
    return 0
end
"""


class DistributedLock:
    def __init__(self, *, client: Redis) -> None:
        self.client = client

    async def acquire_lock(self, *, key: str, ttl: int) -> Optional[str]:
        """
        Try to take the lock without waiting.

        Returns:
            The ownership token when acquired, None when somebody else holds it
        """
        token = uuid4().hex
        try:
            acquired = await self.client.set(key, token, nx=True, ex=ttl)
        except RedisError as e:
            Logger.base.error(f'❌ [LOCK] Error acquiring lock {key}: {e}')
            raise

        if not acquired:
            Logger.base.debug(f'⏳ [LOCK] Failed to acquire lock: {key} (already locked)')
            return None
        Logger.base.debug(f'🔒 [LOCK] Acquired lock: {key} (ttl={ttl}s)')
        return token

    async def release_lock(self, *, key: str, token: str) -> bool:
        try:
            result = await self.client.eval(_RELEASE_SCRIPT, 1, key, token)  # type: ignore
        except RedisError as e:
            Logger.base.error(f'❌ [LOCK] Error releasing lock {key}: {e}')
            return False

        if result:
            Logger.base.debug(f'🔓 [LOCK] Released lock: {key}')
            return True
        Logger.base.warning(f'⚠️ [LOCK] Failed to release lock: {key} (ownership mismatch or expired)')
        return False

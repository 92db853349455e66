import logging
from typing import Dict, Optional, Protocol

import redis
from redis.exceptions import RedisError

from flockweigh.core.errors import WeighingStoreError

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Minimal string key-value storage used to persist weighing schedules."""

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


class InMemoryStore:
    """Process-local store, mainly for tests and single-user tools."""

    def __init__(self):
        self._data: Dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class RedisStore:
    """
    Store backed by a Redis server.

    The client must be created with decode_responses=True so values come back
    as str. Redis failures are logged and re-raised as WeighingStoreError.
    """

    def __init__(self, client: redis.Redis):
        self._client = client

    @classmethod
    def from_url(cls, url: str) -> "RedisStore":
        return cls(redis.Redis.from_url(url, decode_responses=True))

    def get(self, key: str) -> Optional[str]:
        try:
            return self._client.get(key)
        except RedisError as e:
            logger.error(f"Redis error reading '{key}': {e}")
            raise WeighingStoreError(f"Could not read '{key}' from Redis: {e}") from e

    def set(self, key: str, value: str) -> None:
        try:
            self._client.set(key, value)
        except RedisError as e:
            logger.error(f"Redis error writing '{key}': {e}")
            raise WeighingStoreError(f"Could not write '{key}' to Redis: {e}") from e

import logging
from functools import lru_cache

from flockweigh.core.config import settings
from flockweigh.db.repository import WeighingRepository
from flockweigh.db.store import InMemoryStore, KeyValueStore, RedisStore

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def get_store() -> KeyValueStore:
    """
    Returns the process-wide store for weighing schedules.

    Redis is used when REDIS_URL is configured; otherwise schedules live in
    memory for the lifetime of the process.
    """
    if settings.REDIS_URL:
        logger.info("Storing weighing schedules in Redis.")
        return RedisStore.from_url(settings.REDIS_URL)

    logger.info("REDIS_URL is not set. Storing weighing schedules in memory.")
    return InMemoryStore()


@lru_cache(maxsize=None)
def get_repository() -> WeighingRepository:
    return WeighingRepository(get_store(), key_prefix=settings.STORE_KEY_PREFIX)

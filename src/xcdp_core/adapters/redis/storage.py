"""Redis implementation of the storage capability."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from redis.exceptions import RedisError

from xcdp_core.ports.storage import IStorage
from xcdp_core.primitives.exceptions import StorageError

if TYPE_CHECKING:
    from redis import Redis

logger = logging.getLogger("xcdp.storage.redis")


class RedisStorage(IStorage):
    """
    Redis implementation of IStorage.
    Every contract slot maps to one Redis string under ``key_prefix``.

    The aggregate is binary, so the client must return raw bytes: clients
    created with ``decode_responses=True`` are rejected.
    """

    def __init__(self, redis_client: Redis, key_prefix: bytes = b"xcdp:") -> None:
        """
        Initialize storage with a Redis client.

        Args:
            redis_client: Synchronous Redis client instance returning bytes.
            key_prefix: Prefix applied to every slot key.

        Raises:
            ValueError: If the client decodes responses to ``str``.
        """
        pool = getattr(redis_client, "connection_pool", None)
        if pool is not None and pool.connection_kwargs.get("decode_responses"):
            raise ValueError(
                "RedisStorage requires a client with decode_responses=False"
            )
        self._redis = redis_client
        self._key_prefix = key_prefix

    def _get_key(self, key: bytes) -> bytes:
        """Build full Redis key for a slot."""
        return self._key_prefix + key

    def read(self, key: bytes) -> bytes | None:
        try:
            value = self._redis.get(self._get_key(key))
        except (RedisError, UnicodeDecodeError) as e:
            logger.error("Redis get failed for key %r: %s", key, e)
            raise StorageError(f"Redis read failed for key {key!r}") from e
        if value is None:
            return None
        if not isinstance(value, bytes):
            raise StorageError(
                f"Redis returned {type(value).__name__} for key {key!r}, "
                "expected bytes"
            )
        return value

    def write(self, key: bytes, value: bytes) -> None:
        try:
            self._redis.set(self._get_key(key), value)
        except RedisError as e:
            logger.error("Redis set failed for key %r: %s", key, e)
            raise StorageError(f"Redis write failed for key {key!r}") from e

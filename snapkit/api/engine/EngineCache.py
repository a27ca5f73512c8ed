"""Bounded, TTL-expiring cache of ImageEngine instances."""

import logging
import threading
import time
from collections import OrderedDict
from collections.abc import Callable, Mapping
from typing import Any

from .EngineConfig import EngineConfig
from .ImageEngine import ImageEngine

logger = logging.getLogger(__name__)

DEFAULT_MAX_SIZE = 10
DEFAULT_TTL_SECONDS = 300.0


def organization_key(config: EngineConfig) -> str:
    """Key engines by organization alone; configs differing only in defaults share an engine."""
    return config.organization_name


def full_config_key(config: EngineConfig) -> str:
    """Key engines by organization, default quality and default format."""
    return f"{config.organization_name}-{config.default_quality}-{config.default_format}"


class EngineCache:
    """Reuses ImageEngine instances across requests.

    Entries idle for longer than ttl_seconds are rebuilt. When the cache is
    full, expired entries are purged first and then the least recently used
    entry is evicted. Safe to share between threads.
    """

    def __init__(
        self,
        max_size: int = DEFAULT_MAX_SIZE,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        key_func: Callable[[EngineConfig], str] = organization_key,
    ):
        if max_size < 1:
            raise ValueError(f"max_size must be at least 1 (found: {max_size})")
        if ttl_seconds <= 0:
            raise ValueError(f"ttl_seconds must be positive (found: {ttl_seconds})")

        self.max_size = max_size
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._key_func = key_func
        # key -> (engine, last access time); ordered oldest access first
        self._entries: OrderedDict[str, tuple[ImageEngine, float]] = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def size(self) -> int:
        return len(self)

    def __contains__(self, config: EngineConfig) -> bool:
        with self._lock:
            return self._key_func(config) in self._entries

    def get_instance(self, config: EngineConfig | Mapping[str, Any]) -> ImageEngine:
        """Return the cached engine for config, building one if needed.

        Raises:
            ConfigError: If a new engine has to be built from an invalid config
        """
        if not isinstance(config, EngineConfig):
            config = EngineConfig.from_dict(config)

        key = self._key_func(config)
        now = self._clock()

        with self._lock:
            cached = self._entries.get(key)
            if cached is not None:
                engine, last_access = cached
                if now - last_access > self.ttl_seconds:
                    logger.debug(f"Engine cache entry expired: {key}")
                    del self._entries[key]
                else:
                    if engine.config != config:
                        logger.debug(
                            f"Reusing cached engine for {key} although its config differs "
                            f"(cached: {engine.config}, requested: {config})"
                        )
                    self._entries[key] = (engine, now)
                    self._entries.move_to_end(key)
                    return engine

            if len(self._entries) >= self.max_size:
                self._purge_expired(now)
            while len(self._entries) >= self.max_size:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug(f"Engine cache full, evicted least recently used entry: {evicted}")

            engine = ImageEngine(config)
            self._entries[key] = (engine, now)
            logger.debug(f"Engine cache miss, created engine: {key}")
            return engine

    def _purge_expired(self, now: float) -> None:
        expired = [key for key, (_, last_access) in self._entries.items() if now - last_access > self.ttl_seconds]
        for key in expired:
            del self._entries[key]
        if expired:
            logger.debug(f"Purged {len(expired)} expired engine cache entries")

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def stats(self) -> dict[str, Any]:
        """Size, limits and per-entry age in seconds."""
        now = self._clock()
        with self._lock:
            entries = [{"key": key, "age_seconds": now - last_access} for key, (_, last_access) in self._entries.items()]
            return {
                "size": len(self._entries),
                "max_size": self.max_size,
                "ttl_seconds": self.ttl_seconds,
                "entries": entries,
            }

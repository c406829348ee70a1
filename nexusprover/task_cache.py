"""Bounded cache of recently used task IDs with expiry."""

from __future__ import annotations

import asyncio
from collections import deque
from time import monotonic


class TaskCache:
    """Coroutine-safe bounded queue of recent task IDs; entries expire after a while."""

    def __init__(self, capacity: int, expiration: float) -> None:
        self.capacity = capacity
        self.expiration = expiration
        self._entries: deque[tuple[str, float]] = deque()
        self._lock = asyncio.Lock()

    def _prune_expired(self) -> None:
        now = monotonic()
        self._entries = deque(
            (task_id, stamp)
            for task_id, stamp in self._entries
            if now - stamp < self.expiration
        )

    def _has(self, task_id: str) -> bool:
        return any(entry_id == task_id for entry_id, _ in self._entries)

    async def contains(self, task_id: str) -> bool:
        """Return True if the task ID is in the cache and not expired."""
        async with self._lock:
            self._prune_expired()
            return self._has(task_id)

    async def insert(self, task_id: str) -> None:
        """Add a task ID, evicting the oldest entry when the cache is full."""
        async with self._lock:
            self._prune_expired()
            if self._has(task_id):
                return
            if len(self._entries) == self.capacity:
                self._entries.popleft()
            self._entries.append((task_id, monotonic()))
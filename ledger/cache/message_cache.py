"""
Message Cache
A capacity-bounded set of recently seen message ids.

Eviction follows insertion order, not access order: re-adding an id
that is already present neither refreshes nor reorders it.
"""
from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from typing import Hashable, Iterator


logger = logging.getLogger(__name__)


class MessageCache:
    """
    FIFO-bounded set used to drop duplicate messages.

    Example:
        >>> cache = MessageCache(capacity=2)
        >>> cache.add("a"), cache.add("a")
        (True, False)
        >>> cache.add("b"), cache.add("c")
        (True, True)
        >>> "a" in cache
        False
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"MessageCache capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._items: OrderedDict[Hashable, None] = OrderedDict()
        self._lock = threading.Lock()

    def add(self, message_id: Hashable) -> bool:
        """
        Record a message id.

        Returns:
            True if the id was newly added, False if it was already present
        """
        with self._lock:
            if message_id in self._items:
                return False
            while len(self._items) >= self.capacity:
                evicted, _ = self._items.popitem(last=False)
                logger.debug(f"Evicted message id {evicted}")
            self._items[message_id] = None
            return True

    def discard(self, message_id: Hashable) -> None:
        with self._lock:
            self._items.pop(message_id, None)

    def clear(self) -> None:
        with self._lock:
            self._items.clear()

    def __contains__(self, message_id: object) -> bool:
        return message_id in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Hashable]:
        with self._lock:
            return iter(list(self._items))

    def __repr__(self) -> str:
        return f"MessageCache(capacity={self.capacity}, size={len(self._items)})"

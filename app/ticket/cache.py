# app/ticket/cache.py
"""
In-memory read-through cache for ticket lookups.

Two independent keyspaces:

* ``tickets``     - ticket id -> TicketOut
* ``userTickets`` - owner subject id -> tuple of TicketOut

Entries carry no TTL. They leave the cache only when evicted by a write
or displaced by the LRU bound, so an eviction is visible to the very next
lookup.
"""
from collections import OrderedDict
from functools import lru_cache
from threading import Lock
from typing import Any, Hashable

from app.core.config import get_settings
from app.ticket.schemas import TicketOut

MISS = object()


class LRUCache:
    """Thread-safe LRU cache.

    Every ``delete`` bumps a per-key generation and ``clear`` bumps a global
    epoch. A reader that missed can store what it loaded with
    ``set_if_current``, which refuses the write when the key was evicted
    after the miss was observed.
    """

    def __init__(self, name: str, max_size: int = 1024):
        self.name = name
        self.max_size = max_size
        self._cache: OrderedDict[Hashable, Any] = OrderedDict()
        self._generations: dict[Hashable, int] = {}
        self._epoch = 0
        self._lock = Lock()
        self.hits = 0
        self.misses = 0

    def _generation(self, key: Hashable) -> tuple[int, int]:
        return self._epoch, self._generations.get(key, 0)

    def lookup(self, key: Hashable) -> tuple[Any, tuple[int, int]]:
        """Return ``(value or MISS, generation)``."""
        with self._lock:
            generation = self._generation(key)
            if key not in self._cache:
                self.misses += 1
                return MISS, generation
            self._cache.move_to_end(key)
            self.hits += 1
            return self._cache[key], generation

    def get(self, key: Hashable) -> Any:
        """Return the cached value or ``MISS``."""
        return self.lookup(key)[0]

    def set(self, key: Hashable, value: Any) -> None:
        with self._lock:
            self._store(key, value)

    def set_if_current(self, key: Hashable, value: Any, generation: tuple[int, int]) -> bool:
        """Store ``value`` only if ``key`` has not been evicted since ``generation``."""
        with self._lock:
            if self._generation(key) != generation:
                return False
            self._store(key, value)
            return True

    def _store(self, key: Hashable, value: Any) -> None:
        if key in self._cache:
            self._cache.move_to_end(key)
        self._cache[key] = value

        while len(self._cache) > self.max_size:
            self._cache.popitem(last=False)

    def delete(self, key: Hashable) -> bool:
        with self._lock:
            self._generations[key] = self._generations.get(key, 0) + 1
            if key in self._cache:
                del self._cache[key]
                return True
            return False

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()
            self._generations.clear()
            self._epoch += 1
            self.hits = 0
            self.misses = 0

    def stats(self) -> dict:
        with self._lock:
            return {
                "size": len(self._cache),
                "max_size": self.max_size,
                "hits": self.hits,
                "misses": self.misses,
            }


class TicketCache:
    def __init__(self, max_size: int = 1024):
        self.tickets = LRUCache("tickets", max_size)
        self.user_tickets = LRUCache("userTickets", max_size)

    def get_by_id(self, ticket_id: int) -> TicketOut | None:
        value = self.tickets.get(ticket_id)
        return None if value is MISS else value

    def lookup_by_id(self, ticket_id: int) -> tuple[TicketOut | None, tuple[int, int]]:
        value, generation = self.tickets.lookup(ticket_id)
        return (None if value is MISS else value), generation

    def put_by_id(self, ticket_id: int, ticket: TicketOut, generation: tuple[int, int] | None = None) -> bool:
        """Cache a ticket; with ``generation`` the write is dropped if the id was evicted since."""
        if generation is None:
            self.tickets.set(ticket_id, ticket)
            return True
        return self.tickets.set_if_current(ticket_id, ticket, generation)

    def evict_by_id(self, ticket_id: int) -> None:
        self.tickets.delete(ticket_id)

    def get_by_owner(self, owner_id: str) -> tuple[TicketOut, ...] | None:
        """Cached list for an owner, or None on a miss (an empty tuple is a hit)."""
        value = self.user_tickets.get(owner_id)
        return None if value is MISS else value

    def lookup_by_owner(self, owner_id: str) -> tuple[tuple[TicketOut, ...] | None, tuple[int, int]]:
        value, generation = self.user_tickets.lookup(owner_id)
        return (None if value is MISS else value), generation

    def put_by_owner(self, owner_id: str, tickets, generation: tuple[int, int] | None = None) -> bool:
        if generation is None:
            self.user_tickets.set(owner_id, tuple(tickets))
            return True
        return self.user_tickets.set_if_current(owner_id, tuple(tickets), generation)

    def evict_by_owner(self, owner_id: str) -> None:
        self.user_tickets.delete(owner_id)

    def clear(self) -> None:
        self.tickets.clear()
        self.user_tickets.clear()

    def stats(self) -> dict:
        return {
            self.tickets.name: self.tickets.stats(),
            self.user_tickets.name: self.user_tickets.stats(),
        }


@lru_cache
def get_ticket_cache() -> TicketCache:
    return TicketCache(max_size=get_settings().CACHE_MAX_SIZE)

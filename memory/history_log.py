"""Opaque generation history: occasion, timestamp and outfit count per request."""
from __future__ import annotations

import threading
from collections import defaultdict, deque
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Any, Deque, Dict, List
from uuid import uuid4


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class GenerationSummary:
    """What is remembered about one generation request. Outfits are not stored."""

    user_id: str
    occasion: str
    outfit_count: int
    timestamp: str = field(default_factory=_utc_now)
    history_id: str = field(default_factory=lambda: uuid4().hex)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class GenerationHistory:
    """Thread-safe in-memory log bounded per user."""

    def __init__(self, limit: int = 50) -> None:
        if limit < 1:
            raise ValueError("history limit must be positive")
        self.limit = limit
        self._entries: Dict[str, Deque[GenerationSummary]] = defaultdict(lambda: deque(maxlen=self.limit))
        self._lock = threading.Lock()

    def record(self, user_id: str, occasion: str, outfit_count: int) -> GenerationSummary:
        summary = GenerationSummary(user_id=user_id, occasion=occasion, outfit_count=outfit_count)
        with self._lock:
            self._entries[user_id].append(summary)
        return summary

    def list_for_user(self, user_id: str, limit: int | None = None) -> List[GenerationSummary]:
        """Return summaries oldest first, optionally only the most recent ``limit``."""

        with self._lock:
            entries = list(self._entries.get(user_id, ()))
        if limit is not None:
            entries = entries[-limit:] if limit > 0 else []
        return entries

    def count(self, user_id: str) -> int:
        with self._lock:
            return len(self._entries.get(user_id, ()))

    def clear(self, user_id: str) -> None:
        with self._lock:
            self._entries.pop(user_id, None)


__all__ = ["GenerationSummary", "GenerationHistory"]

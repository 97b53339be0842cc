"""
Recent-search history.

The list itself lives in a client-local store; in the web app that is the
signed Flask session cookie, so each browser keeps its own history.
"""

from __future__ import annotations

import json
import logging
from typing import List, Optional

from flask import session

from . import config

logger = logging.getLogger(__name__)

MAX_RECENT_SEARCHES = 5


class MemoryStore:
    """Key-value store held in process memory."""

    def __init__(self, raw: Optional[str] = None):
        self.raw = raw

    def load(self) -> Optional[str]:
        return self.raw

    def save(self, raw: str) -> None:
        self.raw = raw


class SessionStore:
    """Stores the JSON-encoded list under one key of the Flask session cookie."""

    def __init__(self, key: Optional[str] = None):
        self.key = key or config.RECENT_SEARCHES_KEY

    def load(self) -> Optional[str]:
        return session.get(self.key)

    def save(self, raw: str) -> None:
        session.permanent = True
        session[self.key] = raw


class RecentSearches:
    def __init__(self, store, limit: int = MAX_RECENT_SEARCHES):
        self.store = store
        self.limit = limit
        self.items: List[str] = self.load()

    def load(self) -> List[str]:
        raw = self.store.load()
        if not raw:
            return []
        try:
            data = json.loads(raw)
        except (TypeError, ValueError):
            logger.debug("Ignoring unparsable recent searches: %r", raw)
            return []
        if not isinstance(data, list) or not all(isinstance(s, str) for s in data):
            return []
        return data[: self.limit]

    def insert(self, username: str) -> List[str]:
        self.items = ([username] + [s for s in self.items if s != username])[: self.limit]
        self.store.save(json.dumps(self.items))
        return self.items

    def __iter__(self):
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

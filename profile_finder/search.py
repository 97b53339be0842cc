"""
Search orchestration.

SearchController owns everything a page render shows for one search:
the user, their repositories, the analytics summary, the loading flag and
the error banner. A search runs in two steps so that results belonging to a
superseded search can be recognised and dropped:

    token = controller.begin("octocat")
    controller.run(token)

``submit()`` does both. The user fetch and the repository fetch are
independent failure channels: a failed user fetch ends in the error state,
a failed repository fetch leaves the profile without analytics.
"""

from __future__ import annotations

import datetime as dt
import enum
import logging
from typing import Any, Callable, List, Optional, Tuple

from .analytics import compute_analytics
from .models import AnalyticsSummary, Repository, UserProfile, parse_repositories

logger = logging.getLogger(__name__)

Fetcher = Callable[[str], Tuple[Any, int]]

NOT_FOUND_MESSAGE = "User not found"
USER_FAILURE_MESSAGE = "Failed to fetch user data"


class SearchState(str, enum.Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class SearchController:
    def __init__(
        self,
        fetch_user: Fetcher,
        fetch_repos: Fetcher,
        history=None,
        clock: Optional[Callable[[], dt.datetime]] = None,
    ):
        self.fetch_user = fetch_user
        self.fetch_repos = fetch_repos
        self.history = history
        self.clock = clock

        self.state = SearchState.IDLE
        self.username = ""
        self.user: Optional[UserProfile] = None
        self.repositories: List[Repository] = []
        self.analytics: Optional[AnalyticsSummary] = None
        self.error = ""
        self._generation = 0
        self._pending = {}

    @property
    def loading(self) -> bool:
        return self.state is SearchState.LOADING

    def is_current(self, token: int) -> bool:
        return token == self._generation

    def begin(self, username: str) -> Optional[int]:
        """
        Start a new search. Returns its token, or None for blank input
        (in which case nothing changes).
        """
        username = (username or "").strip()
        if not username:
            return None

        self._generation += 1
        self._pending = {self._generation: username}
        self.state = SearchState.LOADING
        self.username = username
        self.user = None
        self.repositories = []
        self.analytics = None
        self.error = ""
        return self._generation

    def run(self, token: int) -> None:
        username = self._pending.get(token)
        if username is None:
            logger.debug("Search token %s is no longer pending", token)
            return

        payload, status = self.fetch_user(username)
        if not self.is_current(token):
            logger.debug("Discarding stale user result for %s", username)
            return
        if status != 200:
            self._fail(token, NOT_FOUND_MESSAGE if status == 404 else USER_FAILURE_MESSAGE)
            return
        try:
            user = UserProfile.from_api(payload)
        except ValueError as e:
            logger.warning("Unusable user payload for %s: %s", username, e)
            self._fail(token, USER_FAILURE_MESSAGE)
            return
        self.user = user

        payload, status = self.fetch_repos(username)
        if not self.is_current(token):
            logger.debug("Discarding stale repository result for %s", username)
            return
        if status == 200:
            try:
                repos = parse_repositories(payload)
            except ValueError as e:
                logger.warning("Unusable repository payload for %s: %s", username, e)
            else:
                self.repositories = repos
                now = self.clock() if self.clock else None
                self.analytics = compute_analytics(repos, user.created_at, now)
        else:
            logger.warning("Repositories for %s unavailable (status %s); showing profile only", username, status)

        if self.history is not None:
            self.history.insert(username)
        self.state = SearchState.SUCCESS
        self._pending.pop(token, None)

    def submit(self, username: str) -> bool:
        token = self.begin(username)
        if token is None:
            return False
        self.run(token)
        return True

    def _fail(self, token: int, message: str) -> None:
        self.error = message
        self.state = SearchState.ERROR
        self._pending.pop(token, None)

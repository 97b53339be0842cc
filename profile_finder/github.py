"""
Thin proxy over the GitHub REST API.

Both proxies return ``(payload, status)`` so the same call can back a Flask
JSON endpoint and the server-rendered page. Nothing here raises: upstream
failures become an ``{"error": ...}`` payload carrying the upstream status,
transport failures become the same payload with status 500.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

import requests

from . import config

logger = logging.getLogger(__name__)

ProxyResult = Tuple[Any, int]

USER_ERROR = "User not found"
USER_TRANSPORT_ERROR = "Failed to fetch user data"
REPOS_ERROR = "Failed to fetch repositories"


class GitHubAPIError(RuntimeError):
    def __init__(self, status: int, message: str):
        super().__init__(message)
        self.status = status


# -----------------------------
# HTTP helpers
# -----------------------------
def _headers() -> Dict[str, str]:
    return {
        "Accept": config.GITHUB_ACCEPT,
        "User-Agent": config.GITHUB_USER_AGENT,
    }


def _user_path(username: str) -> str:
    # One path segment; "a/b" must not reach another endpoint
    return f"{config.GITHUB_API_BASE}/users/{requests.utils.quote(username, safe='')}"


def _get_json(url: str, *, params: Optional[dict] = None) -> Any:
    """
    Single anonymous GET. Raises GitHubAPIError on non-2xx, lets
    requests.RequestException and ValueError (bad JSON) propagate.
    """
    resp = requests.get(url, headers=_headers(), params=params, timeout=config.GITHUB_TIMEOUT_SECONDS)
    if not 200 <= resp.status_code < 300:
        raise GitHubAPIError(resp.status_code, f"GitHub REST error {resp.status_code}: {(resp.text or '')[:300]}")
    return resp.json()


def _proxy(url: str, *, params: Optional[dict], upstream_error: str, transport_error: str) -> ProxyResult:
    try:
        return _get_json(url, params=params), 200
    except GitHubAPIError as e:
        logger.warning("Upstream %s for %s: %s", e.status, url, e)
        return {"error": upstream_error}, e.status
    except (requests.RequestException, ValueError) as e:
        logger.warning("Transport failure for %s: %s", url, e)
        return {"error": transport_error}, 500


# -----------------------------
# Proxies
# -----------------------------
def proxy_user(username: str) -> ProxyResult:
    return _proxy(
        _user_path(username),
        params=None,
        upstream_error=USER_ERROR,
        transport_error=USER_TRANSPORT_ERROR,
    )


def proxy_repos(username: str) -> ProxyResult:
    """First page of the user's repositories, most recently updated first."""
    return _proxy(
        f"{_user_path(username)}/repos",
        params={"per_page": config.REPOS_PER_PAGE, "sort": "updated", "direction": "desc"},
        upstream_error=REPOS_ERROR,
        transport_error=REPOS_ERROR,
    )

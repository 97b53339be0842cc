"""
Data models for GitHub profiles, repositories and the derived summary.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


def _dateparse(s: Optional[str]) -> Optional[dt.datetime]:
    if not s:
        return None
    try:
        return dt.datetime.fromisoformat(s.replace("Z", "+00:00"))
    except ValueError:
        return None


def _isoformat(d: Optional[dt.datetime]) -> Optional[str]:
    return d.isoformat().replace("+00:00", "Z") if d else None


@dataclass(frozen=True)
class UserProfile:
    """Snapshot of a GitHub user as returned by ``GET /users/{username}``."""
    login: str
    html_url: str
    avatar_url: Optional[str] = None
    name: Optional[str] = None
    bio: Optional[str] = None
    location: Optional[str] = None
    company: Optional[str] = None
    blog: Optional[str] = None
    followers: int = 0
    following: int = 0
    public_repos: int = 0
    created_at: Optional[dt.datetime] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "UserProfile":
        if not isinstance(data, dict) or not data.get("login"):
            raise ValueError("GitHub user payload has no login")
        login = data["login"]
        return cls(
            login=login,
            html_url=data.get("html_url") or f"https://github.com/{login}",
            avatar_url=data.get("avatar_url"),
            name=data.get("name"),
            bio=data.get("bio"),
            location=data.get("location"),
            company=data.get("company"),
            blog=data.get("blog"),
            followers=int(data.get("followers") or 0),
            following=int(data.get("following") or 0),
            public_repos=int(data.get("public_repos") or 0),
            created_at=_dateparse(data.get("created_at")),
        )

    @property
    def display_name(self) -> str:
        return self.name or self.login

    @property
    def website_url(self) -> Optional[str]:
        if not self.blog:
            return None
        return self.blog if self.blog.startswith("http") else f"https://{self.blog}"


@dataclass(frozen=True)
class Repository:
    name: str
    html_url: str
    description: Optional[str] = None
    stargazers_count: int = 0
    forks_count: int = 0
    language: Optional[str] = None
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Repository":
        return cls(
            name=data.get("name") or "",
            html_url=data.get("html_url") or "",
            description=data.get("description"),
            stargazers_count=int(data.get("stargazers_count") or 0),
            forks_count=int(data.get("forks_count") or 0),
            language=data.get("language") or None,
            created_at=_dateparse(data.get("created_at")),
            updated_at=_dateparse(data.get("updated_at")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "stargazers_count": self.stargazers_count,
            "forks_count": self.forks_count,
            "language": self.language,
            "html_url": self.html_url,
            "created_at": _isoformat(self.created_at),
            "updated_at": _isoformat(self.updated_at),
        }


def parse_repositories(payload: Any) -> List[Repository]:
    if not isinstance(payload, list):
        raise ValueError("GitHub repositories payload is not a list")
    return [Repository.from_api(r) for r in payload if isinstance(r, dict)]


@dataclass
class AnalyticsSummary:
    """Statistics recomputed on every search; never persisted."""
    total_stars: int = 0
    top_languages: Dict[str, int] = field(default_factory=dict)
    top_repos: List[Repository] = field(default_factory=list)
    account_age: int = 0
    total_repos: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalStars": self.total_stars,
            "topLanguages": dict(self.top_languages),
            "topRepos": [r.to_dict() for r in self.top_repos],
            "accountAge": self.account_age,
            "totalRepos": self.total_repos,
        }

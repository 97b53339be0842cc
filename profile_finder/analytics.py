from __future__ import annotations

import datetime as dt
from typing import Any, Dict, List, Optional, Sequence

from .models import AnalyticsSummary, Repository

TOP_REPOS_LIMIT = 5
TOP_LANGUAGES_LIMIT = 7
CHART_NAME_MAX = 15


def _now_utc() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


def account_age_days(created_at: Optional[dt.datetime], now: Optional[dt.datetime] = None) -> int:
    if created_at is None:
        return 0
    now = now or _now_utc()
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=dt.timezone.utc)
    return max(0, (now - created_at) // dt.timedelta(days=1))


def compute_analytics(
    repositories: Sequence[Repository],
    created_at: Optional[dt.datetime],
    now: Optional[dt.datetime] = None,
) -> AnalyticsSummary:
    """
    Reduce a repository list into an AnalyticsSummary.
    The input is left in its original order; top repos come from a copy.
    """
    total_stars = 0
    lang_counts: Dict[str, int] = {}
    for r in repositories:
        total_stars += r.stargazers_count
        if r.language:
            lang_counts[r.language] = lang_counts.get(r.language, 0) + 1

    # sorted() is stable, so equal star counts keep upstream order
    top_repos = sorted(repositories, key=lambda r: r.stargazers_count, reverse=True)[:TOP_REPOS_LIMIT]

    return AnalyticsSummary(
        total_stars=total_stars,
        top_languages=lang_counts,
        top_repos=top_repos,
        account_age=account_age_days(created_at, now),
        total_repos=len(repositories),
    )


# -----------------------------
# Presentation helpers
# -----------------------------
def language_chart_data(summary: AnalyticsSummary, limit: int = TOP_LANGUAGES_LIMIT) -> List[Dict[str, Any]]:
    ranked = sorted(summary.top_languages.items(), key=lambda kv: kv[1], reverse=True)[:limit]
    return [{"name": name, "value": count} for name, count in ranked]


def _short_name(name: str) -> str:
    return name[:CHART_NAME_MAX] + "..." if len(name) > CHART_NAME_MAX else name


def repo_star_data(summary: AnalyticsSummary) -> List[Dict[str, Any]]:
    return [
        {"name": _short_name(r.name), "stars": r.stargazers_count, "fullName": r.name}
        for r in summary.top_repos
    ]


def _plural(n: int, unit: str) -> str:
    return f"{n} {unit}" if n == 1 else f"{n} {unit}s"


def format_account_age(days: int) -> str:
    """
    Coarse "N years M months" label. Months are 30 days and years 365,
    which is accurate enough for a profile card.
    """
    years = days // 365
    months = (days % 365) // 30
    if years > 0:
        return _plural(years, "year") + (" " + _plural(months, "month") if months > 0 else "")
    return _plural(months, "month")


def years_on_github(days: int) -> int:
    return days // 365


def average_stars(summary: AnalyticsSummary) -> str:
    if summary.total_repos <= 0:
        return "0"
    return f"{summary.total_stars / summary.total_repos:.1f}"

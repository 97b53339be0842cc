"""
GitHub Profile Finder & Analyzer (Flask)

What it does:
- Accepts a GitHub username
- Fetches the public profile and up to 100 repositories via the GitHub REST API
- Computes total stars, language distribution, top repositories and account age
- Renders a profile card, stat tiles and plotly charts
- Remembers the last 5 searches per browser (session cookie)

Setup:
  pip install -e .

Run:
  profile-finder            # or: python -m profile_finder.app
  open http://localhost:5000

Endpoints:
  GET /                              -> search page (?username= runs a search)
  GET /api/github/user/<username>    -> GitHub user JSON, proxied
  GET /api/github/repos/<username>   -> GitHub repositories JSON, proxied
  GET /healthz                       -> liveness + non-secret config
"""

from __future__ import annotations

import datetime as dt
import logging

from flask import Flask, jsonify, render_template, request

from . import config, github
from .analytics import average_stars, format_account_age, years_on_github
from .charts import render_charts
from .history import RecentSearches, SessionStore
from .search import SearchController

logger = logging.getLogger(__name__)

# -----------------------------
# Flask app
# -----------------------------
app = Flask(__name__)
app.config["SECRET_KEY"] = config.SECRET_KEY
app.config["PERMANENT_SESSION_LIFETIME"] = dt.timedelta(days=365)


@app.template_filter("shortdate")
def _shortdate(value) -> str:
    return value.strftime("%Y-%m-%d") if value else ""


# -----------------------------
# Page
# -----------------------------
@app.route("/", methods=["GET"])
def home():
    history = RecentSearches(SessionStore())
    controller = SearchController(github.proxy_user, github.proxy_repos, history=history)
    controller.submit(request.args.get("username") or "")

    analytics = controller.analytics
    charts = render_charts(analytics) if analytics else None

    return render_template(
        "index.html",
        username=controller.username,
        recent_searches=history.items,
        state=controller.state.value,
        error=controller.error,
        user=controller.user,
        analytics=analytics,
        charts=charts,
        account_age_label=format_account_age(analytics.account_age) if analytics else "",
        years_on_github=years_on_github(analytics.account_age) if analytics else 0,
        average_stars=average_stars(analytics) if analytics else "0",
    )


# -----------------------------
# Proxy endpoints
# -----------------------------
@app.route("/api/github/user/<username>", methods=["GET"])
def api_user(username: str):
    payload, status = github.proxy_user(username)
    return jsonify(payload), status


@app.route("/api/github/repos/<username>", methods=["GET"])
def api_repos(username: str):
    payload, status = github.proxy_repos(username)
    return jsonify(payload), status


@app.route("/healthz", methods=["GET"])
def healthz():
    return jsonify({"ok": True, "github_api_base": config.GITHUB_API_BASE, "timeout_seconds": config.GITHUB_TIMEOUT_SECONDS})


def main() -> None:
    logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app.run(host="0.0.0.0", port=config.PORT, debug=False)


if __name__ == "__main__":
    main()

from __future__ import annotations

import os

from dotenv import load_dotenv

load_dotenv()

# -----------------------------
# Upstream
# -----------------------------
GITHUB_API_BASE = os.getenv("GITHUB_API_BASE", "https://api.github.com").rstrip("/")
GITHUB_ACCEPT = "application/vnd.github.v3+json"
GITHUB_USER_AGENT = os.getenv("GITHUB_USER_AGENT", "GitHub-Profile-Analyzer")
GITHUB_TIMEOUT_SECONDS = float(os.getenv("GITHUB_TIMEOUT_SECONDS", "20"))

# Upstream caps a single page at 100 repositories
REPOS_PER_PAGE = 100

# -----------------------------
# Web app
# -----------------------------
SECRET_KEY = os.getenv("SECRET_KEY", "dev-only-change-me")
RECENT_SEARCHES_KEY = os.getenv("RECENT_SEARCHES_KEY", "github-recent-searches")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
PORT = int(os.getenv("PORT", "5000"))

"""
GitHub Profile Finder & Analyzer.

Looks up a GitHub user, pulls their public repositories and renders
profile, language and star statistics in a single Flask page.
"""

__version__ = "0.1.0"

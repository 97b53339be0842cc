import datetime as dt

import pytest
import requests

from profile_finder import github
from profile_finder.app import app as flask_app

NOW = dt.datetime(2024, 6, 1, tzinfo=dt.timezone.utc)

OCTOCAT = {
    "login": "octocat",
    "name": "The Octocat",
    "avatar_url": "https://avatars.githubusercontent.com/u/583231",
    "bio": None,
    "location": "San Francisco",
    "company": "@github",
    "blog": "github.blog",
    "followers": 100,
    "following": 9,
    "public_repos": 3,
    "html_url": "https://github.com/octocat",
    "created_at": "2011-01-25T18:44:36Z",
}


def make_repo(name, stars=0, language=None, forks=0):
    return {
        "name": name,
        "description": f"{name} description",
        "stargazers_count": stars,
        "forks_count": forks,
        "language": language,
        "html_url": f"https://github.com/octocat/{name}",
        "created_at": "2020-01-01T00:00:00Z",
        "updated_at": "2024-05-01T12:00:00Z",
    }


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else ""

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class FakeGitHub:
    """Stands in for requests.get; routes by URL and records every call."""

    def __init__(self):
        self.routes = {}
        self.calls = []

    def add(self, path, response):
        self.routes["https://api.github.com" + path] = response

    def __call__(self, url, headers=None, params=None, timeout=None):
        self.calls.append({"url": url, "headers": headers, "params": params, "timeout": timeout})
        response = self.routes.get(url)
        if response is None:
            return FakeResponse(404, {"message": "Not Found"}, text='{"message": "Not Found"}')
        if isinstance(response, Exception):
            raise response
        return response

    def urls(self):
        return [c["url"] for c in self.calls]


@pytest.fixture
def fake_github(monkeypatch):
    fake = FakeGitHub()
    monkeypatch.setattr(github.requests, "get", fake)
    monkeypatch.setattr(github.config, "GITHUB_API_BASE", "https://api.github.com")
    return fake


@pytest.fixture
def octocat(fake_github):
    fake_github.add("/users/octocat", FakeResponse(200, OCTOCAT))
    fake_github.add(
        "/users/octocat/repos",
        FakeResponse(200, [make_repo("hello-world", 10, "Python"), make_repo("spoon-knife", 50, "HTML"), make_repo("linguist", 5)]),
    )
    return fake_github


@pytest.fixture
def client():
    flask_app.config["TESTING"] = True
    with flask_app.test_client() as c:
        yield c


@pytest.fixture
def connection_error():
    return requests.ConnectionError("boom")

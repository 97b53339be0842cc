import json

from profile_finder import config

from conftest import OCTOCAT, FakeResponse


def test_user_endpoint(client, octocat):
    resp = client.get("/api/github/user/octocat")
    assert resp.status_code == 200
    assert resp.get_json()["login"] == "octocat"


def test_user_endpoint_not_found(client, fake_github):
    resp = client.get("/api/github/user/this-user-does-not-exist-xyz")
    assert resp.status_code == 404
    assert resp.get_json() == {"error": "User not found"}


def test_repos_endpoint(client, octocat):
    resp = client.get("/api/github/repos/octocat")
    assert resp.status_code == 200
    assert [r["name"] for r in resp.get_json()] == ["hello-world", "spoon-knife", "linguist"]


def test_repos_endpoint_transport_failure(client, fake_github, connection_error):
    fake_github.add("/users/octocat/repos", connection_error)
    resp = client.get("/api/github/repos/octocat")
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Failed to fetch repositories"}


def test_home_without_search(client, fake_github):
    resp = client.get("/")
    assert resp.status_code == 200
    assert b"Search GitHub User" in resp.data
    assert fake_github.calls == []


def test_home_renders_profile_and_analytics(client, octocat):
    resp = client.get("/?username=octocat")
    body = resp.data.decode()
    assert resp.status_code == 200
    assert "The Octocat" in body
    assert "https://github.blog" in body
    assert "Top 5 Repositories" in body
    assert "spoon-knife" in body
    assert "cdn.plot.ly" in body


def test_home_not_found(client, fake_github):
    resp = client.get("/?username=this-user-does-not-exist-xyz")
    body = resp.data.decode()
    assert "User not found" in body
    assert fake_github.urls() == ["https://api.github.com/users/this-user-does-not-exist-xyz"]


def test_home_profile_only_when_repos_fail(client, fake_github):
    fake_github.add("/users/octocat", FakeResponse(200, OCTOCAT))
    fake_github.add("/users/octocat/repos", FakeResponse(502, None, text="bad gateway"))
    body = client.get("/?username=octocat").data.decode()
    assert "The Octocat" in body
    assert "Top 5 Repositories" not in body


def test_recent_searches_are_kept_in_session(client, octocat):
    client.get("/?username=octocat")
    with client.session_transaction() as sess:
        assert json.loads(sess[config.RECENT_SEARCHES_KEY]) == ["octocat"]
    body = client.get("/").data.decode()
    assert "Recent searches" in body
    assert "/?username=octocat" in body


def test_healthz(client):
    resp = client.get("/healthz")
    assert resp.get_json()["ok"] is True

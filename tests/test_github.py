from __future__ import annotations

import pytest
import requests

from asset_size_summary.github import GitHubClient
from tests.conftest import make_response


class FakeSession:
    def __init__(self, responses):
        self.headers: dict[str, str] = {}
        self.responses = list(responses)
        self.requests: list[dict] = []

    def request(self, method, url, **kwargs):
        self.requests.append({"method": method, "url": url, **kwargs})
        return self.responses.pop(0)


def make_client(*responses) -> tuple[GitHubClient, FakeSession]:
    session = FakeSession(responses)
    client = GitHubClient("tkn", "https://api.github.test/", session=session, timeout=5)
    return client, session


def test_sets_auth_headers():
    _, session = make_client()
    assert session.headers["Authorization"] == "Bearer tkn"
    assert session.headers["Accept"] == "application/vnd.github+json"


def test_get_pull():
    client, session = make_client(make_response(200, {"number": 7}))
    assert client.get_pull("octo", "web", 7) == {"number": 7}
    assert session.requests[0]["method"] == "GET"
    assert session.requests[0]["url"] == "https://api.github.test/repos/octo/web/pulls/7"
    assert session.requests[0]["timeout"] == 5


def test_list_comments_single_page():
    client, session = make_client(make_response(200, [{"id": 1, "body": "x"}]))
    assert client.list_comments("octo", "web", 7) == [{"id": 1, "body": "x"}]
    assert session.requests[0]["url"].endswith("/repos/octo/web/issues/7/comments")
    assert session.requests[0]["params"] == {"per_page": 100}


def test_comment_mutations():
    client, session = make_client(
        make_response(201, {"id": 3, "body": "a"}),
        make_response(200, {"id": 3, "body": "b"}),
        make_response(204),
    )
    client.create_comment("octo", "web", 7, "a")
    client.update_comment("octo", "web", 3, "b")
    client.delete_comment("octo", "web", 3)

    methods = [(r["method"], r["url"]) for r in session.requests]
    assert methods == [
        ("POST", "https://api.github.test/repos/octo/web/issues/7/comments"),
        ("PATCH", "https://api.github.test/repos/octo/web/issues/comments/3"),
        ("DELETE", "https://api.github.test/repos/octo/web/issues/comments/3"),
    ]
    assert session.requests[0]["json"] == {"body": "a"}
    assert session.requests[1]["json"] == {"body": "b"}


def test_http_errors_propagate():
    client, _ = make_client(make_response(403, {"message": "Resource not accessible"}))
    with pytest.raises(requests.HTTPError):
        client.list_comments("octo", "web", 7)

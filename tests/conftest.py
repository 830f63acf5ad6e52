from __future__ import annotations

import json

import requests


class FakeClient:
    """Records GitHub calls in place of ``GitHubClient``."""

    def __init__(self, comments=None, pull=None):
        self.comments = list(comments or [])
        self.pull = pull
        self.calls: list[tuple] = []

    def get_pull(self, owner, repo, pull_number):
        self.calls.append(("get_pull", owner, repo, pull_number))
        return self.pull

    def list_comments(self, owner, repo, issue_number):
        self.calls.append(("list_comments", owner, repo, issue_number))
        return self.comments

    def create_comment(self, owner, repo, issue_number, body):
        self.calls.append(("create_comment", owner, repo, issue_number, body))
        return {"id": 999, "body": body}

    def update_comment(self, owner, repo, comment_id, body):
        self.calls.append(("update_comment", owner, repo, comment_id, body))
        return {"id": comment_id, "body": body}

    def delete_comment(self, owner, repo, comment_id):
        self.calls.append(("delete_comment", owner, repo, comment_id))

    def call_names(self) -> list[str]:
        return [call[0] for call in self.calls]


def make_response(status: int = 200, data=None) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    resp._content = json.dumps(data).encode("utf-8") if data is not None else b""
    resp.url = "https://api.github.test"
    return resp


def pr_payload(number: int = 7, owner: str = "octo", repo: str = "web") -> dict:
    return {
        "number": number,
        "base": {"repo": {"name": repo, "owner": {"login": owner}}},
    }

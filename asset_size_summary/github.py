"""Minimal GitHub REST client for pull requests and issue comments."""

from __future__ import annotations

from typing import Any

import requests

DEFAULT_API_URL = "https://api.github.com"


class GitHubClient:
    def __init__(
        self,
        token: str,
        api_url: str = DEFAULT_API_URL,
        *,
        session: requests.Session | None = None,
        timeout: int = 30,
    ) -> None:
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Accept": "application/vnd.github+json",
                "Authorization": f"Bearer {token}",
                "X-GitHub-Api-Version": "2022-11-28",
            }
        )

    def _request(self, method: str, path: str, **kwargs: Any) -> requests.Response:
        resp = self.session.request(
            method, f"{self.api_url}{path}", timeout=self.timeout, **kwargs
        )
        resp.raise_for_status()
        return resp

    def get_pull(self, owner: str, repo: str, pull_number: int) -> dict:
        return self._request("GET", f"/repos/{owner}/{repo}/pulls/{pull_number}").json()

    def list_comments(self, owner: str, repo: str, issue_number: int) -> list[dict]:
        # First page only.
        resp = self._request(
            "GET",
            f"/repos/{owner}/{repo}/issues/{issue_number}/comments",
            params={"per_page": 100},
        )
        return resp.json()

    def create_comment(self, owner: str, repo: str, issue_number: int, body: str) -> dict:
        resp = self._request(
            "POST",
            f"/repos/{owner}/{repo}/issues/{issue_number}/comments",
            json={"body": body},
        )
        return resp.json()

    def update_comment(self, owner: str, repo: str, comment_id: int, body: str) -> dict:
        resp = self._request(
            "PATCH",
            f"/repos/{owner}/{repo}/issues/comments/{comment_id}",
            json={"body": body},
        )
        return resp.json()

    def delete_comment(self, owner: str, repo: str, comment_id: int) -> None:
        self._request("DELETE", f"/repos/{owner}/{repo}/issues/comments/{comment_id}")

"""Keep exactly one asset size comment on a pull request."""

from __future__ import annotations

from collections.abc import Callable, Iterable

MARKER = "Asset Change Summary"
BOT_USER_TYPE = "Bot"


def is_bot_comment(comment: dict) -> bool:
    user = comment.get("user")
    if isinstance(user, dict):
        return user.get("type") == BOT_USER_TYPE
    return False


def find_marked_comment(
    comments: Iterable[dict],
    marker: str = MARKER,
    is_bot_author: Callable[[dict], bool] = is_bot_comment,
) -> dict | None:
    for comment in comments:
        body = str(comment.get("body") or "")
        if marker in body and is_bot_author(comment):
            return comment
    return None


def create_or_update_comment(
    *,
    owner: str,
    repo: str,
    issue_number: int,
    body: str,
    client,
) -> str:
    """Create, update or delete our comment and return which one happened."""
    comments = client.list_comments(owner, repo, issue_number)
    ours = find_marked_comment(comments)

    if ours is None:
        if not body:
            return "none"
        client.create_comment(owner, repo, issue_number, body)
        return "created"

    if len(body) == 0:
        client.delete_comment(owner, repo, ours["id"])
        return "deleted"

    client.update_comment(owner, repo, ours["id"], body)
    return "updated"

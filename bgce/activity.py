"""Show a GitHub user's recent public activity."""

from __future__ import annotations

import json
import sys
import urllib.error
import urllib.request
from collections.abc import Iterable, Sequence
from typing import Any

EVENTS_URL = "https://api.github.com/users/{}/events"
USAGE = "usage: github-activity <username>"


class ActivityError(Exception):
    """Raised when the activity cannot be fetched or understood."""


def capitalize(text: str) -> str:
    """Shift the first byte down by 32, which upper-cases an ASCII letter."""
    if not text:
        return text
    raw = text.encode("utf-8")
    return chr((raw[0] - 32) & 0xFF) + raw[1:].decode("utf-8", errors="replace")


def fetch_activity(username: str) -> list[dict[str, Any]]:
    """Download the public events of ``username``."""
    try:
        with urllib.request.urlopen(EVENTS_URL.format(username), timeout=30) as response:
            status, body = response.status, response.read()
    except urllib.error.HTTPError as exc:
        status, body = exc.code, b""
    except OSError as exc:
        raise ActivityError(f"failed to fetch data: {exc}") from exc

    if status == 404:
        raise ActivityError("user not found or has no recent public activity")
    if status != 200:
        raise ActivityError(f"GitHub API returned status code: {status}")
    try:
        events = json.loads(body)
    except ValueError as exc:
        raise ActivityError(f"failed to decode response: {exc}") from exc
    if events is not None and not isinstance(events, list):
        raise ActivityError("failed to decode response: expected a list of events")
    return events or []


def describe_events(events: Iterable[Any]) -> list[str]:
    """Return one line for every push, issue, star or fork event."""
    lines = []
    for event in events:
        try:
            kind, repo = event["type"], event["repo"]["name"]
            if kind == "PushEvent":
                lines.append(f"- Pushed {len(event['payload']['commits'])} commits to {repo}")
            elif kind == "IssuesEvent":
                action = capitalize(event["payload"]["action"])
                lines.append(f"- {action} an issue in {repo}")
            elif kind == "WatchEvent":
                lines.append(f"- Starred {repo}")
            elif kind == "ForkEvent":
                lines.append(f"- Forked {repo}")
        except (KeyError, TypeError, AttributeError) as exc:
            raise ActivityError(f"malformed event: {event!r}") from exc
    return lines


def main(argv: Sequence[str] | None = None) -> int:
    """Print the recent activity of the user named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        if not args:
            raise ActivityError(USAGE)
        lines = describe_events(fetch_activity(args[0]))
    except ActivityError as exc:
        print("Error:", exc)
        return 0
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
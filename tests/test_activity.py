import json
import urllib.error
from unittest.mock import patch

import pytest

from bgce.activity import (
    ActivityError,
    capitalize,
    describe_events,
    fetch_activity,
    main,
)


class FakeResponse:
    def __init__(self, body, status=200):
        self.body = body
        self.status = status

    def read(self):
        return self.body

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        return False


def _http_error(code):
    return urllib.error.HTTPError("https://api.example.com", code, "error", {}, None)


EVENTS = [
    {"type": "PushEvent", "repo": {"name": "octo/alpha"}, "payload": {"commits": [{}, {}]}},
    {"type": "IssuesEvent", "repo": {"name": "octo/beta"}, "payload": {"action": "opened"}},
    {"type": "WatchEvent", "repo": {"name": "octo/gamma"}},
    {"type": "ForkEvent", "repo": {"name": "octo/delta"}},
    {"type": "CreateEvent", "repo": {"name": "octo/epsilon"}},
]


def test_capitalize_lowercase_word():
    assert capitalize("closed") == "Closed"


def test_capitalize_empty():
    assert capitalize("") == ""


def test_capitalize_keeps_rest():
    assert capitalize("reopened")[1:] == "eopened"


def test_describe_events_skips_unknown_types():
    lines = describe_events(EVENTS)
    assert len(lines) == 4
    assert not any("octo/epsilon" in line for line in lines)


def test_describe_events_star():
    assert describe_events([EVENTS[2]]) == ["- Starred octo/gamma"]


def test_describe_events_push_counts_commits():
    (line,) = describe_events([EVENTS[0]])
    assert "2" in line and line.endswith("octo/alpha")


def test_describe_events_issue_action_capitalized():
    (line,) = describe_events([EVENTS[1]])
    assert line.startswith("- O") and line.endswith("octo/beta")


def test_describe_events_empty():
    assert describe_events([]) == []


@pytest.mark.parametrize(
    "event",
    [
        {"repo": {"name": "octo/x"}},
        {"type": "WatchEvent"},
        {"type": "PushEvent", "repo": {"name": "octo/x"}, "payload": {}},
        {"type": 3, "repo": {"name": "octo/x"}},
        None,
    ],
)
def test_describe_events_malformed(event):
    with pytest.raises(ActivityError):
        describe_events([event])


def test_fetch_activity_returns_events():
    body = json.dumps(EVENTS).encode()
    with patch("urllib.request.urlopen", return_value=FakeResponse(body)):
        assert fetch_activity("octo") == EVENTS


def test_fetch_activity_requests_user_url():
    with patch("urllib.request.urlopen", return_value=FakeResponse(b"[]")) as opener:
        assert fetch_activity("octo") == []
    assert "users/octo/events" in opener.call_args.args[0]


def test_fetch_activity_not_found():
    with patch("urllib.request.urlopen", side_effect=_http_error(404)):
        with pytest.raises(ActivityError, match="user not found"):
            fetch_activity("nobody")


def test_fetch_activity_other_status():
    with patch("urllib.request.urlopen", side_effect=_http_error(503)):
        with pytest.raises(ActivityError, match="503"):
            fetch_activity("octo")


def test_fetch_activity_network_failure():
    with patch("urllib.request.urlopen", side_effect=urllib.error.URLError("down")):
        with pytest.raises(ActivityError, match="failed to fetch data"):
            fetch_activity("octo")


def test_fetch_activity_bad_json():
    with patch("urllib.request.urlopen", return_value=FakeResponse(b"{not json")):
        with pytest.raises(ActivityError, match="failed to decode response"):
            fetch_activity("octo")


def test_fetch_activity_not_a_list():
    with patch("urllib.request.urlopen", return_value=FakeResponse(b'{"a": 1}')):
        with pytest.raises(ActivityError, match="failed to decode response"):
            fetch_activity("octo")


def test_main_without_username(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "Error: usage: github-activity <username>\n"


def test_main_prints_events(capsys):
    body = json.dumps(EVENTS).encode()
    with patch("urllib.request.urlopen", return_value=FakeResponse(body)):
        assert main(["octo"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == describe_events(EVENTS)


def test_main_reports_error(capsys):
    with patch("urllib.request.urlopen", side_effect=_http_error(404)):
        assert main(["nobody"]) == 0
    assert capsys.readouterr().out.startswith("Error: user not found")
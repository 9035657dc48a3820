import pytest

from jira_security_issue.config import Settings, parse_watchers
from jira_security_issue.errors import ConfigurationError

FULL_ENV = {
    "JIRA_HOST": "https://localhost",
    "JIRA_USER": "user",
    "JIRA_TOKEN": "pass",
    "JIRA_PROJECT": "ABC",
}


def test_defaults():
    s = Settings.from_env(FULL_ENV)
    assert s.issue_type == "Bug"
    assert s.restricted_comment_role == "Developers"
    assert s.watchers == ()
    assert s.watcher_style == "name"
    assert s.timeout == 30.0


def test_reads_all_variables():
    env = dict(
        FULL_ENV,
        JIRA_ISSUE_TYPE="Mytype",
        JIRA_WATCHERS="user1@example.com,user2@example.com",
        JIRA_RESTRICTED_COMMENT_ROLE="Security",
        JIRA_WATCHER_STYLE="Mention",
        JIRA_TIMEOUT="5",
    )
    s = Settings.from_env(env)
    assert s.issue_type == "Mytype"
    assert s.watchers == ("user1@example.com", "user2@example.com")
    assert s.restricted_comment_role == "Security"
    assert s.watcher_style == "mention"
    assert s.timeout == 5.0


@pytest.mark.parametrize("raw, expected", [
    ("", []),
    (" ", []),
    ("a@x.com", ["a@x.com"]),
    (" a@x.com , ,b@x.com ", ["a@x.com", "b@x.com"]),
])
def test_parse_watchers(raw, expected):
    assert parse_watchers(raw) == expected


@pytest.mark.parametrize("missing, message", [
    ("JIRA_HOST", "No Jira host supplied, please set JIRA_HOST environment variable"),
    ("JIRA_USER", "No Jira user supplied, please set JIRA_USER environment variable"),
    ("JIRA_TOKEN", "No Jira token supplied, please set JIRA_TOKEN environment variable"),
    ("JIRA_PROJECT", "No project key supplied, please set JIRA_PROJECT environment variable"),
])
def test_validate_reports_missing_variable(missing, message):
    env = {k: v for k, v in FULL_ENV.items() if k != missing}
    with pytest.raises(ConfigurationError, match=message):
        Settings.from_env(env).validate()


@pytest.mark.parametrize("raw", ["abc", "0", "-1"])
def test_invalid_timeout(raw):
    with pytest.raises(ConfigurationError):
        Settings.from_env(dict(FULL_ENV, JIRA_TIMEOUT=raw))


def test_invalid_watcher_style():
    with pytest.raises(ConfigurationError):
        Settings.from_env(dict(FULL_ENV, JIRA_WATCHER_STYLE="emoji"))


def test_overrides_append_watchers():
    s = Settings.from_env(dict(FULL_ENV, JIRA_WATCHERS="a@x.com"))
    o = s.with_overrides(project="XYZ", issue_type="Task", extra_watchers=["b@x.com", " "])
    assert o.project == "XYZ"
    assert o.issue_type == "Task"
    assert o.watchers == ("a@x.com", "b@x.com")
    assert s.project == "ABC"


def test_overrides_ignore_empty_values():
    s = Settings.from_env(FULL_ENV)
    assert s.with_overrides(project=None, issue_type="", extra_watchers=[]) == s

from unittest.mock import MagicMock

import pytest

from jira_security_issue.common import set_verbose_enabled
from jira_security_issue.config import Settings
from jira_security_issue.models import DirectoryUser, SearchResult, TicketHandle

USERS = {
    "user1@example.com": DirectoryUser(account_id="abcd", display_name="efgh"),
    "user2@example.com": DirectoryUser(account_id="1234", display_name="5678"),
}


@pytest.fixture(autouse=True)
def _quiet():
    set_verbose_enabled(False)
    yield
    set_verbose_enabled(False)


@pytest.fixture
def settings():
    return Settings(
        host="https://localhost",
        user="user",
        token="pass",
        project="ABC",
        issue_type="Mytype",
    )


@pytest.fixture
def tracker():
    t = MagicMock()
    t.create_issue.return_value = TicketHandle(key="ABC-12")
    t.search_issues.return_value = SearchResult(total=0)
    return t


@pytest.fixture
def directory():
    d = MagicMock()
    d.find_assignable_users.side_effect = lambda query, project, max_results=1: (
        [USERS[query]] if query in USERS else []
    )
    return d

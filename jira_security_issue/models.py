#
# Copyright 2026 ABSA Group Limited
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#

"""Data models and the two remote capabilities the ensure logic depends on."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from .config import DEFAULT_RESTRICTED_COMMENT_ROLE, Settings
from .errors import ConfigurationError, ValidationError


@dataclass(frozen=True)
class IssueRequest:
    """Everything needed to ensure one issue; built once, never mutated."""
    project: str
    issue_type: str
    title: str
    body: str
    key_labels: tuple[str, ...] = ()
    watchers: tuple[str, ...] = ()
    restricted_comment_role: str = DEFAULT_RESTRICTED_COMMENT_ROLE

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        title: str,
        body: str,
        key_labels: list[str] | tuple[str, ...] = (),
    ) -> IssueRequest:
        return cls(
            project=settings.project,
            issue_type=settings.issue_type,
            title=title,
            body=body,
            key_labels=tuple(key_labels),
            watchers=tuple(settings.watchers),
            restricted_comment_role=settings.restricted_comment_role,
        )

    def validate(self) -> None:
        if not self.project:
            raise ConfigurationError("No project key supplied, please set JIRA_PROJECT environment variable")
        if not self.issue_type:
            raise ConfigurationError("No issue type supplied, please set JIRA_ISSUE_TYPE environment variable")
        if not self.restricted_comment_role:
            raise ConfigurationError(
                "No restricted comment role supplied, please set JIRA_RESTRICTED_COMMENT_ROLE environment variable"
            )
        if not self.title:
            raise ValidationError("No title supplied")
        if not self.body:
            raise ValidationError("No body supplied")


@dataclass(frozen=True)
class TicketHandle:
    key: str


@dataclass
class SearchResult:
    total: int
    issues: list[TicketHandle] = field(default_factory=list)

    @property
    def first_match(self) -> TicketHandle | None:
        return self.issues[0] if self.issues else None


@dataclass(frozen=True)
class DirectoryUser:
    account_id: str
    display_name: str
    raw: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)


@dataclass(frozen=True)
class WatcherResolution:
    """Outcome of looking up one requested watcher; ``user`` is None when unresolved."""
    identity: str
    user: DirectoryUser | None = None

    @property
    def resolved(self) -> bool:
        return self.user is not None


@runtime_checkable
class IssueTracker(Protocol):
    """Issue operations used by the ensurer."""

    def create_issue(self, fields: dict[str, Any]) -> TicketHandle:
        ...

    def search_issues(self, jql: str, max_results: int = 1) -> SearchResult:
        ...

    def add_watcher(self, issue_key: str, account_id: str) -> None:
        ...

    def add_comment(self, issue_key: str, body: str, visibility_role: str) -> None:
        ...


@runtime_checkable
class UserDirectory(Protocol):
    """Lookup of users that can be assigned issues in a project."""

    def find_assignable_users(self, query: str, project: str, max_results: int = 1) -> list[DirectoryUser]:
        ...

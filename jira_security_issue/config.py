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

"""Runtime configuration – the ``JIRA_*`` environment variables parsed into
an explicit, immutable ``Settings`` value.

``Settings.from_env`` is the only place that reads the environment; everything
downstream receives the resulting object.

Environment variables
---------------------
JIRA_HOST                     (required)  Base URL of the Jira instance.
JIRA_USER                     (required)  Account used for the REST API.
JIRA_TOKEN                    (required)  API token for ``JIRA_USER``.
JIRA_PROJECT                  (required)  Project key issues are created in.
JIRA_ISSUE_TYPE               Issue type name (default: Bug).
JIRA_WATCHERS                 Comma-separated watcher e-mails / names.
JIRA_RESTRICTED_COMMENT_ROLE  Role the status comment is visible to (default: Developers).
JIRA_WATCHER_STYLE            ``name`` or ``mention`` (default: name).
JIRA_TIMEOUT                  Per-request timeout in seconds (default: 30).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from typing import Mapping

from .errors import ConfigurationError

DEFAULT_ISSUE_TYPE = "Bug"
DEFAULT_RESTRICTED_COMMENT_ROLE = "Developers"
DEFAULT_TIMEOUT = 30.0

WATCHER_STYLE_NAME = "name"
WATCHER_STYLE_MENTION = "mention"
WATCHER_STYLES = (WATCHER_STYLE_NAME, WATCHER_STYLE_MENTION)

# (description, variable) pairs checked by Settings.validate(), in order.
REQUIRED_CONNECTION_VARS: list[tuple[str, str]] = [
    ("Jira host", "JIRA_HOST"),
    ("Jira user", "JIRA_USER"),
    ("Jira token", "JIRA_TOKEN"),
]


def parse_watchers(raw: str | None) -> list[str]:
    """Split a comma-separated watcher list, dropping blank entries.

    Example input:  ``"alice@example.com, bob@example.com"``
    """
    watchers: list[str] = []
    for item in (raw or "").split(","):
        item = item.strip()
        if item:
            watchers.append(item)
    return watchers


def parse_timeout(raw: str | None) -> float:
    if raw is None or raw.strip() == "":
        return DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        raise ConfigurationError(f"JIRA_TIMEOUT must be a number of seconds, got {raw!r}") from None
    if value <= 0:
        raise ConfigurationError(f"JIRA_TIMEOUT must be positive, got {raw!r}")
    return value


def parse_watcher_style(raw: str | None) -> str:
    style = (raw or "").strip().lower() or WATCHER_STYLE_NAME
    if style not in WATCHER_STYLES:
        raise ConfigurationError(
            f"JIRA_WATCHER_STYLE must be one of {', '.join(WATCHER_STYLES)}, got {raw!r}"
        )
    return style


@dataclass(frozen=True)
class Settings:
    host: str = ""
    user: str = ""
    token: str = ""
    project: str = ""
    issue_type: str = DEFAULT_ISSUE_TYPE
    watchers: tuple[str, ...] = field(default_factory=tuple)
    restricted_comment_role: str = DEFAULT_RESTRICTED_COMMENT_ROLE
    watcher_style: str = WATCHER_STYLE_NAME
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        return cls(
            host=(env.get("JIRA_HOST") or "").strip(),
            user=(env.get("JIRA_USER") or "").strip(),
            token=env.get("JIRA_TOKEN") or "",
            project=(env.get("JIRA_PROJECT") or "").strip(),
            issue_type=(env.get("JIRA_ISSUE_TYPE") or "").strip() or DEFAULT_ISSUE_TYPE,
            watchers=tuple(parse_watchers(env.get("JIRA_WATCHERS"))),
            restricted_comment_role=(
                (env.get("JIRA_RESTRICTED_COMMENT_ROLE") or "").strip() or DEFAULT_RESTRICTED_COMMENT_ROLE
            ),
            watcher_style=parse_watcher_style(env.get("JIRA_WATCHER_STYLE")),
            timeout=parse_timeout(env.get("JIRA_TIMEOUT")),
        )

    def with_overrides(
        self,
        *,
        project: str | None = None,
        issue_type: str | None = None,
        extra_watchers: list[str] | None = None,
    ) -> Settings:
        """Return a copy with CLI-supplied values layered over the environment."""
        changes: dict[str, object] = {}
        if project:
            changes["project"] = project
        if issue_type:
            changes["issue_type"] = issue_type
        if extra_watchers:
            changes["watchers"] = self.watchers + tuple(w.strip() for w in extra_watchers if w.strip())
        return replace(self, **changes)

    def validate_connection(self) -> None:
        """Raise ``ConfigurationError`` unless host, user and token are all set."""
        values = {"JIRA_HOST": self.host, "JIRA_USER": self.user, "JIRA_TOKEN": self.token}
        for desc, name in REQUIRED_CONNECTION_VARS:
            if not values[name]:
                raise ConfigurationError(f"No {desc} supplied, please set {name} environment variable")

    def validate(self) -> None:
        """Raise ``ConfigurationError`` for the first missing required setting."""
        self.validate_connection()

        if not self.project:
            raise ConfigurationError("No project key supplied, please set JIRA_PROJECT environment variable")

        if not self.issue_type:
            raise ConfigurationError("No issue type supplied, please set JIRA_ISSUE_TYPE environment variable")

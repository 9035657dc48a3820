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

"""Exception hierarchy.

Only the CLI turns these into ``SystemExit``; library code raises them and
lets the caller decide.
"""

from __future__ import annotations


class JiraSecurityIssueError(Exception):
    """Base class for all errors raised by this package."""


class ConfigurationError(JiraSecurityIssueError):
    """A required ``JIRA_*`` setting is missing or malformed."""


class ValidationError(JiraSecurityIssueError):
    """The issue request is incomplete (missing title or body)."""


class JiraApiError(JiraSecurityIssueError):
    """A Jira REST call failed (transport error, timeout or non-2xx status)."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class TrackerCreateError(JiraApiError):
    pass


class DirectoryLookupError(JiraApiError):
    pass


class TrackerSideEffectError(JiraApiError):
    """Adding a watcher or posting a comment failed."""

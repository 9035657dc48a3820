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

"""Core ensure orchestration – makes sure exactly one Jira issue exists for a
finding and notifies watchers when a new one is created.

Flow for one ``IssueRequest``:

1. Validate settings and request (no network traffic before this passes).
2. If the request carries key labels, search for the most recent issue in
   the project that has *all* of them. A hit is returned as-is: no create,
   no watchers, no comment.
3. Otherwise create the issue with the key labels attached.
4. Resolve each configured watcher, add the ones found as issue watchers,
   and post a role-restricted comment listing who follows the issue and who
   could not be found.

Adding watchers and posting the comment are best-effort: failures,
including request timeouts, are reported as warnings and the created issue
key is still returned. Search and creation failures, timeouts included,
abort the ensure; creation is never retried, since a blind retry could
create the issue twice.
"""

from __future__ import annotations

from typing import Any

from .comments import compose_comment
from .common import is_verbose, vprint, warn
from .config import Settings
from .errors import JiraApiError, TrackerCreateError, TrackerSideEffectError
from .models import DirectoryUser, IssueRequest, IssueTracker, TicketHandle, UserDirectory
from .watchers import resolve_watchers


def _jql_string(value: str) -> str:
    return "'" + value.replace("\\", "\\\\").replace("'", "\\'") + "'"


def build_search_jql(project: str, key_labels: tuple[str, ...] | list[str]) -> str:
    """JQL matching issues in *project* carrying every label in *key_labels*, newest first."""
    clauses = [f"PROJECT = {_jql_string(project)}"]
    for label in key_labels:
        clauses.append(f"labels IN ({_jql_string(label)})")
    return " AND ".join(clauses) + " ORDER BY created DESC"


def build_issue_fields(request: IssueRequest) -> dict[str, Any]:
    fields: dict[str, Any] = {
        "project": {"key": request.project},
        "issuetype": {"name": request.issue_type},
        "summary": request.title,
        "description": request.body,
    }
    if request.key_labels:
        fields["labels"] = list(request.key_labels)
    return fields


class IssueEnsurer:
    def __init__(
        self,
        settings: Settings,
        tracker: IssueTracker,
        directory: UserDirectory,
        *,
        dry_run: bool = False,
    ) -> None:
        self.settings = settings
        self.tracker = tracker
        self.directory = directory
        self.dry_run = dry_run

    def validate(self, request: IssueRequest) -> None:
        self.settings.validate_connection()
        request.validate()

    def find_existing(self, request: IssueRequest) -> TicketHandle | None:
        """Return the most recent issue matching the request's key labels, if any."""
        if not request.key_labels:
            return None

        jql = build_search_jql(request.project, request.key_labels)
        vprint(f"Searching for existing issue: {jql}")
        result = self.tracker.search_issues(jql, max_results=1)
        if result.total > 0:
            return result.first_match
        return None

    def create(self, request: IssueRequest) -> TicketHandle:
        try:
            return self.tracker.create_issue(build_issue_fields(request))
        except JiraApiError as exc:
            raise TrackerCreateError(f"Could not create issue: {exc}", status_code=exc.status_code) from exc

    def notify(self, issue_key: str, request: IssueRequest) -> str:
        """Add resolved watchers to *issue_key* and post the status comment.

        Returns the comment text that was (or, in dry-run, would have been) posted.
        """
        added: list[DirectoryUser] = []
        not_found: list[str] = []

        for resolution in resolve_watchers(self.directory, request.watchers, request.project):
            if resolution.user is None:
                not_found.append(resolution.identity)
                continue

            if self.dry_run:
                print(f"DRY-RUN: would add watcher {resolution.user.display_name} ({resolution.identity})")
                added.append(resolution.user)
                continue

            try:
                self.tracker.add_watcher(issue_key, resolution.user.account_id)
            except TrackerSideEffectError as exc:
                warn(f"Failed to add watcher {resolution.identity!r} to {issue_key}: {exc}")
                continue
            vprint(f"Added watcher {resolution.user.display_name} to {issue_key}")
            added.append(resolution.user)

        comment = compose_comment(added, not_found, style=self.settings.watcher_style)

        if self.dry_run:
            print(f"DRY-RUN: would comment (visible to role {request.restricted_comment_role!r}):")
            print(comment)
            return comment

        try:
            self.tracker.add_comment(issue_key, comment, request.restricted_comment_role)
        except TrackerSideEffectError as exc:
            warn(f"Failed to comment on {issue_key}: {exc}")
        return comment

    def ensure(self, request: IssueRequest) -> str:
        """Ensure the issue exists and return its key.

        In dry-run mode nothing is written; an empty string is returned when
        the issue would have been created.
        """
        self.validate(request)

        existing = self.find_existing(request)
        if existing is not None:
            vprint(f"Found existing issue {existing.key} for labels {list(request.key_labels)}")
            return existing.key

        if self.dry_run:
            print(
                f"DRY-RUN: would create {request.issue_type} in {request.project} "
                f"title={request.title!r} labels=[{','.join(request.key_labels)}]"
            )
            if is_verbose():
                print("DRY-RUN: body_preview_begin")
                print(request.body)
                print("DRY-RUN: body_preview_end")
            self.notify("(new)", request)
            return ""

        ticket = self.create(request)
        vprint(f"Created issue {ticket.key}")
        self.notify(ticket.key, request)
        return ticket.key

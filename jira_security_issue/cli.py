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

"""Command line entry point.

Commands
--------
ensure      Make sure a Jira issue exists for a finding; print its key.
user-info   Look up an e-mail address in the assignable-user directory and
            dump the matching Jira user record.

Configuration comes from the ``JIRA_*`` environment variables (see
``jira_security_issue.config``).

Usage examples
--------------
# Create (or reuse) an issue keyed on a finding fingerprint
jira-security-issue ensure "Outdated dependency" "Upgrade lodash" --key-label sec-1234

# Preview without writing anything
jira-security-issue ensure "Outdated dependency" "Upgrade lodash" --key-label sec-1234 --dry-run

# Check that a watcher address resolves
jira-security-issue user-info alice@example.com
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Callable

from .common import parse_runner_debug, set_verbose_enabled
from .config import Settings
from .errors import JiraSecurityIssueError
from .issue_ensurer import IssueEnsurer
from .jira_client import JiraClient
from .models import IssueRequest

ClientFactory = Callable[[Settings], JiraClient]


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="jira-security-issue",
        description="Ensure Jira issues exist for security findings.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logs on stderr (also enabled when RUNNER_DEBUG=1)",
    )

    # SUPPRESS: a --verbose given before the command must survive the subcommand defaults.
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Enable verbose logs on stderr (also enabled when RUNNER_DEBUG=1)",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    ensure = sub.add_parser(
        "ensure",
        parents=[common],
        help="Create a Jira issue unless one with the key labels exists",
    )
    ensure.add_argument("title", help="Title of issue")
    ensure.add_argument("body", help="Body of issue")
    ensure.add_argument(
        "--key-label",
        action="append",
        default=[],
        dest="key_labels",
        help="Label identifying the finding; repeat for several. Used to find an existing issue.",
    )
    ensure.add_argument("--project", default=None, help="Project key (default: $JIRA_PROJECT)")
    ensure.add_argument("--issue-type", default=None, help="Issue type (default: $JIRA_ISSUE_TYPE or Bug)")
    ensure.add_argument(
        "--watcher",
        action="append",
        default=[],
        dest="watchers",
        help="Additional watcher e-mail, appended to $JIRA_WATCHERS; repeat for several",
    )
    ensure.add_argument(
        "--dry-run",
        action="store_true",
        help="Only search and look up watchers; print intended actions instead of writing",
    )

    user_info = sub.add_parser("user-info", parents=[common], help="Lookup an email address and dump user data")
    user_info.add_argument("email", help="Email to lookup")
    user_info.add_argument("--project", default=None, help="Project key (default: $JIRA_PROJECT)")

    return parser.parse_args(argv)


def run_ensure(args: argparse.Namespace, settings: Settings, client_factory: ClientFactory) -> int:
    settings = settings.with_overrides(
        project=args.project,
        issue_type=args.issue_type,
        extra_watchers=args.watchers,
    )
    request = IssueRequest.from_settings(settings, title=args.title, body=args.body, key_labels=args.key_labels)

    # Validate before a client (and its HTTP session) is built.
    settings.validate_connection()
    request.validate()

    client = client_factory(settings)
    try:
        key = IssueEnsurer(settings, client, client, dry_run=bool(args.dry_run)).ensure(request)
    finally:
        client.close()
    if key:
        print(key)
    return 0


def run_user_info(args: argparse.Namespace, settings: Settings, client_factory: ClientFactory) -> int:
    settings = settings.with_overrides(project=args.project)
    settings.validate()

    client = client_factory(settings)
    try:
        users = client.find_assignable_users(args.email, settings.project, max_results=1)
    finally:
        client.close()

    if not users:
        print(f"No user found for {args.email}", file=sys.stderr)
        return 1

    user = users[-1]
    print(json.dumps(user.raw or {"accountId": user.account_id, "displayName": user.display_name}, indent=2))
    return 0


def main(argv: list[str] | None = None, *, client_factory: ClientFactory = JiraClient.from_settings) -> None:
    args = _parse_args(argv)

    set_verbose_enabled(bool(args.verbose) or parse_runner_debug())

    try:
        settings = Settings.from_env()
        if args.command == "user-info":
            code = run_user_info(args, settings, client_factory)
        else:
            code = run_ensure(args, settings, client_factory)
    except JiraSecurityIssueError as exc:
        raise SystemExit(f"ERROR: {exc}") from exc

    raise SystemExit(code)


if __name__ == "__main__":
    main()

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

"""Jira security issue automation.

Modules
-------
common          Shared low-level utilities (verbose logging, warnings).
errors          Exception hierarchy (configuration, validation, Jira API).
config          ``Settings`` loaded from ``JIRA_*`` environment variables.
models          Dataclasses (IssueRequest, DirectoryUser, TicketHandle) and
                the ``IssueTracker`` / ``UserDirectory`` capabilities.
formatting      English list joining, quoting and Jira mention markup.
templates       Comment templates and ``{{ placeholder }}`` rendering.
comments        Status comment composition from resolved / unresolved watchers.
watchers        Watcher lookup against the assignable-user directory.
jira_client     Jira REST API v2 client (``requests``).
issue_ensurer   Core ensure orchestration (dedup search, create, notify).
cli             ``jira-security-issue`` command line entry point.
"""

__version__ = "1.0.0"

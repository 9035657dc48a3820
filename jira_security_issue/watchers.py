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

"""Watcher lookup – maps each configured watcher identity (usually an e-mail
address) to a Jira account via the assignable-user search.

Lookup failures are never fatal: a watcher that cannot be looked up is
reported as unresolved, exactly like one that matches nobody.
"""

from __future__ import annotations

from typing import Iterable

from .common import vprint
from .errors import DirectoryLookupError
from .models import DirectoryUser, UserDirectory, WatcherResolution


def find_user(directory: UserDirectory, identity: str, project: str) -> DirectoryUser | None:
    try:
        users = directory.find_assignable_users(identity, project, max_results=1)
    except DirectoryLookupError as exc:
        vprint(f"User lookup failed for {identity!r}: {exc}")
        return None

    if not users:
        vprint(f"No assignable user found for {identity!r} in project {project}")
        return None

    # Last candidate wins when the directory returns more than asked for.
    return users[-1]


def resolve_watcher(directory: UserDirectory, identity: str, project: str) -> WatcherResolution:
    return WatcherResolution(identity=identity, user=find_user(directory, identity, project))


def resolve_watchers(directory: UserDirectory, identities: Iterable[str], project: str) -> list[WatcherResolution]:
    """Resolve every identity in input order; duplicates are looked up again."""
    return [resolve_watcher(directory, identity, project) for identity in identities]

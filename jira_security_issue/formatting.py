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

"""Human-readable list formatting for Jira comment text."""

from __future__ import annotations

from typing import Iterable, Sequence

from .config import WATCHER_STYLE_MENTION, WATCHER_STYLE_NAME
from .models import DirectoryUser


def join_with_and(items: Sequence[str]) -> str:
    """Join *items* as an English list: ``"a, b and c"``."""
    if not items:
        raise ValueError("join_with_and() needs at least one item")
    *head, last = items
    if not head:
        return last
    return ", ".join(head) + " and " + last


def quote(text: str) -> str:
    # Jira wiki markup, not JSON: embedded quotes are left alone.
    return f'"{text}"'


def mention(account_id: str) -> str:
    return f"[~accountid:{account_id}]"


def user_token(user: DirectoryUser, style: str = WATCHER_STYLE_NAME) -> str:
    if style == WATCHER_STYLE_MENTION:
        return mention(user.account_id)
    return user.display_name


def format_users(users: Iterable[DirectoryUser], style: str = WATCHER_STYLE_NAME) -> str:
    return join_with_and([user_token(u, style) for u in users])


def format_quoted(strings: Iterable[str]) -> str:
    return join_with_and([quote(s) for s in strings])

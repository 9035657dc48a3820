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

"""Status comment composition – the text posted on a newly created issue
listing who follows it and which configured watchers could not be found.
"""

from __future__ import annotations

from typing import Sequence

from .config import WATCHER_STYLE_NAME
from .formatting import format_quoted, format_users
from .models import DirectoryUser
from .templates import NO_WATCHERS_TEXT, NOT_FOUND_WATCHERS_TEMPLATE, WATCHERS_TEMPLATE, render_template


def compose_comment(
    resolved: Sequence[DirectoryUser],
    unresolved: Sequence[str],
    *,
    style: str = WATCHER_STYLE_NAME,
) -> str:
    if resolved:
        text = render_template(WATCHERS_TEMPLATE, {"watchers": format_users(resolved, style)})
    else:
        text = NO_WATCHERS_TEXT

    if unresolved:
        text += "\n\n" + render_template(NOT_FOUND_WATCHERS_TEMPLATE, {"watchers": format_quoted(unresolved)})

    return text

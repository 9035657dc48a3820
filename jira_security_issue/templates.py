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

"""Comment templates and ``{{ placeholder }}`` rendering engine."""

from __future__ import annotations

import re

WATCHERS_TEMPLATE = "This issue is being followed by {{ watchers }}"

NO_WATCHERS_TEXT = "No watchers on this issue, remember to notify relevant people."

NOT_FOUND_WATCHERS_TEMPLATE = (
    "Could not find user for {{ watchers }}, please check the users listed in JIRA_WATCHERS."
)


PLACEHOLDER_RE = re.compile(r"\{\{\s*([a-zA-Z0-9_]+)\s*\}\}")


def render_template(template: str, values: dict[str, str]) -> str:
    """Replace ``{{ key }}`` placeholders in *template* with values from *values*."""
    return PLACEHOLDER_RE.sub(lambda m: values.get(m.group(1), ""), template)

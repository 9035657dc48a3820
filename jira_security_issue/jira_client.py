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

"""Jira REST API v2 client – issue create / search / watchers / comments and
the assignable-user search, over ``requests`` with basic auth (user + API token).

Every call is a single blocking request bounded by ``timeout``. Failures of
any kind are raised as ``JiraApiError`` (or the subclass matching the
operation); nothing is retried.
"""

from __future__ import annotations

from typing import Any

import requests

from .common import vprint
from .config import Settings
from .errors import DirectoryLookupError, JiraApiError, TrackerSideEffectError
from .models import DirectoryUser, SearchResult, TicketHandle

API_PREFIX = "/rest/api/2"


def _error_detail(resp: requests.Response) -> str:
    """Flatten Jira's ``errorMessages`` / ``errors`` payload into one line."""
    try:
        data = resp.json()
    except ValueError:
        return (resp.text or "").strip() or resp.reason or ""

    if not isinstance(data, dict):
        return str(data)

    parts: list[str] = [str(m) for m in data.get("errorMessages") or []]
    errors = data.get("errors") or {}
    if isinstance(errors, dict):
        parts += [f"{k}: {v}" for k, v in errors.items()]
    return "; ".join(parts) or resp.reason or ""


def _user_from_json(obj: dict[str, Any]) -> DirectoryUser:
    return DirectoryUser(
        account_id=str(obj.get("accountId") or obj.get("name") or ""),
        display_name=str(obj.get("displayName") or ""),
        raw=dict(obj),
    )


class JiraClient:
    """Implements both ``IssueTracker`` and ``UserDirectory``."""

    def __init__(
        self,
        host: str,
        user: str,
        token: str,
        *,
        timeout: float = 30.0,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = host.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.auth = (user, token)
        self.session.headers.update({"Accept": "application/json"})

    @classmethod
    def from_settings(cls, settings: Settings) -> JiraClient:
        return cls(settings.host, settings.user, settings.token, timeout=settings.timeout)

    def close(self) -> None:
        self.session.close()

    def _request(
        self,
        method: str,
        path: str,
        *,
        error_cls: type[JiraApiError] = JiraApiError,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        url = f"{self.base_url}{API_PREFIX}{path}"
        vprint(f"Jira {method} {url}")
        try:
            resp = self.session.request(method, url, params=params, json=json, timeout=self.timeout)
        except requests.Timeout:
            raise error_cls(f"{method} {path} timed out after {self.timeout:g}s") from None
        except requests.RequestException as exc:
            raise error_cls(f"{method} {path} failed: {exc}") from exc

        if not 200 <= resp.status_code < 300:
            raise error_cls(
                f"{method} {path} returned HTTP {resp.status_code}: {_error_detail(resp)}",
                status_code=resp.status_code,
            )

        if resp.status_code == 204 or not resp.content:
            return None
        try:
            return resp.json()
        except ValueError:
            raise error_cls(f"{method} {path} returned a non-JSON body", status_code=resp.status_code) from None

    # -- IssueTracker -------------------------------------------------------

    def create_issue(self, fields: dict[str, Any]) -> TicketHandle:
        data = self._request("POST", "/issue", json={"fields": fields})
        key = str((data or {}).get("key") or "")
        if not key:
            raise JiraApiError("POST /issue response did not include an issue key")
        return TicketHandle(key=key)

    def search_issues(self, jql: str, max_results: int = 1) -> SearchResult:
        data = self._request(
            "GET",
            "/search",
            params={"jql": jql, "maxResults": max_results, "fields": "key"},
        ) or {}
        issues = [TicketHandle(key=str(obj["key"])) for obj in data.get("issues") or [] if obj.get("key")]
        return SearchResult(total=int(data.get("total") or 0), issues=issues)

    def add_watcher(self, issue_key: str, account_id: str) -> None:
        # The endpoint takes a bare JSON string as the request body.
        self._request(
            "POST",
            f"/issue/{issue_key}/watchers",
            json=account_id,
            error_cls=TrackerSideEffectError,
        )

    def add_comment(self, issue_key: str, body: str, visibility_role: str) -> None:
        payload = {"body": body, "visibility": {"type": "role", "value": visibility_role}}
        self._request("POST", f"/issue/{issue_key}/comment", json=payload, error_cls=TrackerSideEffectError)

    # -- UserDirectory ------------------------------------------------------

    def find_assignable_users(self, query: str, project: str, max_results: int = 1) -> list[DirectoryUser]:
        data = self._request(
            "GET",
            "/user/assignable/search",
            params={"query": query, "project": project, "maxResults": max_results},
            error_cls=DirectoryLookupError,
        )
        if not isinstance(data, list):
            return []
        return [_user_from_json(obj) for obj in data if isinstance(obj, dict)]

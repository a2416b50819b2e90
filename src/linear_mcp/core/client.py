import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence

import httpx

from . import graphql
from .observability import elapsed_ms, log_event

DEFAULT_API_URL = "https://api.linear.app/graphql"


class LinearClientError(Exception):
    """Base error for client failures."""


class LinearHTTPError(LinearClientError):
    def __init__(
        self,
        *,
        status_code: int,
        url: str,
        message: str,
        response_json: Optional[Dict[str, Any]] = None,
        response_text: Optional[str] = None,
    ):
        super().__init__(f"{status_code} POST {url}: {message}")
        self.status_code = status_code
        self.url = url
        self.response_json = response_json
        self.response_text = response_text


class LinearParseError(LinearClientError):
    pass


class LinearGraphQLError(LinearClientError):
    def __init__(self, errors: List[Dict[str, Any]]):
        messages = [
            str(e.get("message") or e) if isinstance(e, dict) else str(e)
            for e in errors
        ]
        super().__init__("; ".join(messages) or "GraphQL request failed")
        self.errors = errors


@dataclass(frozen=True)
class RetryConfig:
    max_retries: int = 2  # total extra attempts
    backoff_base_seconds: float = 0.3  # 0.3, 0.6, 1.2...
    retry_statuses: frozenset[int] = frozenset({502, 503, 504})
    retry_on_429: bool = False


class LinearClient:
    """
    GraphQL client for the Linear API.
    - Handles auth header, endpoint, timeouts, retries
    - Returns the GraphQL ``data`` object; callers check ``success`` flags
    - No tool logic; handlers own formatting decisions
    """

    def __init__(
        self,
        *,
        api_key: str,
        api_url: str = DEFAULT_API_URL,
        timeout_seconds: float = 30.0,
        retry: Optional[RetryConfig] = None,
        request_id: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
        http: Optional[httpx.AsyncClient] = None,
    ):
        api_key = (api_key or "").strip()
        api_url = (api_url or DEFAULT_API_URL).strip()

        if not api_key:
            raise ValueError("api_key must be provided.")

        self.api_url = api_url
        self.timeout_seconds = timeout_seconds
        self.retry = retry if retry is not None else RetryConfig()
        self.request_id = request_id
        self.log = logger or logging.getLogger("linear_mcp.client")
        self._headers = {
            # Personal API keys are sent bare; OAuth tokens carry "Bearer ".
            "Authorization": api_key,
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

        self._owns_http = http is None
        self.http = http or httpx.AsyncClient(timeout=timeout_seconds)

    async def aclose(self) -> None:
        if self._owns_http:
            await self.http.aclose()

    async def __aenter__(self) -> "LinearClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def execute(
        self,
        query: str,
        variables: Optional[Mapping[str, Any]] = None,
        *,
        tool: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Core request method.
        - Retries on transient failures (network/timeouts + 502/503/504; optionally 429)
        - Raises LinearHTTPError on non-2xx HTTP responses
        - Raises LinearClientError on network/timeout errors after retries
        - Raises LinearParseError if response isn't a JSON object
        - Raises LinearGraphQLError if the response carries ``errors``
        - Returns the ``data`` object on success
        """
        body: Dict[str, Any] = {"query": query}
        if variables:
            body["variables"] = dict(variables)

        start = time.perf_counter()
        attempt = 0

        while True:
            try:
                resp = await self.http.post(
                    self.api_url,
                    json=body,
                    headers=self._headers,
                    timeout=self.timeout_seconds,
                )
            except (httpx.ConnectError, httpx.ReadTimeout, httpx.ConnectTimeout) as exc:
                if attempt < self.retry.max_retries:
                    await asyncio.sleep(self.retry.backoff_base_seconds * (2**attempt))
                    attempt += 1
                    continue
                self._log_call(tool, "exception", start, attempt, type(exc).__name__)
                raise LinearClientError(
                    f"Network/timeout error calling {self.api_url}: {exc}"
                ) from exc
            except httpx.HTTPError as exc:
                # Other httpx exceptions (rare) - do not blindly retry
                self._log_call(tool, "exception", start, attempt, type(exc).__name__)
                raise LinearClientError(
                    f"HTTPX error calling {self.api_url}: {exc}"
                ) from exc

            if resp.status_code in self.retry.retry_statuses or (
                self.retry.retry_on_429 and resp.status_code == 429
            ):
                if attempt < self.retry.max_retries:
                    await asyncio.sleep(self.retry.backoff_base_seconds * (2**attempt))
                    attempt += 1
                    continue

            self._log_call(tool, resp.status_code, start, attempt)

            if resp.status_code < 200 or resp.status_code >= 300:
                raise self._to_http_error(resp)

            payload = self._safe_json(resp)
            errors = payload.get("errors")
            if errors:
                raise LinearGraphQLError(
                    errors if isinstance(errors, list) else [errors]
                )

            data = payload.get("data")
            if not isinstance(data, dict):
                raise LinearParseError(
                    f"Expected a 'data' object from {self.api_url}, "
                    f"got {type(data).__name__}"
                )
            return data

    def _log_call(
        self,
        tool: Optional[str],
        status: Any,
        start: float,
        attempt: int,
        error_type: Optional[str] = None,
    ) -> None:
        fields: Dict[str, Any] = {
            "request_id": self.request_id,
            "tool": tool,
            "endpoint": self.api_url,
            "status": status,
            "duration_ms": elapsed_ms(start),
            "attempt": attempt,
        }
        if error_type:
            fields["error_type"] = error_type
        log_event("graphql_call", logger=self.log, **fields)

    def _safe_json(self, resp: httpx.Response) -> Dict[str, Any]:
        if not resp.content:
            raise LinearParseError(f"Empty response body from {self.api_url}")

        try:
            data = resp.json()
        except Exception as exc:
            snippet = (resp.text or "")[:500]
            raise LinearParseError(
                f"Expected JSON from {self.api_url}, got non-JSON body snippet: "
                f"{snippet!r}"
            ) from exc

        if not isinstance(data, dict):
            raise LinearParseError(
                f"Expected top-level JSON object from {self.api_url}, "
                f"got {type(data).__name__}"
            )
        return data

    def _to_http_error(self, resp: httpx.Response) -> LinearHTTPError:
        response_json: Optional[Dict[str, Any]] = None
        response_text: Optional[str] = None
        message = "request failed"

        try:
            parsed = resp.json()
            if isinstance(parsed, dict):
                response_json = parsed
                errors = parsed.get("errors")
                if isinstance(errors, list) and errors and isinstance(errors[0], dict):
                    message = errors[0].get("message") or message
                else:
                    message = parsed.get("message") or parsed.get("error") or message
        except Exception:
            response_text = (resp.text or "")[:500]

        return LinearHTTPError(
            status_code=resp.status_code,
            url=self.api_url,
            message=message,
            response_json=response_json,
            response_text=response_text,
        )

    # --- Issues ------------------------------------------------------------ #

    async def create_issue(self, input: Mapping[str, Any]) -> Dict[str, Any]:
        return await self.execute(
            graphql.CREATE_ISSUE, {"input": dict(input)}, tool="create_issue"
        )

    async def create_issues(
        self, issues: Sequence[Mapping[str, Any]]
    ) -> Dict[str, Any]:
        return await self.execute(
            graphql.CREATE_ISSUES,
            {"input": {"issues": [dict(i) for i in issues]}},
            tool="create_issues",
        )

    async def update_issues(
        self, ids: Sequence[str], input: Mapping[str, Any]
    ) -> Dict[str, Any]:
        return await self.execute(
            graphql.UPDATE_ISSUES,
            {"ids": list(ids), "input": dict(input)},
            tool="update_issues",
        )

    async def search_issues(
        self,
        filter: Mapping[str, Any],
        first: int,
        after: Optional[str] = None,
        order_by: str = "updatedAt",
    ) -> Dict[str, Any]:
        variables: Dict[str, Any] = {
            "filter": dict(filter),
            "first": first,
            "orderBy": order_by,
        }
        if after:
            variables["after"] = after
        return await self.execute(
            graphql.SEARCH_ISSUES, variables, tool="search_issues"
        )

    async def delete_issue(self, id: str) -> Dict[str, Any]:
        return await self.execute(
            graphql.DELETE_ISSUE, {"id": id}, tool="delete_issue"
        )

    async def delete_issues(self, ids: Sequence[str]) -> Dict[str, Any]:
        """Delete several issues in one request.

        The aliased ``issueDelete`` results are folded into a single
        ``{"issueDelete": {"success": bool}}`` which is true only when every
        deletion succeeded.
        """
        ids = list(ids)
        if not ids:
            raise ValueError("ids must contain at least one issue id")
        data = await self.execute(
            graphql.delete_issues_document(len(ids)),
            graphql.delete_issues_variables(ids),
            tool="delete_issues",
        )
        results = [data.get(f"delete{i}") for i in range(len(ids))]
        success = all(isinstance(r, dict) and r.get("success") for r in results)
        return {"issueDelete": {"success": success}}

    # --- Projects ---------------------------------------------------------- #

    async def create_project(self, input: Mapping[str, Any]) -> Dict[str, Any]:
        return await self.execute(
            graphql.CREATE_PROJECT, {"input": dict(input)}, tool="create_project"
        )

    async def get_project(self, id: str) -> Dict[str, Any]:
        return await self.execute(graphql.GET_PROJECT, {"id": id}, tool="get_project")

    async def search_projects(self, name: str) -> Dict[str, Any]:
        return await self.execute(
            graphql.SEARCH_PROJECTS,
            {"filter": {"name": {"eq": name}}},
            tool="search_projects",
        )

    # --- Teams / users ----------------------------------------------------- #

    async def get_teams(self) -> Dict[str, Any]:
        return await self.execute(graphql.GET_TEAMS, tool="get_teams")

    async def get_viewer(self) -> Dict[str, Any]:
        return await self.execute(graphql.GET_VIEWER, tool="get_user")

    # --- Comments ---------------------------------------------------------- #

    async def create_comment(self, input: Mapping[str, Any]) -> Dict[str, Any]:
        return await self.execute(
            graphql.CREATE_COMMENT, {"input": dict(input)}, tool="create_comment"
        )

    async def update_comment(
        self, id: str, input: Mapping[str, Any]
    ) -> Dict[str, Any]:
        return await self.execute(
            graphql.UPDATE_COMMENT,
            {"id": id, "input": dict(input)},
            tool="update_comment",
        )

    async def delete_comment(self, id: str) -> Dict[str, Any]:
        return await self.execute(
            graphql.DELETE_COMMENT, {"id": id}, tool="delete_comment"
        )

    async def resolve_comment(
        self, id: str, resolving_comment_id: Optional[str] = None
    ) -> Dict[str, Any]:
        variables: Dict[str, Any] = {"id": id}
        if resolving_comment_id:
            variables["resolvingCommentId"] = resolving_comment_id
        return await self.execute(
            graphql.RESOLVE_COMMENT, variables, tool="resolve_comment"
        )

    async def unresolve_comment(self, id: str) -> Dict[str, Any]:
        return await self.execute(
            graphql.UNRESOLVE_COMMENT, {"id": id}, tool="unresolve_comment"
        )

    # --- Customer needs ---------------------------------------------------- #

    async def create_customer_need_from_attachment(
        self, input: Mapping[str, Any]
    ) -> Dict[str, Any]:
        return await self.execute(
            graphql.CREATE_CUSTOMER_NEED_FROM_ATTACHMENT,
            {"input": dict(input)},
            tool="create_customer_need_from_attachment",
        )

"""
Linear GraphQL data access for initiatives.

Each Linear project of the configured team represents one initiative. A single
query fetches every project together with its 50 most recently updated issues;
canceled projects are dropped and the rest are normalized into `Initiative`
records sorted by name.

This layer neither retries nor caches. Every public read performs its own
fetch, so callers that need several figures from one coherent snapshot should
call `list_initiatives()` once and fold over the result (see
`initiative_status.data.initiatives.total_cost_estimate`).
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional

import httpx

from initiative_status.config import (
    DEFAULT_TEAM_ID,
    DEFAULT_TIMEOUT_SECONDS,
    ISSUE_PAGE_SIZE,
    LINEAR_API_URL,
    LinearSettings,
)
from initiative_status.data.exceptions import ConfigurationError, ProtocolError, TransportError
from initiative_status.data.initiatives import (
    Initiative,
    average_completeness,
    project_to_initiative,
    sort_by_name,
    total_cost_estimate,
)

logger = logging.getLogger(__name__)

EXCLUDED_PROJECT_STATES = {"canceled"}

TEAM_PROJECTS_QUERY = """{
  team(id: %(team_id)s) {
    projects {
      nodes {
        id
        name
        description
        content
        state
        progress
        startDate
        targetDate
        url
        createdAt
        updatedAt
        issues(first: %(issue_page_size)d, orderBy: updatedAt) {
          nodes {
            id
            title
            state { type name }
            completedAt
          }
        }
      }
    }
  }
}"""


def build_team_projects_query(team_id: str, issue_page_size: int = ISSUE_PAGE_SIZE) -> str:
    # json.dumps quotes and escapes the id as a GraphQL string literal
    return TEAM_PROJECTS_QUERY % {
        "team_id": json.dumps(team_id),
        "issue_page_size": issue_page_size,
    }


def normalize_page_path(page_path: str) -> str:
    return page_path if page_path.startswith("/") else f"/{page_path}"


class LinearClient:
    """Read-only client for the Linear GraphQL endpoint"""

    def __init__(
        self,
        api_key: Optional[str],
        team_id: str = DEFAULT_TEAM_ID,
        api_url: str = LINEAR_API_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not api_key:
            raise ConfigurationError("LINEAR_API_KEY environment variable is not set")
        self.api_key = api_key
        self.team_id = team_id
        self.api_url = api_url
        self.timeout = timeout
        self.transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: Optional[LinearSettings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "LinearClient":
        settings = settings or LinearSettings.from_env()
        return cls(
            api_key=settings.require_api_key(),
            team_id=settings.team_id,
            api_url=settings.api_url,
            timeout=settings.timeout_seconds,
            transport=transport,
        )

    def _build_headers(self) -> Dict[str, str]:
        # Linear personal API keys are sent without a Bearer prefix
        return {
            "Content-Type": "application/json",
            "Authorization": self.api_key,
        }

    async def execute(self, query: str) -> Dict[str, Any]:
        """POST one GraphQL query and return its `data` payload."""
        logger.debug("Querying Linear at %s", self.api_url)
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(
                    self.api_url,
                    json={"query": query},
                    headers=self._build_headers(),
                )
        except httpx.HTTPError as exc:
            logger.warning("Linear request failed: %s", exc)
            raise TransportError(None, str(exc)) from exc

        if not response.is_success:
            logger.warning("Linear responded with HTTP %s", response.status_code)
            raise TransportError(response.status_code, response.reason_phrase)

        try:
            payload = response.json()
        except ValueError as exc:
            raise ProtocolError("response body is not valid JSON") from exc
        if not isinstance(payload, dict):
            raise ProtocolError("response body is not a JSON object")

        errors = payload.get("errors")
        if errors is not None:
            first = errors[0] if isinstance(errors, list) and errors else None
            message = first.get("message") if isinstance(first, dict) else None
            logger.warning("Linear returned GraphQL errors: %s", message)
            raise ProtocolError(message)

        return payload.get("data") or {}

    async def list_initiatives(self) -> List[Initiative]:
        data = await self.execute(build_team_projects_query(self.team_id))
        team = data.get("team")
        if not team:
            raise ProtocolError(f"team {self.team_id} not found")

        projects = (team.get("projects") or {}).get("nodes") or []
        initiatives = sort_by_name(
            project_to_initiative(project)
            for project in projects
            if project.get("state") not in EXCLUDED_PROJECT_STATES
        )
        logger.info(
            "Loaded %d initiatives from %d Linear projects", len(initiatives), len(projects)
        )
        return initiatives

    async def find_by_slug(self, slug: str) -> Optional[Initiative]:
        # Colliding slugs resolve to the first initiative in name order
        initiatives = await self.list_initiatives()
        return next((i for i in initiatives if i.slug == slug), None)

    async def find_by_page_path(self, page_path: str) -> Optional[Initiative]:
        normalized_path = normalize_page_path(page_path)
        initiatives = await self.list_initiatives()
        return next((i for i in initiatives if i.page_path == normalized_path), None)

    async def find_by_subdomain(self, subdomain: str) -> Optional[Initiative]:
        initiatives = await self.list_initiatives()
        return next((i for i in initiatives if i.subdomain == subdomain), None)

    async def find_for_page(
        self,
        page_path: Optional[str] = None,
        subdomain: Optional[str] = None,
    ) -> Optional[Initiative]:
        """Resolve the initiative for a page, trying page_path then subdomain."""
        if page_path:
            initiative = await self.find_by_page_path(page_path)
            if initiative:
                return initiative
        if subdomain:
            initiative = await self.find_by_subdomain(subdomain)
            if initiative:
                return initiative
        return None

    async def total_cost_estimate(self) -> int:
        return total_cost_estimate(await self.list_initiatives())

    async def average_completeness(self) -> int:
        return average_completeness(await self.list_initiatives())


# Public read API


def _client() -> LinearClient:
    return LinearClient.from_settings()


async def get_all_initiatives() -> List[Initiative]:
    return await _client().list_initiatives()


async def get_initiative_by_slug(slug: str) -> Optional[Initiative]:
    return await _client().find_by_slug(slug)


async def get_initiative_by_page_path(page_path: str) -> Optional[Initiative]:
    return await _client().find_by_page_path(page_path)


async def get_initiative_by_subdomain(subdomain: str) -> Optional[Initiative]:
    return await _client().find_by_subdomain(subdomain)


async def get_initiative_for_page(
    page_path: Optional[str] = None,
    subdomain: Optional[str] = None,
) -> Optional[Initiative]:
    return await _client().find_for_page(page_path, subdomain)


async def get_total_cost_estimate() -> int:
    return await _client().total_cost_estimate()


async def get_average_completeness() -> int:
    return await _client().average_completeness()

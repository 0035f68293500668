"""Cultural-graph API client for taste correlations."""

import asyncio
import logging
from typing import Any

import httpx

from ..config import CorrelationConfig
from ..models import CorrelationResult, FashionEntity


logger = logging.getLogger(__name__)

FASHION_TYPES = {"fashion", "brand"}
DECOR_TYPES = {"home", "design"}


class CorrelationClient:
    """Client for the cultural-graph search and insights endpoints."""

    def __init__(
        self,
        config: CorrelationConfig,
        base_url: str,
        api_key: str | None,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.config = config
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self._client = http_client

    @property
    def client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=self.config.timeout)
        return self._client

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    async def check_connection(self) -> bool:
        """Verify the API is reachable with the configured key."""
        if not self.api_key:
            return False
        try:
            response = await self.client.get(
                f"{self.base_url}/v1/cultural/search",
                params={"q": "fashion"},
                headers=self.headers,
            )
            return response.status_code == 200
        except httpx.HTTPError:
            return False

    async def _request(self, method: str, endpoint: str, **kwargs) -> dict[str, Any]:
        if not self.api_key:
            raise RuntimeError("QLOO_API_KEY is required")
        response = await self.client.request(
            method,
            f"{self.base_url}{endpoint}",
            headers=self.headers,
            **kwargs,
        )
        response.raise_for_status()
        return response.json()

    async def search_entities(self, query: str, type: str | None = None) -> list[dict[str, Any]]:
        """Search entities matching a free-text taste."""
        params = {"q": query}
        if type:
            params["type"] = type
        data = await self._request("GET", "/v1/cultural/search", params=params)
        return data.get("results") or []

    async def get_recommendations(
        self,
        entity_ids: list[str],
        limit: int = 10,
    ) -> tuple[list[dict[str, Any]], list[str]]:
        """Fetch entities and tags correlated with the given entity ids."""
        data = await self._request(
            "POST",
            "/v1/cultural/insights",
            json={
                "input": [{"id": entity_id} for entity_id in entity_ids],
                "options": {"limit": limit, "include_tags": True},
            },
        )
        results = data.get("results") or {}
        return results.get("recommendations") or [], results.get("tags") or []

    async def _search_or_empty(self, taste: str) -> list[dict[str, Any]]:
        try:
            return await self.search_entities(taste)
        except Exception as e:
            logger.warning("Entity search failed for %r: %s", taste, e)
            return []

    async def get_style_correlations(self, tastes_input: list[str]) -> CorrelationResult:
        """Correlate tastes with fashion and decor entities.

        Never raises; any failure degrades to an empty result.
        """
        try:
            entity_results = await asyncio.gather(
                *(self._search_or_empty(taste) for taste in tastes_input)
            )
            all_entities = [entity for result in entity_results for entity in result]

            if not all_entities:
                return CorrelationResult.empty()

            entity_ids = [e["id"] for e in all_entities[: self.config.search_entity_limit]]
            recommendations, tags = await self.get_recommendations(
                entity_ids, self.config.recommendation_limit
            )

            fashion_entities = [
                _to_entity(e) for e in recommendations
                if e.get("type") in FASHION_TYPES or "fashion" in e.get("name", "").lower()
            ]
            decor_entities = [
                _to_entity(e) for e in recommendations
                if e.get("type") in DECOR_TYPES or "decor" in e.get("name", "").lower()
            ]

            return CorrelationResult(
                fashion_entities=fashion_entities,
                decor_entities=decor_entities,
                tags=[str(tag) for tag in tags],
            )
        except Exception as e:
            logger.error("Error getting style correlations: %s", e)
            return CorrelationResult.empty()

    async def close(self) -> None:
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()


def _to_entity(data: dict[str, Any]) -> FashionEntity:
    return FashionEntity(
        id=str(data["id"]),
        name=data["name"],
        category=data.get("type"),
    )

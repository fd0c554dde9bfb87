"""Moodboard image search via the Unsplash API."""
from __future__ import annotations

import asyncio

import httpx

from designkit.config import Config

UNSPLASH_SEARCH_URL = "https://api.unsplash.com/search/photos"


class ImageSearch:
    """Look up photo URLs for search queries. Best effort: never raises."""

    def __init__(self, config: Config, client: httpx.AsyncClient | None = None):
        self.access_key = config.unsplash_access_key
        self.per_page = config.images_per_query
        self.orientation = config.image_orientation
        self.timeout = config.http_timeout
        self._client = client

    @property
    def enabled(self) -> bool:
        return bool(self.access_key)

    async def _get(self, params: dict) -> httpx.Response:
        headers = {
            "Authorization": f"Client-ID {self.access_key}",
            "Accept-Version": "v1",
        }
        if self._client is not None:
            return await self._client.get(
                UNSPLASH_SEARCH_URL, params=params, headers=headers, timeout=self.timeout
            )
        async with httpx.AsyncClient() as client:
            return await client.get(
                UNSPLASH_SEARCH_URL, params=params, headers=headers, timeout=self.timeout
            )

    async def search(self, query: str, per_page: int | None = None) -> list[str]:
        """Return regular-size image URLs for *query*; [] on any failure."""
        if not self.enabled:
            return []
        params = {
            "query": query,
            "per_page": per_page or self.per_page,
            "orientation": self.orientation,
        }
        try:
            resp = await self._get(params)
            resp.raise_for_status()
            results = resp.json().get("results", [])
            return [photo["urls"]["regular"] for photo in results]
        except Exception as e:
            print(f'[images] Unsplash error for query "{query}": {e}')
            return []

    async def moodboard(self, queries: list[str]) -> list[str]:
        """Search every query concurrently and flatten the URLs in query order."""
        if not self.enabled:
            print("[images] Unsplash API key not configured - skipping moodboard")
            return []
        batches = await asyncio.gather(*(self.search(q) for q in queries))
        return [url for batch in batches for url in batch]

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from ..base import BaseCacheableClass
from ..exceptions import ProviderHTTPError, UpstreamResponseError
from ..interfaces import CacheDecoratorInterface
from ..models import SearchResult
from .config import DataForSEOConfig
from .mapping import transform_serp_results

logger = logging.getLogger(__name__)

SERP_CACHE_TTL = 15 * 60


@dataclass(frozen=True)
class SerpQuery:
    keyword: str
    location_code: int
    language_code: str
    device: str
    os: str
    depth: int

    def to_payload(self) -> list[dict[str, Any]]:
        return [
            {
                "keyword": self.keyword,
                "location_code": self.location_code,
                "language_code": self.language_code,
                "device": self.device,
                "os": self.os,
                "depth": self.depth,
            }
        ]


def normalize_keyword(keyword: str) -> str:
    return " ".join(keyword.split())


class SerpService(BaseCacheableClass):
    """Top organic Google results for a keyword, cached for 15 minutes."""

    def __init__(
        self,
        cache_decorator: CacheDecoratorInterface,
        config: DataForSEOConfig,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        super().__init__(cache_decorator)
        self.config = config
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=config.timeout)

    async def search(self, keyword: str, *, bypass_cache: bool = False) -> list[SearchResult]:
        keyword = normalize_keyword(keyword or "")
        if not keyword:
            raise ValueError("Keyword is required")

        query = SerpQuery(
            keyword=keyword,
            location_code=self.config.location_code,
            language_code=self.config.language_code,
            device=self.config.device,
            os=self.config.os,
            depth=self.config.depth,
        )
        return await self.organic_results(query, bypass_cache=bypass_cache)

    @BaseCacheableClass.cache(ttl=SERP_CACHE_TTL, bypass_param="bypass_cache")
    async def organic_results(self, query: SerpQuery, bypass_cache: bool = False) -> list[SearchResult]:
        logger.info(f"Fetching SERP results for {query.keyword!r}")
        try:
            response = await self._client.post(
                self.config.api_url,
                json=query.to_payload(),
                auth=(self.config.login, self.config.password),
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error(f"DataForSEO API error: {status} {e.response.reason_phrase}")
            raise ProviderHTTPError(f"DataForSEO API error: {status}", status_code=status) from e
        except httpx.HTTPError as e:
            logger.error(f"DataForSEO request failed: {e}")
            raise ProviderHTTPError(f"DataForSEO request failed: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamResponseError("Invalid response from DataForSEO API") from e

        return transform_serp_results(data)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

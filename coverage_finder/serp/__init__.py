from .config import DataForSEOConfig
from .mapping import transform_serp_results
from .service import SERP_CACHE_TTL, SerpQuery, SerpService

__all__ = ["DataForSEOConfig", "SERP_CACHE_TTL", "SerpQuery", "SerpService", "transform_serp_results"]

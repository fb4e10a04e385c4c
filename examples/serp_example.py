import asyncio
import logging
import sys
from pathlib import Path

from coverage_finder import AsyncCacheDecoratorFactory
from coverage_finder.exceptions import CoverageFinderError
from coverage_finder.keywords import CampaignDetails, KeywordGenerator, OpenAIConfig
from coverage_finder.serp import DataForSEOConfig, SerpService


async def main(pdf_path: str):
    logging.basicConfig(level=logging.INFO)

    campaign = CampaignDetails(client_name="Acme", campaign_name="Cheapest Cities to Rent")
    generator = KeywordGenerator(OpenAIConfig.from_env())
    keywords = await generator.generate_from_pdf(campaign, Path(pdf_path).read_bytes())
    for i, keyword in enumerate(keywords, 1):
        print(f"{i:2}. {keyword}")

    decorator = await AsyncCacheDecoratorFactory.inmemory(default_ttl=900)
    service = SerpService(decorator, DataForSEOConfig.from_env())
    try:
        for result in await service.search(keywords[0]):
            print(f"#{result.position} {result.title}\n    {result.url}")

        # Served from the in-process cache, no second API call
        await service.search(keywords[0])
    finally:
        await service.aclose()


if __name__ == "__main__":
    try:
        asyncio.run(main(sys.argv[1]))
    except CoverageFinderError as e:
        print(f"Error: {e}")
        sys.exit(1)

import logging

from openai import AsyncOpenAI, OpenAIError

from ..exceptions import EmptyDocumentError, ProviderHTTPError, UpstreamResponseError
from .config import OpenAIConfig
from .parsing import parse_keywords
from .pdf import extract_pdf_text
from .prompt import SYSTEM_MESSAGE, CampaignDetails, build_prompt
from .text import normalize_text, truncate

logger = logging.getLogger(__name__)


class KeywordGenerator:
    """Ask a chat model for search keywords describing a campaign.

    Every call is a fresh completion; results are never cached.
    """

    def __init__(self, config: OpenAIConfig, client: AsyncOpenAI | None = None):
        self.config = config
        self.client = client or AsyncOpenAI(api_key=config.api_key, timeout=config.timeout)

    async def generate(self, campaign: CampaignDetails, document_text: str) -> list[str]:
        landing_page_copy = normalize_text(document_text)
        if not landing_page_copy:
            raise EmptyDocumentError("No text found in PDF.")

        prompt = build_prompt(campaign, truncate(landing_page_copy))
        try:
            completion = await self.client.chat.completions.create(
                model=self.config.model,
                messages=[
                    {"role": "system", "content": SYSTEM_MESSAGE},
                    {"role": "user", "content": prompt},
                ],
                temperature=self.config.temperature,
                max_tokens=self.config.max_tokens,
            )
        except OpenAIError as e:
            logger.error(f"Keyword generation request failed: {e}")
            raise ProviderHTTPError(f"OpenAI request failed: {e}", status_code=getattr(e, "status_code", None)) from e

        content = ""
        if completion.choices:
            content = (completion.choices[0].message.content or "").strip()
        if not content:
            raise UpstreamResponseError("No response from OpenAI.")

        keywords = parse_keywords(content)
        logger.info(f"Generated {len(keywords)} keywords for campaign {campaign.campaign_name!r}")
        return keywords

    async def generate_from_pdf(self, campaign: CampaignDetails, pdf_bytes: bytes) -> list[str]:
        return await self.generate(campaign, extract_pdf_text(pdf_bytes))

from dataclasses import dataclass

SYSTEM_MESSAGE = 'Return only valid JSON: [{"keyword": "..."}]'

_PROMPT_TEMPLATE = """\
You are an expert SEO and PR specialist. Based on the campaign information, generate 15-20 Google search keywords \
that journalists, bloggers, and website owners might use to find coverage related to this campaign.

Campaign Details:
- Client Name: {client_name}
- Campaign Name: {campaign_name}
- Campaign URL: {campaign_url}
- Seed Keywords: {seed_keywords}

Landing Page Copy:
{landing_page_copy}

Focus on:
- News-worthy angles, industry terms
- Location-based queries for Ireland
- Stats / data / ranking comparisons
- Synonyms (affordable, cheapest, budget, low-cost)

Return ONLY valid JSON array, like:
[
  {{"keyword": "keyword phrase"}},
  {{"keyword": "another keyword phrase"}}
]"""


@dataclass
class CampaignDetails:
    client_name: str = ""
    campaign_name: str = ""
    campaign_url: str = ""
    seed_keywords: str = ""


def _or_unspecified(value: str) -> str:
    return value.strip() or "Not specified"


def build_prompt(campaign: CampaignDetails, landing_page_copy: str) -> str:
    return _PROMPT_TEMPLATE.format(
        client_name=_or_unspecified(campaign.client_name),
        campaign_name=_or_unspecified(campaign.campaign_name),
        campaign_url=_or_unspecified(campaign.campaign_url),
        seed_keywords=_or_unspecified(campaign.seed_keywords),
        landing_page_copy=landing_page_copy,
    ).strip()

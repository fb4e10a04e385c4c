from .config import OpenAIConfig
from .generator import KeywordGenerator
from .parsing import parse_keywords
from .pdf import extract_pdf_text
from .prompt import CampaignDetails, build_prompt
from .text import normalize_text

__all__ = [
    "CampaignDetails",
    "KeywordGenerator",
    "OpenAIConfig",
    "build_prompt",
    "extract_pdf_text",
    "normalize_text",
    "parse_keywords",
]

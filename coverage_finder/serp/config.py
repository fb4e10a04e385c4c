import os
from collections.abc import Mapping
from dataclasses import dataclass

from ..exceptions import MissingCredentialsError

DATAFORSEO_LIVE_ORGANIC_URL = "https://api.dataforseo.com/v3/serp/google/organic/live/regular"

# Values shipped in .env.example; treated as unset.
_PLACEHOLDER_LOGIN = "your_dataforseo_login_here"
_PLACEHOLDER_PASSWORD = "your_dataforseo_password_here"


@dataclass
class DataForSEOConfig:
    """
    Credentials and query defaults for the DataForSEO live organic endpoint.
    Location 2840 is the United States.
    """

    login: str
    password: str
    api_url: str = DATAFORSEO_LIVE_ORGANIC_URL
    location_code: int = 2840
    language_code: str = "en"
    device: str = "desktop"
    os: str = "windows"
    depth: int = 10
    timeout: float = 30.0

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "DataForSEOConfig":
        if environ is None:
            environ = os.environ

        login = environ.get("DATAFORSEO_LOGIN", "")
        password = environ.get("DATAFORSEO_PASSWORD", "")
        if not login or not password or login == _PLACEHOLDER_LOGIN or password == _PLACEHOLDER_PASSWORD:
            raise MissingCredentialsError(
                "DataForSEO credentials are not configured. "
                "Please set DATAFORSEO_LOGIN and DATAFORSEO_PASSWORD in your environment variables."
            )
        return cls(login=login, password=password)
